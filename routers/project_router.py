from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from core.database import get_db
from core.auth import get_current_user_id
from crud.resource_crud import ResourceKind, list_resources, get_resource, create_resource, update_resource, delete_resource
from crud.relation_crud import project_stats
from schemas.project_schema import ResourceCreate, ResourceUpdate, ProjectResponse


router = APIRouter(prefix="/projects", tags=["Projects"])


def _with_stats(db: Session, proj, user_id: str) -> ProjectResponse:
    resp = ProjectResponse.model_validate(proj)
    resp.stats = project_stats(db, proj.id, user_id)
    return resp


@router.get("/", response_model=list[ProjectResponse])
def list_all(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return [_with_stats(db, p, user_id) for p in list_resources(db, ResourceKind.PROJECT, user_id)]


@router.get("/{project_id}", response_model=ProjectResponse)
def read_one(project_id: int, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return _with_stats(db, get_resource(db, ResourceKind.PROJECT, project_id), user_id)


@router.post("/", response_model=ProjectResponse, status_code=201)
def create(payload: ResourceCreate, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    proj = create_resource(db, ResourceKind.PROJECT, payload, author_id=user_id)
    return _with_stats(db, proj, user_id)


@router.api_route("/{project_id}", methods=["PATCH", "PUT"], response_model=ProjectResponse)
def update(
    project_id: int,
    payload: ResourceUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    proj = update_resource(db, ResourceKind.PROJECT, project_id, payload, caller_id=user_id)
    return _with_stats(db, proj, user_id)


@router.delete("/{project_id}", status_code=204)
def delete(project_id: int, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    delete_resource(db, ResourceKind.PROJECT, project_id, caller_id=user_id)
    return None
