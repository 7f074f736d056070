from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from core.database import get_db
from core.auth import get_current_user_id
from crud.resource_crud import ResourceKind, list_resources, get_resource, create_resource, update_resource, delete_resource
from schemas.project_schema import ResourceCreate, ResourceUpdate, IdeaResponse


router = APIRouter(prefix="/ideas", tags=["Ideas"])


@router.get("/", response_model=list[IdeaResponse])
def list_all(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return list_resources(db, ResourceKind.IDEA, user_id)


@router.get("/{idea_id}", response_model=IdeaResponse)
def read_one(idea_id: int, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return get_resource(db, ResourceKind.IDEA, idea_id)


@router.post("/", response_model=IdeaResponse, status_code=201)
def create(payload: ResourceCreate, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return create_resource(db, ResourceKind.IDEA, payload, author_id=user_id)


@router.api_route("/{idea_id}", methods=["PATCH", "PUT"], response_model=IdeaResponse)
def update(
    idea_id: int,
    payload: ResourceUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return update_resource(db, ResourceKind.IDEA, idea_id, payload, caller_id=user_id)


@router.delete("/{idea_id}", status_code=204)
def delete(idea_id: int, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    delete_resource(db, ResourceKind.IDEA, idea_id, caller_id=user_id)
    return None
