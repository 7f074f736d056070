from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from core.database import get_db
from core.auth import get_current_user_id
from crud.relation_crud import RelationKind, toggle_relation, create_relation, remove_relation
from schemas.relation_schema import RelationAck, RelationState


router = APIRouter(prefix="/projects", tags=["Likes & Subscriptions"])


# Toggle endpoints flip state on every call; the plain POST/DELETE pair is
# idempotent and reports "already" instead of flipping.

@router.post("/{project_id}/like/toggle", response_model=RelationState)
def toggle_like(project_id: int, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return toggle_relation(db, RelationKind.LIKE, project_id, user_id)


@router.post("/{project_id}/like", response_model=RelationAck, response_model_exclude_none=True)
def like(project_id: int, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    if not create_relation(db, RelationKind.LIKE, project_id, user_id):
        return RelationAck(message="Already liked")
    return RelationAck(success=True)


@router.delete("/{project_id}/like", response_model=RelationAck, response_model_exclude_none=True)
def unlike(project_id: int, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    remove_relation(db, RelationKind.LIKE, project_id, user_id)
    return RelationAck(success=True)


@router.post("/{project_id}/subscribe/toggle", response_model=RelationState)
def toggle_subscription(project_id: int, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return toggle_relation(db, RelationKind.SUBSCRIPTION, project_id, user_id)


@router.post("/{project_id}/subscribe", response_model=RelationAck, response_model_exclude_none=True)
def subscribe(project_id: int, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    if not create_relation(db, RelationKind.SUBSCRIPTION, project_id, user_id):
        return RelationAck(message="Already subscribed")
    return RelationAck(success=True)


@router.delete("/{project_id}/subscribe", response_model=RelationAck, response_model_exclude_none=True)
def unsubscribe(project_id: int, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    remove_relation(db, RelationKind.SUBSCRIPTION, project_id, user_id)
    return RelationAck(success=True)
