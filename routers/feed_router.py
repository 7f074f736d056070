from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from core.database import get_db
from core.auth import get_current_user_id
from crud.feed_crud import list_feed, append_feed_item, remove_feed_item
from schemas.feed_schema import FeedItemCreate, FeedItemResponse


router = APIRouter(prefix="/projects/{project_id}/feed", tags=["Feed"])


@router.get("", response_model=list[FeedItemResponse])
def list_all(project_id: int, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return list_feed(db, project_id, user_id)


@router.post("", response_model=FeedItemResponse, status_code=201)
def create(
    project_id: int,
    payload: FeedItemCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return append_feed_item(db, project_id, user_id, payload.content)


@router.delete("/{item_id}", status_code=204)
def delete(project_id: int, item_id: int, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    remove_feed_item(db, project_id, item_id, caller_id=user_id)
    return None
