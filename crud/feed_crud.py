import logging
from sqlalchemy.orm import Session
from sqlalchemy import desc
from core import events
from core.errors import Forbidden, NotFound, Unauthenticated, ValidationError
from crud.relation_crud import RelationKind, is_active
from models.base import utcnow
from models.feed_item import ProjectFeedItem
from models.project import Project

logger = logging.getLogger("community.feed")


def _ensure_project(db: Session, project_id: int) -> None:
    if not db.query(Project.id).filter(Project.id == project_id).first():
        raise NotFound("Project not found")


def list_feed(db: Session, project_id: int, caller_id: str | None):
    if not caller_id:
        raise Unauthenticated()
    _ensure_project(db, project_id)
    return (
        db.query(ProjectFeedItem)
        .filter(ProjectFeedItem.project_id == project_id)
        .order_by(desc(ProjectFeedItem.created_at), desc(ProjectFeedItem.id))
        .all()
    )


def append_feed_item(db: Session, project_id: int, author_id: str | None, content: str | None):
    """Post to a project's feed.

    Only current subscribers may post, the project's own author included.
    The subscription is checked once here and never again for the item.
    """
    if not author_id:
        raise Unauthenticated()
    _ensure_project(db, project_id)
    if not is_active(db, RelationKind.SUBSCRIPTION, project_id, author_id):
        logger.warning("Feed post on project %s refused: %s is not subscribed", project_id, author_id)
        raise Forbidden("You must be subscribed to add feed items")
    if content is None or not content.strip():
        raise ValidationError("Content is required")

    now = utcnow()
    item = ProjectFeedItem(
        project_id=project_id,
        author_id=author_id,
        content=content.strip(),
        created_at=now,
        updated_at=now,
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    logger.info("Feed item %s posted on project %s by %s", item.id, project_id, author_id)
    events.emit("feed", project_id, "created")
    return item


def remove_feed_item(db: Session, project_id: int, feed_item_id: int, caller_id: str | None) -> None:
    if not caller_id:
        raise Unauthenticated()
    removed = (
        db.query(ProjectFeedItem)
        .filter(
            ProjectFeedItem.id == feed_item_id,
            ProjectFeedItem.project_id == project_id,
            ProjectFeedItem.author_id == caller_id,
        )
        .delete(synchronize_session=False)
    )
    db.commit()
    if not removed:
        # same answer for "missing" and "not yours"
        raise NotFound("Feed item not found")
    logger.info("Feed item %s on project %s deleted by %s", feed_item_id, project_id, caller_id)
    events.emit("feed", project_id, "deleted")
