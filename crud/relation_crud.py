import enum
import logging
from sqlalchemy.orm import Session
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from core import events
from core.errors import NotFound
from models.base import utcnow
from models.like import ProjectLike
from models.project import Project
from models.subscription import ProjectSubscription
from schemas.project_schema import ProjectStats
from schemas.relation_schema import RelationState

logger = logging.getLogger("community.relations")


class RelationKind(enum.Enum):
    LIKE = "like"
    SUBSCRIPTION = "subscription"

    @property
    def model(self):
        return ProjectLike if self is RelationKind.LIKE else ProjectSubscription


def _ensure_project(db: Session, project_id: int) -> None:
    exists = db.query(Project.id).filter(Project.id == project_id).first()
    if not exists:
        raise NotFound("Project not found")


def _find(db: Session, kind: RelationKind, project_id: int, user_id: str):
    model = kind.model
    return (
        db.query(model)
        .filter(model.project_id == project_id, model.user_id == user_id)
        .first()
    )


def _insert(db: Session, kind: RelationKind, project_id: int, user_id: str) -> bool:
    """Insert the pair; False when the unique constraint says it already exists.

    Raises NotFound when the project was deleted before the insert landed.
    """
    db.add(kind.model(project_id=project_id, user_id=user_id, created_at=utcnow()))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        # a foreign-key failure means the project vanished after the existence check
        _ensure_project(db, project_id)
        # otherwise a concurrent request inserted the same pair first
        logger.info("%s on project %s by %s already present", kind.value, project_id, user_id)
        return False
    return True


def count_relations(db: Session, kind: RelationKind, project_id: int) -> int:
    model = kind.model
    n = db.query(func.count(model.id)).filter(model.project_id == project_id).scalar()
    return int(n or 0)


def is_active(db: Session, kind: RelationKind, project_id: int, user_id: str | None) -> bool:
    if not user_id:
        return False
    return _find(db, kind, project_id, user_id) is not None


def toggle_relation(db: Session, kind: RelationKind, project_id: int, user_id: str) -> RelationState:
    _ensure_project(db, project_id)
    existing = _find(db, kind, project_id, user_id)
    if existing:
        db.delete(existing)
        db.commit()
        active, changed = False, True
    else:
        changed = _insert(db, kind, project_id, user_id)
        active = True
    if changed:
        logger.info("%s on project %s toggled %s by %s", kind.value, project_id, "on" if active else "off", user_id)
        events.emit(kind.value, project_id, "activated" if active else "deactivated")
    return RelationState(active=active, count=count_relations(db, kind, project_id))


def create_relation(db: Session, kind: RelationKind, project_id: int, user_id: str) -> bool:
    """Idempotent create. Returns False when the pair was already active."""
    _ensure_project(db, project_id)
    if _find(db, kind, project_id, user_id):
        return False
    created = _insert(db, kind, project_id, user_id)
    if created:
        logger.info("%s on project %s created by %s", kind.value, project_id, user_id)
        events.emit(kind.value, project_id, "activated")
    return created


def remove_relation(db: Session, kind: RelationKind, project_id: int, user_id: str) -> None:
    model = kind.model
    removed = (
        db.query(model)
        .filter(model.project_id == project_id, model.user_id == user_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    if removed:
        logger.info("%s on project %s removed by %s", kind.value, project_id, user_id)
        events.emit(kind.value, project_id, "deactivated")


def project_stats(db: Session, project_id: int, viewer_id: str | None) -> ProjectStats:
    # independent lookups; a count may shift between them
    return ProjectStats(
        like_count=count_relations(db, RelationKind.LIKE, project_id),
        subscription_count=count_relations(db, RelationKind.SUBSCRIPTION, project_id),
        liked=is_active(db, RelationKind.LIKE, project_id, viewer_id),
        subscribed=is_active(db, RelationKind.SUBSCRIPTION, project_id, viewer_id),
    )
