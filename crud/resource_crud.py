import enum
import logging
from sqlalchemy.orm import Session
from sqlalchemy import desc
from core import events
from core.authors import clean_authors, encode_authors
from core.errors import Forbidden, NotFound, Unauthenticated, ValidationError
from models.base import as_utc, utcnow
from models.idea import ProjectIdea
from models.project import Project
from schemas.project_schema import ResourceCreate, ResourceUpdate

logger = logging.getLogger("community.resources")

REQUIRED_TEXT_FIELDS = ("title", "summary")
OPTIONAL_TEXT_FIELDS = ("location", "pitch_deck", "estimated_resources")


class ResourceKind(enum.Enum):
    PROJECT = "project"
    IDEA = "idea"

    @property
    def model(self):
        return Project if self is ResourceKind.PROJECT else ProjectIdea

    @property
    def label(self) -> str:
        return "Project" if self is ResourceKind.PROJECT else "Idea"


def _require_caller(caller_id: str | None) -> str:
    if not caller_id:
        raise Unauthenticated()
    return caller_id


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


def _validated_changes(fields: dict, partial: bool) -> dict:
    """Normalize and validate payload fields into column values.

    With ``partial`` set, a required field that is absent or None keeps its
    prior value; an explicit blank string still fails.
    """
    changes = {}
    for name in REQUIRED_TEXT_FIELDS:
        value = fields.get(name)
        if value is None and partial:
            continue
        if value is None or not value.strip():
            raise ValidationError(f"{name.capitalize()} is required")
        changes[name] = value.strip()

    authors = fields.get("authors")
    if not (authors is None and partial):
        names = clean_authors(authors or [])
        if not names:
            raise ValidationError("At least one author is required")
        changes["authors"] = encode_authors(names)

    for name in OPTIONAL_TEXT_FIELDS:
        if name in fields:
            changes[name] = _blank_to_none(fields[name])
    return changes


def get_resource(db: Session, kind: ResourceKind, resource_id: int):
    model = kind.model
    row = db.query(model).filter(model.id == resource_id).first()
    if not row:
        raise NotFound(f"{kind.label} not found")
    return row


def list_resources(db: Session, kind: ResourceKind, caller_id: str | None):
    _require_caller(caller_id)
    model = kind.model
    return db.query(model).order_by(desc(model.created_at), desc(model.id)).all()


def create_resource(db: Session, kind: ResourceKind, payload: ResourceCreate, author_id: str | None):
    author_id = _require_caller(author_id)
    changes = _validated_changes(payload.model_dump(), partial=False)
    now = utcnow()
    row = kind.model(author_id=author_id, created_at=now, updated_at=now, **changes)
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("%s %s created by %s", kind.label, row.id, author_id)
    events.emit(kind.value, row.id, "created")
    return row


def _owned_resource(db: Session, kind: ResourceKind, resource_id: int, caller_id: str | None):
    caller_id = _require_caller(caller_id)
    row = get_resource(db, kind, resource_id)
    if row.author_id != caller_id:
        logger.warning("%s %s: %s is not the author", kind.label, resource_id, caller_id)
        raise Forbidden(f"You can only modify your own {kind.value}s")
    return row


def update_resource(db: Session, kind: ResourceKind, resource_id: int, payload: ResourceUpdate, caller_id: str | None):
    row = _owned_resource(db, kind, resource_id, caller_id)
    # validate everything before touching the row so a bad field leaves it intact
    changes = _validated_changes(payload.model_dump(exclude_unset=True), partial=True)
    for k, v in changes.items():
        setattr(row, k, v)
    now = utcnow()
    previous = as_utc(row.updated_at)
    row.updated_at = now if previous is None or now > previous else previous
    db.commit()
    db.refresh(row)
    logger.info("%s %s updated by %s", kind.label, resource_id, caller_id)
    events.emit(kind.value, row.id, "updated")
    return row


def delete_resource(db: Session, kind: ResourceKind, resource_id: int, caller_id: str | None) -> None:
    row = _owned_resource(db, kind, resource_id, caller_id)
    # likes, subscriptions and feed items of a project go with it via ON DELETE CASCADE
    db.delete(row)
    db.commit()
    logger.info("%s %s deleted by %s", kind.label, resource_id, caller_id)
    events.emit(kind.value, resource_id, "deleted")
