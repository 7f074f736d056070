from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from core.authors import decode_authors, split_authors


def _coerce_authors(value):
    # forms post "Ada, Grace"; API clients post ["Ada", "Grace"]
    if isinstance(value, str):
        return split_authors(value)
    return value


class ResourceBase(BaseModel):
    title: str
    summary: str
    authors: list[str]
    location: str | None = None
    pitch_deck: str | None = Field(default=None, alias="pitchDeck")
    estimated_resources: str | None = Field(default=None, alias="estimatedResources")

    model_config = {"populate_by_name": True}


class ResourceCreate(ResourceBase):
    """Client payload for creating a project or idea. Author is inferred from auth."""

    # checked by the crud layer so a missing field is a 400 like a blank one
    title: str | None = None
    summary: str | None = None
    authors: list[str] | None = None

    @field_validator("authors", mode="before")
    @classmethod
    def split_form_authors(cls, value):
        return _coerce_authors(value)


class ResourceUpdate(BaseModel):
    title: str | None = None
    summary: str | None = None
    authors: list[str] | None = None
    location: str | None = None
    pitch_deck: str | None = Field(default=None, alias="pitchDeck")
    estimated_resources: str | None = Field(default=None, alias="estimatedResources")

    model_config = {"populate_by_name": True}

    @field_validator("authors", mode="before")
    @classmethod
    def split_form_authors(cls, value):
        return _coerce_authors(value)


class ResourceResponse(ResourceBase):
    id: int
    author_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }

    @field_validator("authors", mode="before")
    @classmethod
    def decode_stored_authors(cls, value):
        if isinstance(value, str) or value is None:
            return decode_authors(value)
        return value


class ProjectStats(BaseModel):
    like_count: int = 0
    subscription_count: int = 0
    liked: bool = False
    subscribed: bool = False


class ProjectResponse(ResourceResponse):
    stats: ProjectStats | None = None


class IdeaResponse(ResourceResponse):
    pass
