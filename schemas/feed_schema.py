from datetime import datetime
from pydantic import BaseModel


class FeedItemCreate(BaseModel):
    # None is rejected by append_feed_item after the project and subscription checks
    content: str | None = None


class FeedItemResponse(BaseModel):
    id: int
    project_id: int
    author_id: str
    content: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
