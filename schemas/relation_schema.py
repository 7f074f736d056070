from pydantic import BaseModel


class RelationState(BaseModel):
    active: bool
    count: int


class RelationAck(BaseModel):
    success: bool | None = None
    message: str | None = None
