# app/schemas/comment.py
from datetime import datetime

from pydantic import BaseModel

from app.schemas.user import AuthorSummary


class CommentCreate(BaseModel):
    content: str


class CommentRead(BaseModel):
    id: int
    tour_id: int
    author_id: int
    author: AuthorSummary | None = None
    content: str
    created_at: datetime

    model_config = {"from_attributes": True}
