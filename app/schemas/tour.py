# app/schemas/tour.py
from datetime import datetime

from pydantic import BaseModel

from app.schemas.comment import CommentRead
from app.schemas.user import AuthorSummary


class TourForm(BaseModel):
    """Fields submitted when creating or editing a tour.

    ``destination`` is a single space-separated string, e.g. ``"Seoul Busan"``.
    Emptiness is checked by the engagement service, not here.
    """
    title: str
    content: str
    course: str
    cost: str
    destination: str


class TourRead(BaseModel):
    id: int
    author_id: int
    author: AuthorSummary | None = None
    title: str
    content: str
    destinations: list[str]
    course: str
    cost: str
    num_likes: int
    num_comments: int
    num_reads: int
    created_at: datetime

    model_config = {"from_attributes": True}


class TourPage(BaseModel):
    items: list[TourRead]
    page: int
    limit: int
    total_count: int
    total_pages: int


class TourDetail(BaseModel):
    tour: TourRead
    comments: list[CommentRead]
