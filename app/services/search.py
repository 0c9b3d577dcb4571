# app/services/search.py
import math

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ValidationFailed
from app.crud.tour import tour as tour_crud
from app.models.tour import Tour
from app.schemas.tour import TourPage, TourRead
from app.services.store import store_guard


def build_filter(term: str | None):
    """Return the WHERE clause for a free-text search, or None to match everything.

    The term is matched as given, spaces included, case-insensitively anywhere
    in the title or the content; LIKE wildcards in it are escaped.
    """
    if not term:
        return None
    return or_(
        Tour.title.icontains(term, autoescape=True),
        Tour.content.icontains(term, autoescape=True),
    )


def total_pages(total_count: int, limit: int) -> int:
    return max(1, math.ceil(total_count / limit))


async def list_tours(db: AsyncSession, term: str | None = None, page: int = 1, limit: int = 10) -> TourPage:
    if page < 1:
        raise ValidationFailed("page must be >= 1")
    if limit < 1:
        raise ValidationFailed("limit must be >= 1")

    where = build_filter(term)
    async with store_guard(db, "list tours"):
        total_count = await tour_crud.count(db, where)
        items = await tour_crud.page(db, where, offset=(page - 1) * limit, limit=limit)

    return TourPage(
        items=[TourRead.model_validate(t) for t in items],
        page=page,
        limit=limit,
        total_count=total_count,
        total_pages=total_pages(total_count, limit),
    )
