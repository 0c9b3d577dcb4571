# app/services/engagement.py
"""Reads and writes that touch a tour's engagement counters.

Every function takes the request's ``AsyncSession`` and commits its own unit
of work. Counter increments are issued as ``col = col + 1`` updates, and a new
comment is written in the same transaction as the ``num_comments`` bump, so the
counter never drifts from the real comment count.
"""
import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.errors import NotFound, PermissionDenied, ValidationFailed
from app.crud.comment import comment as comment_crud
from app.crud.tour import tour as tour_crud
from app.models.comment import Comment
from app.models.tour import Tour
from app.schemas.tour import TourForm
from app.services.store import store_guard

logger = logging.getLogger(__name__)

REQUIRED_TEXT_FIELDS = ("title", "content", "course", "cost")


def parse_destinations(raw: str | None) -> list[str]:
    """``"Seoul  Busan "`` -> ``["Seoul", "Busan"]``."""
    if not raw:
        return []
    return [d.strip() for d in raw.split() if d.strip()]


def clean_form(form: TourForm) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    missing = []
    for name in REQUIRED_TEXT_FIELDS:
        value = (getattr(form, name) or "").strip()
        if not value:
            missing.append(name)
        fields[name] = value
    if missing:
        raise ValidationFailed(f"Required field(s) empty: {', '.join(missing)}")
    fields["destinations"] = parse_destinations(form.destination)
    return fields


def _check_owner(tour: Tour, editor_id: int | None):
    if get_settings().RESTRICT_EDITS_TO_AUTHOR and tour.author_id != editor_id:
        raise PermissionDenied("Only the author can change this tour")


async def get_tour(db: AsyncSession, tour_id: int) -> Tour:
    async with store_guard(db, "load tour"):
        tour = await tour_crud.get_by_id(db, tour_id, with_author=True)
    if tour is None:
        raise NotFound("Tour does not exist")
    return tour


async def get_comment(db: AsyncSession, comment_id: int) -> Comment:
    async with store_guard(db, "load comment"):
        comment = await comment_crud.get_by_id(db, comment_id)
    if comment is None:
        raise NotFound("Comment does not exist")
    return comment


async def view_tour(db: AsyncSession, tour_id: int) -> tuple[Tour, list[Comment]]:
    # every call counts, the same reader included
    async with store_guard(db, "record view"):
        found = await tour_crud.increment_reads(db, tour_id)
        if not found:
            await db.rollback()
            raise NotFound("Tour does not exist")
        await db.commit()
        tour = await tour_crud.get_by_id(db, tour_id, with_author=True)
        comments = await comment_crud.list_for_tour(db, tour_id)
    if tour is None:
        # deleted between the increment and the read
        raise NotFound("Tour does not exist")
    return tour, comments


async def add_comment(db: AsyncSession, tour_id: int, author_id: int, content: str | None) -> Comment:
    content = (content or "").strip()
    if not content:
        raise ValidationFailed("Comment content is required")

    async with store_guard(db, "add comment"):
        if await tour_crud.get_by_id(db, tour_id) is None:
            raise NotFound("Tour does not exist")
        comment = await comment_crud.add(db, tour_id=tour_id, author_id=author_id, content=content)
        if not await tour_crud.increment_comments(db, tour_id):
            await db.rollback()
            raise NotFound("Tour does not exist")
        await db.commit()
        comment = await comment_crud.get_by_id(db, comment.id)

    logger.info("user %s commented on tour %s (comment %s)", author_id, tour_id, comment.id)
    return comment


async def create_tour(db: AsyncSession, author_id: int, form: TourForm) -> Tour:
    fields = clean_form(form)
    async with store_guard(db, "create tour"):
        tour = await tour_crud.create(db, author_id=author_id, fields=fields)
        await db.commit()
        tour = await tour_crud.get_by_id(db, tour.id, with_author=True)
    logger.info("user %s created tour %s", author_id, tour.id)
    return tour


async def edit_tour(db: AsyncSession, tour_id: int, form: TourForm, editor_id: int | None = None) -> Tour:
    async with store_guard(db, "edit tour"):
        tour = await tour_crud.get_by_id(db, tour_id)
    if tour is None:
        raise NotFound("Tour does not exist")
    _check_owner(tour, editor_id)
    fields = clean_form(form)

    async with store_guard(db, "edit tour"):
        await tour_crud.update_fields(db, tour, fields)
        await db.commit()
        tour = await tour_crud.get_by_id(db, tour_id, with_author=True)
    logger.info("user %s edited tour %s", editor_id, tour_id)
    return tour


async def delete_tour(db: AsyncSession, tour_id: int, editor_id: int | None = None) -> None:
    """Delete a tour if it exists. Its comments are intentionally left in place."""
    async with store_guard(db, "delete tour"):
        tour = await tour_crud.get_by_id(db, tour_id)
        if tour is None:
            return
        _check_owner(tour, editor_id)
        await tour_crud.remove(db, tour_id)
        await db.commit()
    logger.info("user %s deleted tour %s", editor_id, tour_id)
