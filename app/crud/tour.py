# app/crud/tour.py
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.models.tour import Tour

EDITABLE_FIELDS = ("title", "content", "destinations", "course", "cost")


class CRUDTour:
    """Persistence for tours. Never commits; callers own the transaction."""

    async def get_by_id(self, db: AsyncSession, tour_id: int, with_author: bool = False) -> Optional[Tour]:
        q = select(Tour).where(Tour.id == tour_id).execution_options(populate_existing=True)
        if with_author:
            q = q.options(joinedload(Tour.author))
        res = await db.execute(q)
        return res.scalars().first()

    async def count(self, db: AsyncSession, where=None) -> int:
        q = select(func.count(Tour.id))
        if where is not None:
            q = q.where(where)
        res = await db.execute(q)
        return res.scalar_one()

    async def page(self, db: AsyncSession, where=None, *, offset: int, limit: int) -> list[Tour]:
        q = (
            select(Tour)
            .options(joinedload(Tour.author))
            .order_by(Tour.created_at.desc(), Tour.id.desc())
            .offset(offset)
            .limit(limit)
        )
        if where is not None:
            q = q.where(where)
        res = await db.execute(q)
        return list(res.scalars().all())

    async def create(
        self, db: AsyncSession, *, author_id: int, fields: dict[str, Any], created_at: datetime | None = None
    ) -> Tour:
        tour = Tour(
            author_id=author_id,
            num_likes=0,
            num_comments=0,
            num_reads=0,
            created_at=created_at or datetime.utcnow(),
            **{k: fields[k] for k in EDITABLE_FIELDS},
        )
        db.add(tour)
        await db.flush()
        return tour

    async def update_fields(self, db: AsyncSession, tour: Tour, fields: dict[str, Any]) -> Tour:
        for name in EDITABLE_FIELDS:
            setattr(tour, name, fields[name])
        await db.flush()
        return tour

    async def increment_reads(self, db: AsyncSession, tour_id: int) -> bool:
        return await self._increment(db, tour_id, Tour.num_reads)

    async def increment_comments(self, db: AsyncSession, tour_id: int) -> bool:
        return await self._increment(db, tour_id, Tour.num_comments)

    async def _increment(self, db: AsyncSession, tour_id: int, column) -> bool:
        # single UPDATE so concurrent increments don't overwrite each other
        q = (
            update(Tour)
            .where(Tour.id == tour_id)
            .values({column.key: column + 1})
            .execution_options(synchronize_session=False)
        )
        res = await db.execute(q)
        return res.rowcount > 0

    async def remove(self, db: AsyncSession, tour_id: int) -> bool:
        q = delete(Tour).where(Tour.id == tour_id).execution_options(synchronize_session=False)
        res = await db.execute(q)
        return res.rowcount > 0

tour = CRUDTour()
