# app/crud/comment.py
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.models.comment import Comment


class CRUDComment:
    async def get_by_id(self, db: AsyncSession, comment_id: int) -> Optional[Comment]:
        q = (
            select(Comment)
            .options(joinedload(Comment.author))
            .where(Comment.id == comment_id)
            .execution_options(populate_existing=True)
        )
        res = await db.execute(q)
        return res.scalars().first()

    async def list_for_tour(self, db: AsyncSession, tour_id: int) -> list[Comment]:
        q = (
            select(Comment)
            .options(joinedload(Comment.author))
            .where(Comment.tour_id == tour_id)
            .order_by(Comment.created_at, Comment.id)
        )
        res = await db.execute(q)
        return list(res.scalars().all())

    async def add(self, db: AsyncSession, *, tour_id: int, author_id: int, content: str) -> Comment:
        comment = Comment(tour_id=tour_id, author_id=author_id, content=content)
        db.add(comment)
        await db.flush()
        return comment

comment = CRUDComment()
