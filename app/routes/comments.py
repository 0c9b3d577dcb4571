# app/routes/comments.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.comment import CommentRead
from app.services.engagement import get_comment

router = APIRouter(prefix="/comments", tags=["comments"])


@router.get("/{comment_id}", response_model=CommentRead)
async def show(comment_id: int, db: AsyncSession = Depends(get_db)):
    return CommentRead.model_validate(await get_comment(db, comment_id))
