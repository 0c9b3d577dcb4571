# app/routes/tours.py
import logging

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.deps import get_current_user, get_optional_user
from app.database import get_db
from app.models.user import User
from app.schemas.comment import CommentCreate, CommentRead
from app.schemas.tour import TourDetail, TourForm, TourPage, TourRead
from app.services import engagement
from app.services.search import list_tours

settings = get_settings()
router = APIRouter(prefix="/tours", tags=["tours"])
logger = logging.getLogger(__name__)


@router.get("", response_model=TourPage)
async def index(
    term: str | None = None,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_LIMIT, ge=1),
    db: AsyncSession = Depends(get_db),
):
    return await list_tours(db, term=term, page=page, limit=limit)


@router.post("", response_model=TourRead, status_code=status.HTTP_201_CREATED)
async def create(form: TourForm, current_user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    tour = await engagement.create_tour(db, current_user.id, form)
    return TourRead.model_validate(tour)


@router.get("/{tour_id}/edit", response_model=TourRead)
async def edit_form(tour_id: int, current_user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    tour = await engagement.get_tour(db, tour_id)
    return TourRead.model_validate(tour)


@router.get("/{tour_id}", response_model=TourDetail)
async def show(tour_id: int, viewer: User | None = Depends(get_optional_user), db: AsyncSession = Depends(get_db)):
    tour, comments = await engagement.view_tour(db, tour_id)
    logger.debug("tour %s read by %s", tour_id, viewer.id if viewer else "anonymous")
    return TourDetail(
        tour=TourRead.model_validate(tour),
        comments=[CommentRead.model_validate(c) for c in comments],
    )


@router.put("/{tour_id}", response_model=TourRead)
async def update(
    tour_id: int, form: TourForm, current_user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db)
):
    tour = await engagement.edit_tour(db, tour_id, form, editor_id=current_user.id)
    return TourRead.model_validate(tour)


@router.delete("/{tour_id}", status_code=status.HTTP_204_NO_CONTENT)
async def destroy(tour_id: int, current_user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    await engagement.delete_tour(db, tour_id, editor_id=current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{tour_id}/comments", response_model=CommentRead, status_code=status.HTTP_201_CREATED)
async def add_comment(
    tour_id: int,
    body: CommentCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    comment = await engagement.add_comment(db, tour_id, current_user.id, body.content)
    return CommentRead.model_validate(comment)
