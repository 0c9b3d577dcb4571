"""
Pytest configuration and fixtures for the tours API.
"""
import os
from datetime import datetime, timedelta

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.security import create_access_token
from app.crud.tour import tour as tour_crud
from app.database import create_tables, get_db
from app.main import app
from app.models.comment import Comment
from app.models.user import User

BASE_TIME = datetime(2024, 5, 1, 9, 0, 0)


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'tours.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def users(session_factory):
    """Two signed-up users: an author and a reader."""
    async with session_factory() as session:
        author = User(email="mina@travelers.org", name="Mina")
        reader = User(email="joon@travelers.org", name="Joon")
        session.add_all([author, reader])
        await session.commit()
        return {"author": author, "reader": reader}


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'sub': str(user.id)})}"}


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


def tour_fields(title="Tour", content="Some write-up", destinations=None, course="Day 1", cost="100 USD"):
    return {
        "title": title,
        "content": content,
        "destinations": destinations if destinations is not None else ["Seoul"],
        "course": course,
        "cost": cost,
    }


@pytest.fixture
def seed_tours(session_factory):
    """Insert tours with increasing created_at, oldest first. Returns their ids."""
    async def seed(author: User, rows: list[dict]) -> list[int]:
        ids = []
        async with session_factory() as session:
            for i, row in enumerate(rows):
                tour = await tour_crud.create(
                    session,
                    author_id=author.id,
                    fields=tour_fields(**row),
                    created_at=BASE_TIME + timedelta(minutes=i),
                )
                ids.append(tour.id)
            await session.commit()
        return ids

    return seed


async def count_comments(session: AsyncSession, tour_id: int) -> int:
    """Number of comment rows pointing at a tour, counted straight from the table."""
    res = await session.execute(select(func.count(Comment.id)).where(Comment.tour_id == tour_id))
    return res.scalar_one()
