"""
Pytest fixtures for skin museum tests.

Every test gets its own SQLite file, created from the model metadata.
"""

import hashlib
import os
from typing import AsyncGenerator, Awaitable, Callable, Iterable, Optional, Sequence, Tuple

# Keep the module-level engine off Postgres during tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from skin_museum.catalog.ranking import CLASSIC_DEFAULT_SKINS
from skin_museum.database import build_engine, build_session_maker
from skin_museum.kernel.models import (
    ArchiveFile,
    Base,
    InternetArchiveItem,
    ReviewRating,
    Skin,
    SkinFile,
    SkinReview,
    SkinType,
    Tweet,
)


def fake_md5(name: str) -> str:
    """Deterministic fake content hash for a test skin."""
    return hashlib.md5(name.encode()).hexdigest()


SkinFactory = Callable[..., Awaitable[Skin]]


@pytest.fixture
def md5_of() -> Callable[[str], str]:
    return fake_md5


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """Engine over a fresh SQLite file with all tables created."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(db_engine):
    return build_session_maker(db_engine)


@pytest_asyncio.fixture
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_maker() as session:
        yield session
        await session.rollback()


@pytest.fixture
def make_skin(session_maker) -> SkinFactory:
    """
    Insert a skin (and its related rows) in its own transaction.

    Reviews are inserted in the order given, so the last one is the most
    recent.
    """
    counter = {"tweet": 0}

    async def _make(
        md5: str,
        *,
        filename: Optional[str] = None,
        skin_type: int = SkinType.CLASSIC,
        reviews: Sequence[ReviewRating] = (),
        tweets: Iterable[Tuple[int, int]] = (),
        archive_files: Sequence[str] = (),
        ia_identifier: Optional[str] = None,
        readme_text: Optional[str] = None,
        average_color: Optional[str] = None,
    ) -> Skin:
        async with session_maker() as session:
            skin = Skin(
                md5=md5,
                skin_type=int(skin_type),
                readme_text=readme_text,
                average_color=average_color,
            )
            session.add(skin)
            await session.flush()

            if filename:
                session.add(SkinFile(skin_md5=md5, file_path=filename))
            for rating in reviews:
                session.add(SkinReview(skin_md5=md5, review=ReviewRating(rating).value))
                await session.flush()
            for likes, retweets in tweets:
                counter["tweet"] += 1
                session.add(
                    Tweet(
                        skin_md5=md5,
                        tweet_id=f"{1000 + counter['tweet']}",
                        likes=likes,
                        retweets=retweets,
                    )
                )
            for name in archive_files:
                session.add(ArchiveFile(skin_md5=md5, file_name=name, uncompressed_size=len(name)))
            if ia_identifier:
                session.add(InternetArchiveItem(skin_md5=md5, identifier=ia_identifier))

            await session.commit()
            return skin

    return _make


@pytest_asyncio.fixture
async def museum_catalog(make_skin) -> dict:
    """
    4 classic defaults, 2 tweeted, 3 approved, 1 unreviewed.

    Returns the md5s grouped by role, each group in expected museum order.
    """
    for position, md5 in enumerate(CLASSIC_DEFAULT_SKINS):
        await make_skin(md5, filename=f"classic_{position}.wsz")

    popular = fake_md5("popular")
    quiet = fake_md5("quiet")
    await make_skin(quiet, filename="quiet.wsz", reviews=[ReviewRating.APPROVED], tweets=[(5, 1)])
    await make_skin(popular, filename="popular.wsz", reviews=[ReviewRating.APPROVED], tweets=[(100, 20)])

    approved = sorted(fake_md5(f"approved-{i}") for i in range(3))
    for md5 in approved:
        await make_skin(md5, filename=f"{md5[:6]}.wsz", reviews=[ReviewRating.APPROVED])

    unreviewed = fake_md5("unreviewed")
    await make_skin(unreviewed, filename="unreviewed.wsz")

    return {
        "classic": list(CLASSIC_DEFAULT_SKINS),
        "tweeted": [popular, quiet],
        "approved": approved,
        "unreviewed": [unreviewed],
    }
