"""
Catalog store: the read interface the catalog needs from the database.

Per-skin moderation and engagement state is derived here with SQL
aggregates so that filtering, counting and the museum ordering can all be
pushed down to the database.

Derivation rules:
- moderation: NSFW if any review rated the skin NSFW, otherwise the rating of
  the most recent review (highest id), otherwise UNREVIEWED
- tweeted: at least one tweet row
- likes / retweets: summed over the skin's tweets
- filename: the first recorded upload name
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import Select, case, func, select, and_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.sql.elements import ColumnElement

from skin_museum.catalog.entry import CatalogEntry, ModerationOutcome
from skin_museum.errors import StoreError
from skin_museum.kernel.models import (
    ArchiveFile,
    ReviewRating,
    Skin,
    SkinFile,
    SkinReview,
    SkinType,
    Tweet,
)
from skin_museum.logging_config import get_logger

logger = get_logger(__name__)


_latest_review_ids = (
    select(
        SkinReview.skin_md5.label("skin_md5"),
        func.max(SkinReview.id).label("review_id"),
    )
    .group_by(SkinReview.skin_md5)
    .subquery("latest_review_ids")
)

_latest_reviews = (
    select(SkinReview.skin_md5, SkinReview.review)
    .join(_latest_review_ids, SkinReview.id == _latest_review_ids.c.review_id)
    .subquery("latest_reviews")
)

_nsfw_reviews = (
    select(SkinReview.skin_md5.label("skin_md5"))
    .where(SkinReview.review == ReviewRating.NSFW.value)
    .group_by(SkinReview.skin_md5)
    .subquery("nsfw_reviews")
)

_engagement = (
    select(
        Tweet.skin_md5.label("skin_md5"),
        func.count(Tweet.id).label("tweet_count"),
        func.sum(Tweet.likes).label("likes"),
        func.sum(Tweet.retweets).label("retweets"),
    )
    .group_by(Tweet.skin_md5)
    .subquery("engagement")
)

_first_file_ids = (
    select(
        SkinFile.skin_md5.label("skin_md5"),
        func.min(SkinFile.id).label("file_id"),
    )
    .group_by(SkinFile.skin_md5)
    .subquery("first_file_ids")
)

_filenames = (
    select(SkinFile.skin_md5, SkinFile.file_path)
    .join(_first_file_ids, SkinFile.id == _first_file_ids.c.file_id)
    .subquery("filenames")
)


@dataclass(frozen=True)
class CatalogColumns:
    """SQL expressions for the derived per-skin state."""

    md5: ColumnElement[Any]
    nsfw: ColumnElement[Any]
    moderation: ColumnElement[Any]
    tweeted: ColumnElement[Any]
    likes: ColumnElement[Any]
    retweets: ColumnElement[Any]

    @property
    def engagement(self) -> ColumnElement[Any]:
        return self.likes + self.retweets


_is_nsfw = _nsfw_reviews.c.skin_md5.is_not(None)

ENTRY_COLUMNS = CatalogColumns(
    md5=Skin.md5,
    nsfw=_is_nsfw,
    moderation=case(
        (_is_nsfw, ModerationOutcome.NSFW.value),
        else_=func.coalesce(_latest_reviews.c.review, ModerationOutcome.UNREVIEWED.value),
    ),
    tweeted=_engagement.c.tweet_count.is_not(None),
    likes=func.coalesce(_engagement.c.likes, 0),
    retweets=func.coalesce(_engagement.c.retweets, 0),
)

# Primary entry-type criterion: the catalog lists classic skins only
CLASSIC_SKINS: ColumnElement[bool] = Skin.skin_type == SkinType.CLASSIC.value

APPROVED_SKINS: ColumnElement[bool] = and_(
    CLASSIC_SKINS,
    ENTRY_COLUMNS.moderation == ModerationOutcome.APPROVED.value,
)

DEFAULT_ORDER: Sequence[ColumnElement[Any]] = (Skin.md5.asc(),)


def _with_derived_state(statement: Select) -> Select:
    """Attach the aggregate subqueries every catalog query reads from."""
    return (
        statement.select_from(Skin)
        .outerjoin(_latest_reviews, _latest_reviews.c.skin_md5 == Skin.md5)
        .outerjoin(_nsfw_reviews, _nsfw_reviews.c.skin_md5 == Skin.md5)
        .outerjoin(_engagement, _engagement.c.skin_md5 == Skin.md5)
        .outerjoin(_filenames, _filenames.c.skin_md5 == Skin.md5)
    )


def entry_select() -> Select:
    """SELECT producing rows accepted by CatalogEntry.from_row."""
    return _with_derived_state(
        select(
            Skin.id,
            Skin.md5,
            Skin.skin_type,
            Skin.readme_text,
            Skin.average_color,
            _filenames.c.file_path.label("file_path"),
            ENTRY_COLUMNS.nsfw.label("nsfw"),
            ENTRY_COLUMNS.moderation.label("moderation"),
            ENTRY_COLUMNS.tweeted.label("tweeted"),
            ENTRY_COLUMNS.likes.label("likes"),
            ENTRY_COLUMNS.retweets.label("retweets"),
        )
    )


class CatalogStore:
    """
    Read-only access to skins over one AsyncSession.

    Every database failure surfaces as StoreError with the driver error
    chained; nothing is retried here.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _execute(self, statement: Any):
        try:
            return await self.session.execute(statement)
        except SQLAlchemyError as exc:
            logger.exception("Catalog query failed")
            raise StoreError(f"Catalog query failed: {exc}") from exc

    async def count_entries(self, predicate: ColumnElement[bool]) -> int:
        """Number of skins matching predicate."""
        statement = _with_derived_state(select(func.count(Skin.id))).where(predicate)
        result = await self._execute(statement)
        return int(result.scalar_one())

    async def query_entries(
        self,
        predicate: ColumnElement[bool],
        *,
        limit: int,
        offset: int,
        order_by: Sequence[ColumnElement[Any]] = DEFAULT_ORDER,
    ) -> List[CatalogEntry]:
        """One page of skins matching predicate, in order_by order."""
        statement = (
            entry_select()
            .where(predicate)
            .order_by(*order_by)
            .limit(limit)
            .offset(offset)
        )
        result = await self._execute(statement)
        return [CatalogEntry.from_row(row) for row in result.mappings()]

    async def query_md5s(
        self,
        predicate: ColumnElement[bool],
        *,
        limit: int,
        offset: int,
        order_by: Sequence[ColumnElement[Any]],
    ) -> List[str]:
        """Like query_entries but only the md5 column."""
        statement = (
            _with_derived_state(select(Skin.md5))
            .where(predicate)
            .order_by(*order_by)
            .limit(limit)
            .offset(offset)
        )
        result = await self._execute(statement)
        return list(result.scalars())

    async def find_entry_by_md5(self, md5: str) -> Optional[CatalogEntry]:
        result = await self._execute(entry_select().where(Skin.md5 == md5))
        row = result.mappings().one_or_none()
        return CatalogEntry.from_row(row) if row is not None else None

    async def find_entries_by_md5(self, md5s: Sequence[str]) -> Dict[str, CatalogEntry]:
        """Entries keyed by md5; unknown md5s are simply missing."""
        if not md5s:
            return {}
        result = await self._execute(entry_select().where(Skin.md5.in_(list(md5s))))
        entries = (CatalogEntry.from_row(row) for row in result.mappings())
        return {entry.md5: entry for entry in entries}

    async def skin_exists(self, md5: str) -> bool:
        result = await self._execute(select(Skin.id).where(Skin.md5 == md5))
        return result.scalar_one_or_none() is not None

    async def archive_files(self, md5: str) -> List[ArchiveFile]:
        result = await self._execute(
            select(ArchiveFile)
            .where(ArchiveFile.skin_md5 == md5)
            .order_by(ArchiveFile.file_name, ArchiveFile.id)
        )
        return list(result.scalars())

    async def find_skin_with_relations(self, md5: str) -> Optional[Skin]:
        """The Skin row with tweets, reviews and archive.org item loaded."""
        result = await self._execute(
            select(Skin)
            .where(Skin.md5 == md5)
            .options(
                selectinload(Skin.tweets),
                selectinload(Skin.reviews),
                selectinload(Skin.internet_archive_item),
            )
        )
        return result.scalar_one_or_none()
