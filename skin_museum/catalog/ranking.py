"""
Museum ordering - the default browsing order of the skin museum.

1. The four classic default skins, in a fixed order
2. Tweeted skins, most engagement (likes + retweets) first
3. Approved, but not tweeted yet, skins
4. Unreviewed skins
5. Rejected skins
6. NSFW skins

Remaining ties are broken by md5 ascending, so the order is total and a
given (offset, limit) window is stable while the data does not change.

The policy exists twice: museum_sort_key works on CatalogEntry objects,
museum_order_by renders the same key as SQL so the database can sort and
page without the catalog being loaded into memory. Keep them in step.
"""

from enum import IntEnum
from typing import Any, Iterable, List, Sequence, Tuple

from sqlalchemy import case
from sqlalchemy.sql.elements import ColumnElement

from skin_museum.catalog.entry import CatalogEntry, ModerationOutcome
from skin_museum.catalog.store import CLASSIC_SKINS, ENTRY_COLUMNS, CatalogColumns, CatalogStore

CLASSIC_DEFAULT_SKINS: Tuple[str, ...] = (
    "5e4f10275dcb1fb211d4a8b4f1bda236",  # Base 2.91
    "cd251187a5e6ff54ce938d26f1f2de02",  # Winamp3 Classified
    "b0fb83cc20af3abe264291bb17fb2a13",  # Winamp 5 Classified
    "d6010aa35bed659bc1311820daa4b341",  # Bento Classified
)

_CLASSIC_POSITION = {md5: position for position, md5 in enumerate(CLASSIC_DEFAULT_SKINS)}


class MuseumTier(IntEnum):
    """Tiers of the museum ordering, lowest first."""
    CLASSIC_DEFAULT = 0
    TWEETED = 1
    APPROVED = 2
    UNREVIEWED = 3
    REJECTED = 4
    NSFW = 5


_OUTCOME_TIER = {
    ModerationOutcome.APPROVED: MuseumTier.APPROVED,
    ModerationOutcome.UNREVIEWED: MuseumTier.UNREVIEWED,
    ModerationOutcome.REJECTED: MuseumTier.REJECTED,
    ModerationOutcome.NSFW: MuseumTier.NSFW,
}


def museum_tier(entry: CatalogEntry) -> MuseumTier:
    if entry.md5 in _CLASSIC_POSITION:
        return MuseumTier.CLASSIC_DEFAULT
    if entry.tweeted:
        return MuseumTier.TWEETED
    return _OUTCOME_TIER[entry.moderation]


def museum_sort_key(entry: CatalogEntry) -> Tuple[int, int, str]:
    """(tier, within-tier rank, md5); smaller sorts first."""
    tier = museum_tier(entry)
    if tier == MuseumTier.CLASSIC_DEFAULT:
        rank = _CLASSIC_POSITION[entry.md5]
    elif tier == MuseumTier.TWEETED:
        rank = -entry.engagement
    else:
        rank = 0
    return (int(tier), rank, entry.md5)


def sort_for_museum(entries: Iterable[CatalogEntry]) -> List[CatalogEntry]:
    return sorted(entries, key=museum_sort_key)


def museum_order_by(columns: CatalogColumns = ENTRY_COLUMNS) -> List[ColumnElement[Any]]:
    """SQL ORDER BY clauses equivalent to museum_sort_key."""
    is_classic_default = columns.md5.in_(CLASSIC_DEFAULT_SKINS)
    moderation = columns.moderation
    tier = case(
        (is_classic_default, int(MuseumTier.CLASSIC_DEFAULT)),
        (columns.tweeted, int(MuseumTier.TWEETED)),
        (moderation == ModerationOutcome.APPROVED.value, int(MuseumTier.APPROVED)),
        (moderation == ModerationOutcome.REJECTED.value, int(MuseumTier.REJECTED)),
        (moderation == ModerationOutcome.NSFW.value, int(MuseumTier.NSFW)),
        else_=int(MuseumTier.UNREVIEWED),
    )
    rank = case(
        (is_classic_default, case(_CLASSIC_POSITION, value=columns.md5, else_=0)),
        (columns.tweeted, -columns.engagement),
        else_=0,
    )
    return [tier.asc(), rank.asc(), columns.md5.asc()]


class MuseumRanking:
    """
    The museum order as an indexable sequence of md5s.

    Sorting, offset and limit all run in the database; only the requested
    window is fetched.
    """

    def __init__(self, store: CatalogStore):
        self.store = store
        self._order_by: Sequence[ColumnElement[Any]] = museum_order_by()

    async def page(self, offset: int, limit: int) -> List[str]:
        if limit <= 0:
            return []
        return await self.store.query_md5s(
            CLASSIC_SKINS,
            limit=limit,
            offset=offset,
            order_by=self._order_by,
        )
