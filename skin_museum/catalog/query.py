"""
Catalog query resolution - turn listing parameters into a paged result.

Sorting and filtering are mutually exclusive, so a request is parsed into
exactly one of three listing shapes (default, museum-sorted, filtered).
The invalid combination never gets past parse_catalog_request.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from sqlalchemy.sql.elements import ColumnElement

from skin_museum.catalog.entry import CatalogEntry
from skin_museum.catalog.identity import IdentityResolver
from skin_museum.catalog.ranking import MuseumRanking
from skin_museum.catalog.store import APPROVED_SKINS, CLASSIC_SKINS, CatalogStore
from skin_museum.errors import (
    ConsistencyFault,
    InvalidPaginationError,
    LimitExceededError,
    NotFoundError,
    UnsupportedCombinationError,
)
from skin_museum.logging_config import get_logger

logger = get_logger(__name__)

MAX_PAGE_SIZE = 1000
DEFAULT_PAGE_SIZE = 100
# Largest offset a 64-bit signed LIMIT/OFFSET parameter can hold
MAX_OFFSET = 2**63 - 1


class SkinsSortOption(str, Enum):
    """Orderings a listing can ask for."""
    MUSEUM = "MUSEUM"


class SkinsFilterOption(str, Enum):
    """Subsets a listing can be restricted to."""
    APPROVED = "APPROVED"


@dataclass(frozen=True)
class Page:
    """Validated window: first entries starting at offset."""

    first: int
    offset: int


@dataclass(frozen=True)
class DefaultListing:
    page: Page


@dataclass(frozen=True)
class MuseumListing:
    page: Page


@dataclass(frozen=True)
class FilteredListing:
    page: Page
    filter: SkinsFilterOption


CatalogRequest = Union[DefaultListing, MuseumListing, FilteredListing]


def parse_catalog_request(
    first: Optional[int] = None,
    offset: Optional[int] = None,
    sort: Optional[SkinsSortOption] = None,
    filter: Optional[SkinsFilterOption] = None,
    *,
    max_page_size: int = MAX_PAGE_SIZE,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> CatalogRequest:
    """
    Validate listing parameters. No database access happens here.

    Raises:
        LimitExceededError: first is above max_page_size
        InvalidPaginationError: first or offset is negative, or offset is
            above MAX_OFFSET
        UnsupportedCombinationError: both sort and filter were given
    """
    if first is None:
        first = min(default_page_size, max_page_size)
    if first > max_page_size:
        raise LimitExceededError(first, max_page_size)
    if offset is None:
        offset = 0
    if first < 0 or offset < 0:
        raise InvalidPaginationError("first and offset must not be negative")
    if offset > MAX_OFFSET:
        raise InvalidPaginationError(f"offset must not exceed {MAX_OFFSET}")

    page = Page(first=first, offset=offset)
    if sort is not None and filter is not None:
        raise UnsupportedCombinationError(SkinsSortOption(sort).value, SkinsFilterOption(filter).value)
    if sort is not None:
        return MuseumListing(page=page)
    if filter is not None:
        return FilteredListing(page=page, filter=SkinsFilterOption(filter))
    return DefaultListing(page=page)


def listing_predicate(request: CatalogRequest) -> ColumnElement[bool]:
    """Which skins a listing covers; shared by count() and nodes()."""
    if isinstance(request, FilteredListing):
        if request.filter == SkinsFilterOption.APPROVED:
            return APPROVED_SKINS
        raise ValueError(f"Unknown filter: {request.filter}")
    return CLASSIC_SKINS


class SkinsConnection:
    """
    One page of the catalog plus the size of the list it was cut from.

    Holds only the validated request and the request-scoped store.
    """

    def __init__(self, request: CatalogRequest, store: CatalogStore):
        self.request = request
        self.store = store
        self.resolver = IdentityResolver(store)

    async def count(self) -> int:
        """Total skins the listing covers, independent of paging."""
        return await self.store.count_entries(listing_predicate(self.request))

    async def nodes(self) -> List[CatalogEntry]:
        page = self.request.page
        if page.first == 0:
            return []

        if isinstance(self.request, MuseumListing):
            return await self._museum_nodes(page)

        return await self.store.query_entries(
            listing_predicate(self.request),
            limit=page.first,
            offset=page.offset,
        )

    async def _museum_nodes(self, page: Page) -> List[CatalogEntry]:
        md5s = await MuseumRanking(self.store).page(page.offset, page.first)
        try:
            return await self.resolver.get_many_by_md5(md5s)
        except NotFoundError as exc:
            logger.error(
                "Museum ordering references a skin that could not be loaded",
                extra={"md5": exc.md5, "offset": page.offset, "first": page.first},
            )
            raise ConsistencyFault(
                f"Museum ordering references missing skin {exc.md5}",
                md5=exc.md5,
            ) from exc
