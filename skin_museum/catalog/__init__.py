"""Catalog layer - identity lookup, museum ordering and paged listings."""

from skin_museum.catalog.entry import CatalogEntry, ModerationOutcome
from skin_museum.catalog.identity import IdentityResolver
from skin_museum.catalog.query import (
    CatalogRequest,
    DefaultListing,
    FilteredListing,
    MuseumListing,
    Page,
    SkinsConnection,
    SkinsFilterOption,
    SkinsSortOption,
    parse_catalog_request,
)
from skin_museum.catalog.ranking import (
    CLASSIC_DEFAULT_SKINS,
    MuseumRanking,
    MuseumTier,
    museum_sort_key,
)
from skin_museum.catalog.service import CatalogService
from skin_museum.catalog.store import CatalogStore

__all__ = [
    "CatalogEntry",
    "ModerationOutcome",
    "IdentityResolver",
    "CatalogRequest",
    "DefaultListing",
    "FilteredListing",
    "MuseumListing",
    "Page",
    "SkinsConnection",
    "SkinsFilterOption",
    "SkinsSortOption",
    "parse_catalog_request",
    "CLASSIC_DEFAULT_SKINS",
    "MuseumRanking",
    "MuseumTier",
    "museum_sort_key",
    "CatalogService",
    "CatalogStore",
]
