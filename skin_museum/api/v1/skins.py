"""
Skin endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from skin_museum.api.deps import AppSettings, Catalog
from skin_museum.catalog.query import SkinsFilterOption, SkinsSortOption
from skin_museum.schemas.skin import (
    ArchiveFileResponse,
    SkinDetailResponse,
    SkinResponse,
    SkinsConnectionResponse,
    archive_file_responses,
)

router = APIRouter()


@router.get("", response_model=SkinsConnectionResponse)
async def list_skins(
    catalog: Catalog,
    settings: AppSettings,
    first: Optional[int] = Query(None, description="Page size (maximum 1000)"),
    offset: Optional[int] = Query(None, description="Number of skins to skip"),
    sort: Optional[SkinsSortOption] = Query(
        None,
        description="MUSEUM: classic defaults, tweeted by engagement, approved, unreviewed, rejected, NSFW",
    ),
    filter_: Optional[SkinsFilterOption] = Query(
        None,
        alias="filter",
        description="APPROVED: skins approved for tweeting. Cannot be combined with sort.",
    ),
):
    """All classic skins, one page at a time."""
    connection = await catalog.list_skins(first=first, offset=offset, sort=sort, filter=filter_)
    count = await connection.count()
    nodes = await connection.nodes()
    return SkinsConnectionResponse(
        count=count,
        nodes=[SkinResponse.from_entry(entry, settings) for entry in nodes],
    )


@router.get("/{md5}", response_model=SkinDetailResponse)
async def get_skin(
    md5: str,
    catalog: Catalog,
    settings: AppSettings,
):
    """Get a skin by the MD5 hash of its file."""
    details = await catalog.lookup_skin_details(md5)
    if details is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Skin not found",
        )
    entry, skin = details
    return SkinDetailResponse.from_skin(entry, skin, settings)


@router.get("/{md5}/archive-files", response_model=List[ArchiveFileResponse])
async def list_archive_files(
    md5: str,
    catalog: Catalog,
):
    """Files contained in the skin's .wsz archive."""
    files = await catalog.archive_files(md5)
    return archive_file_responses(files)
