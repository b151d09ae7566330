"""
Catalog service - the entry point the HTTP layer talks to.
"""

from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from skin_museum.catalog.entry import CatalogEntry
from skin_museum.catalog.identity import IdentityResolver
from skin_museum.catalog.query import (
    MAX_PAGE_SIZE,
    SkinsConnection,
    SkinsFilterOption,
    SkinsSortOption,
    parse_catalog_request,
)
from skin_museum.catalog.store import CatalogStore
from skin_museum.config import get_settings
from skin_museum.errors import ValidationError
from skin_museum.kernel.models import ArchiveFile, Skin
from skin_museum.logging_config import get_logger

logger = get_logger(__name__)


class CatalogService:
    """
    Read operations over the skin catalog.

    Construct one per request with that request's session.
    """
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.store = CatalogStore(session)
        self.resolver = IdentityResolver(self.store)
    
    async def lookup_by_md5(self, md5: str) -> Optional[CatalogEntry]:
        """Skin with this md5, or None."""
        return await self.resolver.lookup_by_md5(md5)
    
    async def get_by_md5(self, md5: str) -> CatalogEntry:
        """Skin with this md5; raises NotFoundError when there is none."""
        return await self.resolver.get_by_md5(md5)
    
    async def list_skins(
        self,
        first: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Optional[SkinsSortOption] = None,
        filter: Optional[SkinsFilterOption] = None,
    ) -> SkinsConnection:
        """
        Validate listing parameters and return the connection to read from.
        
        Args:
            first: Page size (at most max_page_size)
            offset: Number of skins to skip
            sort: MUSEUM for the museum ordering
            filter: APPROVED to list approved skins only
            
        Returns:
            SkinsConnection with count() and nodes()
            
        Raises:
            ValidationError: Invalid paging or sort+filter combined
        """
        settings = get_settings()
        try:
            request = parse_catalog_request(
                first,
                offset,
                sort,
                filter,
                max_page_size=min(settings.max_page_size, MAX_PAGE_SIZE),
                default_page_size=settings.default_page_size,
            )
        except ValidationError as exc:
            logger.info(
                "Rejected skins listing: %s",
                exc,
                extra={"code": exc.code, "first": first, "offset": offset},
            )
            raise
        return SkinsConnection(request, self.store)
    
    async def archive_files(self, md5: str) -> List[ArchiveFile]:
        return await self.resolver.archive_files(md5)
    
    async def lookup_skin_details(self, md5: str) -> Optional[Tuple[CatalogEntry, Skin]]:
        """Entry plus the Skin row with tweets, reviews and archive.org item, or None."""
        entry = await self.resolver.lookup_by_md5(md5)
        if entry is None:
            return None
        skin = await self.store.find_skin_with_relations(md5)
        if skin is None:
            return None
        return entry, skin
