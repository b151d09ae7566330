"""
Identity resolution: find a skin by the md5 of its file.

Two named operations instead of a flag:
- lookup_by_md5 is tolerant and returns None for an unknown md5
- get_by_md5 is strict and raises NotFoundError

Nothing is cached here; every call reads the current database state.
"""

from typing import List, Optional, Sequence

from skin_museum.catalog.entry import CatalogEntry
from skin_museum.catalog.store import CatalogStore
from skin_museum.errors import NotFoundError
from skin_museum.kernel.models import ArchiveFile


class IdentityResolver:
    """Resolve md5 hashes to catalog entries."""

    def __init__(self, store: CatalogStore):
        self.store = store

    async def lookup_by_md5(self, md5: str) -> Optional[CatalogEntry]:
        """Entry for md5, or None when no skin has that hash."""
        return await self.store.find_entry_by_md5(md5)

    async def get_by_md5(self, md5: str) -> CatalogEntry:
        """
        Entry for md5.

        Raises:
            NotFoundError: no skin has that hash
        """
        entry = await self.store.find_entry_by_md5(md5)
        if entry is None:
            raise NotFoundError(md5)
        return entry

    async def get_many_by_md5(self, md5s: Sequence[str]) -> List[CatalogEntry]:
        """
        Entries for md5s, in the same order, fetched in one query.

        Raises:
            NotFoundError: for the first md5 with no skin
        """
        found = await self.store.find_entries_by_md5(md5s)
        entries = []
        for md5 in md5s:
            entry = found.get(md5)
            if entry is None:
                raise NotFoundError(md5)
            entries.append(entry)
        return entries

    async def archive_files(self, md5: str) -> List[ArchiveFile]:
        """Files inside the skin's archive; strict about the skin existing."""
        if not await self.store.skin_exists(md5):
            raise NotFoundError(md5)
        return await self.store.archive_files(md5)
