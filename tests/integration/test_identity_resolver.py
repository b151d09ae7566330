"""Integration tests for md5 lookups."""

import pytest

from skin_museum.catalog.identity import IdentityResolver
from skin_museum.catalog.store import CatalogStore
from skin_museum.errors import NotFoundError


class TestIdentityResolver:
    """Tolerant and strict lookups."""
    
    @pytest.mark.asyncio
    async def test_lookup_known_md5(self, db_session, make_skin, md5_of):
        md5 = md5_of("known")
        await make_skin(md5, filename="known.wsz")
        
        entry = await IdentityResolver(CatalogStore(db_session)).lookup_by_md5(md5)
        
        assert entry is not None
        assert entry.md5 == md5
    
    @pytest.mark.asyncio
    async def test_lookup_unknown_md5_returns_none(self, db_session, md5_of):
        resolver = IdentityResolver(CatalogStore(db_session))
        
        assert await resolver.lookup_by_md5(md5_of("unknown")) is None
    
    @pytest.mark.asyncio
    async def test_get_known_md5(self, db_session, make_skin, md5_of):
        md5 = md5_of("known")
        await make_skin(md5)
        
        entry = await IdentityResolver(CatalogStore(db_session)).get_by_md5(md5)
        
        assert entry.md5 == md5
    
    @pytest.mark.asyncio
    async def test_get_unknown_md5_raises_with_hash(self, db_session, md5_of):
        missing = md5_of("unknown")
        
        with pytest.raises(NotFoundError) as excinfo:
            await IdentityResolver(CatalogStore(db_session)).get_by_md5(missing)
        
        assert excinfo.value.md5 == missing
    
    @pytest.mark.asyncio
    async def test_get_many_preserves_order(self, db_session, make_skin, md5_of):
        md5s = [md5_of("c"), md5_of("a"), md5_of("b")]
        for md5 in md5s:
            await make_skin(md5)
        
        entries = await IdentityResolver(CatalogStore(db_session)).get_many_by_md5(md5s)
        
        assert [e.md5 for e in entries] == md5s
    
    @pytest.mark.asyncio
    async def test_get_many_raises_for_missing(self, db_session, make_skin, md5_of):
        present = md5_of("present")
        missing = md5_of("missing")
        await make_skin(present)
        
        with pytest.raises(NotFoundError) as excinfo:
            await IdentityResolver(CatalogStore(db_session)).get_many_by_md5([present, missing])
        
        assert excinfo.value.md5 == missing
    
    @pytest.mark.asyncio
    async def test_archive_files_for_unknown_skin(self, db_session, md5_of):
        with pytest.raises(NotFoundError):
            await IdentityResolver(CatalogStore(db_session)).archive_files(md5_of("unknown"))
    
    @pytest.mark.asyncio
    async def test_archive_files_for_skin_without_files(self, db_session, make_skin, md5_of):
        md5 = md5_of("empty")
        await make_skin(md5)
        
        assert await IdentityResolver(CatalogStore(db_session)).archive_files(md5) == []
