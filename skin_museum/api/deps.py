"""
FastAPI dependencies for database sessions and the catalog service.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from skin_museum.catalog.service import CatalogService
from skin_museum.config import Settings, get_settings
from skin_museum.database import get_db


DbSession = Annotated[AsyncSession, Depends(get_db)]
AppSettings = Annotated[Settings, Depends(get_settings)]


async def get_catalog_service(db: DbSession) -> AsyncGenerator[CatalogService, None]:
    """Catalog service bound to this request's session."""
    yield CatalogService(db)


Catalog = Annotated[CatalogService, Depends(get_catalog_service)]

