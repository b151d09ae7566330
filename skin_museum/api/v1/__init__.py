"""
API v1 routes.
"""

from fastapi import APIRouter

from skin_museum.api.v1 import skins

router = APIRouter()

router.include_router(skins.router, prefix="/skins", tags=["Skins"])
