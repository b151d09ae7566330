"""
Pydantic schemas for API request/response validation.
"""

from skin_museum.schemas.common import ErrorResponse, HealthResponse
from skin_museum.schemas.skin import (
    ArchiveFileResponse,
    InternetArchiveItemResponse,
    ReviewResponse,
    SkinDetailResponse,
    SkinResponse,
    SkinsConnectionResponse,
    TweetResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "ArchiveFileResponse",
    "InternetArchiveItemResponse",
    "ReviewResponse",
    "SkinDetailResponse",
    "SkinResponse",
    "SkinsConnectionResponse",
    "TweetResponse",
]
