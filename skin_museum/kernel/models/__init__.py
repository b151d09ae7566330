"""
Kernel Data Models

SQLAlchemy models for the skin archive: skins and the moderation,
engagement and archive records attached to them by md5.
"""

from skin_museum.kernel.models.base import Base, TimestampMixin
from skin_museum.kernel.models.skin import (
    Skin,
    SkinType,
    SkinFile,
    ArchiveFile,
    InternetArchiveItem,
)
from skin_museum.kernel.models.review import SkinReview, ReviewRating
from skin_museum.kernel.models.tweet import Tweet

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    # Skins
    "Skin",
    "SkinType",
    "SkinFile",
    "ArchiveFile",
    "InternetArchiveItem",
    # Moderation
    "SkinReview",
    "ReviewRating",
    # Engagement
    "Tweet",
]
