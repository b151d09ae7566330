"""
Kernel layer: the relational store schema the catalog reads from.

Rows here are written by ingestion and moderation jobs that live outside this
service; the catalog only reads them.
"""

from skin_museum.kernel.models import (
    Base,
    Skin,
    SkinType,
    SkinFile,
    SkinReview,
    ReviewRating,
    Tweet,
    ArchiveFile,
    InternetArchiveItem,
)

__all__ = [
    "Base",
    "Skin",
    "SkinType",
    "SkinFile",
    "SkinReview",
    "ReviewRating",
    "Tweet",
    "ArchiveFile",
    "InternetArchiveItem",
]
