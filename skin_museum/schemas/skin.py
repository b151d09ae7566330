"""
Skin schemas.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from skin_museum import urls
from skin_museum.catalog.entry import CatalogEntry
from skin_museum.config import Settings
from skin_museum.kernel.models import (
    ArchiveFile,
    InternetArchiveItem,
    ReviewRating,
    Skin,
    SkinReview,
    Tweet,
)


class ArchiveFileResponse(BaseModel):
    """A file found within a skin's .wsz archive."""

    model_config = ConfigDict(from_attributes=True)

    filename: str = Field(validation_alias="file_name")
    date: Optional[datetime] = Field(None, validation_alias="file_date")
    size: Optional[int] = Field(None, validation_alias="uncompressed_size")


class TweetResponse(BaseModel):
    """A @winampskins tweet mentioning the skin. Counts are refreshed nightly."""

    url: str
    likes: int
    retweets: int

    @classmethod
    def from_model(cls, tweet: Tweet) -> "TweetResponse":
        return cls(url=urls.tweet_url(tweet.tweet_id), likes=tweet.likes, retweets=tweet.retweets)


class ReviewResponse(BaseModel):
    """A moderator's rating. Early reviews have no reviewer recorded."""

    rating: str
    reviewer: Optional[str] = None

    @classmethod
    def from_model(cls, review: SkinReview) -> "ReviewResponse":
        return cls(rating=ReviewRating(review.review).value, reviewer=review.reviewer)


class InternetArchiveItemResponse(BaseModel):
    """The skin's item at archive.org."""

    identifier: str
    url: str

    @classmethod
    def from_model(cls, item: InternetArchiveItem) -> "InternetArchiveItemResponse":
        return cls(identifier=item.identifier, url=urls.internet_archive_url(item.identifier))


class SkinResponse(BaseModel):
    """A classic Winamp skin."""

    id: int
    md5: str
    filename: Optional[str]
    museum_url: str
    webamp_url: str
    screenshot_url: str
    download_url: str
    readme_text: Optional[str]
    nsfw: bool
    average_color: Optional[str]
    tweeted: bool
    moderation: str
    likes: int
    retweets: int

    @classmethod
    def from_entry(cls, entry: CatalogEntry, settings: Settings) -> "SkinResponse":
        return cls(**_entry_fields(entry, settings))


class SkinDetailResponse(SkinResponse):
    """Skin with its tweets, reviews and archive.org item."""

    tweets: List[TweetResponse] = []
    reviews: List[ReviewResponse] = []
    internet_archive_item: Optional[InternetArchiveItemResponse] = None

    @classmethod
    def from_skin(
        cls,
        entry: CatalogEntry,
        skin: Skin,
        settings: Settings,
    ) -> "SkinDetailResponse":
        item = skin.internet_archive_item
        return cls(
            **_entry_fields(entry, settings),
            tweets=[TweetResponse.from_model(t) for t in skin.tweets],
            reviews=[ReviewResponse.from_model(r) for r in skin.reviews],
            internet_archive_item=InternetArchiveItemResponse.from_model(item) if item else None,
        )


class SkinsConnectionResponse(BaseModel):
    """A page of skins and the total size of the listing."""

    count: int
    nodes: List[SkinResponse]


def _entry_fields(entry: CatalogEntry, settings: Settings) -> dict:
    return {
        "id": entry.id,
        "md5": entry.md5,
        "filename": entry.filename,
        "museum_url": urls.museum_url(entry.md5, entry.filename, settings),
        "webamp_url": urls.webamp_url(entry.md5, settings),
        "screenshot_url": urls.screenshot_url(entry.md5, settings),
        "download_url": urls.download_url(entry.md5, settings),
        "readme_text": entry.readme_text,
        "nsfw": entry.nsfw,
        "average_color": entry.average_color,
        "tweeted": entry.tweeted,
        "moderation": entry.moderation.value,
        "likes": entry.likes,
        "retweets": entry.retweets,
    }


def archive_file_responses(files: List[ArchiveFile]) -> List[ArchiveFileResponse]:
    return [ArchiveFileResponse.model_validate(f) for f in files]
