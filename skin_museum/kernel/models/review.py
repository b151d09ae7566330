"""
SkinReview model - a moderator's judgement of a skin.

Reviews come from the museum's review page or the Discord bot. Older rows
predate reviewer tracking, so reviewer is often null.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, func, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from skin_museum.kernel.models.base import Base

if TYPE_CHECKING:
    from skin_museum.kernel.models.skin import Skin


class ReviewRating(str, Enum):
    """The rating a moderator gave a skin."""
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    NSFW = "NSFW"


class SkinReview(Base):
    """One review of one skin. A skin may be reviewed many times."""

    __tablename__ = "skin_reviews"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    skin_md5: Mapped[str] = mapped_column(
        String(32),
        ForeignKey("skins.md5", ondelete="CASCADE"),
        nullable=False,
    )
    review: Mapped[ReviewRating] = mapped_column(
        String(20),
        nullable=False,
    )
    reviewer: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    skin: Mapped["Skin"] = relationship(
        "Skin",
        back_populates="reviews",
    )

    __table_args__ = (
        Index("ix_skin_reviews_skin_md5", "skin_md5"),
        Index("ix_skin_reviews_review", "review"),
    )

    def __repr__(self) -> str:
        return f"<SkinReview {self.skin_md5} {self.review}>"
