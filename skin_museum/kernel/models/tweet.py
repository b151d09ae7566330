"""
Tweet model - a @winampskins tweet featuring a skin.

likes and retweets are refreshed nightly by an external job; treat them as a
snapshot.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from skin_museum.kernel.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from skin_museum.kernel.models.skin import Skin


class Tweet(Base, TimestampMixin):
    """A tweet mentioning one skin."""

    __tablename__ = "tweets"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    skin_md5: Mapped[str] = mapped_column(
        String(32),
        ForeignKey("skins.md5", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tweet_id: Mapped[str] = mapped_column(
        String(64),
        unique=True,
        nullable=False,
    )
    likes: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
    )
    retweets: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
    )

    skin: Mapped["Skin"] = relationship(
        "Skin",
        back_populates="tweets",
    )

    def __repr__(self) -> str:
        return f"<Tweet {self.tweet_id} {self.skin_md5}>"
