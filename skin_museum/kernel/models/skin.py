"""
Skin models - one row per distinct skin file, keyed by the md5 of its bytes.
"""

from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    Index,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from skin_museum.kernel.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from skin_museum.kernel.models.review import SkinReview
    from skin_museum.kernel.models.tweet import Tweet


class SkinType(IntEnum):
    """Kinds of skin in the archive. Only classic skins are catalogued."""
    CLASSIC = 1
    MODERN = 2


class Skin(Base, TimestampMixin):
    """
    A skin in the archive.

    The md5 is the identity: the same bytes uploaded under different names
    are one skin with several SkinFile rows.
    """
    
    __tablename__ = "skins"
    
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    md5: Mapped[str] = mapped_column(
        String(32),
        unique=True,
        nullable=False,
    )
    skin_type: Mapped[int] = mapped_column(
        Integer,
        default=SkinType.CLASSIC,
        nullable=False,
    )
    readme_text: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    average_color: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
    )
    emails: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    
    # Relationships
    files: Mapped[List["SkinFile"]] = relationship(
        "SkinFile",
        back_populates="skin",
        cascade="all, delete-orphan",
        order_by="SkinFile.id",
    )
    reviews: Mapped[List["SkinReview"]] = relationship(
        "SkinReview",
        back_populates="skin",
        cascade="all, delete-orphan",
        order_by="SkinReview.id",
    )
    tweets: Mapped[List["Tweet"]] = relationship(
        "Tweet",
        back_populates="skin",
        cascade="all, delete-orphan",
        order_by="Tweet.id",
    )
    archive_files: Mapped[List["ArchiveFile"]] = relationship(
        "ArchiveFile",
        back_populates="skin",
        cascade="all, delete-orphan",
        order_by="ArchiveFile.file_name",
    )
    internet_archive_item: Mapped[Optional["InternetArchiveItem"]] = relationship(
        "InternetArchiveItem",
        back_populates="skin",
        cascade="all, delete-orphan",
        uselist=False,
    )
    
    __table_args__ = (
        Index("ix_skins_type_md5", "skin_type", "md5"),
    )
    
    def __repr__(self) -> str:
        return f"<Skin {self.md5}>"


class SkinFile(Base):
    """A filename the skin was uploaded under."""
    
    __tablename__ = "files"
    
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
    file_path: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    
    skin: Mapped["Skin"] = relationship(
        "Skin",
        back_populates="files",
    )


class ArchiveFile(Base):
    """A member of the skin's .wsz archive."""
    
    __tablename__ = "archive_files"
    
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
    file_name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    file_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    uncompressed_size: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
    )
    
    skin: Mapped["Skin"] = relationship(
        "Skin",
        back_populates="archive_files",
    )


class InternetArchiveItem(Base):
    """The archive.org item mirroring the skin."""
    
    __tablename__ = "ia_items"
    
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    skin_md5: Mapped[str] = mapped_column(
        String(32),
        ForeignKey("skins.md5", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    identifier: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
    )
    
    skin: Mapped["Skin"] = relationship(
        "Skin",
        back_populates="internet_archive_item",
    )
