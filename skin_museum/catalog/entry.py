"""
CatalogEntry - the read-only view of a skin handed out by the catalog.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional


class ModerationOutcome(str, Enum):
    """Effective moderation state of a skin."""
    UNREVIEWED = "UNREVIEWED"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    NSFW = "NSFW"


def basename(file_path: Optional[str]) -> Optional[str]:
    """Last component of an uploaded path (either slash style)."""
    if not file_path:
        return None
    return re.split(r"[\\/]", file_path)[-1] or None


@dataclass(frozen=True)
class CatalogEntry:
    """A skin together with its derived moderation and engagement state."""

    id: int
    md5: str
    skin_type: int
    filename: Optional[str]
    readme_text: Optional[str]
    average_color: Optional[str]
    nsfw: bool
    moderation: ModerationOutcome
    tweeted: bool
    likes: int
    retweets: int

    @property
    def engagement(self) -> int:
        """Combined tweet engagement used by the museum ordering."""
        return self.likes + self.retweets

    @property
    def approved(self) -> bool:
        return self.moderation == ModerationOutcome.APPROVED

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "CatalogEntry":
        """Build from a result row of the store's entry select."""
        return cls(
            id=row["id"],
            md5=row["md5"],
            skin_type=row["skin_type"],
            filename=basename(row["file_path"]),
            readme_text=row["readme_text"],
            average_color=row["average_color"],
            nsfw=bool(row["nsfw"]),
            moderation=ModerationOutcome(row["moderation"]),
            tweeted=bool(row["tweeted"]),
            likes=int(row["likes"] or 0),
            retweets=int(row["retweets"] or 0),
        )
