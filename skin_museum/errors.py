"""Exception hierarchy for catalog lookups and listings.

Callers (mostly the HTTP layer) react to the broad categories: a
``ValidationError`` means the request was bad, ``NotFoundError`` means the
skin does not exist, ``ConsistencyFault`` and ``StoreError`` are server side.
Each class carries a stable ``code`` so the category survives serialisation.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "CatalogError",
    "ValidationError",
    "LimitExceededError",
    "UnsupportedCombinationError",
    "InvalidPaginationError",
    "NotFoundError",
    "ConsistencyFault",
    "StoreError",
]


class CatalogError(RuntimeError):
    """Base exception for catalog failures."""

    code = "catalog_error"


class ValidationError(CatalogError):
    """Raised when a caller supplies invalid listing parameters."""

    code = "invalid_request"


class LimitExceededError(ValidationError):
    """Raised when the requested page size is above the maximum."""

    code = "limit_exceeded"

    def __init__(self, requested: int, maximum: int) -> None:
        super().__init__(f"Maximum limit is {maximum}")
        self.requested = requested
        self.maximum = maximum


class UnsupportedCombinationError(ValidationError):
    """Raised when sorting and filtering are requested together."""

    code = "unsupported_combination"

    def __init__(self, sort: str, filter: str) -> None:
        super().__init__(
            "We don't support combining sorting and filtering at the same time."
        )
        self.sort = sort
        self.filter = filter


class InvalidPaginationError(ValidationError):
    """Raised for negative or out-of-range page sizes and offsets."""

    code = "invalid_pagination"


class NotFoundError(CatalogError):
    """Raised by strict lookups when no skin has the given md5."""

    code = "not_found"

    def __init__(self, md5: str) -> None:
        super().__init__(f"Could not find skin with md5 {md5!r}")
        self.md5 = md5


class ConsistencyFault(CatalogError):
    """Raised when the museum ordering names a skin that cannot be loaded."""

    code = "consistency_fault"

    def __init__(self, message: str, *, md5: Optional[str] = None) -> None:
        super().__init__(message)
        self.md5 = md5


class StoreError(CatalogError):
    """Raised when the underlying database query fails."""

    code = "store_error"
