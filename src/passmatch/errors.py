"""Exception hierarchy for store access.

Each error carries a stable ``code`` that the service layer copies into
:class:`~passmatch.services.result.ServiceError` so callers can tell an
expected "no such entry" apart from a disk failure.
"""

from __future__ import annotations

from pathlib import Path


class StoreError(Exception):
    """Base class for password store errors."""

    code = "STORE_ERROR"

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = str(path) if path is not None else None


class StoreConfigError(StoreError):
    """The store root cannot be resolved or is not a directory."""

    code = "STORE_CONFIG"


class ItemNotFoundError(StoreError):
    """The requested entry does not exist in the store."""

    code = "NOT_FOUND"


class InvalidItemPathError(StoreError):
    """The requested entry resolves outside the store root."""

    code = "INVALID_PATH"


class InvalidQueryError(StoreError):
    """The search query cannot be turned into a glob pattern."""

    code = "INVALID_QUERY"
