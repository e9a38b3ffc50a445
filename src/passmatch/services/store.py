"""StoreService — lookup, search, and entry access over a PasswordStore.

Four read-only surfaces:
- lookup: entries for a visited domain, most specific site first
- search: glob over entry paths
- sites: the raw enumeration (every domain with its users)
- open: raw stream for one entry

Store exceptions are translated into ServiceError codes here; nothing
below this layer knows about ServiceResult.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, BinaryIO

from passmatch.errors import StoreError
from passmatch.services.result import ServiceResult
from passmatch.services.telemetry import traced

if TYPE_CHECKING:
    from passmatch.infrastructure.store import PasswordStore

logger = logging.getLogger(__name__)


def _io_failure(op: str, exc: OSError) -> ServiceResult:
    detail = {"path": str(exc.filename)} if exc.filename else {}
    return ServiceResult.failure(op, "IO_ERROR", str(exc), **detail)


def _store_failure(op: str, exc: StoreError) -> ServiceResult:
    detail = {"path": exc.path} if exc.path else {}
    return ServiceResult.failure(op, exc.code, str(exc), **detail)


class StoreService:
    """Read operations over a single password store."""

    def __init__(self, store: PasswordStore) -> None:
        self._store = store

    @traced
    def lookup(self, domain: str) -> ServiceResult:
        """Entries for sites matching *domain*, as ``domain/user`` strings.

        No match is a success with an empty item list.
        """
        if not domain.strip():
            return ServiceResult.failure("lookup", "EMPTY_QUERY", "Domain cannot be empty")

        try:
            items = self._store.lookup(domain)
        except OSError as exc:
            logger.warning("Lookup for %s aborted: %s", domain, exc)
            return _io_failure("lookup", exc)

        return ServiceResult(
            ok=True,
            op="lookup",
            data={"domain": domain, "items": items, "count": len(items)},
        )

    @traced
    def search(self, query: str) -> ServiceResult:
        """Free-text glob search over entry paths."""
        if not query.strip():
            return ServiceResult.failure("search", "EMPTY_QUERY", "Search query cannot be empty")

        try:
            items = self._store.search(query)
        except StoreError as exc:
            return _store_failure("search", exc)
        except OSError as exc:
            return _io_failure("search", exc)

        return ServiceResult(
            ok=True,
            op="search",
            data={"query": query, "items": items, "count": len(items)},
        )

    @traced
    def sites(self) -> ServiceResult:
        """Every site in the store with its users."""
        try:
            sites = self._store.sites()
        except OSError as exc:
            return _io_failure("sites", exc)

        items = [{"domain": s.domain, "users": list(s.users)} for s in sites]
        return ServiceResult(ok=True, op="sites", data={"items": items, "count": len(items)})

    def open(self, item: str) -> tuple[BinaryIO | None, ServiceResult]:
        """Open *item* for reading.

        Returns ``(stream, result)``. The stream is None whenever
        ``result.ok`` is False; otherwise the caller must close it.
        """
        try:
            stream = self._store.open(item)
        except StoreError as exc:
            logger.debug("Open %r rejected: %s", item, exc.code)
            return None, _store_failure("open", exc)
        except OSError as exc:
            return None, _io_failure("open", exc)

        return stream, ServiceResult(ok=True, op="open", data={"item": item})
