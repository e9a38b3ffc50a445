"""PasswordStore — read access to a pass-style store on disk.

INVARIANT: The filesystem is the only state. Every lookup re-enumerates
the store, so entries added between calls are always visible.

Three read surfaces:
- lookup: domain match over the enumerated sites (the core)
- search: free-text glob over entry paths
- open: raw bytes of a single entry for an external decryption step
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

from passmatch.domain.sites import MIN_MATCH, Site, flatten, match_sites
from passmatch.errors import (
    InvalidItemPathError,
    InvalidQueryError,
    ItemNotFoundError,
    StoreConfigError,
)
from passmatch.infrastructure.enumerator import DEFAULT_EXTENSION, enumerate_sites

if TYPE_CHECKING:
    from passmatch.config.settings import PassSettings

logger = logging.getLogger(__name__)


def resolve_store_root(path: Path) -> Path:
    """Canonicalize *path*, following symlinks.

    Raises:
        StoreConfigError: The path (or a symlink along it) does not resolve,
            or it is not a directory.
    """
    try:
        resolved = path.expanduser().resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        msg = f"Cannot resolve password store at {path}: {exc}"
        raise StoreConfigError(msg, path=path) from exc
    if not resolved.is_dir():
        msg = f"Password store is not a directory: {resolved}"
        raise StoreConfigError(msg, path=resolved)
    return resolved


class PasswordStore:
    """Repository over a directory tree of encrypted credential files.

    Constructed once per CLI invocation from :class:`PassSettings`, or
    directly from a path in library use.
    """

    def __init__(
        self,
        root: Path | str,
        *,
        extension: str = DEFAULT_EXTENSION,
        min_match: int = MIN_MATCH,
        queue_size: int = 0,
    ) -> None:
        self._root = resolve_store_root(Path(root))
        self._extension = extension
        self._min_match = min_match
        self._queue_size = queue_size

    @classmethod
    def from_settings(cls, settings: PassSettings) -> PasswordStore:
        """Build a store from resolved settings."""
        return cls(
            settings.resolve_store_dir(),
            extension=settings.store.extension,
            min_match=settings.store.min_match,
            queue_size=settings.store.queue_size,
        )

    @property
    def root(self) -> Path:
        """The canonical store root."""
        return self._root

    @property
    def extension(self) -> str:
        """Suffix carried by credential files."""
        return self._extension

    def sites(self) -> list[Site]:
        """Enumerate every site in the store, unfiltered."""
        return enumerate_sites(self._root, extension=self._extension, queue_size=self._queue_size)

    def lookup(self, domain: str) -> list[str]:
        """Find entries for sites matching or partly matching *domain*.

        The most specific domain comes first. With ``sub1.domain.tld``,
        ``sub2.domain.tld`` and ``domain.tld`` stored, a query for
        ``sub1.domain.tld`` returns entries of ``sub1.domain.tld`` then
        ``domain.tld``. A query for ``domain.tld`` returns only
        ``domain.tld``: subdomains are never matched from their parent.

        Raises:
            OSError: The store could not be enumerated. No partial results.
        """
        matched = match_sites(domain, self.sites(), minimum=self._min_match)
        entries = flatten(matched)
        logger.debug("Lookup %s matched %d sites, %d entries", domain, len(matched), len(entries))
        return entries

    def search(self, query: str) -> list[str]:
        """Glob the store for entries whose path mentions *query*.

        First ``DOMAIN/USER`` hits (``**/QUERY*/*.gpg``), then ``DOMAIN``
        hits (``**/QUERY*.gpg``). Results are store-relative, extension
        stripped.

        Raises:
            InvalidQueryError: *query* would put ``**`` inside a path
                component, which pathlib refuses.
        """
        # The query is followed by "*", so a "**" in it (or a trailing "*")
        # can never be a whole path component.
        if "**" in f"{query}*":
            msg = f"Invalid search query: {query!r}"
            raise InvalidQueryError(msg)

        ext = self._extension
        try:
            hits = sorted(self._root.glob(f"**/{query}*/*{ext}"))
            hits += sorted(self._root.glob(f"**/{query}*{ext}"))
        except (ValueError, NotImplementedError) as exc:
            msg = f"Invalid search query: {query!r}: {exc}"
            raise InvalidQueryError(msg) from exc

        items = [p.relative_to(self._root).as_posix().removesuffix(ext) for p in hits]
        logger.debug("Search %r found %d entries", query, len(items))
        return items

    def open(self, item: str) -> BinaryIO:
        """Open the entry *item* for reading raw (still encrypted) bytes.

        The caller owns the returned stream and must close it. Symlinks
        below the root are followed without a second containment check.

        Raises:
            InvalidItemPathError: *item* resolves outside the store root.
            ItemNotFoundError: No such entry.
        """
        # Normalised lexically so ".." segments cannot climb out of the root.
        path = Path(os.path.normpath(self._root / f"{item}{self._extension}"))
        if not path.is_relative_to(self._root):
            msg = f"Invalid item path: {item!r}"
            raise InvalidItemPathError(msg, path=path)

        try:
            return path.open("rb")
        except FileNotFoundError as exc:
            msg = f"No such entry: {item}"
            raise ItemNotFoundError(msg, path=path) from exc
