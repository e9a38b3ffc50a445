"""Tree enumeration — collect sites from the store directory.

Every directory directly below the store root is a terminal domain node:
its immediate children become the site's users and the walker never
descends further. A layout such as ``com/example/user.gpg`` therefore
yields a site ``com`` with the user ``example``. Existing stores rely on
this flattening, so it is kept as is.

The walk runs on a single worker thread that hands sites to the caller
through a queue. The caller drains the queue to the end-of-stream marker
before asking the worker for its outcome, so a failing walk can never leave
the worker blocked on a full queue.
"""

from __future__ import annotations

import logging
import queue
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import cast

from passmatch.domain.sites import Site

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".gpg"

# End-of-stream marker put on the queue once the walk finishes.
_DONE = object()


def read_site(directory: Path, *, extension: str = DEFAULT_EXTENSION) -> Site:
    """Build a site from a domain directory.

    Users are the directory's immediate entries in name order, with
    *extension* trimmed when present. Entries without the extension are kept.
    """
    names = sorted(child.name for child in directory.iterdir())
    users = tuple(name.removesuffix(extension) for name in names)
    return Site(domain=directory.name, users=users)


def _walk(root: Path, extension: str, out: queue.Queue[Site | object]) -> None:
    """Put one site per domain directory on *out*, then the end marker."""
    try:
        for entry in sorted(root.iterdir()):
            # Files belong to their parent domain; symlinks are not followed.
            if entry.is_symlink() or not entry.is_dir():
                continue
            out.put(read_site(entry, extension=extension))
    finally:
        out.put(_DONE)


def enumerate_sites(
    root: Path,
    *,
    extension: str = DEFAULT_EXTENSION,
    queue_size: int = 0,
) -> list[Site]:
    """Enumerate all sites below *root*.

    Args:
        root: The store root. Never reported as a site itself.
        extension: Credential file suffix trimmed from user names.
        queue_size: Bound for the hand-off queue; ``0`` means unbounded.

    Raises:
        OSError: The root or a domain directory could not be read. Sites
            already collected are discarded.
    """
    handoff: queue.Queue[Site | object] = queue.Queue(maxsize=queue_size)
    sites: list[Site] = []

    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="passmatch-walk") as pool:
        walk = pool.submit(_walk, root, extension, handoff)
        while True:
            item = handoff.get()
            if item is _DONE:
                break
            sites.append(cast(Site, item))

        # Only inspected after the queue is fully drained.
        try:
            walk.result()
        except OSError:
            logger.debug("Store walk failed under %s", root, exc_info=True)
            raise

    logger.debug("Enumerated %d sites under %s", len(sites), root)
    return sites
