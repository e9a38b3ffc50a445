"""Site model and domain matching.

A site is one domain directory of the store together with the users
(credential files) stored beneath it. Matching compares label sequences
from the TLD inward so that a stored ``example.org`` matches a visited
``login.example.org``, but never the other way round.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

# Minimum number of aligned labels before a site is accepted.
MIN_MATCH = 2


@dataclass(frozen=True)
class Site:
    """A domain directory and the users stored for it."""

    domain: str
    users: tuple[str, ...] = ()


def split_labels(domain: str) -> list[str]:
    """Split a dotted domain into labels, most general first.

    Examples:
        >>> split_labels("sub.domain.tld")
        ['tld', 'domain', 'sub']
        >>> split_labels("localhost")
        ['localhost']
    """
    labels = domain.split(".")
    labels.reverse()
    return labels


def sub_match(query: Sequence[str], candidate: Sequence[str], minimum: int = MIN_MATCH) -> bool:
    """Return True if *candidate* is a prefix of *query* of at least *minimum* labels.

    Both sequences are TLD-first. Positions are compared from the tail of
    *candidate* toward index 0; the first mismatch rejects.

    Example::

        query = ["org", "example", "my"]
        candidate = ["org", "example"]

    matches, because both labels of *candidate* appear at the same
    positions in *query*.
    """
    if len(candidate) < minimum:
        return False
    if len(query) < len(candidate):
        return False

    matches = 0
    for i in range(len(candidate) - 1, -1, -1):
        if candidate[i] != query[i]:
            return False
        matches += 1
        if matches >= minimum:
            return True

    return False


def match_sites(query: str, sites: Iterable[Site], *, minimum: int = MIN_MATCH) -> list[Site]:
    """Select the sites relevant to *query*, most specific first.

    Specificity is the raw length of the domain string, longest first.
    The sort is stable, so equal lengths keep their input order.
    """
    query_labels = split_labels(query)
    results = [s for s in sites if sub_match(query_labels, split_labels(s.domain), minimum)]
    results.sort(key=lambda s: len(s.domain), reverse=True)
    return results


def flatten(sites: Iterable[Site]) -> list[str]:
    """Render sites as ``domain/user`` entries, site order then user order."""
    return [f"{site.domain}/{user}" for site in sites for user in site.users]
