"""Query partitioning for initials-style matching.

A query like "hcn" is split into ordered groups where each group after the
first must start a new word in the candidate. At most one group is longer
than a single character, so "hcn" with a max group length of 2 yields:

    ("h", "c", "n"), ("hc", "n"), ("h", "cn")
"""

from __future__ import annotations

from ..models.candidate import Decomposition


def explode(query: str, max_group_length: int) -> list[Decomposition]:
    """Enumerate the decompositions of query.

    Args:
        query: Search string
        max_group_length: Longest allowed group (>= 1)

    Returns:
        Decompositions ordered by group length, then by group position.
        The all-singletons decomposition comes first.
    """
    if max_group_length < 1:
        raise ValueError(f"max_group_length must be >= 1, got {max_group_length}")
    if not query:
        return []
    if len(query) == 1:
        return [(query,)]

    effective_max = min(max_group_length, len(query) - 1)

    decompositions: list[Decomposition] = []
    for length in range(1, effective_max + 1):
        # A one-character "group" is just the all-singletons case
        positions = [0] if length == 1 else range(len(query) - length + 1)
        for pos in positions:
            decompositions.append(_split_at(query, pos, length))
    return decompositions


def _split_at(query: str, pos: int, length: int) -> Decomposition:
    """Singletons around one group query[pos:pos+length]."""
    before = tuple(query[:pos])
    after = tuple(query[pos + length:])
    return before + (query[pos:pos + length],) + after
