"""Per-source snapshot cache of full candidate enumerations.

A snapshot is taken under a query prefix. While the user keeps typing the
same search (every new query starts with that prefix) the snapshot is reused,
since a narrower query can only match a subset of it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from ..models.candidate import Candidate

logger = logging.getLogger(__name__)

EnumerateFn = Callable[[str], list[Candidate]]


@dataclass(frozen=True)
class Snapshot:
    """Full candidate list captured for one source under one prefix."""

    source_id: str
    prefix: str
    candidates: tuple[Candidate, ...]


class SnapshotCache:
    """Memoizes full enumerations, one entry per source."""

    def __init__(self) -> None:
        self._snapshots: dict[str, Snapshot] = {}

    def get(self, source_id: str) -> Snapshot | None:
        """Current snapshot for a source, if any."""
        return self._snapshots.get(source_id)

    def needs_refresh(self, source_id: str, query: str) -> bool:
        """Whether query is not a continuation of the stored prefix."""
        if not query:
            return False
        snapshot = self._snapshots.get(source_id)
        if snapshot is None:
            return True
        return not query.startswith(snapshot.prefix)

    def get_or_refresh(
        self,
        source_id: str,
        query: str,
        enumerate_fn: EnumerateFn,
    ) -> list[Candidate]:
        """Return the full candidate list, enumerating only when needed.

        Args:
            source_id: Source identity (its name)
            query: Current query
            enumerate_fn: Called with the query to enumerate all candidates

        Returns:
            Candidates in enumeration order
        """
        if self.needs_refresh(source_id, query):
            candidates = tuple(enumerate_fn(query))
            self._snapshots[source_id] = Snapshot(source_id, query, candidates)
            logger.debug(
                f"Snapshot refreshed for {source_id!r} under {query!r}: "
                f"{len(candidates)} candidates"
            )
            return list(candidates)

        snapshot = self._snapshots.get(source_id)
        if snapshot is None:
            # Empty query with nothing cached: nothing to key a snapshot on
            return list(enumerate_fn(query))
        return list(snapshot.candidates)

    def clear_source(self, source_id: str) -> None:
        """Drop the snapshot for one source."""
        self._snapshots.pop(source_id, None)

    def reset(self) -> None:
        """Drop every snapshot."""
        self._snapshots.clear()

    def __contains__(self, source_id: object) -> bool:
        return source_id in self._snapshots

    def __len__(self) -> int:
        return len(self._snapshots)
