"""Preferred-match selection.

For short queries, scan the complete candidate set (not just what the host
would look at before its cutoff) for structural initials matches. Those are
the candidates most likely to score best, so they are guaranteed a place in
the results ahead of the host's own matches.
"""

from __future__ import annotations

import logging
from typing import Callable

from ..models.candidate import Candidate, MatchPartFn, Source
from ..models.exceptions import EnumerationUnavailableError, PatternCompilationError
from .config import FuzzierConfig
from .enumeration import enumerate_all
from .pattern import Matcher, build_matcher
from .snapshot import SnapshotCache
from .standard import resolve_case_sensitive

logger = logging.getLogger(__name__)

# (source, query, case_sensitive, match_part_fn) -> all candidates
FullEnumerationFn = Callable[[Source, str, bool, MatchPartFn | None], list[Candidate]]


class PreferredSelector:
    """Finds the candidates that deserve guaranteed visibility."""

    def __init__(
        self,
        cache: SnapshotCache,
        config: FuzzierConfig | None = None,
        enumerate_fn: FullEnumerationFn = enumerate_all,
    ) -> None:
        self._cache = cache
        self._config = config or FuzzierConfig()
        self._enumerate_fn = enumerate_fn

    @property
    def config(self) -> FuzzierConfig:
        return self._config

    def is_eligible(self, source: Source, query: str) -> bool:
        """Whether the query length and source allow a preferred scan."""
        config = self._config
        return source.fuzzy and (
            config.min_query_length <= len(query) <= config.max_query_length
        )

    def select(
        self,
        source: Source,
        query: str,
        match_part_fn: MatchPartFn | None = None,
        limit: int | None = None,
        emitted: set[str] | None = None,
        fallback: list[Candidate] | None = None,
    ) -> list[Candidate]:
        """Select preferred matches in scan order.

        Args:
            source: Source being searched
            query: Current query
            match_part_fn: Extracts matched text (defaults to the source's)
            limit: Maximum matches (defaults to the source's candidate limit)
            emitted: Ids already produced in this pass; updated in place
            fallback: Candidates to scan if the source can't enumerate

        Returns:
            Up to `limit` candidates, first found first
        """
        if limit is None:
            limit = source.candidate_limit
        if limit <= 0 or not self.is_eligible(source, query):
            return []
        if emitted is None:
            emitted = set()

        case_sensitive = resolve_case_sensitive(self._config.case_fold, query)
        try:
            matcher = build_matcher(
                query,
                self._config.word_boundary_chars,
                self._config.max_group_length,
                case_sensitive,
            )
        except PatternCompilationError as e:
            logger.warning(f"Preferred matching disabled for {source.name!r} on {query!r}: {e}")
            return []

        candidates = self._candidates(source, query, case_sensitive, match_part_fn, fallback)
        return self._scan(source, candidates, matcher, match_part_fn, limit, emitted)

    def _candidates(
        self,
        source: Source,
        query: str,
        case_sensitive: bool,
        match_part_fn: MatchPartFn | None,
        fallback: list[Candidate] | None,
    ) -> list[Candidate]:
        try:
            return self._cache.get_or_refresh(
                source.name,
                query,
                lambda q: self._enumerate_fn(source, q, case_sensitive, match_part_fn),
            )
        except EnumerationUnavailableError as e:
            logger.debug(f"Falling back to caller candidates for {source.name!r}: {e}")
            return list(fallback or [])

    def _scan(
        self,
        source: Source,
        candidates: list[Candidate],
        matcher: Matcher,
        match_part_fn: MatchPartFn | None,
        limit: int,
        emitted: set[str],
    ) -> list[Candidate]:
        matches: list[Candidate] = []
        ceiling = self._config.max_candidates_to_scan
        for scanned, candidate in enumerate(candidates):
            if scanned >= ceiling:
                logger.debug(f"Scan ceiling {ceiling} reached for {source.name!r}")
                break
            if candidate.id in emitted:
                continue
            if matcher(source.target(candidate, match_part_fn)):
                matches.append(candidate)
                emitted.add(candidate.id)
                if len(matches) >= limit:
                    break
        return matches
