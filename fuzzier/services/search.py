"""Search pipeline: the host side of a keystroke.

For every source: match (capped at the source's candidate limit), then score.
The match step is a strategy; installing a PreferredMatchEngine swaps it for
`engine.match_with_preferred` and starts tagging fuzzy sources with a
PreferredMarker.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..models.candidate import Candidate, Source
from .config import CaseFold
from .engine import PreferredMatchEngine, StandardMatchFn
from .fuzzy import rank
from .standard import (
    default_matchers,
    resolve_case_sensitive,
    standard_match,
    with_preferred_marker,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """One ranked hit."""

    source: str
    candidate: Candidate
    score: int


class SearchPipeline:
    """Runs the match and score phases over a set of sources."""

    def __init__(
        self,
        sources: list[Source],
        match_fn: StandardMatchFn = standard_match,
        case_fold: CaseFold = CaseFold.SMART,
    ) -> None:
        self._sources = list(sources)
        self._match_fn = match_fn
        self._case_fold = case_fold
        self._engine: PreferredMatchEngine | None = None

    @property
    def sources(self) -> list[Source]:
        return list(self._sources)

    @property
    def engine(self) -> PreferredMatchEngine | None:
        return self._engine

    @property
    def preferred_enabled(self) -> bool:
        return self._engine is not None

    def install(self, engine: PreferredMatchEngine) -> None:
        """Route matching through the preferred-match engine."""
        self._engine = engine
        self._match_fn = engine.match_with_preferred
        self._case_fold = engine.config.case_fold
        logger.debug("Preferred matching installed")

    def uninstall(self) -> None:
        """Restore the standard matcher and drop engine state."""
        if self._engine is not None:
            self._engine.reset()
        self._engine = None
        self._match_fn = standard_match
        logger.debug("Preferred matching removed")

    def add_source(self, source: Source) -> None:
        self._sources.append(source)

    def remove_source(self, name: str) -> None:
        """Remove a source and forget its snapshot."""
        self._sources = [s for s in self._sources if s.name != name]
        if self._engine is not None:
            self._engine.clear_source(name)

    def match(self, source: Source, query: str) -> list[Candidate]:
        """Matching phase for one source."""
        case_sensitive = resolve_case_sensitive(self._case_fold, query)
        matchers = default_matchers(query, case_sensitive)
        if self._engine is not None:
            matchers = with_preferred_marker(matchers, query, source)
        return self._match_fn(
            source.visible_candidates(),
            matchers,
            source.match_part,
            source.candidate_limit,
            source,
        )

    def search(self, query: str) -> list[SearchResult]:
        """Match and rank every source for a query.

        Results are grouped by source in source order, ranked within each.
        An empty query lists each source's first candidates unranked.
        """
        case_sensitive = resolve_case_sensitive(self._case_fold, query)
        results: list[SearchResult] = []
        for source in self._sources:
            if query:
                matches = self.match(source, query)
            else:
                matches = source.visible_candidates()[: source.candidate_limit]
            for scored in rank(
                query,
                matches,
                target=lambda c, s=source: s.target(c),
                case_sensitive=case_sensitive,
                keep_unscored=True,
            ):
                results.append(SearchResult(source.name, scored.candidate, scored.score))
        return results
