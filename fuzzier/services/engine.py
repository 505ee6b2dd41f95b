"""PreferredMatchEngine: drop-in replacement for the host's matching step.

Usage:
    engine = PreferredMatchEngine.from_config(config_manager.config)
    pipeline.install(engine)

    # Each keystroke, per source, the host calls:
    engine.match_with_preferred(candidates, matchers, match_part_fn, limit, source)

A pass runs the preferred scan first (when the matcher list carries a
PreferredMarker) and then lets the standard matcher fill the remaining quota.
Both phases share one emitted-set, so no candidate is returned twice.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from ..models.candidate import Candidate, MatchPartFn, Source
from ..models.exceptions import MatchingError
from .config import FuzzierConfig
from .enumeration import enumerate_all
from .selector import FullEnumerationFn, PreferredSelector
from .snapshot import SnapshotCache
from .standard import MatcherLike, PreferredMarker, standard_match

logger = logging.getLogger(__name__)

StandardMatchFn = Callable[..., list[Candidate]]


class PreferredMatchEngine:
    """Owns the snapshot cache and the pass-scoped emitted-set.

    Passes must run one at a time: both pieces of state are shared by every
    pass this engine runs.
    """

    def __init__(
        self,
        config: FuzzierConfig | None = None,
        standard_match_fn: StandardMatchFn = standard_match,
        enumerate_fn: FullEnumerationFn = enumerate_all,
    ) -> None:
        self._config = config or FuzzierConfig()
        self._cache = SnapshotCache()
        self._selector = PreferredSelector(self._cache, self._config, enumerate_fn)
        self._standard_match = standard_match_fn
        self._emitted: set[str] = set()

    @classmethod
    def from_config(cls, config: FuzzierConfig, **kwargs) -> "PreferredMatchEngine":
        """Build an engine from validated settings."""
        config.validate()
        return cls(config=config, **kwargs)

    @property
    def config(self) -> FuzzierConfig:
        return self._config

    @property
    def cache(self) -> SnapshotCache:
        return self._cache

    @property
    def selector(self) -> PreferredSelector:
        return self._selector

    def match_with_preferred(
        self,
        candidates: Iterable[Candidate],
        matchers: list[MatcherLike],
        match_part_fn: MatchPartFn | None,
        limit: int,
        source: Source,
    ) -> list[Candidate]:
        """Run one matching pass.

        Same contract as standard_match: at most `limit` candidates, no id
        repeated, preferred matches first.
        """
        self._emitted.clear()
        candidates = list(candidates)

        marker = next((m for m in matchers if isinstance(m, PreferredMarker)), None)
        preferred: list[Candidate] = []
        if marker is not None:
            matchers = [m for m in matchers if not isinstance(m, PreferredMarker)]
            preferred = self._selector.select(
                source,
                marker.query,
                match_part_fn,
                limit,
                emitted=self._emitted,
                fallback=candidates,
            )

        remaining = max(0, limit - len(preferred))
        try:
            standard = self._standard_match(
                candidates,
                matchers,
                match_part_fn,
                remaining,
                source,
                emitted=self._emitted,
            )
        except MatchingError as e:
            logger.debug(f"Standard matching failed for {source.name!r}: {e}")
            standard = []
        except Exception as e:
            logger.error(f"Matching error in source {source.name!r}: {e}")
            raise

        return preferred + standard[:remaining]

    def clear_source(self, source_name: str) -> None:
        """Forget the snapshot for one source."""
        self._cache.clear_source(source_name)

    def reset(self) -> None:
        """Drop all snapshots and pass state."""
        self._cache.reset()
        self._emitted.clear()
