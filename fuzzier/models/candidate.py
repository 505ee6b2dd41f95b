"""Candidate and source models.

A Source is a named collection of candidates plus the metadata the matching
pass needs: whether fuzzy matching is on, how to enumerate everything, and
which part of a candidate is actually matched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, Sequence


# A structural partition of the query, e.g. ("a", "bc")
Decomposition = tuple[str, ...]


class EnumerationStrategy(Enum):
    """How a source produces its full candidate list."""

    FULL_LIST = "full_list"  # Eager list, returned as-is
    INDEXED_WITH_PREFILTER = "indexed"  # Random access, first-char prefilter


@dataclass(frozen=True)
class Candidate:
    """One searchable item."""

    id: str                  # Identity used for dedup
    display: str             # Text shown and matched by default
    value: Any = field(default=None, compare=False, hash=False)

    @classmethod
    def from_text(cls, text: str) -> Candidate:
        """Candidate whose identity is its own text."""
        return cls(id=text, display=text)


MatchPartFn = Callable[[Candidate], str]
CandidateCollection = Sequence[Candidate] | Callable[[], Iterable[Candidate]]


DEFAULT_CANDIDATE_LIMIT = 100


@dataclass
class Source:
    """A named, configured collection of candidates."""

    name: str
    candidates: CandidateCollection | None = None
    fuzzy: bool = True
    strategy: EnumerationStrategy = EnumerationStrategy.FULL_LIST
    match_part: MatchPartFn | None = None
    candidate_limit: int = DEFAULT_CANDIDATE_LIMIT

    @property
    def can_enumerate(self) -> bool:
        """Whether the source has a collection to enumerate."""
        return self.candidates is not None

    def iter_candidates(self) -> Iterable[Candidate]:
        """Iterate the underlying collection (empty if there is none)."""
        if self.candidates is None:
            return iter(())
        if callable(self.candidates):
            return self.candidates()
        return iter(self.candidates)

    def visible_candidates(self) -> list[Candidate]:
        """Candidates the host sees without help from the engine."""
        return list(self.iter_candidates())

    def target(self, candidate: Candidate, match_part_fn: MatchPartFn | None = None) -> str:
        """Text of a candidate that matchers test."""
        fn = match_part_fn or self.match_part
        if fn is None:
            return candidate.display
        return fn(candidate)

    @classmethod
    def from_lines(
        cls,
        name: str,
        lines: Iterable[str],
        strategy: EnumerationStrategy = EnumerationStrategy.FULL_LIST,
        **kwargs,
    ) -> Source:
        """Build a source from plain text lines, one candidate per line.

        Line numbers are used as identities so duplicate lines stay distinct.
        """
        candidates = [
            Candidate(id=f"{name}:{i}", display=line, value=i)
            for i, line in enumerate(lines, start=1)
        ]
        return cls(name=name, candidates=candidates, strategy=strategy, **kwargs)
