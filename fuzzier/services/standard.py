"""Default best-effort matcher for the search host.

The host filters candidates with a list of query matchers and stops as soon
as it has `limit` hits. It knows nothing about match quality; scoring happens
afterwards on whatever survived the cutoff.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Union

from ..models.candidate import Candidate, MatchPartFn, Source
from ..models.exceptions import MatchingError
from .config import CaseFold

logger = logging.getLogger(__name__)


def case_fold_policy(query: str) -> bool:
    """Smart case: True (case-sensitive) only if query has an uppercase letter."""
    return query != query.lower()


def resolve_case_sensitive(case_fold: CaseFold, query: str) -> bool:
    """Apply the configured case-fold mode to a query."""
    if case_fold == CaseFold.SENSITIVE:
        return True
    if case_fold == CaseFold.INSENSITIVE:
        return False
    return case_fold_policy(query)


@dataclass
class QueryMatcher:
    """Predicate over candidate text, built for one query."""

    query: str
    case_sensitive: bool = False

    def _fold(self, text: str) -> str:
        return text if self.case_sensitive else text.lower()

    def __call__(self, text: str) -> bool:
        raise NotImplementedError


@dataclass
class SubstringMatcher(QueryMatcher):
    """Query appears verbatim somewhere in the text."""

    def __call__(self, text: str) -> bool:
        return self._fold(self.query) in self._fold(text)


@dataclass
class SubsequenceMatcher(QueryMatcher):
    """Query characters appear in the text in order."""

    def __call__(self, text: str) -> bool:
        text = self._fold(text)
        text_idx = 0
        for char in self._fold(self.query):
            found = text.find(char, text_idx)
            if found == -1:
                return False
            text_idx = found + 1
        return True


@dataclass
class RegexMatcher(QueryMatcher):
    """Query interpreted as a user-supplied regular expression.

    Compilation is deferred to first use, so a malformed pattern surfaces as
    a MatchingError during the matching pass.
    """

    _compiled: re.Pattern[str] | None = field(default=None, init=False, repr=False)

    def __call__(self, text: str) -> bool:
        if self._compiled is None:
            flags = 0 if self.case_sensitive else re.IGNORECASE
            try:
                self._compiled = re.compile(self.query, flags)
            except re.error as e:
                raise MatchingError(f"Invalid regex {self.query!r}: {e}") from e
        return self._compiled.search(text) is not None


@dataclass(frozen=True)
class PreferredMarker:
    """Requests the preferred-match phase for a query.

    Lives in a matcher list but never matches anything itself; the default
    matcher skips it.
    """

    query: str


MatcherLike = Union[QueryMatcher, PreferredMarker]


def default_matchers(query: str, case_sensitive: bool = False) -> list[QueryMatcher]:
    """Host's standard matcher list: substring first, then subsequence."""
    return [
        SubstringMatcher(query, case_sensitive),
        SubsequenceMatcher(query, case_sensitive),
    ]


def with_preferred_marker(
    matchers: list[MatcherLike], query: str, source: Source
) -> list[MatcherLike]:
    """Prepend the preferred marker for fuzzy sources."""
    if not source.fuzzy:
        return list(matchers)
    return [PreferredMarker(query), *matchers]


def standard_match(
    candidates: Iterable[Candidate],
    matchers: list[MatcherLike],
    match_part_fn: MatchPartFn | None,
    limit: int,
    source: Source,
    emitted: set[str] | None = None,
) -> list[Candidate]:
    """Collect up to `limit` matches, matcher by matcher.

    Args:
        candidates: Candidates in host order
        matchers: Predicates tried in order; markers are skipped
        match_part_fn: Extracts the matched text (defaults to the source's)
        limit: Maximum number of results
        source: Source being searched
        emitted: Ids already produced in this pass; updated in place

    Returns:
        Matches in discovery order, no id repeated
    """
    if emitted is None:
        emitted = set()
    results: list[Candidate] = []
    if limit <= 0:
        return results

    candidates = list(candidates)
    for matcher in matchers:
        if isinstance(matcher, PreferredMarker):
            continue
        try:
            for candidate in candidates:
                if candidate.id in emitted:
                    continue
                if matcher(source.target(candidate, match_part_fn)):
                    results.append(candidate)
                    emitted.add(candidate.id)
                    if len(results) >= limit:
                        return results
        except MatchingError as e:
            logger.debug(f"Matcher skipped for {source.name!r}: {e}")
    return results
