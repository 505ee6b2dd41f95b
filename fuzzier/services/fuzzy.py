"""Scoring for the search host.

Ranks whatever the matching step let through:
- Exact match: highest score
- Prefix match: high score
- Initials match (each query char starts a word): medium-high score
- Word prefix match: medium-high score
- Contains match: medium score
- Fuzzy (subsequence) match: scored by gaps
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from ..models.candidate import Candidate
from .pattern import END_MARKER

_WORD_START = re.compile(r"(?:^|[\s\-/:|_.])(\w)")

# Score for candidates the matching step accepted but no tier recognises
UNSCORED = 1


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate with its match score."""

    candidate: Candidate
    score: int


def fuzzy_match(query: str, text: str, case_sensitive: bool = False) -> tuple[bool, int]:
    """Check if query fuzzy-matches text and return score.

    Returns:
        (matches, score) - Higher score = better match.
        Score of 0 means no match.
    """
    if not query:
        return True, 0

    if not case_sensitive:
        query = query.lower()
        text = text.lower()

    if query == text:
        return True, 10000

    if text.startswith(query):
        return True, 5000 + len(query)

    initials = "".join(m.group(1) for m in _WORD_START.finditer(text))
    if initials.startswith(query):
        return True, 4000 + len(query) - len(initials)

    for word in re.split(r"[\s\-/:|_.]+", text):
        if word.startswith(query):
            return True, 3000 + len(query)

    if query in text:
        # Earlier position = higher score
        return True, 2000 - text.index(query)

    score = _subsequence_score(query, text)
    if score > 0:
        return True, score

    return False, 0


def _subsequence_score(query: str, text: str) -> int:
    """Score a fuzzy subsequence match.

    Characters must appear in order but not consecutively.
    Consecutive matches score higher.
    """
    query_idx = 0
    consecutive = 0
    score = 0
    last_match_idx = -2  # -2 so first match isn't "consecutive"

    for i, char in enumerate(text):
        if query_idx < len(query) and char == query[query_idx]:
            if i == last_match_idx + 1:
                consecutive += 1
                score += 10 * consecutive
            else:
                consecutive = 0
                score += 1

            last_match_idx = i
            query_idx += 1

    if query_idx == len(query):
        return 500 + score
    return 0


def scoring_query(query: str) -> str:
    """Drop a trailing end marker, which the scorer would treat as text."""
    if len(query) > 1 and query.endswith(END_MARKER):
        return query[: -len(END_MARKER)]
    return query


def rank(
    query: str,
    candidates: list[Candidate],
    target: Callable[[Candidate], str] | None = None,
    case_sensitive: bool = False,
    keep_unscored: bool = False,
) -> list[ScoredCandidate]:
    """Rank candidates by fuzzy match quality.

    Args:
        query: Search string
        candidates: Candidates from the matching step
        target: Text to score for a candidate (defaults to display)
        case_sensitive: Match case exactly
        keep_unscored: Keep candidates the scorer rejects, ranked last

    Returns:
        Matching candidates sorted by score descending, then by display.
    """
    query = scoring_query(query)
    if not query:
        return [ScoredCandidate(c, 0) for c in candidates]

    results: list[ScoredCandidate] = []
    for candidate in candidates:
        text = target(candidate) if target else candidate.display
        matches, score = fuzzy_match(query, text, case_sensitive)
        if matches and score > 0:
            results.append(ScoredCandidate(candidate, score))
        elif keep_unscored:
            results.append(ScoredCandidate(candidate, UNSCORED))

    results.sort(key=lambda s: (-s.score, s.candidate.display.lower()))
    return results
