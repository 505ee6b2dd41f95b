"""Structural matcher built from query decompositions.

Each decomposition is lowered to a short token sequence and then compiled to
a native `re` pattern:

    ("h", "c", "n")  ->  Literal("h") Boundary Literal("c") Boundary Literal("n")
                     ->  ^h.*?[- /:|_]c.*?[- /:|_]n

The first group is anchored at the start of the candidate. Every later group
must directly follow a boundary character, with any content in between. A
trailing "$" group anchors the previous group at the end of the candidate.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ..models.candidate import Decomposition
from ..models.exceptions import PatternCompilationError
from .partition import explode

logger = logging.getLogger(__name__)

END_MARKER = "$"

# Characters that keep a special meaning inside a character class
_CLASS_SPECIALS = frozenset("\\]^-[")


@dataclass(frozen=True)
class Literal:
    """Text that must appear verbatim."""

    text: str


@dataclass(frozen=True)
class Boundary:
    """Any content followed by one boundary character."""

    chars: str


@dataclass(frozen=True)
class EndAnchor:
    """End of the candidate."""


Token = Literal | Boundary | EndAnchor


def tokenize(decomposition: Decomposition, boundary_chars: str) -> list[Token]:
    """Lower one decomposition to its token sequence."""
    tokens: list[Token] = []
    last = len(decomposition) - 1
    for i, group in enumerate(decomposition):
        is_end = i == last and group.endswith(END_MARKER)
        text = group[: -len(END_MARKER)] if is_end else group

        if i > 0 and text:
            tokens.append(Boundary(boundary_chars))
        if text:
            tokens.append(Literal(text))
        if is_end:
            tokens.append(EndAnchor())
    return tokens


def _class_escape(chars: str) -> str:
    return "".join(f"\\{c}" if c in _CLASS_SPECIALS else c for c in chars)


def render(tokens: list[Token]) -> str:
    """Render a token sequence as an anchored regex source string."""
    parts = ["^"]
    for token in tokens:
        if isinstance(token, Literal):
            parts.append(re.escape(token.text))
        elif isinstance(token, Boundary):
            parts.append(f".*?[{_class_escape(token.chars)}]")
        else:
            parts.append(r"\Z")
    return "".join(parts)


def compile_decomposition(
    decomposition: Decomposition,
    boundary_chars: str,
    case_sensitive: bool = False,
) -> re.Pattern[str]:
    """Compile one decomposition.

    Raises:
        PatternCompilationError: If the rendered pattern is invalid
    """
    source = render(tokenize(decomposition, boundary_chars))
    flags = 0 if case_sensitive else re.IGNORECASE
    try:
        return re.compile(source, flags)
    except re.error as e:
        raise PatternCompilationError(
            f"Cannot compile pattern for {decomposition!r}: {e}",
            pattern=source,
            suggestion="check word_boundary_chars",
        ) from e


class Matcher:
    """Union of the structural patterns for every decomposition of a query.

    Calling the matcher with a candidate string returns True when any
    decomposition fits.
    """

    def __init__(
        self,
        query: str,
        decompositions: list[Decomposition],
        patterns: list[re.Pattern[str]],
    ) -> None:
        self.query = query
        self.decompositions = decompositions
        self._patterns = patterns

    @property
    def patterns(self) -> list[str]:
        """Regex sources, one per decomposition."""
        return [p.pattern for p in self._patterns]

    def __call__(self, text: str) -> bool:
        return any(p.match(text) for p in self._patterns)

    def __repr__(self) -> str:
        return f"Matcher({self.query!r}, {len(self._patterns)} patterns)"


def build_matcher(
    query: str,
    boundary_chars: str,
    max_group_length: int,
    case_sensitive: bool = False,
) -> Matcher:
    """Build the matcher for a query.

    Args:
        query: Search string
        boundary_chars: Literal word separator characters
        max_group_length: Longest group per decomposition
        case_sensitive: Match case exactly

    Raises:
        PatternCompilationError: If any decomposition fails to compile
    """
    decompositions = explode(query, max_group_length)
    patterns = [
        compile_decomposition(d, boundary_chars, case_sensitive)
        for d in decompositions
    ]
    logger.debug(f"Built matcher for {query!r}: {len(patterns)} patterns")
    return Matcher(query, decompositions, patterns)
