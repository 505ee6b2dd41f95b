"""Full candidate enumeration per source strategy."""

from __future__ import annotations

from ..models.candidate import Candidate, EnumerationStrategy, MatchPartFn, Source
from ..models.exceptions import EnumerationUnavailableError


def enumerate_all(
    source: Source,
    query: str,
    case_sensitive: bool = False,
    match_part_fn: MatchPartFn | None = None,
) -> list[Candidate]:
    """Every candidate of a source, ignoring the host's result cap.

    Indexed sources are prefiltered on the query's first character: the
    structural matcher anchors its first group at the start of the text, so
    nothing else could match.

    Raises:
        EnumerationUnavailableError: If the source has nothing to enumerate
    """
    if not source.can_enumerate:
        raise EnumerationUnavailableError(
            f"Source {source.name!r} has no full enumeration",
            source_name=source.name,
        )

    candidates = source.iter_candidates()
    if source.strategy == EnumerationStrategy.FULL_LIST or not query:
        return list(candidates)

    first = query[0] if case_sensitive else query[0].lower()
    result = []
    for candidate in candidates:
        target = source.target(candidate, match_part_fn)
        if not case_sensitive:
            target = target[:1].lower()
        if target.startswith(first):
            result.append(candidate)
    return result
