"""Data models for Fuzzier."""

from .candidate import (
    Candidate,
    CandidateCollection,
    Decomposition,
    EnumerationStrategy,
    MatchPartFn,
    Source,
)
from .exceptions import (
    FuzzierError,
    PatternCompilationError,
    EnumerationUnavailableError,
    MatchingError,
    ConfigError,
    ConfigValidationError,
)

__all__ = [
    # Candidate models
    "Candidate",
    "CandidateCollection",
    "Decomposition",
    "EnumerationStrategy",
    "MatchPartFn",
    "Source",
    # Exceptions
    "FuzzierError",
    "PatternCompilationError",
    "EnumerationUnavailableError",
    "MatchingError",
    "ConfigError",
    "ConfigValidationError",
]
