"""Exception hierarchy for Fuzzier.

Recoverable failures (pattern compilation, missing enumeration, bad user
regex) are caught inside a matching pass; everything else propagates.
"""


class FuzzierError(Exception):
    """Base exception for all Fuzzier errors.

    All domain-specific exceptions inherit from this base class,
    enabling consistent error handling across the application.
    """

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message} ({self.suggestion})"
        return self.message


class PatternCompilationError(FuzzierError):
    """A decomposition could not be compiled into a pattern."""

    def __init__(
        self, message: str, pattern: str = "", suggestion: str | None = None
    ) -> None:
        super().__init__(message, suggestion)
        self.pattern = pattern


class EnumerationUnavailableError(FuzzierError):
    """Source cannot supply a full candidate enumeration."""

    def __init__(
        self, message: str, source_name: str = "", suggestion: str | None = None
    ) -> None:
        super().__init__(message, suggestion)
        self.source_name = source_name


class MatchingError(FuzzierError):
    """Recoverable failure while matching (e.g. an invalid user regex)."""

    pass


class ConfigError(FuzzierError):
    """Configuration is invalid or missing."""

    pass


class ConfigValidationError(ConfigError):
    """Configuration value failed validation."""

    pass
