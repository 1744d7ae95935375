"""Exception hierarchy for Quick Actions.

Searching never raises: a query that matches nothing is an empty result.
Exceptions are reserved for configuration problems.
"""


class QuickActionsError(Exception):
    """Base exception for all Quick Actions errors."""

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message} ({self.suggestion})"
        return self.message


class ConfigError(QuickActionsError):
    """Configuration is invalid or missing."""

    pass


class ConfigValidationError(ConfigError):
    """Configuration value failed validation."""

    pass
