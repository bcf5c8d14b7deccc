"""Error hierarchy for queryback."""
from __future__ import annotations


class QuerybackError(Exception):
    """Base error for all queryback errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class FetchError(QuerybackError):
    """An external style sheet could not be retrieved."""

    def __init__(
        self,
        message: str,
        *,
        locator: str = "",
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.locator = locator
        self.status_code = status_code


class ConfigError(QuerybackError):
    """Configuration values are invalid."""
