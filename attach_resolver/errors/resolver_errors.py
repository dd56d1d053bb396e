"""Error types for the attach configuration resolver.

The resolver itself never raises for well-typed input; these exceptions are
used by the surrounding layers (settings validation and request loading) so
callers have one hierarchy to catch and report.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


class ResolverError(Exception):
    """Base exception for all resolver errors.

    Subclasses fill ``details`` with the context needed to report the problem
    without re-parsing the message.
    """

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a dictionary for machine-readable output."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {self.cause!s})"
        return self.message


class ConfigurationError(ResolverError):
    """Raised when resolver settings are invalid."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, error_code="ConfigurationError", details=details, **kwargs)
        self.config_key = config_key


class RequestLoadError(ResolverError):
    """Raised when an attach request document cannot be loaded."""

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if source:
            details["source"] = source
        super().__init__(message, error_code="RequestLoadError", details=details, **kwargs)
        self.source = source


def report_error(error: Exception, *, log_level: int = logging.ERROR) -> dict[str, Any]:
    """Log *error* and return its dictionary form.

    Non-resolver exceptions are reported with their class name as the code.
    """
    logger.log(log_level, "Error: %s", error)
    if isinstance(error, ResolverError):
        return error.to_dict()
    return {
        "error": error.__class__.__name__,
        "message": str(error),
        "details": {},
    }
