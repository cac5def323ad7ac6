"""
Exception hierarchy for the logging facade.

Configuration problems are the only failures the facade raises itself; they
surface when the first logger is requested. Everything raised by a backend
implementation or a subscription callback propagates untouched.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class Slf4pyError(Exception):
    """Root of all facade errors.

    Carries a stable ``code`` and a ``details`` mapping for structured logging.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class ConfigurationError(Slf4pyError):
    """The facade cannot be set up with the given configuration."""

    pass


class NoBindingFoundError(ConfigurationError):
    """No backend binding was registered before the first logger request.

    The condition is not transient: the factory remembers it and does not
    retry until its binding is reset.
    """

    def __init__(self) -> None:
        super().__init__(
            "No logger binding found",
            code="NO_BINDING_FOUND",
        )


class InvalidLogLevelError(ConfigurationError, ValueError):
    """A log level could not be parsed."""

    def __init__(self, *, value: Any) -> None:
        super().__init__(
            f"Invalid log level: {value!r}",
            code="INVALID_LOG_LEVEL",
            details={"value": value},
        )
