"""
Logger instances handed out by the factory.

An instance owns nothing but its identity, its cached effective level and its
common metadata. Every record that passes the level check is forwarded, with
the metadata merged, to the shared backend implementation.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Awaitable, Dict, Mapping, Optional, Union

from .bindings import LoggerImplementation, completed
from .levels import LogLevel

if TYPE_CHECKING:
    from .configuration import LogLevelChangedEvent, LoggerConfiguration, Subscription

MetadataArg = Union[Mapping[str, Any], BaseException, None]


@dataclass(frozen=True)
class LogPayload:
    """Normalized metadata bag and error for one record.

    Callers may pass an exception where metadata is expected; it is moved to
    the error slot here so backends never receive the ambiguous form.
    """

    metadata: Dict[str, Any] = field(default_factory=dict)
    error: Optional[BaseException] = None

    @classmethod
    def build(
        cls,
        common: Mapping[str, Any],
        metadata: Any = None,
        error: Optional[BaseException] = None,
        fields: Optional[Mapping[str, Any]] = None,
    ) -> LogPayload:
        merged: Dict[str, Any] = dict(common)
        if isinstance(metadata, BaseException):
            if error is None:
                error = metadata
        elif isinstance(metadata, Mapping):
            merged.update(metadata)
        elif metadata is not None:
            merged["value"] = metadata
        if fields:
            merged.update(fields)
        return cls(metadata=merged, error=error)


class LoggerInstance:
    """Leveled logger bound to one (group, name) key.

    Usage:
        log = factory.get_logger("db", "pool")
        log.info("connection opened", {"host": host})
        log.error("query failed", exc)
        await log.warn("slow query", duration_ms=812)
    """

    def __init__(
        self,
        group: str,
        name: str,
        log_level: LogLevel,
        implementation: LoggerImplementation,
        configuration: Optional[LoggerConfiguration] = None,
    ) -> None:
        self._group = group
        self._name = name
        self._log_level = log_level
        self._impl = implementation
        self._common_metadata: Dict[str, Any] = {}
        self._subscription: Optional[Subscription] = None
        if configuration is not None:
            self._subscription = configuration.on_log_level_changed(self._on_level_changed, group, name)

    def __repr__(self) -> str:
        return f"LoggerInstance(group={self._group!r}, name={self._name!r}, level={self._log_level.name})"

    @property
    def group(self) -> str:
        return self._group

    @property
    def name(self) -> str:
        return self._name

    @property
    def implementation(self) -> LoggerImplementation:
        return self._impl

    def get_log_level(self) -> LogLevel:
        return self._log_level

    def is_enabled(self, level: LogLevel) -> bool:
        return self._log_level.allows(level)

    def set_metadata(self, metadata: Optional[Mapping[str, Any]] = None, **fields: Any) -> None:
        """Replace the metadata merged into every subsequent record."""
        common: Dict[str, Any] = dict(metadata or {})
        common.update(fields)
        self._common_metadata = common

    def get_metadata(self) -> Dict[str, Any]:
        return dict(self._common_metadata)

    def detach(self) -> None:
        """Stop following configuration changes."""
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None

    def _on_level_changed(self, event: LogLevelChangedEvent) -> None:
        self._log_level = event.log_level

    # =========================================================================
    # Emission
    # =========================================================================

    def log(
        self,
        level: LogLevel,
        message: str,
        metadata: MetadataArg = None,
        error: Optional[BaseException] = None,
        **fields: Any,
    ) -> Awaitable[Any]:
        """Forward a record to the backend if ``level`` passes the threshold.

        Returns the backend's awaitable, or an already-completed one when the
        record is filtered out.
        """
        if not self._log_level.allows(level):
            return completed()
        payload = LogPayload.build(self._common_metadata, metadata, error, fields)
        return self._impl.log(level, self._group, self._name, message, payload.error, payload.metadata)

    def trace(
        self,
        message: str,
        metadata: MetadataArg = None,
        error: Optional[BaseException] = None,
        **fields: Any,
    ) -> Awaitable[Any]:
        return self.log(LogLevel.TRACE, message, metadata, error, **fields)

    def debug(
        self,
        message: str,
        metadata: MetadataArg = None,
        error: Optional[BaseException] = None,
        **fields: Any,
    ) -> Awaitable[Any]:
        return self.log(LogLevel.DEBUG, message, metadata, error, **fields)

    def info(
        self,
        message: str,
        metadata: MetadataArg = None,
        error: Optional[BaseException] = None,
        **fields: Any,
    ) -> Awaitable[Any]:
        return self.log(LogLevel.INFO, message, metadata, error, **fields)

    def warn(
        self,
        message: str,
        metadata: MetadataArg = None,
        error: Optional[BaseException] = None,
        **fields: Any,
    ) -> Awaitable[Any]:
        return self.log(LogLevel.WARN, message, metadata, error, **fields)

    warning = warn

    def error(
        self,
        message: str,
        metadata: MetadataArg = None,
        error: Optional[BaseException] = None,
        **fields: Any,
    ) -> Awaitable[Any]:
        return self.log(LogLevel.ERROR, message, metadata, error, **fields)

    def exception(self, message: str, metadata: MetadataArg = None, **fields: Any) -> Awaitable[Any]:
        """Log at ERROR with the exception currently being handled."""
        return self.log(LogLevel.ERROR, message, metadata, sys.exc_info()[1], **fields)
