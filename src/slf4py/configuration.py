"""
Level configuration registry.

Maps (group, name) selectors to log levels and notifies subscribers when an
override changes. Resolution order for a logger is:

1. exact ``(group, name)`` override
2. ``group`` override
3. global override
4. the registry's base default (INFO unless configured otherwise)

Subscribers are always told the re-resolved effective level for their own
scope, so the most specific override wins no matter which selector changed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Optional, Tuple

from .diagnostics import get_logger
from .levels import LogLevel

if TYPE_CHECKING:
    from .config import LoggingSettings

_log = get_logger(__name__)

GLOBAL_SELECTOR = "*"

Selector = Tuple[Optional[str], Optional[str]]


@dataclass(frozen=True)
class LogLevelChangedEvent:
    """Notification payload for a level change.

    ``group`` and ``name`` identify the selector that changed (``None`` for
    a wildcard); ``log_level`` is the effective level for the subscriber.
    """

    log_level: LogLevel
    group: Optional[str] = None
    name: Optional[str] = None


LogLevelChangedCallback = Callable[[LogLevelChangedEvent], Any]


def _selector(group: Optional[str], name: Optional[str]) -> Selector:
    """Normalize a selector; empty strings mean "not specified"."""
    group_key = group or None
    name_key = name or None
    if name_key is not None and group_key is None:
        group_key = ""
    return group_key, name_key


def _affects(changed: Selector, scope: Selector) -> bool:
    changed_group, changed_name = changed
    if changed_group is None:
        return True
    if changed_name is None:
        return scope[0] == changed_group
    return scope == changed


def parse_selector(selector: str) -> Selector:
    """Parse ``"*"``, ``"group"`` or ``"group:name"`` into a selector tuple."""
    selector = selector.strip()
    if selector in ("", GLOBAL_SELECTOR):
        return None, None
    group, _, name = selector.partition(":")
    return _selector(group, name)


def format_selector(selector: Selector) -> str:
    group, name = selector
    if group is None:
        return GLOBAL_SELECTOR
    if name is None:
        return group
    return f"{group}:{name}"


class Subscription:
    """Handle for a registered level-change callback."""

    def __init__(
        self,
        registry: LoggerConfiguration,
        callback: LogLevelChangedCallback,
        scope: Selector,
    ) -> None:
        self._registry = registry
        self.callback = callback
        self.scope = scope

    @property
    def active(self) -> bool:
        return self in self._registry._subscriptions

    def cancel(self) -> None:
        """Stop receiving notifications. Safe to call more than once."""
        self._registry._remove(self)


class LoggerConfiguration:
    """Per-group/per-name level registry with change notifications.

    Usage:
        config = LoggerConfiguration()
        config.set_log_level(LogLevel.DEBUG, "db")
        config.get_log_level("db", "pool")  # LogLevel.DEBUG
    """

    def __init__(self, default_level: LogLevel | int | str = LogLevel.INFO) -> None:
        self._default_level = LogLevel.from_name(default_level)
        self._overrides: Dict[Selector, LogLevel] = {}
        self._subscriptions: List[Subscription] = []

    @classmethod
    def from_settings(cls, settings: LoggingSettings) -> LoggerConfiguration:
        """Build a registry seeded from environment settings."""
        configuration = cls(default_level=settings.level)
        configuration.apply(settings.levels)
        return configuration

    @property
    def default_level(self) -> LogLevel:
        return self._default_level

    # =========================================================================
    # Resolution
    # =========================================================================

    def get_log_level(self, group: Optional[str] = None, name: Optional[str] = None) -> LogLevel:
        """Resolve the effective level for a logger scope."""
        group_key, name_key = _selector(group, name)
        if name_key is not None:
            level = self._overrides.get((group_key, name_key))
            if level is not None:
                return level
        if group_key is not None:
            level = self._overrides.get((group_key, None))
            if level is not None:
                return level
        return self._overrides.get((None, None), self._default_level)

    def levels(self) -> Dict[str, LogLevel]:
        """Snapshot of configured overrides keyed by selector string."""
        return {format_selector(selector): level for selector, level in self._overrides.items()}

    # =========================================================================
    # Mutation
    # =========================================================================

    def set_log_level(
        self,
        level: LogLevel | int | str,
        group: Optional[str] = None,
        name: Optional[str] = None,
    ) -> None:
        """Override the level at a selector and notify affected subscribers."""
        selector = _selector(group, name)
        resolved = LogLevel.from_name(level)
        self._overrides[selector] = resolved
        _log.debug("log level set", selector=format_selector(selector), level=resolved.name)
        self._notify(selector)

    def clear_log_level(self, group: Optional[str] = None, name: Optional[str] = None) -> None:
        """Remove the override at a selector, falling back to broader ones."""
        selector = _selector(group, name)
        if self._overrides.pop(selector, None) is None:
            return
        _log.debug("log level cleared", selector=format_selector(selector))
        self._notify(selector)

    def apply(self, levels: Mapping[str, LogLevel | int | str]) -> None:
        """Set many overrides from ``{"group:name": level}`` style mappings."""
        for selector, level in levels.items():
            group, name = parse_selector(selector)
            self.set_log_level(level, group, name)

    def reset(self) -> None:
        """Drop every override and push the default level to all subscribers.

        Subscriptions survive so live loggers keep following later changes.
        """
        self._overrides.clear()
        _log.debug("log levels reset")
        self._notify((None, None))

    # =========================================================================
    # Subscriptions
    # =========================================================================

    def on_log_level_changed(
        self,
        callback: LogLevelChangedCallback,
        group: Optional[str] = None,
        name: Optional[str] = None,
    ) -> Subscription:
        """Register ``callback`` for changes affecting the given scope.

        A change affects the scope when it was made at the scope itself or at a
        broader selector (its group, or globally).
        """
        subscription = Subscription(self, callback, _selector(group, name))
        self._subscriptions.append(subscription)
        return subscription

    def _remove(self, subscription: Subscription) -> None:
        try:
            self._subscriptions.remove(subscription)
        except ValueError:
            pass

    def _notify(self, changed: Selector) -> None:
        for subscription in list(self._subscriptions):
            if not _affects(changed, subscription.scope):
                continue
            event = LogLevelChangedEvent(
                log_level=self.get_log_level(*subscription.scope),
                group=changed[0],
                name=changed[1],
            )
            subscription.callback(event)
