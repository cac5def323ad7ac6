"""
Log level ordering.

The integer value of each member is its severity rank, so a single comparison
answers whether a record passes a threshold: ``level >= threshold``.
"""

from __future__ import annotations

from enum import IntEnum

from .exceptions import InvalidLogLevelError

_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "ERROR",
    "FATAL": "ERROR",
    "NONE": "OFF",
}


class LogLevel(IntEnum):
    """Severity tiers, least severe first."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    OFF = 5

    @classmethod
    def from_name(cls, value: LogLevel | int | str) -> LogLevel:
        """Parse a level from a member, its integer rank or its name.

        Names are case-insensitive and accept the common stdlib spellings
        (``WARNING``, ``CRITICAL``).
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise InvalidLogLevelError(value=value) from None
        if isinstance(value, str):
            key = value.strip().upper()
            key = _ALIASES.get(key, key)
            try:
                return cls[key]
            except KeyError:
                raise InvalidLogLevelError(value=value) from None
        raise InvalidLogLevelError(value=value)

    def allows(self, level: LogLevel) -> bool:
        """Whether a record at ``level`` is emitted under this threshold.

        OFF is only a threshold; no record is ever emitted at OFF.
        """
        if self is LogLevel.OFF or level is LogLevel.OFF:
            return False
        return level >= self
