"""
In-memory binding for tests.

``RecordingBinding`` stores every record it receives so tests can assert on
what reached the backend without any output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .bindings import Binding, Completed, LoggerImplementation, completed
from .levels import LogLevel


@dataclass(frozen=True)
class LogEntry:
    """One record as delivered to the backend."""

    level: LogLevel
    group: str
    name: str
    message: str
    error: Optional[BaseException] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


class RecordingImplementation(LoggerImplementation):
    """Backend that keeps records in a list."""

    def __init__(self) -> None:
        self.entries: List[LogEntry] = []

    def log(
        self,
        level: LogLevel,
        group: str,
        name: str,
        message: str,
        error: Optional[BaseException],
        metadata: Dict[str, Any],
    ) -> Completed:
        entry = LogEntry(level, group, name, message, error, dict(metadata))
        self.entries.append(entry)
        return completed(entry)

    def clear(self) -> None:
        self.entries.clear()

    def get_entries(self, level: Optional[LogLevel] = None) -> List[LogEntry]:
        """Get recorded entries, optionally filtered by level."""
        if level is None:
            return list(self.entries)
        return [entry for entry in self.entries if entry.level == level]

    def has_entry(self, message: str, level: Optional[LogLevel] = None) -> bool:
        """Check for an entry whose message contains ``message``."""
        return any(message in entry.message for entry in self.get_entries(level))


class RecordingBinding(Binding):
    """Binding whose implementation records instead of emitting."""

    def __init__(self, vendor: str = "slf4py-testing", version: str = "0.0.0") -> None:
        self._vendor = vendor
        self._version = version
        self.implementation = RecordingImplementation()

    def get_vendor(self) -> str:
        return self._vendor

    def get_version(self) -> str:
        return self._version

    def get_logger_implementation(self) -> RecordingImplementation:
        return self.implementation
