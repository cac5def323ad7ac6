"""
Log level unit tests

Covers the severity order that drives every filtering decision, the OFF
threshold that silences a logger completely, and the parsing rules used by
settings and the configuration API (names, stdlib aliases, integer ranks).
"""

from __future__ import annotations

import pytest

from slf4py.exceptions import ConfigurationError, InvalidLogLevelError
from slf4py.levels import LogLevel

MESSAGE_LEVELS = [level for level in LogLevel if level is not LogLevel.OFF]


class TestOrdering:
    """Severity order"""

    def test_levels_are_ordered_by_severity(self) -> None:
        """TRACE is least severe, OFF sits above ERROR"""
        assert LogLevel.TRACE < LogLevel.DEBUG < LogLevel.INFO < LogLevel.WARN < LogLevel.ERROR < LogLevel.OFF

    @pytest.mark.parametrize("threshold", MESSAGE_LEVELS)
    def test_allows_iff_at_or_above_threshold(self, threshold: LogLevel) -> None:
        """A record passes exactly when its level is at or above the threshold"""
        for level in MESSAGE_LEVELS:
            assert threshold.allows(level) is (level >= threshold)

    def test_off_threshold_allows_nothing(self) -> None:
        """An OFF threshold suppresses every level"""
        assert not any(LogLevel.OFF.allows(level) for level in LogLevel)

    @pytest.mark.parametrize("threshold", list(LogLevel))
    def test_off_is_never_a_record_level(self, threshold: LogLevel) -> None:
        """OFF is only a threshold, so no threshold lets an OFF record through"""
        assert threshold.allows(LogLevel.OFF) is False


class TestFromName:
    """Level parsing"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("debug", LogLevel.DEBUG),
            (" INFO ", LogLevel.INFO),
            ("Warning", LogLevel.WARN),
            ("critical", LogLevel.ERROR),
            ("none", LogLevel.OFF),
            (0, LogLevel.TRACE),
            (LogLevel.ERROR, LogLevel.ERROR),
        ],
    )
    def test_accepts_names_aliases_and_ranks(self, value, expected: LogLevel) -> None:
        """Names are case-insensitive, stdlib spellings and integer ranks are accepted"""
        assert LogLevel.from_name(value) is expected

    @pytest.mark.parametrize("value", ["verbose", 42, None, True, 2.0])
    def test_rejects_unknown_values(self, value) -> None:
        """Unknown names, out-of-range ranks and other types raise with details"""
        with pytest.raises(InvalidLogLevelError) as exc_info:
            LogLevel.from_name(value)
        assert exc_info.value.code == "INVALID_LOG_LEVEL"
        assert exc_info.value.details == {"value": value}

    def test_invalid_level_is_a_configuration_and_value_error(self) -> None:
        """The parsing error can be caught either as configuration or value error"""
        with pytest.raises(ConfigurationError):
            LogLevel.from_name("loud")
        with pytest.raises(ValueError):
            LogLevel.from_name("loud")
