"""
Severity levels.

Levels are ordered by verbosity: a message is emitted when its level is
not more verbose than the configured threshold.
"""

from enum import IntEnum
from typing import Union

from .exceptions import ConfigurationError


class LogLevel(IntEnum):
    """Ordered severity, least verbose first."""

    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @classmethod
    def parse(cls, value: Union["LogLevel", int, str]) -> "LogLevel":
        """Convert a level, an int or a case-insensitive level name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().isdigit():
            value = int(value)
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ConfigurationError(
                    f"Unknown log level: {value!r}",
                    help_text=f"Use one of: {', '.join(level.name for level in cls)}",
                    error_code="LEVEL_UNKNOWN",
                ) from None
        try:
            return cls(value)
        except ValueError:
            raise ConfigurationError(
                f"Log level out of range: {value!r}",
                help_text=f"Use an integer between {min(cls).value} and {max(cls).value}",
                error_code="LEVEL_RANGE",
            ) from None
