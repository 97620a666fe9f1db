"""
Exception hierarchy for scopelog.

Exception Hierarchy:
    ScopelogError (base)
    ├── ConfigurationError
    └── SinkUnavailableError

Logging calls themselves never raise; these exceptions surface only from
setup-time operations (loading settings, constructing handlers).
"""

from typing import Any, Dict, Optional


class ScopelogError(Exception):
    """Base exception for all scopelog errors.

    Attributes:
        message: The error message
        help_text: Optional actionable guidance for the user
        error_code: Optional error code for programmatic handling
    """

    def __init__(
        self,
        message: str,
        help_text: Optional[str] = None,
        error_code: Optional[str] = None,
    ):
        self.message = message
        self.help_text = help_text
        self.error_code = error_code
        super().__init__(message)

    def __str__(self) -> str:
        if self.help_text:
            return f"{self.message}\n\nHelp: {self.help_text}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for reporting."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "help_text": self.help_text,
        }


class ConfigurationError(ScopelogError):
    """Raised when settings cannot be read or are invalid."""
    pass


class SinkUnavailableError(ScopelogError):
    """Raised when a handler cannot be brought into existence."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(
            f"Cannot open log file '{path}': {reason}",
            help_text="Check that the directory exists and is writable",
            error_code="SINK_UNAVAILABLE",
        )
