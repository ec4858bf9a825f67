"""
Log level enumeration

Severities are ordered by their numeric weight (10 ... 60) so they can be
compared directly: a record is emitted when ``level >= min_level``.
"""

from enum import IntEnum
from typing import Dict, Optional


class InvalidLevelError(ValueError):
    """Raised when a string does not name one of the six log levels."""


class LogLevel(IntEnum):
    """
    Log level enumeration.

    The canonical string form of a level is its upper-case name
    (``str(LogLevel.INFO) == "INFO"``).
    """

    TRACE = 10      # Most verbose, detailed tracing
    DEBUG = 20      # Debug information
    INFO = 30       # Informational messages
    WARN = 40       # Warning messages
    ERROR = 50      # Error messages
    FATAL = 60      # Unrecoverable errors

    def __str__(self) -> str:
        """Canonical upper-case name."""
        return self.name

    @classmethod
    def parse(cls, level_str: str) -> Optional["LogLevel"]:
        """
        Convert string to LogLevel without raising.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value, or None if the name is unknown
        """
        if not isinstance(level_str, str):
            return None
        return LEVEL_FROM_NAME.get(level_str.upper())

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            InvalidLevelError: If level_str is not valid
        """
        level = cls.parse(level_str)
        if level is None:
            raise InvalidLevelError(f"Invalid log level: {level_str!r}")
        return level

    @property
    def color_code(self) -> str:
        """Default ANSI color for this level."""
        return DEFAULT_COLORS[self]

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return RESET_CODE


RESET_CODE = "\033[0m"

# Default palette, copied into each formatter that colors levels
DEFAULT_COLORS: Dict[LogLevel, str] = {
    LogLevel.TRACE: "\033[90m",     # Bright black
    LogLevel.DEBUG: "\033[36m",     # Cyan
    LogLevel.INFO: "\033[32m",      # Green
    LogLevel.WARN: "\033[33m",      # Yellow
    LogLevel.ERROR: "\033[31m",     # Red
    LogLevel.FATAL: "\033[35m",     # Magenta
}

# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {level: level.name for level in LogLevel}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}
