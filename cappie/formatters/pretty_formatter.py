"""
Human-readable formatter with colored levels
"""

from datetime import datetime
from typing import Any, Dict, Mapping

from cappie.core.fields import format_fields
from cappie.core.log_level import DEFAULT_COLORS, RESET_CODE, LogLevel
from cappie.formatters.base_formatter import BaseFormatter
from cappie.formatters.time_format import format_timestamp


class PrettyFormatter(BaseFormatter):
    """
    Format log events as a single human-friendly line.

    Layout:
        [12:34:56] (auth) INFO: login succeeded user=42

    The level name is wrapped in its ANSI color and a reset sequence. A
    level without a configured color is written without any escape
    bytes.
    """

    DEFAULT_TIME_FORMAT = "%H:%M:%S"

    def __init__(
        self,
        time_format: str = DEFAULT_TIME_FORMAT,
        colors: Dict[LogLevel, str] = None,
        reset_color: str = RESET_CODE
    ):
        """
        Initialize pretty formatter.

        Args:
            time_format: Timestamp pattern (see format_timestamp)
            colors: Per-level color escapes (default: DEFAULT_COLORS)
            reset_color: Sequence emitted after a colored level

        Example:
            formatter = (PrettyFormatter()
                .with_color(LogLevel.ERROR, "\\033[91m")
                .with_time_format("%Y-%m-%d %H:%M:%S"))
        """
        self.time_format = time_format
        self.colors = dict(DEFAULT_COLORS if colors is None else colors)
        self.reset_color = reset_color

    def with_time_format(self, time_format: str) -> "PrettyFormatter":
        """Set the timestamp pattern."""
        self.time_format = time_format
        return self

    def with_color(self, level: LogLevel, color: str) -> "PrettyFormatter":
        """Override the color of one level."""
        self.colors[level] = color
        return self

    def with_no_colors(self) -> "PrettyFormatter":
        """Disable all colors and the reset sequence."""
        self.colors.clear()
        self.reset_color = ""
        return self

    def format(
        self,
        level: LogLevel,
        message: str,
        fields: Mapping[str, Any],
        timestamp: datetime,
        logger_name: str
    ) -> str:
        time_str = format_timestamp(timestamp, self.time_format)

        color = self.colors.get(level)
        if color:
            level_str = f"{color}{level.name}{self.reset_color}"
        else:
            level_str = level.name

        result = f"[{time_str}] ({logger_name}) {level_str}: {message}"

        fields_str = format_fields(fields)
        if fields_str is not None:
            result += " " + fields_str

        return result

    def __repr__(self) -> str:
        """String representation."""
        return f"PrettyFormatter(time_format='{self.time_format}')"
