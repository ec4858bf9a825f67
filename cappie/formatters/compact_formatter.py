"""
Compact formatter for minimal log output

Produces concise single-line log entries
"""

from datetime import datetime
from typing import Any, Mapping

from cappie.core.fields import format_fields
from cappie.core.log_level import LogLevel
from cappie.formatters.base_formatter import BaseFormatter
from cappie.formatters.time_format import format_timestamp

LEVEL_ABBREVIATIONS = {
    LogLevel.TRACE: "TRC",
    LogLevel.DEBUG: "DBG",
    LogLevel.INFO: "INF",
    LogLevel.WARN: "WRN",
    LogLevel.ERROR: "ERR",
    LogLevel.FATAL: "FTL",
}


class CompactFormatter(BaseFormatter):
    """
    Format log events in a compact single-line format.

    Optimized for production environments with high log volume.
    """

    def __init__(self, include_timestamp: bool = True, include_logger: bool = False):
        """
        Initialize compact formatter.

        Args:
            include_timestamp: Include timestamp in output
            include_logger: Include logger name in output

        Example:
            # Minimal format: "INF: message"
            formatter = CompactFormatter(include_timestamp=False)

            # With timestamp: "12:34:56 INF: message"
            formatter = CompactFormatter()

            # With logger: "12:34:56 [myapp] INF: message"
            formatter = CompactFormatter(include_logger=True)
        """
        self.include_timestamp = include_timestamp
        self.include_logger = include_logger

    def format(
        self,
        level: LogLevel,
        message: str,
        fields: Mapping[str, Any],
        timestamp: datetime,
        logger_name: str
    ) -> str:
        parts = []

        if self.include_timestamp:
            parts.append(format_timestamp(timestamp, "%H:%M:%S"))

        if self.include_logger and logger_name:
            parts.append(f"[{logger_name}]")

        parts.append(f"{LEVEL_ABBREVIATIONS[level]}:")
        parts.append(message)

        fields_str = format_fields(fields)
        if fields_str is not None:
            parts.append(fields_str)

        return " ".join(parts)

    def __repr__(self) -> str:
        """String representation."""
        return f"CompactFormatter(timestamp={self.include_timestamp}, logger={self.include_logger})"
