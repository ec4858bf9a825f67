"""
Log record data structure
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict

from cappie.core.log_level import LogLevel


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass
class LogRecord:
    """
    Log record data structure.

    Built once per log call, handed to exactly one formatter and then
    discarded. ``fields`` already holds base fields merged with call
    fields.
    """

    level: LogLevel
    message: str
    fields: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=utc_now)
    logger_name: str = ""

    def __post_init__(self):
        """Validate log record after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            self.message = str(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log record to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level.name,
            "message": self.message,
            "fields": dict(self.fields),
            "timestamp": self.timestamp.isoformat(),
            "logger_name": self.logger_name,
        }
