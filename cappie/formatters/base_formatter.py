"""
Base formatter interface
"""

import copy
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Mapping

from cappie.core.log_level import LogLevel
from cappie.core.log_record import LogRecord


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters turn one log record into the final text handed to a
    writer. They never perform I/O.
    """

    @abstractmethod
    def format(
        self,
        level: LogLevel,
        message: str,
        fields: Mapping[str, Any],
        timestamp: datetime,
        logger_name: str
    ) -> str:
        """
        Format a log event into a string.

        Args:
            level: Severity of the event
            message: Human-readable message
            fields: Merged structured fields
            timestamp: Time of the call (UTC)
            logger_name: Hierarchical logger name

        Returns:
            Formatted string (without trailing newline)
        """
        pass

    def format_record(self, record: LogRecord) -> str:
        """Format a LogRecord."""
        return self.format(
            record.level,
            record.message,
            record.fields,
            record.timestamp,
            record.logger_name,
        )

    def copy(self) -> "BaseFormatter":
        """Independent copy, including templates and color palettes."""
        return copy.deepcopy(self)

    def __call__(self, record: LogRecord) -> str:
        """Allow formatters to be callable."""
        return self.format_record(record)
