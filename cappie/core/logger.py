"""
Main Logger class - synchronous structured logger
"""

from __future__ import annotations
import sys
from typing import Any, Callable, Dict, Mapping, Optional

from cappie.core.fields import FieldBuilder, merge_fields, to_field_value
from cappie.core.log_level import LogLevel
from cappie.core.log_record import LogRecord, utc_now
from cappie.core.logger_config import LoggerConfig
from cappie.formatters.base_formatter import BaseFormatter
from cappie.formatters.pretty_formatter import PrettyFormatter
from cappie.writers.base_writer import BaseWriter

FieldCallback = Callable[[FieldBuilder], Any]


class Logger:
    """
    Structured logger facade.

    The configuration is fixed at construction (the formatter is copied),
    so one instance can be shared by any number of threads. Every call builds its own merged
    field dict and LogRecord.

    Example:
        logger = Logger(LoggerConfig(name="backend", min_level=LogLevel.DEBUG))
        logger.info("server started", port=8080)
        logger.warn_with("slow request", lambda log: log.number("ms", 950))
    """

    def __init__(self, config: Optional[LoggerConfig] = None):
        config = config or LoggerConfig.default()
        self._name = config.name
        self._min_level = config.min_level
        self._formatter = config.formatter.copy()
        self._writer = config.writer
        self._base_fields: Dict[str, Any] = {
            str(k): to_field_value(v) for k, v in config.base_fields.items()
        }

    @classmethod
    def pretty(cls, name: str = "app") -> "Logger":
        """Create a logger with the human-readable formatter."""
        return cls(LoggerConfig(name=name, formatter=PrettyFormatter()))

    @property
    def name(self) -> str:
        return self._name

    @property
    def min_level(self) -> LogLevel:
        return self._min_level

    @property
    def formatter(self) -> BaseFormatter:
        """Copy of the formatter; editing it does not affect this logger."""
        return self._formatter.copy()

    @property
    def writer(self) -> BaseWriter:
        return self._writer

    @property
    def base_fields(self) -> Dict[str, Any]:
        """Copy of the fields attached to every record."""
        return dict(self._base_fields)

    def child(self, name: str) -> "Logger":
        """
        Create a child logger named ``<parent>.<name>``.

        The child keeps the parent's level, formatter, writer and a copy
        of its base fields.
        """
        child_name = f"{self._name}.{name}" if self._name else name
        return Logger(LoggerConfig(
            name=child_name,
            min_level=self._min_level,
            formatter=self._formatter,
            writer=self._writer,
            base_fields=self._base_fields,
        ))

    def is_enabled(self, level: LogLevel) -> bool:
        """Check whether records at this level are emitted."""
        return level >= self._min_level

    def log(
        self,
        level: LogLevel,
        message: str,
        fields: Optional[Mapping[str, Any]] = None
    ) -> None:
        """Log a message with optional call fields."""
        if not self.is_enabled(level):
            return

        call_fields = None
        if fields:
            call_fields = {str(k): to_field_value(v) for k, v in fields.items()}

        record = LogRecord(
            level=level,
            message=message,
            fields=merge_fields(self._base_fields, call_fields),
            timestamp=utc_now(),
            logger_name=self._name,
        )
        line = self._formatter.format_record(record)
        try:
            self._writer.write(line)
        except Exception as e:
            print(f"Writer error: {e}", file=sys.stderr)

    def _log_with(self, level: LogLevel, message: str, build: FieldCallback) -> None:
        if not self.is_enabled(level):
            return
        builder = FieldBuilder()
        build(builder)
        self.log(level, message, builder.build())

    def trace(self, message: str, /, **fields) -> None:
        """Log trace message."""
        self.log(LogLevel.TRACE, message, fields)

    def trace_with(self, message: str, build: FieldCallback) -> None:
        """Log trace message with fields from a FieldBuilder callback."""
        self._log_with(LogLevel.TRACE, message, build)

    def debug(self, message: str, /, **fields) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message, fields)

    def debug_with(self, message: str, build: FieldCallback) -> None:
        """Log debug message with fields from a FieldBuilder callback."""
        self._log_with(LogLevel.DEBUG, message, build)

    def info(self, message: str, /, **fields) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, message, fields)

    def info_with(self, message: str, build: FieldCallback) -> None:
        """Log info message with fields from a FieldBuilder callback."""
        self._log_with(LogLevel.INFO, message, build)

    def warn(self, message: str, /, **fields) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, message, fields)

    def warn_with(self, message: str, build: FieldCallback) -> None:
        """Log warning message with fields from a FieldBuilder callback."""
        self._log_with(LogLevel.WARN, message, build)

    def error(self, message: str, /, **fields) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message, fields)

    def error_with(self, message: str, build: FieldCallback) -> None:
        """Log error message with fields from a FieldBuilder callback."""
        self._log_with(LogLevel.ERROR, message, build)

    def fatal(self, message: str, /, **fields) -> None:
        """Log fatal message."""
        self.log(LogLevel.FATAL, message, fields)

    def fatal_with(self, message: str, build: FieldCallback) -> None:
        """Log fatal message with fields from a FieldBuilder callback."""
        self._log_with(LogLevel.FATAL, message, build)

    def flush(self) -> None:
        """Flush the writer."""
        if hasattr(self._writer, "flush"):
            self._writer.flush()

    def __repr__(self) -> str:
        return f"Logger(name={self._name!r}, min_level={self._min_level})"
