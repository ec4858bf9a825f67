"""Logger builder pattern"""

from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from cappie.core.logger import Logger
from cappie.core.logger_config import LoggerConfig
from cappie.core.log_level import LogLevel
from cappie.formatters.base_formatter import BaseFormatter
from cappie.formatters.flexible_formatter import FlexibleFormatter
from cappie.formatters.pretty_formatter import PrettyFormatter
from cappie.writers.base_writer import BaseWriter
from cappie.writers.console_writer import ConsoleWriter
from cappie.writers.file_writer import FileWriter
from cappie.writers.multi_writer import MultiWriter


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._config = LoggerConfig()
        self._formatter: Optional[BaseFormatter] = None
        self._writers: List[BaseWriter] = []

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._config.name = name
        return self

    def with_level(self, level: Union[LogLevel, str]) -> "LoggerBuilder":
        """
        Set minimum log level.

        Raises:
            InvalidLevelError: If a level name is not valid
        """
        if isinstance(level, str):
            level = LogLevel.from_string(level)
        self._config.min_level = level
        return self

    def with_formatter(self, formatter: BaseFormatter) -> "LoggerBuilder":
        """Set the formatter."""
        self._formatter = formatter
        return self

    def with_pretty(self, colored: bool = True) -> "LoggerBuilder":
        """Use the human-readable formatter."""
        formatter = PrettyFormatter()
        if not colored:
            formatter.with_no_colors()
        return self.with_formatter(formatter)

    def with_flexible(self, formatter: Optional[FlexibleFormatter] = None) -> "LoggerBuilder":
        """Use a flexible formatter (default template if none is given)."""
        return self.with_formatter(formatter or FlexibleFormatter())

    def with_writer(self, writer: BaseWriter) -> "LoggerBuilder":
        """Replace all writers with a single one."""
        self._writers = [writer]
        return self

    def add_writer(self, writer: BaseWriter) -> "LoggerBuilder":
        """
        Add a writer.

        Args:
            writer: Writer instance

        Returns:
            Self for method chaining
        """
        self._writers.append(writer)
        return self

    def with_console(self, stderr: bool = False) -> "LoggerBuilder":
        """Enable console output."""
        return self.add_writer(ConsoleWriter(use_stderr=stderr))

    def with_file(self, filepath: Union[str, Path]) -> "LoggerBuilder":
        """Enable file output."""
        return self.add_writer(FileWriter(filepath))

    def with_field(self, key: str, value: Any) -> "LoggerBuilder":
        """Attach a base field to every record."""
        self._config.base_fields[str(key)] = value
        return self

    def with_fields(self, fields: Mapping[str, Any]) -> "LoggerBuilder":
        """Attach several base fields."""
        for key, value in fields.items():
            self.with_field(key, value)
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        if not self._writers:
            writer: BaseWriter = ConsoleWriter()
        elif len(self._writers) == 1:
            writer = self._writers[0]
        else:
            writer = MultiWriter(self._writers)

        config = LoggerConfig(
            name=self._config.name,
            min_level=self._config.min_level,
            formatter=self._formatter or self._config.formatter,
            writer=writer,
            base_fields=self._config.base_fields,
        )
        return Logger(config)
