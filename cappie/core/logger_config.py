"""
Logger configuration management
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from cappie.core.log_level import LogLevel
from cappie.formatters.base_formatter import BaseFormatter
from cappie.formatters.json_formatter import JSONFormatter
from cappie.formatters.pretty_formatter import PrettyFormatter
from cappie.writers.base_writer import BaseWriter
from cappie.writers.console_writer import ConsoleWriter


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    A Logger copies these values at construction; changing a config
    afterwards does not affect loggers already built from it.
    """

    name: str = "app"
    min_level: LogLevel = LogLevel.INFO
    formatter: BaseFormatter = field(default_factory=JSONFormatter)
    writer: BaseWriter = field(default_factory=ConsoleWriter)
    base_fields: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.min_level, LogLevel):
            raise TypeError("min_level must be LogLevel enum")
        self.name = "" if self.name is None else str(self.name)
        self.base_fields = dict(self.base_fields)

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            min_level=LogLevel.DEBUG,
            formatter=PrettyFormatter(),
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            min_level=LogLevel.WARN,
            formatter=JSONFormatter(),
        )
