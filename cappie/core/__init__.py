"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Main logger class
- LoggerBuilder: Builder pattern for logger construction
- LogRecord: Log record data structure
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
- FieldBuilder: Per-call structured fields
"""

from cappie.core.log_level import LogLevel, InvalidLevelError
from cappie.core.fields import FieldBuilder
from cappie.core.log_record import LogRecord
from cappie.core.logger_config import LoggerConfig
from cappie.core.logger import Logger
from cappie.core.logger_builder import LoggerBuilder

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogRecord",
    "LogLevel",
    "InvalidLevelError",
    "LoggerConfig",
    "FieldBuilder",
]
