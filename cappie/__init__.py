"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

cappie - Structured application logging with pluggable formatters
and writers, including a position-based flexible template formatter
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from cappie.core.logger import Logger
from cappie.core.logger_builder import LoggerBuilder
from cappie.core.log_record import LogRecord
from cappie.core.log_level import LogLevel, InvalidLevelError
from cappie.core.logger_config import LoggerConfig
from cappie.core.fields import FieldBuilder
from cappie.formatters import (
    BaseFormatter,
    JSONFormatter,
    PrettyFormatter,
    CompactFormatter,
    FlexibleFormatter,
    ComponentPosition,
    ComponentType,
    Template,
    TemplateComponent,
)
from cappie.writers import BaseWriter, ConsoleWriter, FileWriter, MultiWriter

# Import submodules (not all classes by default)
from cappie import formatters
from cappie import writers


def create_logger(name: str) -> Logger:
    """Create a logger with the default JSON formatter and stdout writer."""
    return Logger(LoggerConfig(name=name))


__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogRecord",
    "LogLevel",
    "InvalidLevelError",
    "LoggerConfig",
    "FieldBuilder",
    "BaseFormatter",
    "JSONFormatter",
    "PrettyFormatter",
    "CompactFormatter",
    "FlexibleFormatter",
    "ComponentPosition",
    "ComponentType",
    "Template",
    "TemplateComponent",
    "BaseWriter",
    "ConsoleWriter",
    "FileWriter",
    "MultiWriter",
    "create_logger",
    "formatters",
    "writers",
]
