"""
Log formatters module

Provides formatter implementations that turn log records into text.
"""

from cappie.formatters.base_formatter import BaseFormatter
from cappie.formatters.json_formatter import JSONFormatter
from cappie.formatters.pretty_formatter import PrettyFormatter
from cappie.formatters.compact_formatter import CompactFormatter
from cappie.formatters.flexible_formatter import FlexibleFormatter
from cappie.formatters.template import (
    ComponentPosition,
    ComponentType,
    Template,
    TemplateComponent,
    default_template,
)
from cappie.formatters.time_format import format_timestamp

__all__ = [
    "BaseFormatter",
    "JSONFormatter",
    "PrettyFormatter",
    "CompactFormatter",
    "FlexibleFormatter",
    "ComponentPosition",
    "ComponentType",
    "Template",
    "TemplateComponent",
    "default_template",
    "format_timestamp",
]
