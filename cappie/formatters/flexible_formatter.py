"""
Flexible formatter driven by a component template

Every layout is data: a list of components placed at fixed relative
positions. The default template reproduces the PrettyFormatter layout;
callers can clear it and assemble their own, for example a JSON-shaped
line built from literal text and fields.
"""

from datetime import datetime
from typing import Any, Mapping, Optional

from cappie.core.fields import format_fields
from cappie.core.log_level import RESET_CODE, LogLevel
from cappie.core.log_record import LogRecord
from cappie.formatters.base_formatter import BaseFormatter
from cappie.formatters.template import (
    ComponentPosition,
    ComponentType,
    Template,
    TemplateComponent,
)
from cappie.formatters.time_format import format_timestamp


class FlexibleFormatter(BaseFormatter):
    """
    Render log events from a caller-assembled template.

    Components are rendered position by position (START, AFTER_TIMESTAMP,
    AFTER_LOGGER_NAME, AFTER_LEVEL, AFTER_MESSAGE, END) and in insertion
    order within a position. Each one is written as::

        prefix + color + content + reset + suffix

    where the reset is only written for a colored component. A FIELDS
    component is dropped entirely, decoration included, when the record
    has no fields.

    Example:
        formatter = (FlexibleFormatter()
            .clear_components()
            .add_level(ComponentPosition.START, color="\\033[33m", prefix="[", suffix="]")
            .add_message(ComponentPosition.AFTER_LEVEL, prefix=" ")
            .add_fields(ComponentPosition.END, prefix=" | "))
        # "[WARN] disk almost full | free_mb=12"
    """

    DEFAULT_TIME_FORMAT = "%H:%M:%S"

    def __init__(
        self,
        template: Optional[Template] = None,
        time_format: str = DEFAULT_TIME_FORMAT,
        reset_color: str = RESET_CODE
    ):
        """
        Initialize flexible formatter.

        Args:
            template: Components to render (copied; default: Template.default())
            time_format: Timestamp pattern (see format_timestamp)
            reset_color: Sequence written after each colored component
        """
        self.template = Template.default() if template is None else template.copy()
        self.time_format = time_format
        self.reset_color = reset_color

    # Template editing

    def clear_components(self) -> "FlexibleFormatter":
        """Remove all components; the formatter then renders empty lines."""
        self.template.clear()
        return self

    def add_component(
        self,
        component_type: ComponentType,
        position: ComponentPosition,
        color: Optional[str] = None,
        prefix: Optional[str] = None,
        suffix: Optional[str] = None,
        text: Optional[str] = None
    ) -> "FlexibleFormatter":
        """Append a component of any type."""
        self.template.add(component_type, position, color, prefix, suffix, text)
        return self

    def add_timestamp(
        self,
        position: ComponentPosition,
        color: Optional[str] = None,
        prefix: Optional[str] = None,
        suffix: Optional[str] = None
    ) -> "FlexibleFormatter":
        return self.add_component(ComponentType.TIMESTAMP, position, color, prefix, suffix)

    def add_logger_name(
        self,
        position: ComponentPosition,
        color: Optional[str] = None,
        prefix: Optional[str] = None,
        suffix: Optional[str] = None
    ) -> "FlexibleFormatter":
        return self.add_component(ComponentType.LOGGER_NAME, position, color, prefix, suffix)

    def add_level(
        self,
        position: ComponentPosition,
        color: Optional[str] = None,
        prefix: Optional[str] = None,
        suffix: Optional[str] = None
    ) -> "FlexibleFormatter":
        return self.add_component(ComponentType.LEVEL, position, color, prefix, suffix)

    def add_message(
        self,
        position: ComponentPosition,
        color: Optional[str] = None,
        prefix: Optional[str] = None,
        suffix: Optional[str] = None
    ) -> "FlexibleFormatter":
        return self.add_component(ComponentType.MESSAGE, position, color, prefix, suffix)

    def add_fields(
        self,
        position: ComponentPosition,
        color: Optional[str] = None,
        prefix: Optional[str] = None,
        suffix: Optional[str] = None
    ) -> "FlexibleFormatter":
        return self.add_component(ComponentType.FIELDS, position, color, prefix, suffix)

    def add_custom_text(
        self,
        text: str,
        position: ComponentPosition,
        color: Optional[str] = None
    ) -> "FlexibleFormatter":
        """Append literal text."""
        return self.add_component(ComponentType.CUSTOM_TEXT, position, color, text=text)

    def remove_components(self, component_type: ComponentType) -> "FlexibleFormatter":
        """Remove every component of the given type."""
        self.template.remove(component_type)
        return self

    # Settings

    def with_time_format(self, time_format: str) -> "FlexibleFormatter":
        """Set the timestamp pattern."""
        self.time_format = time_format
        return self

    def with_reset_color(self, reset_color: str) -> "FlexibleFormatter":
        """Set the sequence written after colored components."""
        self.reset_color = reset_color
        return self

    def strip_colors(self) -> "FlexibleFormatter":
        """
        Remove the color of every current component and clear the reset.

        Components added afterwards keep whatever color they are given.
        """
        self.template.strip_colors()
        self.reset_color = ""
        return self

    def with_no_colors(self) -> "FlexibleFormatter":
        """Alias of strip_colors() for builder-style configuration."""
        return self.strip_colors()

    # Rendering

    def format(
        self,
        level: LogLevel,
        message: str,
        fields: Mapping[str, Any],
        timestamp: datetime,
        logger_name: str
    ) -> str:
        record = LogRecord(
            level=level,
            message=message,
            fields=dict(fields),
            timestamp=timestamp,
            logger_name=logger_name,
        )
        return self.render(record)

    def format_record(self, record: LogRecord) -> str:
        return self.render(record)

    def render(self, record: LogRecord) -> str:
        """
        Render a record through the template.

        Args:
            record: Record to render

        Returns:
            Rendered line without trailing newline
        """
        scalars = {
            ComponentType.TIMESTAMP: format_timestamp(record.timestamp, self.time_format),
            ComponentType.LEVEL: record.level.name,
            ComponentType.LOGGER_NAME: record.logger_name,
            ComponentType.MESSAGE: record.message,
        }
        fields_str = format_fields(record.fields)

        parts = []
        for components in self.template.buckets().values():
            for component in components:
                content = self._resolve(component, scalars, fields_str)
                if content is None:
                    continue
                self._emit(parts, component, content)

        return "".join(parts)

    @staticmethod
    def _resolve(component: TemplateComponent, scalars: dict, fields_str: Optional[str]) -> Optional[str]:
        """Content of a component, or None when it must be skipped."""
        if component.component_type is ComponentType.CUSTOM_TEXT:
            return component.text or ""
        if component.component_type is ComponentType.FIELDS:
            return fields_str
        return scalars[component.component_type]

    def _emit(self, parts: list, component: TemplateComponent, content: str) -> None:
        if component.prefix:
            parts.append(component.prefix)
        if component.color:
            parts.append(component.color)
        parts.append(content)
        if component.color and self.reset_color:
            parts.append(self.reset_color)
        if component.suffix:
            parts.append(component.suffix)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"FlexibleFormatter(components={len(self.template)}, "
            f"time_format='{self.time_format}')"
        )
