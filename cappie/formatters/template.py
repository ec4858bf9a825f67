"""
Template model for the flexible formatter

A template is an ordered list of components. Each component says WHAT
to render (its type), WHERE to render it (one of six positions) and HOW
to decorate it (color, prefix, suffix).
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional


class ComponentType(Enum):
    """Kind of content a template component renders."""

    TIMESTAMP = "timestamp"
    LOGGER_NAME = "logger_name"
    LEVEL = "level"
    MESSAGE = "message"
    FIELDS = "fields"
    CUSTOM_TEXT = "custom_text"


class ComponentPosition(Enum):
    """
    Relative slot of a component in the rendered line.

    Positions are rendered in definition order, START first and END last.
    """

    START = 0
    AFTER_TIMESTAMP = 1
    AFTER_LOGGER_NAME = 2
    AFTER_LEVEL = 3
    AFTER_MESSAGE = 4
    END = 5


@dataclass
class TemplateComponent:
    """
    One renderable unit of a template.

    Attributes:
        component_type: What to render
        position: Where to render it
        color: Escape sequence written before the content
        prefix: Literal text written before the color
        suffix: Literal text written after the reset
        text: Literal content of a CUSTOM_TEXT component
    """

    component_type: ComponentType
    position: ComponentPosition
    color: Optional[str] = None
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    text: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.component_type, ComponentType):
            raise TypeError("component_type must be ComponentType enum")
        if not isinstance(self.position, ComponentPosition):
            raise TypeError("position must be ComponentPosition enum")
        if self.component_type is ComponentType.CUSTOM_TEXT and self.text is None:
            self.text = ""


class Template:
    """
    Ordered collection of template components.

    Components sharing a position keep their insertion order.

    Example:
        template = (Template()
            .add(ComponentType.LEVEL, ComponentPosition.START, prefix="[", suffix="]")
            .add(ComponentType.MESSAGE, ComponentPosition.AFTER_LEVEL, prefix=" "))
    """

    def __init__(self, components: Optional[Iterable[TemplateComponent]] = None):
        self._components: List[TemplateComponent] = [
            replace(component) for component in (components or ())
        ]

    @classmethod
    def default(cls) -> "Template":
        """
        Template reproducing the human-readable layout:

            [12:34:56] (name) INFO: message k=v
        """
        return (cls()
            .add(ComponentType.TIMESTAMP, ComponentPosition.START, prefix="[", suffix="]")
            .add(ComponentType.LOGGER_NAME, ComponentPosition.AFTER_TIMESTAMP, prefix=" (", suffix=")")
            .add(ComponentType.LEVEL, ComponentPosition.AFTER_LOGGER_NAME, prefix=" ")
            .add(ComponentType.CUSTOM_TEXT, ComponentPosition.AFTER_LEVEL, text=":")
            .add(ComponentType.MESSAGE, ComponentPosition.AFTER_LEVEL, prefix=" ")
            .add(ComponentType.FIELDS, ComponentPosition.END, prefix=" "))

    def add(
        self,
        component_type: ComponentType,
        position: ComponentPosition,
        color: Optional[str] = None,
        prefix: Optional[str] = None,
        suffix: Optional[str] = None,
        text: Optional[str] = None
    ) -> "Template":
        """Append a component. Duplicate types and positions are allowed."""
        self._components.append(
            TemplateComponent(component_type, position, color, prefix, suffix, text)
        )
        return self

    def add_component(self, component: TemplateComponent) -> "Template":
        """Append a copy of an existing component."""
        self._components.append(replace(component))
        return self

    def remove(self, component_type: ComponentType) -> "Template":
        """Remove every component of the given type."""
        self._components = [
            c for c in self._components if c.component_type is not component_type
        ]
        return self

    def clear(self) -> "Template":
        """Remove all components."""
        self._components.clear()
        return self

    def strip_colors(self) -> "Template":
        """Drop the color of every current component."""
        for component in self._components:
            component.color = None
        return self

    def copy(self) -> "Template":
        """Independent copy of this template."""
        return Template(self._components)

    def buckets(self) -> Dict[ComponentPosition, List[TemplateComponent]]:
        """Components grouped by position, in render order."""
        grouped: Dict[ComponentPosition, List[TemplateComponent]] = {
            position: [] for position in ComponentPosition
        }
        for component in self._components:
            grouped[component.position].append(component)
        return grouped

    @property
    def components(self) -> List[TemplateComponent]:
        """Snapshot of the components in insertion order."""
        return list(self._components)

    def __iter__(self) -> Iterator[TemplateComponent]:
        return iter(list(self._components))

    def __len__(self) -> int:
        return len(self._components)

    def __repr__(self) -> str:
        return f"Template({len(self._components)} components)"


def default_template() -> Template:
    """Create a new default template."""
    return Template.default()
