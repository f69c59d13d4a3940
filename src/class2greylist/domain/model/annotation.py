"""Annotation value objects read from class files."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class EnumValue:
    """Enum constant used as annotation element value.

    Attributes:
        type_name: Enum type descriptor (e.g., "Ljava/lang/annotation/ElementType;")
        const_name: Constant name (e.g., "METHOD")
    """

    type_name: str
    const_name: str


@dataclass(frozen=True, slots=True)
class ClassValue:
    """Class literal used as annotation element value.

    Attributes:
        descriptor: Return descriptor of the class (e.g., "Ljava/lang/String;", "V")
    """

    descriptor: str


ElementValue: TypeAlias = (
    "int | float | bool | str | EnumValue | ClassValue | Annotation | tuple[ElementValue, ...]"
)


@dataclass(frozen=True, slots=True)
class Annotation:
    """Annotation applied to a class member.

    Attributes:
        type_name: Annotation type descriptor
            (e.g., "Landroid/annotation/UnsupportedAppUsage;")
        elements: Element name -> decoded value. Read-only.
        visible: True for RuntimeVisibleAnnotations, False for RuntimeInvisibleAnnotations
    """

    type_name: str
    elements: Mapping[str, ElementValue] = field(default_factory=dict)
    visible: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.type_name:
            raise ValueError("annotation type_name must not be empty")
        if not isinstance(self.elements, MappingProxyType):
            object.__setattr__(self, "elements", MappingProxyType(dict(self.elements)))

    def get(self, name: str) -> ElementValue | None:
        """Get element value by name, None if not set."""
        return self.elements.get(name)
