"""Parsed class aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from class2greylist.domain.model.enums import MemberKind
from class2greylist.domain.model.member import Member


@dataclass(frozen=True, slots=True)
class ParsedClass:
    """Class read from a class file.

    Attributes:
        name: Internal binary name (e.g., "android/app/Activity", "a/B$C")
        source_file: Value of the SourceFile attribute, None if stripped
        access_flags: Raw class access flags
        members: Fields then methods, in class file order
    """

    name: str
    source_file: str | None = None
    access_flags: int = 0
    members: tuple[Member, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("class name must not be empty")
        if "." in self.name:
            raise ValueError(f"class name must use '/' separators, got {self.name!r}")

    @property
    def descriptor(self) -> str:
        """Field descriptor of this class (e.g., "Landroid/app/Activity;")."""
        return f"L{self.name};"

    @property
    def fields(self) -> tuple[Member, ...]:
        """Declared fields."""
        return tuple(m for m in self.members if m.kind is MemberKind.FIELD)

    @property
    def methods(self) -> tuple[Member, ...]:
        """Declared methods, constructors included."""
        return tuple(m for m in self.members if m.kind is MemberKind.METHOD)

    @property
    def display_name(self) -> str:
        """Source file name if known, else the class name. Used in error messages."""
        return self.source_file or self.name
