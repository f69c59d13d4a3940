"""Class member entity."""

from __future__ import annotations

from dataclasses import dataclass

from class2greylist.domain.model.annotation import Annotation
from class2greylist.domain.model.enums import AccessFlag, MemberKind


@dataclass(frozen=True, slots=True)
class Member:
    """Field or method declared by a class.

    Attributes:
        kind: FIELD or METHOD
        name: Member name (e.g., "mValue", "<init>")
        descriptor: Type descriptor (e.g., "I", "(Ljava/lang/String;)V")
        access_flags: Raw access flags from the class file
        annotations: Visible and invisible annotations, in class file order
    """

    kind: MemberKind
    name: str
    descriptor: str
    access_flags: int = 0
    annotations: tuple[Annotation, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("member name must not be empty")
        if not self.descriptor:
            raise ValueError("member descriptor must not be empty")

    @property
    def is_bridge(self) -> bool:
        """Compiler generated bridge method. Always False for fields."""
        return self.kind is MemberKind.METHOD and bool(self.access_flags & AccessFlag.BRIDGE)

    @property
    def is_synthetic(self) -> bool:
        """Compiler generated member."""
        return bool(self.access_flags & AccessFlag.SYNTHETIC)

    def find_annotation(self, type_name: str) -> Annotation | None:
        """Get first annotation of given type, None if absent."""
        for annotation in self.annotations:
            if annotation.type_name == type_name:
                return annotation
        return None

    def signature(self, class_descriptor: str) -> str:
        """Dex-style signature of this member.

        Examples:
            Lfoo/Bar;->run(I)V
            Lfoo/Bar;->mValue:I
        """
        if self.kind is MemberKind.FIELD:
            return f"{class_descriptor}->{self.name}:{self.descriptor}"
        return f"{class_descriptor}->{self.name}{self.descriptor}"
