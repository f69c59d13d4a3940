"""RuntimeVisibleAnnotations / RuntimeInvisibleAnnotations attribute decoding."""

from __future__ import annotations

from typing import TYPE_CHECKING

from class2greylist.domain.exceptions import ClassFormatError
from class2greylist.domain.model.annotation import Annotation, ClassValue, ElementValue, EnumValue

if TYPE_CHECKING:
    from class2greylist.infrastructure.classfile.constant_pool import ConstantPool
    from class2greylist.infrastructure.classfile.reader import ByteReader

VISIBLE_ANNOTATIONS = "RuntimeVisibleAnnotations"
INVISIBLE_ANNOTATIONS = "RuntimeInvisibleAnnotations"

# Nested annotations and arrays deeper than this are rejected as malformed
MAX_NESTING = 64


def read_annotations(
    reader: ByteReader,
    pool: ConstantPool,
    *,
    visible: bool,
) -> tuple[Annotation, ...]:
    """Decode annotations attribute body.

    Args:
        reader: Reader over attribute info bytes
        pool: Constant pool of the class
        visible: Attribute was RuntimeVisibleAnnotations

    Returns:
        Tuple of Annotation objects in attribute order

    Raises:
        ClassFormatError: Malformed attribute
    """
    count = reader.u2()
    return tuple(_read_annotation(reader, pool, visible=visible, depth=0) for _ in range(count))


def _read_annotation(
    reader: ByteReader,
    pool: ConstantPool,
    *,
    visible: bool,
    depth: int,
) -> Annotation:
    """Decode one annotation structure (JVMS 4.7.16)."""
    type_name = pool.utf8(reader.u2())
    elements: dict[str, ElementValue] = {}
    for _ in range(reader.u2()):
        name = pool.utf8(reader.u2())
        elements[name] = _read_element_value(reader, pool, visible=visible, depth=depth)
    try:
        return Annotation(type_name=type_name, elements=elements, visible=visible)
    except ValueError as e:
        raise ClassFormatError(reader.entry, str(e)) from e


def _read_element_value(
    reader: ByteReader,
    pool: ConstantPool,
    *,
    visible: bool,
    depth: int,
) -> ElementValue:
    """Decode one element_value structure (JVMS 4.7.16.1)."""
    if depth > MAX_NESTING:
        raise ClassFormatError(
            reader.entry, f"element_value nesting deeper than {MAX_NESTING}"
        )
    tag = chr(reader.u1())

    match tag:
        case "B" | "I" | "S":
            return pool.integer(reader.u2())
        case "C":
            return chr(pool.integer(reader.u2()) & 0xFFFF)
        case "Z":
            return pool.integer(reader.u2()) != 0
        case "J":
            return pool.long(reader.u2())
        case "F":
            return pool.float32(reader.u2())
        case "D":
            return pool.double(reader.u2())
        case "s":
            return pool.utf8(reader.u2())
        case "e":
            type_name = pool.utf8(reader.u2())
            return EnumValue(type_name=type_name, const_name=pool.utf8(reader.u2()))
        case "c":
            return ClassValue(descriptor=pool.utf8(reader.u2()))
        case "@":
            return _read_annotation(reader, pool, visible=visible, depth=depth + 1)
        case "[":
            count = reader.u2()
            return tuple(
                _read_element_value(reader, pool, visible=visible, depth=depth + 1)
                for _ in range(count)
            )
        case _:
            raise ClassFormatError(reader.entry, f"unknown element_value tag {tag!r}")
