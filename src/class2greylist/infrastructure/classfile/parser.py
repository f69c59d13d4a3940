"""Class file parser: bytes -> ParsedClass.

Reads the subset of the class file format (JVMS chapter 4) needed to
find annotated members: class name, SourceFile, fields, methods,
access flags and annotations. Code and all other attributes are skipped.
FAIL-FIRST: ClassFormatError on malformed input.
"""

from __future__ import annotations

from class2greylist.domain.exceptions import ClassFormatError
from class2greylist.domain.model.enums import MemberKind
from class2greylist.domain.model.member import Member
from class2greylist.domain.model.parsed_class import ParsedClass
from class2greylist.infrastructure.classfile.annotations import (
    INVISIBLE_ANNOTATIONS,
    VISIBLE_ANNOTATIONS,
    read_annotations,
)
from class2greylist.infrastructure.classfile.constant_pool import ConstantPool, read_constant_pool
from class2greylist.infrastructure.classfile.reader import ByteReader

CLASS_MAGIC = 0xCAFEBABE
SOURCE_FILE = "SourceFile"


def parse_class(data: bytes, entry: str = "<class>") -> ParsedClass:
    """Parse class file bytes.

    Args:
        data: Complete .class file contents
        entry: Name used in error messages (archive entry name)

    Returns:
        ParsedClass with fields and methods in class file order

    Raises:
        ClassFormatError: Bad magic, truncated data, invalid constant pool reference
    """
    reader = ByteReader(data, entry)

    magic = reader.u4()
    if magic != CLASS_MAGIC:
        raise ClassFormatError(entry, f"bad magic 0x{magic:08X}")
    reader.skip(4)  # minor_version, major_version

    pool = read_constant_pool(reader)

    access_flags = reader.u2()
    name = pool.class_name(reader.u2())
    reader.skip(2)  # super_class
    reader.skip(2 * reader.u2())  # interfaces

    fields = _read_members(reader, pool, MemberKind.FIELD)
    methods = _read_members(reader, pool, MemberKind.METHOD)

    source_file: str | None = None
    for attr_name, info in _read_attributes(reader, pool):
        if attr_name == SOURCE_FILE:
            source_file = pool.utf8(ByteReader(info, entry).u2())

    if reader.remaining:
        raise ClassFormatError(entry, f"{reader.remaining} trailing bytes")

    try:
        return ParsedClass(
            name=name,
            source_file=source_file,
            access_flags=access_flags,
            members=fields + methods,
        )
    except ValueError as e:
        raise ClassFormatError(entry, str(e)) from e


def _read_members(reader: ByteReader, pool: ConstantPool, kind: MemberKind) -> tuple[Member, ...]:
    """Read fields_count/fields[] or methods_count/methods[]."""
    members: list[Member] = []

    for _ in range(reader.u2()):
        access_flags = reader.u2()
        name = pool.utf8(reader.u2())
        descriptor = pool.utf8(reader.u2())

        annotations = []
        for attr_name, info in _read_attributes(reader, pool):
            if attr_name in (VISIBLE_ANNOTATIONS, INVISIBLE_ANNOTATIONS):
                annotations.extend(
                    read_annotations(
                        ByteReader(info, reader.entry),
                        pool,
                        visible=attr_name == VISIBLE_ANNOTATIONS,
                    )
                )

        try:
            member = Member(
                kind=kind,
                name=name,
                descriptor=descriptor,
                access_flags=access_flags,
                annotations=tuple(annotations),
            )
        except ValueError as e:
            raise ClassFormatError(reader.entry, str(e)) from e
        members.append(member)

    return tuple(members)


def _read_attributes(reader: ByteReader, pool: ConstantPool) -> list[tuple[str, bytes]]:
    """Read attributes_count/attributes[] as (name, info) pairs."""
    attributes: list[tuple[str, bytes]] = []

    for _ in range(reader.u2()):
        name = pool.utf8(reader.u2())
        info = reader.read(reader.u4())
        attributes.append((name, info))

    return attributes
