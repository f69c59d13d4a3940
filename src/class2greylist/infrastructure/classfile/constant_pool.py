"""Class file constant pool.

Only the entry kinds referenced by members, annotations and
the SourceFile attribute are decoded; the rest are skipped by size.
"""

from __future__ import annotations

import struct
from enum import IntEnum
from typing import TYPE_CHECKING, TypeAlias

from class2greylist.domain.exceptions import ClassFormatError

if TYPE_CHECKING:
    from class2greylist.infrastructure.classfile.reader import ByteReader


class ConstantTag(IntEnum):
    """cp_info tag values (JVMS 4.4)."""

    UTF8 = 1
    INTEGER = 3
    FLOAT = 4
    LONG = 5
    DOUBLE = 6
    CLASS = 7
    STRING = 8
    FIELDREF = 9
    METHODREF = 10
    INTERFACE_METHODREF = 11
    NAME_AND_TYPE = 12
    METHOD_HANDLE = 15
    METHOD_TYPE = 16
    DYNAMIC = 17
    INVOKE_DYNAMIC = 18
    MODULE = 19
    PACKAGE = 20


# Size in bytes of entries that are skipped, not decoded
_SKIPPED_SIZES = {
    ConstantTag.STRING: 2,
    ConstantTag.FIELDREF: 4,
    ConstantTag.METHODREF: 4,
    ConstantTag.INTERFACE_METHODREF: 4,
    ConstantTag.NAME_AND_TYPE: 4,
    ConstantTag.METHOD_HANDLE: 3,
    ConstantTag.METHOD_TYPE: 2,
    ConstantTag.DYNAMIC: 4,
    ConstantTag.INVOKE_DYNAMIC: 4,
    ConstantTag.MODULE: 2,
    ConstantTag.PACKAGE: 2,
}

Constant: TypeAlias = str | int | float


def decode_modified_utf8(raw: bytes) -> str:
    """Decode JVM modified UTF-8.

    Differences from standard UTF-8: NUL is encoded as C0 80 and
    supplementary characters as two 3-byte surrogates.

    Raises:
        UnicodeDecodeError: Invalid byte sequence.
    """
    text = raw.replace(b"\xc0\x80", b"\x00").decode("utf-8", errors="surrogatepass")
    if any("\ud800" <= ch <= "\udfff" for ch in text):
        # Join surrogate pairs into supplementary characters
        utf16 = text.encode("utf-16-le", errors="surrogatepass")
        text = utf16.decode("utf-16-le", errors="surrogatepass")
    return text


class ConstantPool:
    """Decoded constant pool, indexed from 1.

    Stateless after construction.
    """

    def __init__(self, entry: str, constants: dict[int, tuple[ConstantTag, Constant]]) -> None:
        """Initialize pool.

        Args:
            entry: Class file name, used in error messages
            constants: Index -> (tag, decoded value). CLASS values are utf8 indexes.
        """
        self._entry = entry
        self._constants = constants

    def _get(self, index: int, tag: ConstantTag) -> Constant:
        try:
            actual_tag, value = self._constants[index]
        except KeyError:
            raise ClassFormatError(self._entry, f"invalid constant pool index {index}") from None
        if actual_tag is not tag:
            raise ClassFormatError(
                self._entry,
                f"constant pool index {index} is {actual_tag.name}, expected {tag.name}",
            )
        return value

    def utf8(self, index: int) -> str:
        """Get CONSTANT_Utf8 string."""
        return str(self._get(index, ConstantTag.UTF8))

    def class_name(self, index: int) -> str:
        """Get internal name referenced by CONSTANT_Class."""
        return self.utf8(int(self._get(index, ConstantTag.CLASS)))

    def integer(self, index: int) -> int:
        """Get CONSTANT_Integer value (also used for byte, char, short, boolean)."""
        return int(self._get(index, ConstantTag.INTEGER))

    def long(self, index: int) -> int:
        """Get CONSTANT_Long value."""
        return int(self._get(index, ConstantTag.LONG))

    def float32(self, index: int) -> float:
        """Get CONSTANT_Float value."""
        return float(self._get(index, ConstantTag.FLOAT))

    def double(self, index: int) -> float:
        """Get CONSTANT_Double value."""
        return float(self._get(index, ConstantTag.DOUBLE))


def read_constant_pool(reader: ByteReader) -> ConstantPool:
    """Read constant_pool_count and constant_pool[] from reader.

    Args:
        reader: Reader positioned at constant_pool_count

    Returns:
        Decoded ConstantPool

    Raises:
        ClassFormatError: Unknown tag, truncated data, invalid UTF-8
    """
    count = reader.u2()
    constants: dict[int, tuple[ConstantTag, Constant]] = {}

    index = 1
    while index < count:
        raw_tag = reader.u1()
        try:
            tag = ConstantTag(raw_tag)
        except ValueError:
            raise ClassFormatError(
                reader.entry, f"unknown constant pool tag {raw_tag} at index {index}"
            ) from None

        match tag:
            case ConstantTag.UTF8:
                raw = reader.read(reader.u2())
                try:
                    constants[index] = (tag, decode_modified_utf8(raw))
                except UnicodeDecodeError as e:
                    raise ClassFormatError(
                        reader.entry, f"invalid UTF-8 at constant pool index {index}: {e}"
                    ) from e
            case ConstantTag.INTEGER:
                constants[index] = (tag, struct.unpack(">i", reader.read(4))[0])
            case ConstantTag.FLOAT:
                constants[index] = (tag, struct.unpack(">f", reader.read(4))[0])
            case ConstantTag.LONG:
                constants[index] = (tag, struct.unpack(">q", reader.read(8))[0])
            case ConstantTag.DOUBLE:
                constants[index] = (tag, struct.unpack(">d", reader.read(8))[0])
            case ConstantTag.CLASS:
                constants[index] = (tag, reader.u2())
            case _:
                reader.skip(_SKIPPED_SIZES[tag])

        # 8-byte constants take two slots
        index += 2 if tag in (ConstantTag.LONG, ConstantTag.DOUBLE) else 1

    return ConstantPool(reader.entry, constants)
