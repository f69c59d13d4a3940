"""Tests for infrastructure/classfile/constant_pool.py and reader.py."""

import struct

import pytest

from class2greylist.domain.exceptions import ClassFormatError
from class2greylist.infrastructure.classfile.constant_pool import (
    decode_modified_utf8,
    read_constant_pool,
)
from class2greylist.infrastructure.classfile.reader import ByteReader


def utf8_entry(value: bytes) -> bytes:
    return b"\x01" + struct.pack(">H", len(value)) + value


def pool_bytes(*entries: bytes, count: int | None = None) -> bytes:
    """constant_pool_count followed by entries. count defaults to len + 1."""
    return struct.pack(">H", count if count is not None else len(entries) + 1) + b"".join(entries)


class TestDecodeModifiedUtf8:
    def test_ascii(self) -> None:
        assert decode_modified_utf8(b"Landroid/app/Activity;") == "Landroid/app/Activity;"

    def test_encoded_nul(self) -> None:
        assert decode_modified_utf8(b"a\xc0\x80b") == "a\x00b"

    def test_supplementary_character_as_surrogate_pair(self) -> None:
        # U+1F600 as two 3-byte surrogates: D83D DE00
        raw = b"\xed\xa0\xbd\xed\xb8\x80"
        assert decode_modified_utf8(raw) == "\U0001f600"

    def test_invalid_bytes_raise(self) -> None:
        with pytest.raises(UnicodeDecodeError):
            decode_modified_utf8(b"\xff")


class TestReadConstantPool:
    def test_utf8_and_class(self) -> None:
        data = pool_bytes(utf8_entry(b"a/B"), b"\x07" + struct.pack(">H", 1))

        pool = read_constant_pool(ByteReader(data, "a/B.class"))

        assert pool.utf8(1) == "a/B"
        assert pool.class_name(2) == "a/B"

    def test_numeric_constants(self) -> None:
        data = pool_bytes(
            b"\x03" + struct.pack(">i", -5),
            b"\x04" + struct.pack(">f", 1.5),
            count=3,
        )
        pool = read_constant_pool(ByteReader(data, "a/B.class"))
        assert pool.integer(1) == -5
        assert pool.float32(2) == 1.5

    def test_long_and_double_take_two_slots(self) -> None:
        data = struct.pack(">H", 6)
        data += b"\x05" + struct.pack(">q", 2**40)  # index 1-2
        data += b"\x06" + struct.pack(">d", 2.25)  # index 3-4
        data += utf8_entry(b"after")  # index 5

        pool = read_constant_pool(ByteReader(data, "a/B.class"))

        assert pool.long(1) == 2**40
        assert pool.double(3) == 2.25
        assert pool.utf8(5) == "after"

    def test_skipped_entries(self) -> None:
        data = pool_bytes(
            b"\x0a" + struct.pack(">HH", 3, 4),  # Methodref
            b"\x0f" + b"\x01" + struct.pack(">H", 1),  # MethodHandle
            utf8_entry(b"name"),
        )
        pool = read_constant_pool(ByteReader(data, "a/B.class"))
        assert pool.utf8(3) == "name"

    def test_unknown_tag(self) -> None:
        data = pool_bytes(b"\x02")
        with pytest.raises(ClassFormatError, match="unknown constant pool tag 2"):
            read_constant_pool(ByteReader(data, "a/B.class"))

    def test_invalid_index(self) -> None:
        pool = read_constant_pool(ByteReader(pool_bytes(utf8_entry(b"x")), "a/B.class"))
        with pytest.raises(ClassFormatError, match="invalid constant pool index 9"):
            pool.utf8(9)

    def test_wrong_tag(self) -> None:
        data = pool_bytes(b"\x03" + struct.pack(">i", 1))
        pool = read_constant_pool(ByteReader(data, "a/B.class"))
        with pytest.raises(ClassFormatError, match="is INTEGER, expected UTF8"):
            pool.utf8(1)

    def test_invalid_utf8(self) -> None:
        data = pool_bytes(utf8_entry(b"\xff\xfe"))
        with pytest.raises(ClassFormatError, match="invalid UTF-8"):
            read_constant_pool(ByteReader(data, "a/B.class"))


class TestByteReader:
    def test_reads_big_endian(self) -> None:
        reader = ByteReader(b"\x01\x00\x02\x00\x00\x00\x03", "x")
        assert reader.u1() == 1
        assert reader.u2() == 2
        assert reader.u4() == 3
        assert reader.remaining == 0

    def test_read_past_end_raises(self) -> None:
        reader = ByteReader(b"\x01", "x")
        with pytest.raises(ClassFormatError, match="truncated"):
            reader.u2()
