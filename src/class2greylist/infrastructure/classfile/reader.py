"""Big-endian cursor over class file bytes."""

from __future__ import annotations

import struct

from class2greylist.domain.exceptions import ClassFormatError

_U2 = struct.Struct(">H")
_U4 = struct.Struct(">I")


class ByteReader:
    """Sequential reader of u1/u2/u4 items.

    FAIL-FIRST: reading past the end raises ClassFormatError.
    """

    __slots__ = ("_data", "_offset", "entry")

    def __init__(self, data: bytes, entry: str) -> None:
        """Initialize reader.

        Args:
            data: Class file bytes (or attribute info bytes)
            entry: Class file name, used in error messages
        """
        self._data = memoryview(data)
        self._offset = 0
        self.entry = entry

    @property
    def remaining(self) -> int:
        """Bytes left to read."""
        return len(self._data) - self._offset

    def read(self, size: int) -> bytes:
        """Read size bytes."""
        end = self._offset + size
        if end > len(self._data):
            raise ClassFormatError(
                self.entry,
                f"truncated: need {size} bytes at offset {self._offset}, have {self.remaining}",
            )
        chunk = self._data[self._offset : end].tobytes()
        self._offset = end
        return chunk

    def skip(self, size: int) -> None:
        """Advance past size bytes."""
        self.read(size)

    def u1(self) -> int:
        return self.read(1)[0]

    def u2(self) -> int:
        return _U2.unpack(self.read(2))[0]

    def u4(self) -> int:
        return _U4.unpack(self.read(4))[0]
