"""Archive reader: jar file -> lazy stream of ParsedClass.

Scoped acquisition: use as context manager, archive closed on exit.
"""

from __future__ import annotations

import lzma
import zipfile
import zlib
from typing import TYPE_CHECKING, Self

from class2greylist.domain.exceptions import ArchiveError, ClassFormatError
from class2greylist.infrastructure.classfile import parse_class

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path
    from types import TracebackType

    from class2greylist.application.status import Status
    from class2greylist.domain.model.parsed_class import ParsedClass

CLASS_SUFFIX = ".class"

# Raised by ZipFile.read for corrupt, truncated, encrypted or unsupported entries
_ENTRY_READ_ERRORS = (
    OSError,
    EOFError,
    RuntimeError,  # also NotImplementedError
    zipfile.BadZipFile,
    zlib.error,
    lzma.LZMAError,
)


class ArchiveReader:
    """Reads classes from a jar (zip) file.

    Entries not ending in .class (resources, manifests, directories)
    are skipped.

    Usage:
        with ArchiveReader(path, status) as reader:
            for parsed in reader.classes():
                ...
    """

    def __init__(self, path: Path, status: Status) -> None:
        """Open archive.

        Args:
            path: Jar file path
            status: Run status, receives debug messages

        Raises:
            ArchiveError: File missing, unreadable, or not a zip file
        """
        self._path = path
        self._status = status
        try:
            self._zip = zipfile.ZipFile(path)
        except FileNotFoundError as e:
            raise ArchiveError(path, "file not found") from e
        except PermissionError as e:
            raise ArchiveError(path, "permission denied") from e
        except zipfile.BadZipFile as e:
            raise ArchiveError(path, f"not a valid jar file: {e}") from e
        except OSError as e:
            raise ArchiveError(path, str(e) or type(e).__name__) from e

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def class_entries(self) -> list[str]:
        """Names of .class entries, in archive order."""
        return [
            info.filename
            for info in self._zip.infolist()
            if not info.is_dir() and info.filename.endswith(CLASS_SUFFIX)
        ]

    def classes(self) -> Iterator[ParsedClass]:
        """Parse classes lazily, one entry at a time.

        Yields:
            ParsedClass per .class entry

        Raises:
            ArchiveError: Entry cannot be read or is not a valid class file
        """
        for entry in self.class_entries():
            self._status.debug("Reading %s from %s", entry, self._path)
            try:
                data = self._zip.read(entry)
            except _ENTRY_READ_ERRORS as e:
                raise ArchiveError(self._path, f"cannot read {entry}: {e}") from e
            try:
                parsed = parse_class(data, entry)
            except ClassFormatError as e:
                raise ArchiveError(self._path, str(e)) from e
            yield parsed

    def close(self) -> None:
        """Close the archive. Safe to call more than once."""
        self._zip.close()
