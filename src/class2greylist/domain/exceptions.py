"""Domain exceptions: all public errors of class2greylist.

All exceptions visible to users are defined in the domain.
Infrastructure/Application raise these, not their own public exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class Class2GreylistError(Exception):
    """Base for all class2greylist errors.

    Allows: except Class2GreylistError to catch all tool errors.
    """


class UsageError(Class2GreylistError):
    """Command line could not be parsed.

    Attributes:
        reason: Parser message.
    """

    def __init__(self, reason: str) -> None:
        """Initialize with parser message."""
        self.reason = reason
        super().__init__(reason)


class NoInputArchivesError(Class2GreylistError, ValueError):
    """No archive was given on the command line.

    Inherits ValueError for semantic correctness (invalid configuration).
    """

    def __init__(self) -> None:
        """Initialize with fixed message."""
        super().__init__("no jar files specified.")


class PublicApiListError(Class2GreylistError, OSError):
    """Public API list file could not be read.

    Fatal: the run cannot de-dupe bridge methods without it.

    Attributes:
        path: Public API list file.
        reason: Why reading failed.
    """

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize with file path and error reason."""
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read public API list {path}: {reason}")


class ArchiveError(Class2GreylistError):
    """Archive could not be opened or read.

    Abandons the archive, not the run. A malformed class entry
    surfaces as ArchiveError chained to the ClassFormatError.

    Attributes:
        path: Archive that failed.
        reason: Why reading failed.
    """

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize with archive path and error reason."""
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read {path}: {reason}")


class ClassFormatError(Class2GreylistError, ValueError):
    """Bytes are not a valid class file.

    Inherits ValueError for semantic correctness (malformed input).

    Attributes:
        entry: Name of the class file (archive entry name).
        reason: What is malformed.
    """

    def __init__(self, entry: str, reason: str) -> None:
        """Initialize with entry name and reason."""
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.entry = entry
        self.reason = reason
        super().__init__(f"{entry}: {reason}")
