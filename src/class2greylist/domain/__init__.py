"""class2greylist domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, pathlib, types, collections.abc
"""

from class2greylist.domain.exceptions import (
    ArchiveError,
    Class2GreylistError,
    ClassFormatError,
    NoInputArchivesError,
    PublicApiListError,
    UsageError,
)
from class2greylist.domain.model import (
    AccessFlag,
    Annotation,
    ClassValue,
    Configuration,
    EnumValue,
    GreylistEntry,
    Member,
    MemberKind,
    ParsedClass,
)
from class2greylist.domain.ports import GreylistConsumerProtocol

__all__ = [
    # Exceptions
    "Class2GreylistError",
    "UsageError",
    "NoInputArchivesError",
    "PublicApiListError",
    "ArchiveError",
    "ClassFormatError",
    # Enums
    "AccessFlag",
    "MemberKind",
    # Value objects
    "Annotation",
    "ClassValue",
    "EnumValue",
    "GreylistEntry",
    # Entities
    "Member",
    "ParsedClass",
    "Configuration",
    # Ports
    "GreylistConsumerProtocol",
]
