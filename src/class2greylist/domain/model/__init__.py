"""Domain model: value objects and aggregates read from class archives."""

from class2greylist.domain.model.annotation import Annotation, ClassValue, ElementValue, EnumValue
from class2greylist.domain.model.configuration import Configuration
from class2greylist.domain.model.enums import AccessFlag, MemberKind
from class2greylist.domain.model.greylist_entry import GreylistEntry
from class2greylist.domain.model.member import Member
from class2greylist.domain.model.parsed_class import ParsedClass

__all__ = [
    # Enums
    "AccessFlag",
    "MemberKind",
    # Value objects
    "Annotation",
    "ClassValue",
    "ElementValue",
    "EnumValue",
    "GreylistEntry",
    # Entities
    "Member",
    "ParsedClass",
    # Configuration
    "Configuration",
]
