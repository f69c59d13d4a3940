"""Domain enumerations."""

from enum import Enum, IntFlag, auto


class MemberKind(Enum):
    """Kind of class member."""

    FIELD = auto()
    METHOD = auto()


class AccessFlag(IntFlag):
    """Class file access flags used by the tool.

    Some bits have different meanings for fields and methods
    (BRIDGE == VOLATILE, VARARGS == TRANSIENT).
    """

    PUBLIC = 0x0001
    PRIVATE = 0x0002
    PROTECTED = 0x0004
    STATIC = 0x0008
    FINAL = 0x0010
    BRIDGE = 0x0040  # methods only
    SYNTHETIC = 0x1000
