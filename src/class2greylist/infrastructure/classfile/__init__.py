"""Class file format reader."""

from class2greylist.infrastructure.classfile.constant_pool import ConstantPool, decode_modified_utf8
from class2greylist.infrastructure.classfile.parser import parse_class

__all__ = ["ConstantPool", "decode_modified_utf8", "parse_class"]
