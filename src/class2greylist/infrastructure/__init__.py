"""Infrastructure: class file parsing, archive and file access."""

from class2greylist.infrastructure.archive_reader import ArchiveReader
from class2greylist.infrastructure.classfile import parse_class
from class2greylist.infrastructure.public_api import load_public_api_list

__all__ = ["ArchiveReader", "load_public_api_list", "parse_class"]
