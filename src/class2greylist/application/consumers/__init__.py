"""Greylist consumers: where greylist entries go.

ConsoleGreylistConsumer prints everything to stdout.
FileWritingGreylistConsumer partitions by maxTargetSdk into files.
"""

from class2greylist.application.consumers._base import BaseGreylistConsumer
from class2greylist.application.consumers.console import ConsoleGreylistConsumer
from class2greylist.application.consumers.file_writing import FileWritingGreylistConsumer

__all__ = [
    "BaseGreylistConsumer",
    "ConsoleGreylistConsumer",
    "FileWritingGreylistConsumer",
]
