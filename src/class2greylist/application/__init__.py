"""class2greylist application layer.

Status, output spec parsing, annotation visiting, greylist consumers
and the Class2Greylist service that ties them together.
"""

from class2greylist.application.consumers import (
    BaseGreylistConsumer,
    ConsoleGreylistConsumer,
    FileWritingGreylistConsumer,
)
from class2greylist.application.output_spec import read_greylist_map
from class2greylist.application.services import (
    ANNOTATION_TYPE,
    DEFAULT_SDK_VERSIONS,
    Class2Greylist,
)
from class2greylist.application.status import Status
from class2greylist.application.visitor import AnnotationVisitor

__all__ = [
    "ANNOTATION_TYPE",
    "DEFAULT_SDK_VERSIONS",
    "AnnotationVisitor",
    "BaseGreylistConsumer",
    "Class2Greylist",
    "ConsoleGreylistConsumer",
    "FileWritingGreylistConsumer",
    "Status",
    "read_greylist_map",
]
