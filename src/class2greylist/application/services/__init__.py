"""Application services."""

from class2greylist.application.services.class2greylist import (
    ANNOTATION_TYPE,
    DEFAULT_SDK_VERSIONS,
    Class2Greylist,
)

__all__ = ["ANNOTATION_TYPE", "DEFAULT_SDK_VERSIONS", "Class2Greylist"]
