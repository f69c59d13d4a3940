"""class2greylist - extract greylist entries from annotated members in jar files."""

__version__ = "0.1.0"

from class2greylist.application.services import ANNOTATION_TYPE, Class2Greylist
from class2greylist.application.status import Status
from class2greylist.domain.model.configuration import Configuration

__all__ = ["ANNOTATION_TYPE", "Class2Greylist", "Configuration", "Status", "__version__"]
