"""Class2Greylist service: jar files -> greylist.

Orchestrates consumer selection, public API list loading,
archive reading and annotation visiting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from class2greylist.application.consumers import (
    ConsoleGreylistConsumer,
    FileWritingGreylistConsumer,
)
from class2greylist.application.output_spec import read_greylist_map
from class2greylist.application.visitor import AnnotationVisitor
from class2greylist.domain.exceptions import ArchiveError
from class2greylist.infrastructure.archive_reader import ArchiveReader
from class2greylist.infrastructure.public_api import load_public_api_list

if TYPE_CHECKING:
    from collections.abc import Set
    from pathlib import Path

    from class2greylist.application.status import Status
    from class2greylist.domain.model.configuration import Configuration
    from class2greylist.domain.ports.consumer import GreylistConsumerProtocol

ANNOTATION_TYPE = "Landroid/annotation/UnsupportedAppUsage;"

# Allowed maxTargetSdk values when no --write-greylist is given
DEFAULT_SDK_VERSIONS: frozenset[int | None] = frozenset({None, 26, 28})


class Class2Greylist:
    """Extracts members annotated with ANNOTATION_TYPE from jar files.

    Contracts:
        - Archives processed in order; a failing archive is reported
          and skipped, later archives still run
        - Consumer always closed, even if processing raises
        - Public API list read failure is fatal (PublicApiListError)
        - Outcome is in status.ok
    """

    def __init__(
        self,
        status: Status,
        config: Configuration,
        *,
        annotation_type: str = ANNOTATION_TYPE,
    ) -> None:
        """Initialize service.

        Args:
            status: Run status
            config: Run configuration
            annotation_type: Annotation descriptor to look for
        """
        self._status = status
        self._config = config
        self._annotation_type = annotation_type

    def run(self) -> None:
        """Process all archives.

        Raises:
            PublicApiListError: Public API list cannot be read
        """
        consumer, allowed_sdk_versions = self._build_consumer()
        try:
            public_apis = self._load_public_apis()
            visitor = AnnotationVisitor(
                self._annotation_type,
                public_apis,
                allowed_sdk_versions,
                consumer,
                self._status,
            )
            for archive in self._config.archives:
                self._process_archive(archive, visitor)
        finally:
            consumer.close()

    def _build_consumer(self) -> tuple[GreylistConsumerProtocol, Set[int | None]]:
        """Select consumer: files if --write-greylist given, else stdout."""
        if self._config.write_greylist is not None:
            output_files = read_greylist_map(self._config.write_greylist, self._status)
            consumer = FileWritingGreylistConsumer(self._status, output_files)
            return consumer, frozenset(output_files)
        # Legacy mode: single greylist on stdout
        return ConsoleGreylistConsumer(), DEFAULT_SDK_VERSIONS

    def _load_public_apis(self) -> frozenset[str]:
        if self._config.public_api_list is None:
            return frozenset()
        self._status.debug("Reading public API list %s", self._config.public_api_list)
        return load_public_api_list(self._config.public_api_list)

    def _process_archive(self, archive: Path, visitor: AnnotationVisitor) -> None:
        self._status.debug("Processing jar file %s", archive)
        try:
            with ArchiveReader(archive, self._status) as reader:
                for parsed_class in reader.classes():
                    visitor.visit(parsed_class)
        except ArchiveError as e:
            self._status.error(e)
