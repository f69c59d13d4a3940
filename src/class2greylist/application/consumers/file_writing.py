"""File-writing consumer: one greylist file per maxTargetSdk value."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from class2greylist.application.consumers._base import BaseGreylistConsumer

if TYPE_CHECKING:
    from collections.abc import Mapping

    from class2greylist.application.status import Status
    from class2greylist.domain.model.greylist_entry import GreylistEntry


class FileWritingGreylistConsumer(BaseGreylistConsumer):
    """Writes signatures to the file configured for their maxTargetSdk.

    Files are opened lazily on first write and truncated when opened:
    each run produces fresh greylists. A file that receives no entry
    is never opened, so it is not created or truncated.
    Keys mapped to the same path share one handle.

    Contracts:
        - maxTargetSdk without a configured file: error, entry dropped
        - open/write failure: error, entry dropped; failed path not retried
        - close(): every opened handle closed exactly once
    """

    def __init__(self, status: Status, sdk_to_filename: Mapping[int | None, str]) -> None:
        """Initialize consumer. Opens nothing.

        Args:
            status: Run status
            sdk_to_filename: maxTargetSdk (None = not set) -> output file
        """
        self._status = status
        self._sdk_to_filename = dict(sdk_to_filename)
        self._handles: dict[str, TextIO] = {}
        self._failed: set[str] = set()
        self._closed = False

    @property
    def opened_files(self) -> tuple[str, ...]:
        """Files opened so far, in open order."""
        return tuple(self._handles)

    def accept(self, entry: GreylistEntry) -> None:
        if self._closed:
            raise RuntimeError("consumer is closed")

        filename = self._sdk_to_filename.get(entry.max_target_sdk)
        if filename is None:
            self._status.error(
                "No output file for signature %s with maxTargetSdk of %s",
                entry.signature,
                entry.max_target_sdk,
            )
            return

        handle = self._open(filename)
        if handle is None:
            return
        try:
            handle.write(entry.signature + "\n")
        except OSError as e:
            self._status.error("Cannot write to %s: %s", filename, e)

    def close(self) -> None:
        """Close all opened files, reporting failures and continuing."""
        if self._closed:
            return
        self._closed = True

        for filename, handle in self._handles.items():
            try:
                handle.close()
            except OSError as e:
                self._status.error("Cannot close %s: %s", filename, e)

    def _open(self, filename: str) -> TextIO | None:
        """Get handle for filename, opening it on first use. None if opening failed."""
        handle = self._handles.get(filename)
        if handle is not None:
            return handle
        if filename in self._failed:
            return None

        self._status.debug("Opening greylist file %s", filename)
        try:
            handle = Path(filename).open("w", encoding="utf-8", newline="\n")
        except OSError as e:
            self._failed.add(filename)
            self._status.error("Cannot open %s for writing: %s", filename, e)
            return None

        self._handles[filename] = handle
        return handle
