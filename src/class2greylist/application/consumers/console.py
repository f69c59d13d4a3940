"""Console consumer: all signatures to stdout.

Used when no --write-greylist option is given.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from class2greylist.application.consumers._base import BaseGreylistConsumer

if TYPE_CHECKING:
    from class2greylist.domain.model.greylist_entry import GreylistEntry


class ConsoleGreylistConsumer(BaseGreylistConsumer):
    """Prints each signature on its own line, ignoring maxTargetSdk.

    Plain print(), no markup: output is consumed by the build.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize consumer.

        Args:
            output: Output stream (default: sys.stdout at accept time)
        """
        self._output = output

    @property
    def _stream(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def accept(self, entry: GreylistEntry) -> None:
        print(entry.signature, file=self._stream)

    def close(self) -> None:
        """Flush the stream. Never closes stdout."""
        self._stream.flush()
