"""Greylist consumer protocol.

Output router for greylist entries. Selected once at startup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from class2greylist.domain.model.greylist_entry import GreylistEntry


class GreylistConsumerProtocol(Protocol):
    """Contract for greylist consumers.

    class2greylist provides ConsoleGreylistConsumer and
    FileWritingGreylistConsumer. Anything with accept() and close()
    can be passed to AnnotationVisitor.

    Example:
        class CollectingConsumer:
            def __init__(self) -> None:
                self.entries: list[GreylistEntry] = []

            def accept(self, entry: GreylistEntry) -> None:
                self.entries.append(entry)

            def close(self) -> None:
                pass
    """

    def accept(self, entry: GreylistEntry) -> None:
        """Route one greylist entry to its destination.

        Args:
            entry: Signature with its maxTargetSdk value
        """
        ...

    def close(self) -> None:
        """Flush and release all destinations. Called exactly once."""
        ...
