"""Base greylist consumer.

Provides default implementation of GreylistConsumerProtocol.
Concrete consumers inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from types import TracebackType

    from class2greylist.domain.model.greylist_entry import GreylistEntry


class BaseGreylistConsumer(ABC):
    """Base class for consumers implementing GreylistConsumerProtocol.

    Concrete consumers implement accept() and close().
    Usable as context manager: close() called on exit.
    """

    @abstractmethod
    def accept(self, entry: GreylistEntry) -> None:
        """Route one greylist entry to its destination.

        Args:
            entry: Signature with its maxTargetSdk value
        """

    @abstractmethod
    def close(self) -> None:
        """Flush and release all destinations."""

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
