"""
Abstract interface for deferred delivery sinks.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .iimplementor_consumer import ImplementorTable


class IPendingSink(ABC):
    """Abstract single-slot holder for a table awaiting its consumer."""

    @abstractmethod
    def put(self, table: ImplementorTable) -> None:
        """
        Store a table, replacing whatever was held before.

        Args:
            table: Table to hold until the host drains it
        """
        pass

    @abstractmethod
    def peek(self) -> Optional[ImplementorTable]:
        """Return the held table without clearing it."""
        pass

    @abstractmethod
    def take(self) -> Optional[ImplementorTable]:
        """
        Return the held table and clear the slot.

        Returns:
            The held table, or None if the slot is empty
        """
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        """Check whether the slot currently holds a table."""
        pass
