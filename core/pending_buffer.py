"""
Pending buffer for implementor tables that arrive before the host is ready.
Each slot holds at most one table; later deliveries overwrite earlier ones.
"""

import logging
from typing import Dict, List, Optional

from interfaces import IPendingSink, ImplementorTable

logger = logging.getLogger(__name__)


class PendingSlot(IPendingSink):
    """Single-slot container for one deferred implementor table."""

    def __init__(self, name: str):
        """
        Initialize an empty slot.

        Args:
            name: Well-known name the host uses to find this slot
        """
        self.name = name
        self._table: Optional[ImplementorTable] = None

    def put(self, table: ImplementorTable) -> None:
        if self._table is not None:
            logger.debug(f"Overwriting pending table in slot {self.name}")
        self._table = table

    def peek(self) -> Optional[ImplementorTable]:
        return self._table

    def take(self) -> Optional[ImplementorTable]:
        table, self._table = self._table, None
        return table

    def is_empty(self) -> bool:
        return self._table is None

    def clear(self) -> None:
        """Drop the held table, if any."""
        self._table = None

    def __repr__(self) -> str:
        state = "empty" if self.is_empty() else f"{len(self._table)} groups"
        return f"PendingSlot({self.name!r}, {state})"


class PendingBuffer:
    """Page-wide collection of named pending slots, created on first use."""

    def __init__(self):
        """Initialize an empty buffer."""
        self._slots: Dict[str, PendingSlot] = {}

    def slot(self, name: str) -> PendingSlot:
        """
        Get the slot registered under a name, creating it if needed.

        Args:
            name: Slot name

        Returns:
            The same slot object for the same name
        """
        if name not in self._slots:
            self._slots[name] = PendingSlot(name)
            logger.debug(f"Created pending slot: {name}")
        return self._slots[name]

    def has_slot(self, name: str) -> bool:
        return name in self._slots

    def pending(self) -> List[str]:
        """
        List slots currently holding a table.

        Returns:
            Slot names in creation order
        """
        return [name for name, slot in self._slots.items() if not slot.is_empty()]

    def reset(self) -> None:
        """Drop every slot and its contents."""
        self._slots.clear()
