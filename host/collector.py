"""
Consumer that records delivered implementor tables for the host page.
"""

import logging
from typing import Dict, List

from interfaces import IImplementorConsumer, ImplementorEntry, ImplementorTable

logger = logging.getLogger(__name__)


class ImplementorCollector(IImplementorConsumer):
    """Collects implementor tables in arrival order."""

    def __init__(self):
        """Initialize an empty collector."""
        self.received: List[ImplementorTable] = []
        self._groups: Dict[str, List[ImplementorEntry]] = {}

    def accept(self, table: ImplementorTable) -> None:
        self.received.append(table)
        for group, entries in table.items():
            # A later table replaces the group wholesale
            self._groups[group] = entries
        logger.info(f"Accepted implementor table with {len(table)} groups")

    def implementors(self, group: str) -> List[ImplementorEntry]:
        """
        Get the entries registered for a group key.

        Args:
            group: Crate or module name

        Returns:
            Entries from the latest table carrying the key, empty if unknown
        """
        return self._groups.get(group, [])

    def groups(self) -> List[str]:
        """Group keys in first-seen order."""
        return list(self._groups.keys())

    def merged(self) -> ImplementorTable:
        """Merged view of every group received so far."""
        return dict(self._groups)
