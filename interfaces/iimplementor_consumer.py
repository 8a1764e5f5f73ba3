"""
Abstract interface for host-side implementor consumers.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

# Group key (crate or module name) -> ordered, pre-rendered implementor entries.
# Entries are opaque: they are transported, never interpreted.
ImplementorEntry = Any
ImplementorTable = Dict[str, List[ImplementorEntry]]


class IImplementorConsumer(ABC):
    """Abstract interface for the host page's registration function."""

    @abstractmethod
    def accept(self, table: ImplementorTable) -> None:
        """
        Receive one implementor table from a fragment.

        Args:
            table: Mapping from group key to ordered implementor entries
        """
        pass
