"""
Implementor registry bridge.
Hands a fragment's implementor table to the host page, or parks it in a
pending slot when the host has not installed its registration function yet.
"""

import logging
from typing import Optional

from config.settings import settings
from interfaces import IPendingSink, ImplementorTable
from host.namespace import HostNamespace

logger = logging.getLogger(__name__)


class ImplementorBridge:
    """Delivers implementor tables to the host consumer or a pending sink."""

    def __init__(self, namespace: HostNamespace, sink: IPendingSink,
                 function_name: Optional[str] = None):
        """
        Initialize the bridge.

        Args:
            namespace: Host namespace probed for the registration function
            sink: Slot that receives the table when no consumer is bound
            function_name: Well-known consumer name, defaults to settings
        """
        self.namespace = namespace
        self.sink = sink
        self.function_name = function_name or settings.REGISTER_FUNCTION_NAME

    def deliver(self, table: ImplementorTable) -> None:
        """
        Deliver a table exactly once.

        Calls the bound consumer synchronously if there is one, otherwise
        overwrites the pending sink. Never retries or polls.

        Args:
            table: Fully constructed implementor table
        """
        consumer = self.namespace.lookup(self.function_name)
        if consumer is not None:
            logger.debug(f"Host ready, handing {len(table)} groups to {self.function_name}")
            consumer.accept(table)
            return

        logger.debug(f"Host not ready, buffering {len(table)} groups")
        self.sink.put(table)


def deliver(table: ImplementorTable, namespace: HostNamespace, sink: IPendingSink) -> None:
    """Deliver a table through a one-off bridge using the default function name."""
    ImplementorBridge(namespace, sink).deliver(table)
