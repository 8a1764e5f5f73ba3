"""
Host page lifecycle: installing the registration function and draining
tables that fragments parked before the page was ready.
"""

import logging
from typing import Optional

from config.settings import settings
from core.pending_buffer import PendingBuffer
from interfaces import IImplementorConsumer
from .namespace import HostNamespace

logger = logging.getLogger(__name__)


class HostPage:
    """Host side of deferred implementor registration."""

    def __init__(self, namespace: HostNamespace, buffer: PendingBuffer,
                 function_name: Optional[str] = None):
        """
        Initialize the host page.

        Args:
            namespace: Namespace the registration function is bound in
            buffer: Pending buffer fragments write to while the host is absent
            function_name: Well-known consumer name, defaults to settings
        """
        self.namespace = namespace
        self.buffer = buffer
        self.function_name = function_name or settings.REGISTER_FUNCTION_NAME

    @property
    def is_ready(self) -> bool:
        return self.namespace.is_bound(self.function_name)

    def ready(self, consumer: IImplementorConsumer) -> int:
        """
        Install the registration function and drain pending slots into it.

        Args:
            consumer: Consumer to bind under the registration name

        Returns:
            Number of tables drained from pending slots

        Raises:
            Exception: Whatever the consumer raises; the failing table stays
                pending and the consumer is uninstalled
        """
        self.namespace.bind(self.function_name, consumer)

        drained = 0
        for name in self.buffer.pending():
            slot = self.buffer.slot(name)
            table = slot.peek()
            if table is None:
                continue
            try:
                consumer.accept(table)
            except Exception:
                # Slot keeps its table so a later ready() can deliver it
                logger.error(f"Consumer rejected pending slot {name}, uninstalling", exc_info=True)
                self.namespace.unbind(self.function_name)
                raise
            slot.clear()
            drained += 1
            logger.debug(f"Drained pending slot: {name}")

        logger.info(f"Host ready, drained {drained} pending tables")
        return drained

    def teardown(self) -> None:
        """Uninstall the registration function, leaving pending slots alone."""
        self.namespace.unbind(self.function_name)
