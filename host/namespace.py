"""
Host namespace for capabilities the host page installs under well-known names.
"""

import logging
from typing import Dict, Optional

from interfaces import IImplementorConsumer

logger = logging.getLogger(__name__)


class HostNamespace:
    """Registry of host capabilities, looked up by name instead of probing globals."""

    def __init__(self):
        """Initialize an empty namespace."""
        self._bindings: Dict[str, IImplementorConsumer] = {}

    def bind(self, name: str, consumer: IImplementorConsumer) -> None:
        """
        Bind a consumer under a well-known name.

        Args:
            name: Well-known capability name
            consumer: Consumer instance

        Raises:
            TypeError: If consumer does not implement IImplementorConsumer
        """
        if not isinstance(consumer, IImplementorConsumer):
            raise TypeError(f"Cannot bind {type(consumer).__name__} as {name}: not an implementor consumer")
        self._bindings[name] = consumer
        logger.info(f"Bound host capability: {name}")

    def unbind(self, name: str) -> None:
        """
        Remove a binding. Unknown names are ignored.

        Args:
            name: Capability name to remove
        """
        if self._bindings.pop(name, None) is not None:
            logger.info(f"Unbound host capability: {name}")

    def lookup(self, name: str) -> Optional[IImplementorConsumer]:
        """
        Get the consumer bound under a name.

        Args:
            name: Capability name

        Returns:
            Bound consumer or None
        """
        return self._bindings.get(name)

    def is_bound(self, name: str) -> bool:
        return name in self._bindings

    def clear(self) -> None:
        """Clear all bindings."""
        self._bindings.clear()
