"""
Python SDK for the implementor bridge API.
Provides programmatic access for fragment producers and host pages.
"""

import requests
from urllib.parse import quote
from typing import Any, Dict, List, Optional

from interfaces import ImplementorTable


class BridgeClientError(Exception):
    """Raised when the bridge API cannot be reached or rejects a request."""


class ImplementorBridgeClient:
    """Python SDK client for the implementor bridge API."""

    def __init__(self, base_url: str = "http://localhost:8000", timeout: float = 10.0):
        """
        Initialize the bridge client.

        Args:
            base_url: Base URL of the bridge API server
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()

    def _make_request(self, method: str, endpoint: str, **kwargs) -> Dict[str, Any]:
        """Make HTTP request to the API."""
        url = f"{self.base_url}{endpoint}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            raise BridgeClientError(f"API request failed: {e}") from e

    def deliver(self, table: ImplementorTable, slot: Optional[str] = None) -> Dict[str, Any]:
        """
        Deliver a table to the host page behind the API.

        Args:
            table: Implementor table
            slot: Pending slot to use if the host is not ready

        Returns:
            Where the table went and which slot was used
        """
        payload: Dict[str, Any] = {"table": table}
        if slot:
            payload["slot"] = slot
        return self._make_request("POST", "/deliver", json=payload)

    def pending(self) -> List[str]:
        """List slots holding an undrained table."""
        return self._make_request("GET", "/pending")["slots"]

    def pending_table(self, slot: str) -> ImplementorTable:
        """Get the table buffered in a slot."""
        return self._make_request("GET", f"/pending/{quote(slot, safe='/')}")["table"]

    def host_ready(self) -> int:
        """
        Mark the host ready.

        Returns:
            Number of pending tables drained into the host
        """
        return self._make_request("POST", "/host/ready")["drained"]

    def implementors(self) -> ImplementorTable:
        """Get every implementor group the host has received."""
        return self._make_request("GET", "/host/implementors")["groups"]

    def health(self) -> Dict[str, Any]:
        """Get API health status."""
        return self._make_request("GET", "/health")
