"""
Host page side of implementor registration.
"""

from .namespace import HostNamespace
from .collector import ImplementorCollector
from .page import HostPage

__all__ = ['HostNamespace', 'ImplementorCollector', 'HostPage']
