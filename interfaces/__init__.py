"""
Abstract interfaces for the implementor bridge.
Provides contracts between fragments, pending sinks and the host page.
"""

from .iimplementor_consumer import IImplementorConsumer, ImplementorEntry, ImplementorTable
from .ipending_sink import IPendingSink

__all__ = [
    'IImplementorConsumer',
    'IPendingSink',
    'ImplementorEntry',
    'ImplementorTable'
]
