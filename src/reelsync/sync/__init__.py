"""
Player/timeline synchronization.
"""

from .bridge import SyncBridge, SyncDirection

__all__ = [
    'SyncBridge',
    'SyncDirection',
]
