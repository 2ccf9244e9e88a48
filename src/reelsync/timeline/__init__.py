"""
Timeline Components

Track/action model and cursor for the timeline editor.
"""

from .model import TimelineModel

__all__ = [
    'TimelineModel',
]
