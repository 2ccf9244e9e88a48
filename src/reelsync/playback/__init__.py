"""
Playback Components

Playback intent, the engine protocol and the Qt Multimedia engine adapter.
"""

from .interfaces import MediaPlaybackEngine
from .controller import PlaybackController
from .qt_engine import QtMediaEngine

__all__ = [
    'MediaPlaybackEngine',
    'PlaybackController',
    'QtMediaEngine',
]
