"""
ReelSync
========

Playback/timeline synchronization and edit-parameter model for a media
trimming and cropping editor.

Import Examples
---------------
    from reelsync.application.api import EditorSession
    from reelsync.playback import PlaybackController, QtMediaEngine
    from reelsync.timeline import TimelineModel
    from reelsync.editing import EditParameterStore
    from reelsync.sync import SyncBridge
    from reelsync.timing import format_time
"""

__version__ = "0.1.0"
