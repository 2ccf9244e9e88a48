"""
Playback Interfaces

Protocol for the media playback engine that decodes and renders a source.
The core only commands the engine through this protocol and learns about the
clock through PlaybackController.on_time_advance / on_duration_known.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class MediaPlaybackEngine(Protocol):
    """
    Protocol for media playback engines.

    Implement this interface to connect a player to PlaybackController.
    """

    def load(self, source: str) -> None:
        """Open a new source; the engine reports its duration once known."""
        ...

    def play(self) -> None:
        """Start or resume playback."""
        ...

    def pause(self) -> None:
        """Pause playback."""
        ...

    def seek(self, seconds: float) -> None:
        """
        Seek to a specific position.

        Args:
            seconds: Target position in seconds
        """
        ...

    def set_volume(self, volume: float) -> None:
        """Set output volume in [0, 1]."""
        ...

    def set_rate(self, rate: float) -> None:
        """Set playback speed multiplier."""
        ...
