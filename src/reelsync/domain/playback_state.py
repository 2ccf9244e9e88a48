"""
Playback State

Playback intent owned by PlaybackController.
"""
from dataclasses import dataclass

# Rates offered by the speed selector
ALLOWED_RATES = (0.5, 1.0, 1.5, 2.0)

DEFAULT_VOLUME = 0.8
DEFAULT_RATE = 1.0


@dataclass
class PlaybackState:
    """
    Attributes:
        is_playing: Desired transport state
        volume: Output volume in [0, 1]
        rate: Playback speed, one of the allowed rates
        current_time_seconds: Clock position, never past a known duration
    """
    is_playing: bool = False
    volume: float = DEFAULT_VOLUME
    rate: float = DEFAULT_RATE
    current_time_seconds: float = 0.0
