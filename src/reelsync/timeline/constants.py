"""
Timeline Constants
"""
from reelsync.domain.timeline import TrackKind

DEFAULT_PIXELS_PER_SECOND = 100  # Default scale level

# One track per stream kind, in display order
DEFAULT_TRACK_KINDS = (TrackKind.VIDEO, TrackKind.AUDIO)
