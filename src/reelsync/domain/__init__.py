"""
Domain types: media asset, playback state, edit parameters, timeline tracks
and the editor error hierarchy.
"""
from reelsync.domain.errors import (
    EditorError,
    InvalidParameter,
    OutOfRange,
    InvalidTrim,
    InvalidTimelineEdit,
    DurationUnknown,
    require_finite,
)
from reelsync.domain.media import MediaAsset, MediaKind
from reelsync.domain.playback_state import PlaybackState, ALLOWED_RATES
from reelsync.domain.edit_parameters import TrimRange, CropRect, CropField, CropInset
from reelsync.domain.timeline import TimelineAction, TimelineTrack, TrackKind

__all__ = [
    'EditorError',
    'InvalidParameter',
    'OutOfRange',
    'InvalidTrim',
    'InvalidTimelineEdit',
    'DurationUnknown',
    'require_finite',
    'MediaAsset',
    'MediaKind',
    'PlaybackState',
    'ALLOWED_RATES',
    'TrimRange',
    'CropRect',
    'CropField',
    'CropInset',
    'TimelineAction',
    'TimelineTrack',
    'TrackKind',
]
