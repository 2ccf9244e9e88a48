"""
Timeline Model

Discrete track/action representation of the media range plus the visual
cursor position.

Two ways the cursor moves:
- on_user_scrub(): the user dragged the timeline; emits seek_requested so the
  player follows (timeline -> player)
- set_cursor(): the player clock advanced; representation only, never emits
  seek_requested (player -> timeline)

Error policy: scrubs and track edits that break the bounds are rejected with
an exception and the previous tracks/cursor are kept.
"""

from typing import Dict, List, Optional, Sequence

from PyQt6.QtCore import QObject, pyqtSignal

from reelsync.domain.errors import (
    DurationUnknown, InvalidParameter, InvalidTimelineEdit, OutOfRange, require_finite
)
from reelsync.domain.timeline import (
    TimelineAction, TimelineTrack, TrackKind, validate_actions
)
from reelsync.timeline.constants import DEFAULT_PIXELS_PER_SECOND, DEFAULT_TRACK_KINDS
from reelsync.utils.message import Log


class TimelineModel(QObject):
    """
    Signals:
        cursor_changed(seconds): Visual cursor moved
        seek_requested(track_id, seconds): User scrub asking the player to seek
        tracks_changed(): Track set rebuilt, cleared or edited
    """

    cursor_changed = pyqtSignal(float)
    seek_requested = pyqtSignal(str, float)
    tracks_changed = pyqtSignal()

    def __init__(
        self,
        track_kinds: Sequence[TrackKind] = DEFAULT_TRACK_KINDS,
        pixels_per_second: float = DEFAULT_PIXELS_PER_SECOND,
        parent=None
    ):
        super().__init__(parent)
        self._track_kinds = tuple(track_kinds)
        self._tracks: Dict[str, TimelineTrack] = {}
        self._duration: Optional[float] = None
        self._cursor = 0.0
        self._pixels_per_second = float(pixels_per_second)

    @property
    def cursor(self) -> float:
        """Cursor position in seconds"""
        return self._cursor

    @property
    def duration(self) -> Optional[float]:
        return self._duration

    @property
    def tracks(self) -> List[TimelineTrack]:
        """Tracks in display order"""
        return list(self._tracks.values())

    def get_track(self, track_id: str) -> TimelineTrack:
        track = self._tracks.get(track_id)
        if track is None:
            raise InvalidParameter("track_id", track_id, "no such track")
        return track

    # =========================================================================
    # Track set
    # =========================================================================

    def build_tracks(self, duration: float):
        """
        Replace the track set with one full-range action per track.

        Args:
            duration: Media length in seconds
        """
        duration = require_finite("duration", duration)
        if duration < 0:
            raise InvalidParameter("duration", duration, "must be >= 0")

        self._duration = duration
        self._tracks = {
            track.id: track
            for track in (TimelineTrack.full_range(kind, duration) for kind in self._track_kinds)
        }
        Log.debug(f"TimelineModel: Built {len(self._tracks)} tracks spanning [0, {duration:.3f}]")
        self.tracks_changed.emit()
        self.set_cursor(min(self._cursor, duration))

    def clear(self):
        """Drop all tracks; the duration becomes unknown again."""
        self._tracks = {}
        self._duration = None
        self.tracks_changed.emit()
        self.set_cursor(0.0)

    def on_track_edited(self, track_id: str, actions: Sequence[TimelineAction]):
        """
        Accept an edited action list for a track (drag-move or drag-resize).

        Raises:
            DurationUnknown: Before the duration is resolved
            InvalidParameter: Unknown track
            InvalidTimelineEdit: Overlapping or out-of-bounds actions
        """
        if self._duration is None:
            raise DurationUnknown("edit timeline track")
        track = self.get_track(track_id)

        ordered = validate_actions(track_id, actions, self._duration)
        self._tracks[track_id] = TimelineTrack(id=track.id, kind=track.kind, actions=ordered)

        Log.debug(f"TimelineModel: Track '{track_id}' now has {len(ordered)} action(s)")
        self.tracks_changed.emit()

    def resize_action(self, track_id: str, action_id: str, start: float, end: float):
        """Move the bounds of one action, validated like any other track edit."""
        if self._duration is None:
            raise DurationUnknown("resize timeline action")
        track = self.get_track(track_id)
        target = track.get_action(action_id)

        try:
            start = require_finite("start", start)
            end = require_finite("end", end)
        except InvalidParameter as e:
            raise InvalidTimelineEdit(track_id, str(e), action_id) from e

        resized = TimelineAction(id=target.id, start=start, end=end, effect_id=target.effect_id)
        self.on_track_edited(
            track_id,
            [resized if action.id == action_id else action for action in track.actions],
        )

    # =========================================================================
    # Cursor
    # =========================================================================

    def on_user_scrub(self, track_id: str, seconds: float):
        """
        User dragged the timeline cursor.

        Raises:
            DurationUnknown: Before the duration is resolved
            InvalidParameter: Unknown track
            OutOfRange: seconds outside [0, duration]
        """
        if self._duration is None:
            raise DurationUnknown("scrub timeline")
        self.get_track(track_id)

        seconds = require_finite("time", seconds)
        if not 0.0 <= seconds <= self._duration:
            raise OutOfRange(seconds, self._duration)

        Log.debug(f"TimelineModel: Scrub on '{track_id}' to {seconds:.3f}s")
        self.seek_requested.emit(track_id, seconds)

    def set_cursor(self, seconds: float):
        """
        Move the visual cursor. Representation only; setting the current value is a no-op.
        """
        if seconds == self._cursor:
            return
        self._cursor = seconds
        self.cursor_changed.emit(seconds)

    # =========================================================================
    # Time <-> position mapping
    # =========================================================================

    @property
    def pixels_per_second(self) -> float:
        return self._pixels_per_second

    def set_pixels_per_second(self, pps: float):
        """Update zoom level"""
        pps = require_finite("pixels_per_second", pps)
        if pps <= 0:
            raise InvalidParameter("pixels_per_second", pps, "must be > 0")
        self._pixels_per_second = pps

    def time_to_position(self, seconds: float) -> float:
        """Horizontal cursor offset in pixels for a time"""
        return seconds * self._pixels_per_second

    def position_to_time(self, x: float) -> float:
        """Time under a horizontal pixel offset, clamped to the media range"""
        seconds = max(0.0, x / self._pixels_per_second)
        if self._duration is not None:
            seconds = min(seconds, self._duration)
        return seconds
