"""
Sync Bridge

Keeps the player clock and the timeline cursor in agreement.

Directions:
- player -> timeline: PlaybackController.position_changed moves the cursor
  through TimelineModel.set_cursor (representation only)
- timeline -> player: TimelineModel.seek_requested seeks the engine and
  optimistically moves the controller clock, so the readout does not lag
  the scrub while the engine catches up

Echo suppression:
- While one direction is propagating, a request for the other direction that
  is raised from inside that propagation (e.g. a widget listening to
  cursor_changed that reports the move back as a drag) is dropped.
- The last scrub target is remembered. The first later time advance within
  echo_epsilon_seconds of it is the engine confirming the seek: the marker is
  cleared and the value is applied idempotently. A newer scrub replaces the
  target; only the latest one is confirmed.
"""

from enum import Enum
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from reelsync.domain.media import MediaAsset
from reelsync.editing.parameter_store import EditParameterStore
from reelsync.playback.controller import PlaybackController
from reelsync.timeline.model import TimelineModel
from reelsync.timing.time_format import format_readout
from reelsync.utils.message import Log

DEFAULT_ECHO_EPSILON_SECONDS = 0.05


class SyncDirection(Enum):
    """Propagation currently in progress."""
    IDLE = "idle"
    PLAYER_TO_TIMELINE = "player_to_timeline"
    TIMELINE_TO_PLAYER = "timeline_to_player"


class SyncBridge(QObject):
    """
    Signals:
        seek_issued(seconds): A scrub was forwarded to the engine
        seek_confirmed(seconds): The engine reported a time matching the last scrub
    """

    seek_issued = pyqtSignal(float)
    seek_confirmed = pyqtSignal(float)

    def __init__(
        self,
        controller: PlaybackController,
        timeline: TimelineModel,
        store: EditParameterStore,
        echo_epsilon_seconds: float = DEFAULT_ECHO_EPSILON_SECONDS,
        parent=None
    ):
        super().__init__(parent)
        self._controller = controller
        self._timeline = timeline
        self._store = store
        self._echo_epsilon = float(echo_epsilon_seconds)

        self._direction = SyncDirection.IDLE
        self._last_scrub_target: Optional[float] = None

        controller.position_changed.connect(self._on_player_time)
        controller.duration_known.connect(self._on_duration_known)
        controller.asset_loaded.connect(self._on_asset_loaded)
        timeline.seek_requested.connect(self._on_seek_intent)

        Log.debug(f"SyncBridge: Connected (echo epsilon {self._echo_epsilon:.3f}s)")

    @property
    def direction(self) -> SyncDirection:
        return self._direction

    @property
    def last_scrub_target(self) -> Optional[float]:
        """Latest scrub target not yet confirmed by the engine"""
        return self._last_scrub_target

    @property
    def current_time_seconds(self) -> float:
        return self._controller.current_time_seconds

    @property
    def echo_epsilon_seconds(self) -> float:
        return self._echo_epsilon

    def formatted_time(self) -> str:
        """Transport readout, e.g. "0:30 / 2:00"."""
        return format_readout(self._controller.current_time_seconds, self._controller.duration)

    def disconnect_all(self):
        """Stop propagating between the components."""
        self._controller.position_changed.disconnect(self._on_player_time)
        self._controller.duration_known.disconnect(self._on_duration_known)
        self._controller.asset_loaded.disconnect(self._on_asset_loaded)
        self._timeline.seek_requested.disconnect(self._on_seek_intent)
        self._last_scrub_target = None
        Log.debug("SyncBridge: Disconnected")

    # =========================================================================
    # Player -> timeline
    # =========================================================================

    def _on_player_time(self, seconds: float):
        target = self._last_scrub_target
        if target is not None and abs(seconds - target) <= self._echo_epsilon:
            self._last_scrub_target = None
            Log.debug(f"SyncBridge: Engine confirmed seek to {target:.3f}s at {seconds:.3f}s")
            self.seek_confirmed.emit(seconds)

        previous = self._direction
        self._direction = SyncDirection.PLAYER_TO_TIMELINE
        try:
            self._timeline.set_cursor(seconds)
        finally:
            self._direction = previous

    # =========================================================================
    # Timeline -> player
    # =========================================================================

    def _on_seek_intent(self, track_id: str, seconds: float):
        if self._direction is not SyncDirection.IDLE:
            Log.debug(
                f"SyncBridge: Dropped echo scrub to {seconds:.3f}s on '{track_id}' "
                f"during {self._direction.value}"
            )
            return

        self._direction = SyncDirection.TIMELINE_TO_PLAYER
        try:
            self._last_scrub_target = seconds
            engine = self._controller.engine
            if engine is not None:
                engine.seek(seconds)
            self._controller.apply_seek_position(seconds)
            self._timeline.set_cursor(self._controller.current_time_seconds)
        finally:
            self._direction = SyncDirection.IDLE

        Log.debug(f"SyncBridge: Seek to {seconds:.3f}s from '{track_id}'")
        self.seek_issued.emit(seconds)

    # =========================================================================
    # Asset lifecycle
    # =========================================================================

    def _on_duration_known(self, seconds: float):
        self._store.reset_for_duration(seconds)
        self._timeline.build_tracks(seconds)

    def _on_asset_loaded(self, asset: MediaAsset):
        self._last_scrub_target = None
        self._store.clear()
        self._timeline.clear()
