"""
Editor Session

Facade that wires the playback, timeline and edit-parameter components
through a SyncBridge and turns UI input events into component calls.

All input handlers return CommandResult and never raise for rejected input.
Policy per field:
- volume, crop x/y/width/height: clamped into range (WARNING result when adjusted)
- rate, trim, timeline scrub, timeline action edits: rejected (ERROR result),
  last valid state kept
"""
import os
from typing import Optional, Union

from reelsync.application.api.result_types import CommandResult
from reelsync.application.settings.editor_settings import EditorSettings
from reelsync.domain.edit_parameters import CropField, CropInset, TrimRange
from reelsync.domain.errors import EditorError, InvalidParameter
from reelsync.domain.media import MediaAsset, MediaKind
from reelsync.editing.parameter_store import EditParameterStore
from reelsync.playback.controller import PlaybackController
from reelsync.playback.interfaces import MediaPlaybackEngine
from reelsync.playback.qt_engine import QtMediaEngine
from reelsync.sync.bridge import SyncBridge
from reelsync.timeline.model import TimelineModel
from reelsync.utils.message import Log

# Slider parameter name -> crop field
_CROP_SLIDERS = {
    "x": CropField.X,
    "y": CropField.Y,
    "width": CropField.WIDTH,
    "height": CropField.HEIGHT,
}


class EditorSession:
    """
    One editing session over a single media asset.

    Usage:
        session = EditorSession(settings, engine=QtMediaEngine())
        session.file_selected("video", "/path/clip.mp4")
        session.duration_resolved(120.0)   # normally sent by the engine
        session.timeline_dragged("video", 30.0)
        session.time_readout()             # "0:30 / 2:00"
    """

    def __init__(
        self,
        settings: Optional[EditorSettings] = None,
        engine: Optional[MediaPlaybackEngine] = None
    ):
        self.settings = settings or EditorSettings()
        result = self.settings.validate()
        if not result:
            raise InvalidParameter("settings", "; ".join(result.errors))
        Log.set_level(self.settings.log_level)

        self.controller = PlaybackController(
            allowed_rates=self.settings.allowed_rates,
            volume=self.settings.default_volume,
            rate=self.settings.default_rate,
        )
        self.timeline = TimelineModel(pixels_per_second=self.settings.pixels_per_second)
        self.store = EditParameterStore()
        self.bridge = SyncBridge(
            self.controller,
            self.timeline,
            self.store,
            echo_epsilon_seconds=self.settings.echo_epsilon_seconds,
        )

        if engine is not None:
            self.attach_engine(engine)

        Log.info("EditorSession: Initialized")

    def attach_engine(self, engine: Optional[MediaPlaybackEngine]):
        """Connect a playback engine; a QtMediaEngine also wires its notifications."""
        if isinstance(engine, QtMediaEngine):
            engine.attach(self.controller)
        else:
            self.controller.set_engine(engine)

    # =========================================================================
    # UI input events
    # =========================================================================

    def file_selected(self, kind: Union[str, MediaKind], handle) -> CommandResult[MediaAsset]:
        """A video or audio file was picked; it replaces the current asset."""
        try:
            kind = kind if isinstance(kind, MediaKind) else MediaKind(kind)
        except ValueError:
            return self._rejected("file_selected", InvalidParameter("media kind", kind))

        if not handle:
            return CommandResult.error_result("No file selected")

        source = os.fspath(handle)
        asset = self.controller.load_asset(source, kind)
        return CommandResult.success_result(f"Loaded {kind.value} {source}", data=asset)

    def slider_changed(self, parameter: str, value: float) -> CommandResult[float]:
        """
        A slider moved.

        Args:
            parameter: "volume", "trim_start", "trim_end", or a crop field
                       ("x", "y", "width", "height")
        """
        try:
            if parameter == "volume":
                return self._clamped(parameter, value, self.controller.set_volume(value))
            if parameter in _CROP_SLIDERS:
                stored = self.store.set_crop_field(_CROP_SLIDERS[parameter], value)
                return self._clamped(parameter, value, stored)
            if parameter == "trim_start":
                trim = self.store.set_trim(value, self.store.trim.end)
                return CommandResult.success_result("Trim start updated", data=trim.start)
            if parameter == "trim_end":
                trim = self.store.set_trim(self.store.trim.start, value)
                return CommandResult.success_result("Trim end updated", data=trim.end)
            raise InvalidParameter("slider", parameter, "unknown parameter")
        except EditorError as e:
            return self._rejected(f"slider '{parameter}'", e)

    def trim_range_changed(self, start: float, end: float) -> CommandResult[TrimRange]:
        """Both handles of the trim range slider."""
        try:
            trim = self.store.set_trim(start, end)
        except EditorError as e:
            return self._rejected("trim", e)
        return CommandResult.success_result("Trim updated", data=trim)

    def rate_selected(self, value: float) -> CommandResult[float]:
        try:
            self.controller.set_rate(value)
        except EditorError as e:
            return self._rejected("rate", e)
        rate = self.controller.rate
        return CommandResult.success_result(f"Rate set to {rate:g}x", data=rate)

    def timeline_dragged(self, track_id: str, seconds: float) -> CommandResult[float]:
        """The timeline cursor was dragged to a new time."""
        try:
            self.timeline.on_user_scrub(track_id, seconds)
        except EditorError as e:
            return self._rejected("scrub", e)
        return CommandResult.success_result(
            f"Seek to {self.controller.current_time_seconds:.3f}s",
            data=self.controller.current_time_seconds,
        )

    def timeline_action_resized(
        self,
        track_id: str,
        action_id: str,
        start: float,
        end: float
    ) -> CommandResult:
        try:
            self.timeline.resize_action(track_id, action_id, start, end)
        except EditorError as e:
            return self._rejected("action resize", e)
        return CommandResult.success_result(
            f"Resized '{action_id}' on '{track_id}'", data=self.timeline.get_track(track_id)
        )

    def play_pause_clicked(self) -> CommandResult[bool]:
        self.controller.toggle_playback()
        state = "Playing" if self.controller.is_playing else "Paused"
        return CommandResult.success_result(state, data=self.controller.is_playing)

    # =========================================================================
    # Engine notifications (for engines that do not attach themselves)
    # =========================================================================

    def time_advanced(self, seconds: float):
        self.controller.on_time_advance(seconds)

    def duration_resolved(self, seconds: float):
        self.controller.on_duration_known(seconds)

    # =========================================================================
    # Derived output
    # =========================================================================

    def time_readout(self) -> str:
        """Formatted "current / duration" readout."""
        return self.bridge.formatted_time()

    def crop_region(self) -> CropInset:
        return self.store.get_crop_render_region()

    def crop_clip_path(self) -> str:
        return self.store.get_crop_render_region().as_clip_path()

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def _clamped(parameter: str, requested, stored: float) -> CommandResult[float]:
        if float(requested) != stored:
            message = f"{parameter} {requested} clamped to {stored:g}"
            Log.debug(f"EditorSession: {message}")
            return CommandResult.warning_result(message, data=stored)
        return CommandResult.success_result(f"{parameter} set to {stored:g}", data=stored)

    @staticmethod
    def _rejected(what: str, error: EditorError) -> CommandResult:
        Log.warning(f"EditorSession: Rejected {what}: {error}")
        return CommandResult.error_result(str(error))
