"""
Playback Controller

Owns playback intent (transport, volume, rate, clock) and the loaded media
asset, and issues commands to the media playback engine.

Error policy:
- set_volume clamps into [0, 1]
- set_rate rejects anything outside the allowed rates with InvalidParameter
- on_time_advance clamps the clock into [0, duration]
"""

from dataclasses import replace
from typing import Optional, Sequence

from PyQt6.QtCore import QObject, pyqtSignal

from reelsync.domain.errors import InvalidParameter, require_finite
from reelsync.domain.media import MediaAsset, MediaKind
from reelsync.domain.playback_state import (
    ALLOWED_RATES, DEFAULT_RATE, DEFAULT_VOLUME, PlaybackState
)
from reelsync.playback.interfaces import MediaPlaybackEngine
from reelsync.utils.message import Log


class PlaybackController(QObject):
    """
    Coordinates playback intent with the media engine.

    Signals:
        position_changed(seconds): Clock advanced from an engine notification
        duration_known(seconds): Engine resolved the asset length
        asset_loaded(asset): A new MediaAsset replaced the previous one
        playback_started(): Transport switched to playing
        playback_paused(): Transport switched to paused
        volume_changed(volume): Stored volume changed
        rate_changed(rate): Stored rate changed
    """

    position_changed = pyqtSignal(float)
    duration_known = pyqtSignal(float)
    asset_loaded = pyqtSignal(object)
    playback_started = pyqtSignal()
    playback_paused = pyqtSignal()
    volume_changed = pyqtSignal(float)
    rate_changed = pyqtSignal(float)

    def __init__(
        self,
        allowed_rates: Sequence[float] = ALLOWED_RATES,
        volume: float = DEFAULT_VOLUME,
        rate: float = DEFAULT_RATE,
        parent=None
    ):
        super().__init__(parent)

        self._allowed_rates = tuple(float(r) for r in allowed_rates)
        if float(rate) not in self._allowed_rates:
            raise InvalidParameter("rate", rate, f"allowed: {self._allowed_rates}")

        self._engine: Optional[MediaPlaybackEngine] = None
        self._asset: Optional[MediaAsset] = None
        self._state = PlaybackState(
            volume=_clamp(require_finite("volume", volume), 0.0, 1.0),
            rate=float(rate),
        )

    @property
    def state(self) -> PlaybackState:
        """Snapshot of the playback state"""
        return replace(self._state)

    @property
    def is_playing(self) -> bool:
        return self._state.is_playing

    @property
    def volume(self) -> float:
        return self._state.volume

    @property
    def rate(self) -> float:
        return self._state.rate

    @property
    def current_time_seconds(self) -> float:
        return self._state.current_time_seconds

    @property
    def allowed_rates(self) -> tuple:
        return self._allowed_rates

    @property
    def engine(self) -> Optional[MediaPlaybackEngine]:
        return self._engine

    @property
    def asset(self) -> Optional[MediaAsset]:
        return self._asset

    @property
    def duration(self) -> Optional[float]:
        """Asset length in seconds, None until the engine resolves it"""
        if self._asset is None:
            return None
        return self._asset.duration_seconds

    def set_engine(self, engine: Optional[MediaPlaybackEngine]):
        """
        Attach the playback engine, or None to disconnect.

        The current volume, rate, source and transport state are pushed to a
        newly attached engine. Disconnecting while playing pauses playback.
        """
        if self._engine is not None and self._state.is_playing:
            self._engine.pause()

        self._engine = engine

        if engine is not None:
            engine.set_volume(self._state.volume)
            engine.set_rate(self._state.rate)
            if self._asset is not None:
                engine.load(self._asset.source)
            if self._state.is_playing:
                engine.play()
            Log.info("PlaybackController: Engine connected")
        else:
            if self._state.is_playing:
                self._state.is_playing = False
                self.playback_paused.emit()
            Log.info("PlaybackController: Engine disconnected")

    # =========================================================================
    # Transport
    # =========================================================================

    def play(self):
        """Start or resume playback"""
        if self._state.is_playing:
            return

        self._state.is_playing = True
        if self._engine:
            self._engine.play()

        self.playback_started.emit()
        Log.debug(f"PlaybackController: Play from {self._state.current_time_seconds:.3f}s")

    def pause(self):
        """Pause playback"""
        if not self._state.is_playing:
            return

        self._state.is_playing = False
        if self._engine:
            self._engine.pause()

        self.playback_paused.emit()
        Log.debug(f"PlaybackController: Pause at {self._state.current_time_seconds:.3f}s")

    def toggle_playback(self):
        """Toggle between play and pause"""
        if self._state.is_playing:
            self.pause()
        else:
            self.play()

    def set_volume(self, volume: float) -> float:
        """
        Set output volume, clamped into [0, 1].

        Returns:
            The stored volume

        Raises:
            InvalidParameter: If volume is not a finite number
        """
        volume = _clamp(require_finite("volume", volume), 0.0, 1.0)
        self._state.volume = volume
        if self._engine:
            self._engine.set_volume(volume)

        self.volume_changed.emit(volume)
        return volume

    def set_rate(self, rate: float):
        """
        Set playback speed.

        Numeric strings are coerced like every other numeric input.

        Raises:
            InvalidParameter: If rate is not one of the allowed rates
        """
        value = require_finite("rate", rate)
        if value not in self._allowed_rates:
            raise InvalidParameter("rate", rate, f"allowed: {self._allowed_rates}")

        rate = value
        self._state.rate = rate
        if self._engine:
            self._engine.set_rate(rate)

        self.rate_changed.emit(rate)
        Log.debug(f"PlaybackController: Rate set to {rate}x")

    # =========================================================================
    # Media asset
    # =========================================================================

    def load_asset(self, source: str, kind: MediaKind = MediaKind.VIDEO) -> MediaAsset:
        """
        Replace the current asset. Duration stays unknown until the engine reports it.

        Loading stops the engine, so a playing transport switches to paused.
        """
        asset = MediaAsset(source=source, kind=kind)
        self._asset = asset
        self._state.current_time_seconds = 0.0

        if self._engine:
            self._engine.load(source)

        if self._state.is_playing:
            self._state.is_playing = False
            self.playback_paused.emit()

        Log.info(f"PlaybackController: Loaded {kind.value} source {source}")
        self.asset_loaded.emit(asset)
        return asset

    # =========================================================================
    # Engine notifications
    # =========================================================================

    def on_time_advance(self, seconds: float):
        """
        Engine clock advanced (natural playback or after a seek).

        Args:
            seconds: Played position reported by the engine
        """
        seconds = self._clamp_to_media(require_finite("time", seconds))
        self._state.current_time_seconds = seconds
        self.position_changed.emit(seconds)

    def on_duration_known(self, seconds: float):
        """
        Engine resolved the asset length.

        A report that differs from an already-known duration replaces the asset
        with a new one carrying the new duration.

        Raises:
            InvalidParameter: If seconds is negative or not finite
        """
        seconds = require_finite("duration", seconds)
        if seconds < 0:
            raise InvalidParameter("duration", seconds, "must be >= 0")

        if self._asset is None:
            # Engine reported before any load went through the controller
            self._asset = MediaAsset(source="")
        elif self._asset.duration_seconds == seconds:
            return
        elif self._asset.duration_known:
            Log.warning(
                f"PlaybackController: Duration changed from "
                f"{self._asset.duration_seconds:.3f}s to {seconds:.3f}s, replacing asset"
            )

        self._asset = self._asset.with_duration(seconds)
        self._state.current_time_seconds = min(self._state.current_time_seconds, seconds)

        Log.info(f"PlaybackController: Duration resolved, duration={seconds:.2f}s")
        self.duration_known.emit(seconds)

    def apply_seek_position(self, seconds: float):
        """
        Optimistically move the clock to a seek target before the engine confirms it.

        Does not emit position_changed.
        """
        self._state.current_time_seconds = self._clamp_to_media(require_finite("time", seconds))

    def _clamp_to_media(self, seconds: float) -> float:
        duration = self.duration
        if duration is not None:
            return _clamp(seconds, 0.0, duration)
        return max(0.0, seconds)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))
