"""
Qt Media Engine

MediaPlaybackEngine implementation on top of Qt Multimedia's QMediaPlayer.
Decoding and rendering stay inside Qt; this adapter only forwards commands
and turns QMediaPlayer's millisecond signals into controller notifications.
"""

import os
from typing import Optional

from PyQt6.QtCore import QUrl

from reelsync.playback.controller import PlaybackController
from reelsync.utils.message import Log


class QtMediaEngine:
    """
    Media engine backed by QMediaPlayer + QAudioOutput.

    Args:
        player: Existing QMediaPlayer-like object; a new QMediaPlayer is
                created when omitted
        audio_output: Existing QAudioOutput-like object
    """

    def __init__(self, player=None, audio_output=None):
        if player is None:
            from PyQt6.QtMultimedia import QMediaPlayer, QAudioOutput
            player = QMediaPlayer()
            audio_output = QAudioOutput()
            player.setAudioOutput(audio_output)
            Log.info("QtMediaEngine: Qt Multimedia initialized")

        self._player = player
        self._audio_output = audio_output
        self._controller: Optional[PlaybackController] = None
        self._source: Optional[str] = None

    @property
    def source(self) -> Optional[str]:
        return self._source

    def attach(self, controller: PlaybackController):
        """
        Route player notifications into the controller and register as its engine.
        """
        self.detach()
        self._controller = controller
        self._player.positionChanged.connect(self._on_position_changed)
        self._player.durationChanged.connect(self._on_duration_changed)
        controller.set_engine(self)

    def detach(self):
        if self._controller is None:
            return
        self._player.positionChanged.disconnect(self._on_position_changed)
        self._player.durationChanged.disconnect(self._on_duration_changed)
        self._controller.set_engine(None)
        self._controller = None

    def _on_position_changed(self, position_ms: int):
        if self._controller is not None:
            self._controller.on_time_advance(position_ms / 1000.0)

    def _on_duration_changed(self, duration_ms: int):
        # QMediaPlayer reports 0 while no media length is available
        if self._controller is not None and duration_ms > 0:
            self._controller.on_duration_known(duration_ms / 1000.0)

    # MediaPlaybackEngine implementation

    def load(self, source: str) -> None:
        """Open a local file path or URL"""
        self._player.stop()
        if "://" in source:
            url = QUrl(source)
            self._source = source
        else:
            self._source = os.path.abspath(os.path.normpath(source))
            url = QUrl.fromLocalFile(self._source)
        self._player.setSource(url)
        Log.info(f"QtMediaEngine: Loaded {self._source}")

    def play(self) -> None:
        self._player.play()

    def pause(self) -> None:
        self._player.pause()

    def seek(self, seconds: float) -> None:
        self._player.setPosition(int(round(seconds * 1000)))

    def set_volume(self, volume: float) -> None:
        if self._audio_output is not None:
            self._audio_output.setVolume(volume)

    def set_rate(self, rate: float) -> None:
        self._player.setPlaybackRate(rate)
