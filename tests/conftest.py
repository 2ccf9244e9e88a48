"""
Shared fixtures: a Qt core application for signal delivery and a media
engine stand-in that records the commands it receives.
"""
import pytest
from PyQt6.QtCore import QCoreApplication

from reelsync.editing.parameter_store import EditParameterStore
from reelsync.playback.controller import PlaybackController
from reelsync.sync.bridge import SyncBridge
from reelsync.timeline.model import TimelineModel


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """Ensure a QCoreApplication exists for PyQt signals."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


class RecordingEngine:
    """MediaPlaybackEngine stand-in that records every command."""

    def __init__(self):
        self.calls = []

    def load(self, source):
        self.calls.append(("load", source))

    def play(self):
        self.calls.append(("play",))

    def pause(self):
        self.calls.append(("pause",))

    def seek(self, seconds):
        self.calls.append(("seek", seconds))

    def set_volume(self, volume):
        self.calls.append(("set_volume", volume))

    def set_rate(self, rate):
        self.calls.append(("set_rate", rate))

    def commands(self, name):
        """Arguments of every call to a given command."""
        return [call[1:] for call in self.calls if call[0] == name]


@pytest.fixture
def engine():
    return RecordingEngine()


@pytest.fixture
def controller(engine):
    controller = PlaybackController()
    controller.set_engine(engine)
    engine.calls.clear()
    return controller


@pytest.fixture
def timeline():
    return TimelineModel()


@pytest.fixture
def store():
    return EditParameterStore()


@pytest.fixture
def bridge(controller, timeline, store):
    return SyncBridge(controller, timeline, store)
