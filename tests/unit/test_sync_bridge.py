"""
Tests for SyncBridge.

Validates both propagation directions, the optimistic clock update on scrub,
echo suppression of re-entrant scrubs and seek confirmation by later engine
notifications.
"""
import pytest

from reelsync.domain.edit_parameters import TrimRange
from reelsync.domain.errors import OutOfRange
from reelsync.sync.bridge import SyncBridge, SyncDirection


@pytest.fixture
def loaded(controller, bridge, engine):
    """Bridge over a 120s asset."""
    controller.load_asset("clip.mp4")
    controller.on_duration_known(120.0)
    engine.calls.clear()
    return bridge


# =============================================================================
# Asset lifecycle
# =============================================================================

class TestDurationPropagation:

    @pytest.mark.parametrize("duration", [0.0, 1.0, 120.0, 3661.0])
    def test_duration_resets_trim_and_builds_tracks(self, controller, timeline, store, bridge, duration):
        controller.on_duration_known(duration)

        assert store.trim == TrimRange(0.0, duration)
        assert len(timeline.tracks) == 2
        for track in timeline.tracks:
            assert len(track.actions) == 1
            assert (track.actions[0].start, track.actions[0].end) == (0.0, duration)

    def test_new_asset_clears_timeline_and_trim(self, controller, timeline, store, loaded):
        store.set_trim(10.0, 20.0)
        timeline.on_user_scrub("video", 40.0)

        controller.load_asset("other.mp4")

        assert timeline.tracks == []
        assert timeline.cursor == 0.0
        assert store.trim == TrimRange()
        assert loaded.last_scrub_target is None

    def test_redundant_duration_keeps_user_trim(self, controller, store, loaded):
        store.set_trim(10.0, 20.0)
        controller.on_duration_known(120.0)
        assert store.trim == TrimRange(10.0, 20.0)


# =============================================================================
# Player -> timeline
# =============================================================================

class TestPlayerToTimeline:

    def test_cursor_tracks_non_decreasing_advances(self, controller, timeline, engine, loaded):
        for t in [0.0, 0.016, 0.5, 0.5, 1.25, 60.0, 119.99, 120.0]:
            controller.on_time_advance(t)
            assert timeline.cursor == t
            assert loaded.current_time_seconds == t

        assert engine.commands("seek") == []

    def test_discontinuity_accepted(self, controller, timeline, loaded):
        controller.on_time_advance(80.0)
        controller.on_time_advance(12.0)
        assert timeline.cursor == 12.0

    def test_advance_past_duration_clamped(self, controller, timeline, loaded):
        controller.on_time_advance(130.0)
        assert timeline.cursor == 120.0


# =============================================================================
# Timeline -> player
# =============================================================================

class TestTimelineToPlayer:

    def test_scrub_seeks_engine_and_updates_clock_optimistically(self, controller, timeline, engine, loaded):
        timeline.on_user_scrub("video", 30.0)

        assert engine.commands("seek") == [(30.0,)]
        assert controller.current_time_seconds == 30.0
        assert timeline.cursor == 30.0
        assert loaded.last_scrub_target == 30.0
        assert loaded.direction is SyncDirection.IDLE

    def test_scenario_scrub_then_engine_confirms(self, controller, timeline, engine, loaded):
        """120s asset, scrub to 30s, engine later reports 30.02s."""
        confirmed = []
        loaded.seek_confirmed.connect(confirmed.append)

        timeline.on_user_scrub("video", 30.0)
        assert controller.current_time_seconds == 30.0

        controller.on_time_advance(30.02)

        assert timeline.cursor == 30.02
        assert controller.current_time_seconds == 30.02
        assert confirmed == [30.02]
        assert loaded.last_scrub_target is None
        assert engine.commands("seek") == [(30.0,)]

    def test_far_advance_is_not_a_confirmation(self, controller, timeline, loaded):
        timeline.on_user_scrub("video", 30.0)
        controller.on_time_advance(80.0)

        assert timeline.cursor == 80.0
        assert loaded.last_scrub_target == 30.0

    def test_latest_scrub_wins(self, controller, timeline, engine, loaded):
        confirmed = []
        loaded.seek_confirmed.connect(confirmed.append)

        timeline.on_user_scrub("video", 30.0)
        timeline.on_user_scrub("audio", 90.0)
        controller.on_time_advance(30.01)

        assert engine.commands("seek") == [(30.0,), (90.0,)]
        assert confirmed == []
        assert loaded.last_scrub_target == 90.0

        controller.on_time_advance(90.0)
        assert confirmed == [90.0]

    def test_rejected_scrub_changes_nothing(self, controller, timeline, engine, loaded):
        controller.on_time_advance(10.0)
        with pytest.raises(OutOfRange):
            timeline.on_user_scrub("video", 500.0)

        assert engine.commands("seek") == []
        assert controller.current_time_seconds == 10.0
        assert timeline.cursor == 10.0


# =============================================================================
# Echo suppression
# =============================================================================

class TestEchoSuppression:

    def test_cursor_listener_reporting_back_is_dropped(self, controller, timeline, engine, loaded):
        """A widget that turns every cursor move into a drag must not cause a seek."""
        timeline.cursor_changed.connect(lambda t: timeline.on_user_scrub("video", t))

        controller.on_time_advance(5.0)
        controller.on_time_advance(6.0)

        assert engine.commands("seek") == []
        assert timeline.cursor == 6.0

    def test_echo_during_scrub_is_dropped(self, controller, timeline, engine, loaded):
        timeline.cursor_changed.connect(lambda t: timeline.on_user_scrub("video", t))

        timeline.on_user_scrub("video", 45.0)

        assert engine.commands("seek") == [(45.0,)]

    def test_engine_confirming_synchronously_during_seek(self, controller, timeline, loaded, engine):
        """Engines may report the new position from inside seek()."""
        original_seek = engine.seek

        def seek_and_report(seconds):
            original_seek(seconds)
            controller.on_time_advance(seconds)

        engine.seek = seek_and_report

        timeline.on_user_scrub("video", 20.0)

        assert engine.commands("seek") == [(20.0,)]
        assert timeline.cursor == 20.0
        assert loaded.last_scrub_target is None

    def test_repeated_confirmation_does_not_move_cursor(self, controller, timeline, loaded):
        moves = []
        timeline.on_user_scrub("video", 30.0)
        timeline.cursor_changed.connect(moves.append)

        controller.on_time_advance(30.0)
        controller.on_time_advance(30.0)

        assert moves == []
        assert timeline.cursor == 30.0


# =============================================================================
# Readout and wiring
# =============================================================================

class TestReadout:

    def test_formatted_time(self, controller, timeline, loaded):
        timeline.on_user_scrub("video", 65.0)
        assert loaded.formatted_time() == "1:05 / 2:00"

    def test_readout_before_duration(self, bridge):
        assert bridge.formatted_time() == "0:00 / 0:00"

    def test_disconnect_all_stops_propagation(self, controller, timeline, loaded):
        loaded.disconnect_all()
        controller.on_time_advance(12.0)
        assert timeline.cursor == 0.0

    def test_custom_epsilon(self, controller, timeline, store):
        bridge = SyncBridge(controller, timeline, store, echo_epsilon_seconds=0.5)
        controller.on_duration_known(60.0)
        timeline.on_user_scrub("video", 10.0)

        controller.on_time_advance(10.4)

        assert bridge.last_scrub_target is None
