"""
Tests for TimelineModel.

Covers track construction, scrub validation, representation-only cursor
updates and validation of edited tracks.
"""
import pytest
from unittest.mock import Mock

from reelsync.domain.errors import (
    DurationUnknown, InvalidParameter, InvalidTimelineEdit, OutOfRange
)
from reelsync.domain.timeline import TimelineAction, TrackKind
from reelsync.timeline.model import TimelineModel


@pytest.fixture
def built():
    """Timeline with a 120s media range."""
    model = TimelineModel()
    model.build_tracks(120.0)
    return model


# =============================================================================
# Track construction
# =============================================================================

class TestBuildTracks:

    @pytest.mark.parametrize("duration", [0.0, 0.5, 120.0, 7200.0])
    def test_one_full_range_action_per_track(self, duration):
        model = TimelineModel()
        model.build_tracks(duration)

        assert [t.id for t in model.tracks] == ["video", "audio"]
        for track in model.tracks:
            assert len(track.actions) == 1
            assert track.actions[0].start == 0.0
            assert track.actions[0].end == duration

    def test_default_action_ids_and_effects(self, built):
        video = built.get_track("video")
        audio = built.get_track("audio")
        assert video.kind is TrackKind.VIDEO
        assert video.actions[0].id == "videoAction"
        assert video.actions[0].effect_id == "videoEffect"
        assert audio.actions[0].id == "audioAction"
        assert audio.actions[0].effect_id == "audioEffect"

    def test_rebuild_replaces_prior_tracks(self, built):
        built.resize_action("video", "videoAction", 10.0, 20.0)
        built.build_tracks(60.0)

        assert built.get_track("video").actions[0].end == 60.0
        assert built.duration == 60.0

    def test_rebuild_clamps_cursor(self, built):
        built.set_cursor(100.0)
        built.build_tracks(50.0)
        assert built.cursor == 50.0

    def test_negative_duration_rejected(self):
        model = TimelineModel()
        with pytest.raises(InvalidParameter):
            model.build_tracks(-1.0)
        assert model.tracks == []

    def test_clear_forgets_tracks(self, built):
        built.set_cursor(4.0)
        built.clear()
        assert built.tracks == []
        assert built.duration is None
        assert built.cursor == 0.0

    def test_tracks_changed_signal(self):
        model = TimelineModel()
        listener = Mock()
        model.tracks_changed.connect(listener)
        model.build_tracks(10.0)
        assert listener.call_count == 1


# =============================================================================
# Scrub and cursor
# =============================================================================

class TestScrub:

    def test_scrub_emits_seek_intent(self, built):
        intents = []
        built.seek_requested.connect(lambda track, t: intents.append((track, t)))

        built.on_user_scrub("video", 30.0)

        assert intents == [("video", 30.0)]

    @pytest.mark.parametrize("seconds", [0.0, 120.0])
    def test_scrub_bounds_inclusive(self, built, seconds):
        built.on_user_scrub("audio", seconds)

    @pytest.mark.parametrize("seconds", [-0.01, 120.01, 500.0])
    def test_scrub_out_of_range(self, built, seconds):
        intents = []
        built.seek_requested.connect(lambda track, t: intents.append(t))

        with pytest.raises(OutOfRange):
            built.on_user_scrub("video", seconds)
        assert intents == []

    def test_scrub_before_duration(self):
        model = TimelineModel()
        with pytest.raises(DurationUnknown):
            model.on_user_scrub("video", 1.0)

    def test_scrub_unknown_track(self, built):
        with pytest.raises(InvalidParameter):
            built.on_user_scrub("subtitles", 1.0)


class TestCursor:

    def test_set_cursor_never_requests_seek(self, built):
        intents = []
        built.seek_requested.connect(lambda track, t: intents.append(t))

        built.set_cursor(15.0)

        assert built.cursor == 15.0
        assert intents == []

    def test_set_cursor_idempotent(self, built):
        moves = []
        built.cursor_changed.connect(moves.append)

        built.set_cursor(15.0)
        built.set_cursor(15.0)

        assert moves == [15.0]

    def test_cursor_follows_latest_value(self, built):
        for t in [0.0, 0.5, 0.5, 1.0, 60.0, 120.0]:
            built.set_cursor(t)
            assert built.cursor == t


class TestPositionMapping:

    def test_time_to_position_uses_scale(self):
        model = TimelineModel(pixels_per_second=50)
        assert model.time_to_position(2.0) == 100.0

    def test_position_to_time_clamped_to_media(self, built):
        assert built.position_to_time(-40) == 0.0
        assert built.position_to_time(1000) == 10.0
        assert built.position_to_time(1_000_000) == 120.0

    def test_invalid_scale_rejected(self, built):
        with pytest.raises(InvalidParameter):
            built.set_pixels_per_second(0)
        assert built.pixels_per_second == 100.0


# =============================================================================
# Track edits
# =============================================================================

class TestTrackEdits:

    def test_split_into_adjacent_actions(self, built):
        actions = [
            TimelineAction("b", 60.0, 120.0, "videoEffect"),
            TimelineAction("a", 0.0, 60.0, "videoEffect"),
        ]
        built.on_track_edited("video", actions)

        assert [a.id for a in built.get_track("video").actions] == ["a", "b"]

    def test_overlap_rejected_and_track_kept(self, built):
        before = built.get_track("video").actions
        actions = [
            TimelineAction("a", 0.0, 61.0),
            TimelineAction("b", 60.0, 120.0),
        ]

        with pytest.raises(InvalidTimelineEdit) as info:
            built.on_track_edited("video", actions)

        assert info.value.action_id == "b"
        assert built.get_track("video").actions == before

    @pytest.mark.parametrize("start,end", [
        (-1.0, 10.0),
        (10.0, 121.0),
        (10.0, 10.0),
        (20.0, 10.0),
    ])
    def test_out_of_bounds_rejected(self, built, start, end):
        with pytest.raises(InvalidTimelineEdit):
            built.on_track_edited("audio", [TimelineAction("x", start, end)])

    def test_duplicate_ids_rejected(self, built):
        with pytest.raises(InvalidTimelineEdit):
            built.on_track_edited("audio", [
                TimelineAction("x", 0.0, 10.0),
                TimelineAction("x", 20.0, 30.0),
            ])

    def test_empty_track_allowed(self, built):
        built.on_track_edited("audio", [])
        assert built.get_track("audio").actions == ()

    def test_edit_before_duration(self):
        model = TimelineModel()
        with pytest.raises(DurationUnknown):
            model.on_track_edited("video", [])

    def test_resize_action(self, built):
        built.resize_action("video", "videoAction", 5.0, 95.0)
        action = built.get_track("video").actions[0]
        assert (action.start, action.end) == (5.0, 95.0)
        assert action.effect_id == "videoEffect"

    def test_resize_unknown_action(self, built):
        with pytest.raises(InvalidTimelineEdit):
            built.resize_action("video", "missing", 0.0, 1.0)

    def test_resize_past_end_rejected(self, built):
        with pytest.raises(InvalidTimelineEdit):
            built.resize_action("video", "videoAction", 0.0, 130.0)
        assert built.get_track("video").actions[0].end == 120.0

    @pytest.mark.parametrize("start,end", [
        (float("nan"), 10.0),
        (0.0, float("nan")),
        (float("-inf"), 10.0),
        (0.0, float("inf")),
        ("soon", 10.0),
    ])
    def test_non_finite_bounds_rejected(self, built, start, end):
        before = built.get_track("video").actions

        with pytest.raises(InvalidTimelineEdit) as info:
            built.on_track_edited("video", [TimelineAction("a", start, end)])

        assert info.value.action_id == "a"
        assert built.get_track("video").actions == before

    def test_non_action_entry_rejected(self, built):
        with pytest.raises(InvalidTimelineEdit):
            built.on_track_edited("video", [{"id": "a", "start": 0.0, "end": 10.0}])
        assert built.get_track("video").actions[0].end == 120.0

    def test_numeric_string_bounds_stored_as_floats(self, built):
        built.on_track_edited("audio", [TimelineAction("a", "0", "30.5")])
        action = built.get_track("audio").actions[0]
        assert (action.start, action.end) == (0.0, 30.5)
