"""
Timeline Data Types
===================

Track/action representation of the media range shown in the timeline editor.

Actions are frozen; a track edit replaces the whole action tuple.
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, List, Tuple

from reelsync.domain.errors import InvalidParameter, InvalidTimelineEdit, require_finite


class TrackKind(Enum):
    VIDEO = "video"
    AUDIO = "audio"


@dataclass(frozen=True)
class TimelineAction:
    """
    A block on a track.

    Attributes:
        id: Unique identifier within its track
        start: Start time in seconds
        end: End time in seconds
        effect_id: Effect applied to the block (e.g. "videoEffect")
    """
    id: str
    start: float
    end: float
    effect_id: str = ""


@dataclass
class TimelineTrack:
    """One track per stream kind, holding its actions ordered by start time."""
    id: str
    kind: TrackKind
    actions: Tuple[TimelineAction, ...] = field(default_factory=tuple)

    @classmethod
    def full_range(cls, kind: TrackKind, duration: float) -> "TimelineTrack":
        """Default track: a single action spanning [0, duration]."""
        name = kind.value
        action = TimelineAction(
            id=f"{name}Action",
            start=0.0,
            end=duration,
            effect_id=f"{name}Effect",
        )
        return cls(id=name, kind=kind, actions=(action,))

    def get_action(self, action_id: str) -> TimelineAction:
        for action in self.actions:
            if action.id == action_id:
                return action
        raise InvalidTimelineEdit(self.id, "no such action", action_id)


def validate_actions(
    track_id: str,
    actions: Iterable[TimelineAction],
    duration: float
) -> Tuple[TimelineAction, ...]:
    """
    Check bounds, id uniqueness and non-overlap of an edited action list.

    Adjacent actions may touch (end == next start).

    Returns:
        The actions sorted by start time

    Raises:
        InvalidTimelineEdit: On the first violated rule
    """
    checked = [_checked_action(track_id, action) for action in actions]
    ordered: List[TimelineAction] = sorted(checked, key=lambda a: (a.start, a.end))

    seen_ids = set()
    for action in ordered:
        if action.id in seen_ids:
            raise InvalidTimelineEdit(track_id, "duplicate action id", action.id)
        seen_ids.add(action.id)

        if action.start < 0 or action.end > duration:
            raise InvalidTimelineEdit(
                track_id,
                f"[{action.start}, {action.end}] is outside [0, {duration}]",
                action.id,
            )
        if action.start >= action.end:
            raise InvalidTimelineEdit(
                track_id,
                f"start {action.start} must be before end {action.end}",
                action.id,
            )

    for previous, current in zip(ordered, ordered[1:]):
        if current.start < previous.end:
            raise InvalidTimelineEdit(
                track_id,
                f"overlaps '{previous.id}' ({previous.start}-{previous.end})",
                current.id,
            )

    return tuple(ordered)


def _checked_action(track_id: str, action) -> TimelineAction:
    """Reject non-actions and non-finite bounds; bounds come back as floats."""
    if not isinstance(action, TimelineAction):
        raise InvalidTimelineEdit(track_id, f"not a timeline action: {action!r}")
    try:
        start = require_finite("start", action.start)
        end = require_finite("end", action.end)
    except InvalidParameter as e:
        raise InvalidTimelineEdit(track_id, str(e), action.id) from e
    return replace(action, start=start, end=end)
