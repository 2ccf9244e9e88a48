"""
Editor Errors

Exceptions raised by the playback, timeline and edit-parameter components.
A raising operation leaves its component's state exactly as it was.
"""
import math
from typing import Any, Optional


class EditorError(Exception):
    """Base exception for rejected editor operations."""
    pass


class InvalidParameter(EditorError):
    """Raised when a value is outside a parameter's allowed domain."""

    def __init__(self, parameter: str, value: Any, reason: str = ""):
        self.parameter = parameter
        self.value = value
        self.reason = reason
        message = f"Invalid {parameter}: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class OutOfRange(EditorError):
    """Raised when a scrub/seek target lies outside [0, duration]."""

    def __init__(self, value: float, duration: float):
        self.value = value
        self.duration = duration
        super().__init__(f"Time {value}s is outside [0, {duration}]")


class InvalidTrim(EditorError):
    """Raised when a trim range violates 0 <= start < end <= duration."""

    def __init__(self, start: float, end: float, duration: float):
        self.start = start
        self.end = end
        self.duration = duration
        super().__init__(
            f"Trim [{start}, {end}] must satisfy 0 <= start < end <= {duration}"
        )


class InvalidTimelineEdit(EditorError):
    """Raised when an edited track has overlapping or out-of-bounds actions."""

    def __init__(self, track_id: str, reason: str, action_id: Optional[str] = None):
        self.track_id = track_id
        self.action_id = action_id
        self.reason = reason
        where = f"track '{track_id}'"
        if action_id:
            where += f", action '{action_id}'"
        super().__init__(f"Invalid edit on {where}: {reason}")


class DurationUnknown(EditorError):
    """Raised when a time-relative operation runs before the duration is resolved."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot {operation}: media duration is not known yet")


def require_finite(parameter: str, value: Any) -> float:
    """Coerce a numeric input to float, rejecting NaN, infinities and non-numbers."""
    if isinstance(value, bool):
        raise InvalidParameter(parameter, value, "not a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidParameter(parameter, value, "not a number") from None
    if not math.isfinite(number):
        raise InvalidParameter(parameter, value, "not a finite number")
    return number
