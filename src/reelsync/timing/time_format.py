"""
Time Format

Display strings for the transport readout.

Design:
- Pure functions (no side effects)
- Seconds are the base unit; fractional seconds are truncated
"""

import math
from typing import Optional


def format_time(seconds: float) -> str:
    """
    Format a time for the transport readout.

    Below one hour: "M:SS" (minutes unpadded). From one hour: "H:MM:SS".
    Negative and non-finite inputs render as "0:00".

    Examples:
        format_time(0)     -> "0:00"
        format_time(65)    -> "1:05"
        format_time(3661)  -> "1:01:01"
    """
    if not math.isfinite(seconds) or seconds < 0:
        seconds = 0

    total = int(seconds)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)

    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_readout(current: float, duration: Optional[float]) -> str:
    """"current / duration" readout; an unknown duration shows as 0:00."""
    return f"{format_time(current)} / {format_time(duration or 0.0)}"
