"""
Media Asset

Identity of the currently loaded source. Frozen: a new load, or a new
duration report, produces a new MediaAsset instead of mutating this one.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class MediaKind(Enum):
    """Stream kind of a loaded source."""
    VIDEO = "video"
    AUDIO = "audio"


@dataclass(frozen=True)
class MediaAsset:
    """
    Attributes:
        source: Path or URL handed to the playback engine
        kind: Whether the source was picked as video or audio
        duration_seconds: None until the engine resolves the length
    """
    source: str
    kind: MediaKind = MediaKind.VIDEO
    duration_seconds: Optional[float] = None

    @property
    def duration_known(self) -> bool:
        return self.duration_seconds is not None

    def with_duration(self, seconds: float) -> "MediaAsset":
        return replace(self, duration_seconds=seconds)
