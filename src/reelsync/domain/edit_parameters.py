"""
Edit Parameters

Value types for the temporal (trim) and spatial (crop) edit parameters.
All types are frozen dataclasses; EditParameterStore swaps whole values so
readers never observe a half-applied edit.
"""
from dataclasses import dataclass
from enum import Enum

CROP_MIN = 0.0
CROP_MAX = 100.0


@dataclass(frozen=True)
class TrimRange:
    """Sub-range [start, end] of the media, in seconds."""
    start: float = 0.0
    end: float = 0.0


class CropField(Enum):
    """Selector for a single CropRect field."""
    X = "x"
    Y = "y"
    WIDTH = "width"
    HEIGHT = "height"


@dataclass(frozen=True)
class CropInset:
    """
    Clip region for the playback surface, as percentage insets from each edge.

    Values can be negative when the crop rectangle extends past the frame.
    """
    top: float
    right: float
    bottom: float
    left: float

    def as_clip_path(self) -> str:
        """Render as a CSS-style inset() clip path."""
        return (
            f"inset({_pct(self.top)} {_pct(self.right)} "
            f"{_pct(self.bottom)} {_pct(self.left)})"
        )


def _pct(value: float) -> str:
    return f"{value:g}%"


@dataclass(frozen=True)
class CropRect:
    """
    Visible sub-region of the video frame; every field is a percentage in [0, 100].

    Fields are clamped independently. x + width and y + height may exceed 100.
    """
    x: float = 0.0
    y: float = 0.0
    width: float = 100.0
    height: float = 100.0

    def get(self, field: CropField) -> float:
        if field is CropField.X:
            return self.x
        if field is CropField.Y:
            return self.y
        if field is CropField.WIDTH:
            return self.width
        return self.height

    @property
    def exceeds_frame(self) -> bool:
        """True when the rectangle reaches past the right or bottom edge."""
        return self.x + self.width > CROP_MAX or self.y + self.height > CROP_MAX

    def to_inset(self) -> CropInset:
        return CropInset(
            top=self.y,
            right=CROP_MAX - self.width - self.x,
            bottom=CROP_MAX - self.height - self.y,
            left=self.x,
        )
