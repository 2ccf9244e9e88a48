"""
Edit Parameter Store

Owns the trim range and the crop rectangle.

Error policy:
- set_trim rejects invalid ranges with InvalidTrim and keeps the previous range
- set_crop_field clamps the value into [0, 100]; fields are clamped
  independently, so x + width (or y + height) may exceed 100
"""

from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from reelsync.domain.edit_parameters import (
    CROP_MAX, CROP_MIN, CropField, CropInset, CropRect, TrimRange
)
from reelsync.domain.errors import (
    DurationUnknown, InvalidParameter, InvalidTrim, require_finite
)
from reelsync.utils.message import Log


class EditParameterStore(QObject):
    """
    Signals:
        trim_changed(TrimRange): New trim range in effect
        crop_changed(CropRect): New crop rectangle in effect
    """

    trim_changed = pyqtSignal(object)
    crop_changed = pyqtSignal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._duration: Optional[float] = None
        self._trim = TrimRange()
        self._crop = CropRect()

    @property
    def trim(self) -> TrimRange:
        return self._trim

    @property
    def crop(self) -> CropRect:
        return self._crop

    @property
    def duration(self) -> Optional[float]:
        return self._duration

    # =========================================================================
    # Trim
    # =========================================================================

    def reset_for_duration(self, duration: float):
        """Media length resolved: trim covers the whole media."""
        duration = require_finite("duration", duration)
        if duration < 0:
            raise InvalidParameter("duration", duration, "must be >= 0")
        self._duration = duration
        self._replace_trim(TrimRange(0.0, duration))

    def clear(self):
        """New media loaded: duration unknown, trim back to its default."""
        self._duration = None
        self._replace_trim(TrimRange())

    def set_trim(self, start: float, end: float) -> TrimRange:
        """
        Set both trim bounds at once.

        Raises:
            DurationUnknown: Before the duration is resolved
            InvalidTrim: Unless 0 <= start < end <= duration
        """
        if self._duration is None:
            raise DurationUnknown("set trim")
        try:
            start = require_finite("trim start", start)
            end = require_finite("trim end", end)
        except InvalidParameter:
            raise InvalidTrim(start, end, self._duration) from None

        if not 0.0 <= start < end <= self._duration:
            raise InvalidTrim(start, end, self._duration)

        self._replace_trim(TrimRange(start, end))
        return self._trim

    def _replace_trim(self, trim: TrimRange):
        if trim == self._trim:
            return
        self._trim = trim
        Log.debug(f"EditParameterStore: Trim [{trim.start:.3f}, {trim.end:.3f}]")
        self.trim_changed.emit(trim)

    # =========================================================================
    # Crop
    # =========================================================================

    def set_crop_field(self, field: CropField, value: float) -> float:
        """
        Update a single crop field, leaving the others unchanged.

        Returns:
            The stored (clamped) value

        Raises:
            InvalidParameter: If field is not a CropField or value is not a finite number
        """
        if not isinstance(field, CropField):
            raise InvalidParameter("crop field", field, "expected a CropField")
        value = max(CROP_MIN, min(require_finite(field.value, value), CROP_MAX))

        crop = self._crop
        if field is CropField.X:
            updated = CropRect(value, crop.y, crop.width, crop.height)
        elif field is CropField.Y:
            updated = CropRect(crop.x, value, crop.width, crop.height)
        elif field is CropField.WIDTH:
            updated = CropRect(crop.x, crop.y, value, crop.height)
        else:
            updated = CropRect(crop.x, crop.y, crop.width, value)

        if updated != crop:
            self._crop = updated
            if updated.exceeds_frame:
                Log.warning(
                    f"EditParameterStore: Crop x={updated.x:g} y={updated.y:g} "
                    f"w={updated.width:g} h={updated.height:g} reaches past the frame"
                )
            self.crop_changed.emit(updated)
        return value

    def get_crop_render_region(self) -> CropInset:
        """Clip region for the playback surface derived from the crop rectangle."""
        return self._crop.to_inset()
