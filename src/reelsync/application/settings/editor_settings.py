"""
Editor Settings

Persistent preferences for the editor: rate choices, default volume, echo
tolerance for timeline sync, timeline scale and log level.

Stored as JSON in the user config directory. Unknown keys in the file are
ignored; missing keys fall back to defaults.
"""
import json
import math
import os
from dataclasses import dataclass, field, asdict, fields
from typing import Any, Dict, List, Optional, Tuple

from reelsync.domain.playback_state import ALLOWED_RATES, DEFAULT_RATE, DEFAULT_VOLUME
from reelsync.utils.message import Log

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ValidationResult:
    """
    Result of validating settings.

    Attributes:
        valid: True if all validations passed
        errors: List of error messages (validation failures)
        warnings: List of warning messages (non-blocking issues)
    """
    valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        """Add an error and mark as invalid."""
        self.errors.append(message)
        self.valid = False

    def add_warning(self, message: str):
        """Add a warning (doesn't affect validity)."""
        self.warnings.append(message)

    def __bool__(self) -> bool:
        return self.valid


@dataclass
class EditorSettings:
    allowed_rates: Tuple[float, ...] = ALLOWED_RATES
    default_rate: float = DEFAULT_RATE
    default_volume: float = DEFAULT_VOLUME
    # Time advances this close to the last scrub target confirm the seek
    echo_epsilon_seconds: float = 0.05
    pixels_per_second: float = 100.0
    log_level: str = "INFO"

    def validate(self) -> ValidationResult:
        result = ValidationResult()

        if not self.allowed_rates:
            result.add_error("allowed_rates: at least one rate is required")
        for rate in self.allowed_rates:
            if not _is_number(rate) or rate <= 0:
                result.add_error(f"allowed_rates: {rate!r} is not a positive number")
        if self.default_rate not in self.allowed_rates:
            result.add_error(f"default_rate: {self.default_rate} is not in allowed_rates")

        if not _is_number(self.default_volume) or not 0.0 <= self.default_volume <= 1.0:
            result.add_error(f"default_volume: {self.default_volume!r} must be within [0, 1]")
        if not _is_number(self.echo_epsilon_seconds) or self.echo_epsilon_seconds < 0:
            result.add_error("echo_epsilon_seconds: must be >= 0")
        elif self.echo_epsilon_seconds > 1.0:
            result.add_warning("echo_epsilon_seconds: values above 1s hide real seeks")
        if not _is_number(self.pixels_per_second) or self.pixels_per_second <= 0:
            result.add_error("pixels_per_second: must be > 0")
        if str(self.log_level).upper() not in LOG_LEVELS:
            result.add_error(f"log_level: {self.log_level!r} is not one of {', '.join(LOG_LEVELS)}")

        return result

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['allowed_rates'] = list(self.allowed_rates)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EditorSettings':
        """Create from a dict, ignoring unknown keys (backwards-compatible loading)."""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        if 'allowed_rates' in values:
            values['allowed_rates'] = tuple(float(r) for r in values['allowed_rates'])
        return cls(**values)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


class SettingsManager:
    """Loads and saves EditorSettings as JSON."""

    def __init__(self, settings_file: Optional[str] = None):
        if settings_file is None:
            from reelsync.utils.paths import get_settings_path
            settings_file = str(get_settings_path())
        self.settings_file = settings_file
        self.settings = EditorSettings()

    def load_settings(self) -> EditorSettings:
        """Load settings from file; defaults are used for a missing or invalid file."""
        if not os.path.exists(self.settings_file):
            Log.info(f"SettingsManager: No settings file at {self.settings_file}, using defaults")
            self.settings = EditorSettings()
            return self.settings

        try:
            with open(self.settings_file, 'r', encoding='utf-8') as file:
                loaded = EditorSettings.from_dict(json.load(file))
        except (OSError, ValueError, TypeError) as e:
            Log.error(f"SettingsManager: Failed to load settings: {e}")
            self.settings = EditorSettings()
            return self.settings

        result = loaded.validate()
        for warning in result.warnings:
            Log.warning(f"SettingsManager: {warning}")
        if not result:
            Log.error(f"SettingsManager: Invalid settings ({'; '.join(result.errors)}), using defaults")
            self.settings = EditorSettings()
        else:
            self.settings = loaded
            Log.info("SettingsManager: Settings loaded successfully")
        return self.settings

    def save_settings(self):
        """Save settings to file"""
        directory = os.path.dirname(self.settings_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.settings_file, 'w', encoding='utf-8') as file:
            json.dump(self.settings.to_dict(), file, indent=4)
        Log.info("SettingsManager: Settings saved successfully")

    def get(self, key: str) -> Any:
        return getattr(self.settings, key)

    def set(self, key: str, value: Any):
        """Update a single setting in memory; call save_settings() to persist."""
        if key not in {f.name for f in fields(EditorSettings)}:
            raise KeyError(f"Unknown setting: {key}")
        setattr(self.settings, key, value)
