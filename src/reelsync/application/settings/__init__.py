"""
Editor settings and their JSON persistence.
"""
from reelsync.application.settings.editor_settings import (
    EditorSettings,
    SettingsManager,
    ValidationResult,
)

__all__ = [
    'EditorSettings',
    'SettingsManager',
    'ValidationResult',
]
