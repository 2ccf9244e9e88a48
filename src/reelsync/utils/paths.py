"""
Path management for ReelSync

Handles platform-specific user directories following standard conventions:
- macOS: ~/Library/Application Support/ReelSync/
- Linux: ~/.local/share/reelsync/ (data), ~/.config/reelsync/ (config)
- Windows: %APPDATA%/ReelSync/
"""
import os
import sys
from pathlib import Path


APP_NAME = "ReelSync"


def get_user_data_dir() -> Path:
    """
    Get platform-specific user data directory.

    Returns:
        Path to user data directory where logs and user files are stored.
    """
    system = sys.platform

    if system == "darwin":  # macOS
        base = Path.home() / "Library" / "Application Support"
        user_data_dir = base / APP_NAME
    elif system == "win32":  # Windows
        base = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
        user_data_dir = base / APP_NAME
    else:  # Linux and other Unix-like
        user_data_dir = Path.home() / ".local" / "share" / "reelsync"

    user_data_dir.mkdir(parents=True, exist_ok=True)
    return user_data_dir


def get_user_config_dir() -> Path:
    """
    Get platform-specific user config directory.

    Same as the data directory on macOS/Windows, ~/.config/reelsync/ on Linux.
    """
    if sys.platform in ("darwin", "win32"):
        return get_user_data_dir()

    config_dir = Path.home() / ".config" / "reelsync"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_logs_dir() -> Path:
    """Directory for application log files."""
    logs_dir = get_user_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir


def get_settings_path() -> Path:
    """Path to settings.json in the user config directory."""
    return get_user_config_dir() / "settings.json"
