"""Shared utilities (logging, platform paths)."""
