"""
Configuration management for rmview.

Handles loading and merging configuration from multiple sources:
- Default settings
- User config file (~/.config/rmview/config.yaml)
- Environment variables

Created: 2026-10-19
"""

from rmview.config.settings import (
    Settings,
    BehaviorSettings,
    DisplaySettings,
    LoggingSettings,
    get_config_dir,
    get_cache_dir,
)
from rmview.config.logs import setup_logging

__all__ = [
    "Settings",
    "BehaviorSettings",
    "DisplaySettings",
    "LoggingSettings",
    "get_config_dir",
    "get_cache_dir",
    "setup_logging",
]
