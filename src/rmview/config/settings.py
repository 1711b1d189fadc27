"""
Configuration management for rmview.

Hierarchical settings loading: defaults → config file → environment variables

Created: 2026-10-19
"""

import os
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional

from rmview.core.exceptions import ConfigurationError
from rmview.core.remover import SymlinkPolicy


@dataclass
class BehaviorSettings:
    """Behavior settings."""

    symlink_policy: str = "unlink"  # unlink, reject
    page_size: int = 10

    def policy(self) -> SymlinkPolicy:
        """Parsed symlink policy."""
        try:
            return SymlinkPolicy(self.symlink_policy.lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown symlink_policy '{self.symlink_policy}' "
                f"(expected one of: {', '.join(p.value for p in SymlinkPolicy)})"
            )

    def validate(self) -> None:
        """Check values before anything uses them."""
        self.policy()
        if (
            isinstance(self.page_size, bool)
            or not isinstance(self.page_size, int)
            or self.page_size < 1
        ):
            raise ConfigurationError(
                f"Invalid page_size {self.page_size!r} (expected a positive integer)"
            )


@dataclass
class DisplaySettings:
    """Display settings."""

    show_hints: bool = True


@dataclass
class LoggingSettings:
    """Logging settings."""

    level: str = "WARNING"
    file: str = "~/.cache/rmview/rmview.log"


@dataclass
class Settings:
    """Main settings container."""

    behavior: BehaviorSettings = field(default_factory=BehaviorSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """
        Load settings from file and environment variables.

        Priority:
        1. Default values (defined in dataclasses)
        2. Config file (~/.config/rmview/config.yaml)
        3. Environment variables (override everything)

        Args:
            config_path: Optional path to config file

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If the file is not valid YAML or holds
                invalid values
        """
        settings = cls()

        if config_path is None:
            config_path = Path.home() / ".config" / "rmview" / "config.yaml"

        if config_path.exists():
            try:
                with open(config_path) as f:
                    config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid config file {config_path}: {e}")

            if not isinstance(config_data, dict):
                raise ConfigurationError(
                    f"Invalid config file {config_path}: expected a mapping"
                )

            if "behavior" in config_data:
                behavior = _section(config_data, "behavior")
                settings.behavior = BehaviorSettings(
                    symlink_policy=behavior.get("symlink_policy", "unlink"),
                    page_size=behavior.get("page_size", 10),
                )

            if "display" in config_data:
                display = _section(config_data, "display")
                settings.display = DisplaySettings(
                    show_hints=display.get("show_hints", True),
                )

            if "logging" in config_data:
                log = _section(config_data, "logging")
                settings.logging = LoggingSettings(
                    level=log.get("level", "WARNING"),
                    file=log.get("file", "~/.cache/rmview/rmview.log"),
                )

        # Override with environment variables
        policy_env = os.getenv("RMVIEW_SYMLINK_POLICY")
        if policy_env:
            settings.behavior.symlink_policy = policy_env

        level_env = os.getenv("RMVIEW_LOG_LEVEL")
        if level_env:
            settings.logging.level = level_env

        log_file_env = os.getenv("RMVIEW_LOG_FILE")
        if log_file_env:
            settings.logging.file = log_file_env

        # Fail at startup rather than on the first symlink or page key
        settings.behavior.validate()

        return settings

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "behavior": {
                "symlink_policy": self.behavior.symlink_policy,
                "page_size": self.behavior.page_size,
            },
            "display": {"show_hints": self.display.show_hints},
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
        }


def _section(config_data: Dict[str, Any], name: str) -> Dict[str, Any]:
    """A top-level config section; an empty section reads as no overrides."""
    section = config_data[name]
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Config section '{name}' must be a mapping, got {type(section).__name__}"
        )
    return section


def get_config_dir() -> Path:
    """Get configuration directory, creating if needed."""
    config_dir = Path.home() / ".config" / "rmview"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_cache_dir() -> Path:
    """Get cache directory, creating if needed."""
    cache_dir = Path.home() / ".cache" / "rmview"
    cache_dir.mkdir(parents=True, exist_ok=True)
    return cache_dir
