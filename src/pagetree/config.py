"""
Configuration for pagetree.

All tunable parameters in one place. Loaded from:
1. Defaults (this file)
2. Config file (~/.config/pagetree/config.toml) if exists
3. Environment variables (PAGETREE_*) override file
4. CLI flags override everything
"""

from __future__ import annotations

import contextlib
import logging
import os
import tomllib  # stdlib in 3.11+
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    """Editing session behaviour."""
    seed_sample: bool = False  # open with the starter page instead of an empty canvas
    select_on_insert: bool = True


@dataclass
class OutlineConfig:
    """Text outline display settings."""
    content_chars: int = 40
    id_chars: int = 8  # shown id prefix length, 0 = full id


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class Config:
    """Root config with all settings."""
    session: SessionConfig = field(default_factory=SessionConfig)
    outline: OutlineConfig = field(default_factory=OutlineConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_path() -> Path:
    """Get config file path, respecting XDG."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "pagetree" / "config.toml"
    return Path.home() / ".config" / "pagetree" / "config.toml"


def load_config() -> Config:
    """Load config from file if exists, else return defaults."""
    config = Config()
    path = get_config_path()

    if path.exists():
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
            config = _apply_toml(config, data)
        except (OSError, tomllib.TOMLDecodeError, ValueError, TypeError) as e:
            logger.warning("Ignoring config file %s: %s", path, e)
            config = Config()

    # env var overrides
    config = _apply_env(config)

    return config


def _apply_toml(config: Config, data: dict) -> Config:
    """Apply toml data to config."""
    if "session" in data:
        s = data["session"]
        if "seed_sample" in s:
            config.session.seed_sample = bool(s["seed_sample"])
        if "select_on_insert" in s:
            config.session.select_on_insert = bool(s["select_on_insert"])

    if "outline" in data:
        o = data["outline"]
        if "content_chars" in o:
            config.outline.content_chars = int(o["content_chars"])
        if "id_chars" in o:
            config.outline.id_chars = int(o["id_chars"])

    if "logging" in data:
        lg = data["logging"]
        if "level" in lg:
            config.logging.level = str(lg["level"]).upper()

    return config


def _apply_env(config: Config) -> Config:
    """Apply environment variable overrides."""
    env_map: dict[str, tuple[str, str, type]] = {
        "PAGETREE_SEED_SAMPLE": ("session", "seed_sample", bool),
        "PAGETREE_SELECT_ON_INSERT": ("session", "select_on_insert", bool),
        "PAGETREE_OUTLINE_CONTENT_CHARS": ("outline", "content_chars", int),
        "PAGETREE_OUTLINE_ID_CHARS": ("outline", "id_chars", int),
        "PAGETREE_LOG_LEVEL": ("logging", "level", str),
    }

    for env_key, (section, attr, conv) in env_map.items():
        val = os.environ.get(env_key)
        if val is not None:
            with contextlib.suppress(ValueError, AttributeError):
                # Bool needs special handling: "true", "1", "yes" -> True
                if conv is bool:
                    converted = val.lower() in ("true", "1", "yes")
                elif conv is str:
                    converted = val.upper()
                else:
                    converted = conv(val)
                setattr(getattr(config, section), attr, converted)

    return config


# Module-level config instance, loaded once on first use
_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next get_config() reloads it."""
    global _config
    _config = None
