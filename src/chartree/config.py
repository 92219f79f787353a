"""
Configuration for chartree.

Chart defaults in one place. Loaded from:
1. Defaults (this file)
2. Config file (~/.config/chartree/config.toml) if exists
3. Environment variables (CHARTREE_*) override file
4. Chart constructor arguments override everything
"""

from __future__ import annotations

import contextlib
import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class ChartConfig:
    """Canvas defaults used when a chart does not set its own size."""
    width: int = 640
    height: int = 480
    auto_fit: bool = False


@dataclass
class ResizeConfig:
    """Auto-fit resize handling."""
    debounce_delay: float = 0.3  # seconds of quiet before re-measuring


@dataclass
class Config:
    """Root config with all settings."""
    chart: ChartConfig = field(default_factory=ChartConfig)
    resize: ResizeConfig = field(default_factory=ResizeConfig)


def get_config_path() -> Path:
    """Get config file path, respecting XDG."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "chartree" / "config.toml"
    return Path.home() / ".config" / "chartree" / "config.toml"


def load_config() -> Config:
    """Load config from file if exists, else return defaults."""
    config = Config()
    path = get_config_path()

    if path.exists():
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
            config = _apply_toml(config, data)
        except (OSError, tomllib.TOMLDecodeError, TypeError, ValueError) as e:
            logger.warning("ignoring config file %s: %s", path, e)
            config = Config()

    config = _apply_env(config)

    return config


def _apply_toml(config: Config, data: dict) -> Config:
    """Apply toml data to config."""
    if "chart" in data:
        c = data["chart"]
        if "width" in c:
            config.chart.width = int(c["width"])
        if "height" in c:
            config.chart.height = int(c["height"])
        if "auto_fit" in c:
            config.chart.auto_fit = bool(c["auto_fit"])

    if "resize" in data:
        r = data["resize"]
        if "debounce_delay" in r:
            config.resize.debounce_delay = float(r["debounce_delay"])

    return config


def _apply_env(config: Config) -> Config:
    """Apply environment variable overrides."""
    env_map: dict[str, tuple[str, str, type]] = {
        "CHARTREE_WIDTH": ("chart", "width", int),
        "CHARTREE_HEIGHT": ("chart", "height", int),
        "CHARTREE_AUTO_FIT": ("chart", "auto_fit", bool),
        "CHARTREE_DEBOUNCE_DELAY": ("resize", "debounce_delay", float),
    }

    for env_key, (section, attr, conv) in env_map.items():
        val = os.environ.get(env_key)
        if val is not None:
            with contextlib.suppress(ValueError):
                # "true", "1", "yes" -> True
                converted = val.lower() in ("true", "1", "yes") if conv is bool else conv(val)
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
