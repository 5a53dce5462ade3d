"""Configuration loading and schema definitions."""

from colorize.config.loader import load_config
from colorize.config.schema import Config, GlobalConfig, Preset, RunSettings

__all__ = [
    "Config",
    "GlobalConfig",
    "Preset",
    "RunSettings",
    "load_config",
]
