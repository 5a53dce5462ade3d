"""Configuration loader with support for drop-in directories."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from colorize.config.defaults import DEFAULT_CONFIG_YAML
from colorize.config.schema import Config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "colorize" / "config.yaml"
DEFAULT_DROPIN_DIR = Path.home() / ".config" / "colorize" / "conf.d"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif key in result and isinstance(result[key], list) and isinstance(value, list):
            # For lists, extend rather than replace
            result[key] = result[key] + value
        else:
            result[key] = value

    return result


def ensure_mapping(data: Any, source: str) -> dict[str, Any]:
    """Check that a YAML document is a mapping (an empty document is allowed).

    Raises:
        ValueError: If the document is a list or a scalar
    """
    if not data:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{source}: top-level value must be a mapping, not {type(data).__name__}")
    return data


def without_overridden_presets(
    defaults: dict[str, Any], user: dict[str, Any]
) -> dict[str, Any]:
    """Drop built-in presets that the user config defines again.

    A user preset replaces the built-in one of the same name (compared
    case-insensitively) instead of extending its lists.
    """
    user_presets = user.get("presets")
    default_presets = defaults.get("presets")
    if not isinstance(user_presets, dict) or not isinstance(default_presets, dict):
        return defaults

    overridden = {str(name).lower() for name in user_presets}
    result = defaults.copy()
    result["presets"] = {
        name: preset
        for name, preset in default_presets.items()
        if name.lower() not in overridden
    }
    return result


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file, returning empty dict if not found."""
    if not path.exists():
        logger.debug("config file '%s' not found", path)
        return {}
    logger.info("loading config file '%s'", path)
    with open(path) as f:
        data = yaml.safe_load(f)
    return ensure_mapping(data, str(path))


def load_dropin_directory(dropin_dir: Path) -> dict[str, Any]:
    """Load and merge all YAML files from drop-in directory."""
    if not dropin_dir.exists():
        return {}

    result: dict[str, Any] = {}
    yaml_files = sorted(dropin_dir.glob("*.yaml")) + sorted(dropin_dir.glob("*.yml"))

    for yaml_file in yaml_files:
        data = load_yaml_file(yaml_file)
        result = deep_merge(result, data)

    return result


def load_config(
    config_path: Path | str | None = None,
    dropin_dir: Path | str | None = None,
) -> Config:
    """Load configuration from the built-in defaults, file and drop-in directory.

    Args:
        config_path: Path to main config file (default: ~/.config/colorize/config.yaml)
        dropin_dir: Path to drop-in directory (default: ~/.config/colorize/conf.d/)

    Returns:
        Merged configuration object
    """
    # Resolve paths
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    elif isinstance(config_path, str):
        config_path = Path(config_path)

    if dropin_dir is None:
        dropin_dir = DEFAULT_DROPIN_DIR
    elif isinstance(dropin_dir, str):
        dropin_dir = Path(dropin_dir)

    defaults = ensure_mapping(yaml.safe_load(DEFAULT_CONFIG_YAML), "built-in defaults")

    # Load main config
    main_config = load_yaml_file(config_path)

    # Load and merge drop-in configs
    dropin_config = load_dropin_directory(dropin_dir)
    user_data = deep_merge(main_config, dropin_config)
    merged_data = deep_merge(without_overridden_presets(defaults, user_data), user_data)

    # Parse into Config model
    return Config.model_validate(merged_data)


def load_config_from_string(yaml_string: str) -> Config:
    """Load configuration from a YAML string (useful for testing)."""
    data = ensure_mapping(yaml.safe_load(yaml_string), "config")
    return Config.model_validate(data)
