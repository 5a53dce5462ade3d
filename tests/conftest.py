"""Pytest configuration and fixtures."""

import logging

import pytest

from colorize.config.loader import load_config_from_string
from colorize.config.schema import Config
from colorize.logging_setup import ROOT_LOGGER


@pytest.fixture
def sample_config() -> Config:
    """Sample configuration for testing."""
    yaml_content = """
config:
  color: true

shortcuts:
  orange: "38;5;208"
  level: 4

presets:
  Logs:
    description: "log markers"
    patterns:
      - "(?i)error:"
      - "(?i)warning:"
    color_map: "red+bold,yellow"
  single:
    patterns:
      - "ccc"
"""
    return load_config_from_string(yaml_content)


@pytest.fixture
def empty_config() -> Config:
    """Empty configuration for testing."""
    return Config()


@pytest.fixture
def isolated_args(tmp_path) -> list[str]:
    """CLI arguments that keep the user's configuration out of the test."""
    return [
        "--config",
        str(tmp_path / "missing.yaml"),
        "--config-dir",
        str(tmp_path / "missing.d"),
    ]


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by logging_setup.configure."""
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
