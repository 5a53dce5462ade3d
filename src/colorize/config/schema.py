"""Pydantic models for configuration schema."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


class Preset(BaseModel):
    """Named set of patterns with their color map."""

    name: str = Field(description="Preset name, e.g., 'logs'")
    description: str = Field(default="", description="One line description")
    patterns: list[str] = Field(default_factory=list, description="Regular expressions, in order")
    color_map: list[str] = Field(
        default_factory=list,
        description="Color specifications, e.g., ['red+bold', 'yellow+bold']",
    )

    @field_validator("color_map", mode="before")
    @classmethod
    def parse_color_map(cls, v: str | list[str] | None) -> list[str]:
        """Accept a single comma separated string or a list."""
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v


class GlobalConfig(BaseModel):
    """Global configuration options."""

    color: bool = Field(default=True, description="Enable/disable colors")


class Config(BaseModel):
    """Top-level configuration."""

    config: GlobalConfig = Field(default_factory=GlobalConfig)
    shortcuts: dict[str, str] = Field(
        default_factory=dict, description="Extra color shortcut names to ANSI parameters"
    )
    presets: dict[str, Preset] = Field(default_factory=dict)

    @field_validator("shortcuts", mode="before")
    @classmethod
    def parse_shortcuts(cls, v: dict[str, Any] | None) -> dict[str, str]:
        """Allow plain numbers as shortcut values."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError("shortcuts must be a mapping of name to ANSI parameters")
        return {str(name): str(value) for name, value in v.items()}

    @field_validator("presets", mode="before")
    @classmethod
    def parse_presets(cls, v: dict[str, Any] | None) -> dict[str, Preset]:
        """Parse preset definitions.

        Names are case-insensitive, so "Logs" and "logs" in the same file
        are rejected.
        """
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError("presets must be a mapping of name to preset")

        result = {}
        for name, data in v.items():
            key = str(name).lower()
            if key in result:
                raise ValueError(f"duplicate preset '{name}' (names are case-insensitive)")
            if isinstance(data, dict):
                # The mapping key is the name
                result[key] = Preset.model_validate({**data, "name": str(name)})
            elif isinstance(data, list):
                result[key] = Preset(name=str(name), patterns=data)
            else:
                raise ValueError(f"preset '{name}' must be a mapping or a list of patterns")
        return result

    def get_preset(self, name: str) -> Preset:
        """Get a preset by name (case-insensitive).

        Raises:
            ValueError: If there is no such preset
        """
        key = name.lower()
        if key not in self.presets:
            known = ", ".join(sorted(p.name for p in self.presets.values())) or "none"
            raise ValueError(f"unknown preset '{name}' (known presets: {known})")
        return self.presets[key]


class RunSettings(BaseModel):
    """Options for a single run, built once from the command line."""

    patterns: list[str] = Field(default_factory=list, description="Regular expressions, in order")
    color_maps: list[str] = Field(
        default_factory=list, description="Color map specifications, in supply order"
    )
    input_file: Path | None = Field(default=None, description="Read from this file instead of stdin")
    preset: str | None = Field(default=None, description="Preset to prepend to patterns")
    color: bool = Field(default=True, description="Emit escape codes")
    verbose: int = Field(default=0, ge=0)
