"""
Session configuration.

Parses the [calcline] table from calcline.toml (or [tool.calcline] from a
pyproject.toml) into a typed settings model.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from calcline.core.errors import ConfigError

DEFAULT_CONFIG_NAME = "calcline.toml"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class CalclineConfig(BaseModel):
    """Settings for the line-reading session."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    prompt: str = "> "
    max_line_length: int = Field(default=1024, gt=0, description="Longest accepted input line")
    number_format: str = Field(default="g", description="Format spec for results and tree leaves")
    show_tree: bool = False
    log_level: str = "WARNING"

    @field_validator("number_format")
    @classmethod
    def _check_number_format(cls, value: str) -> str:
        try:
            format(1.5, value)
        except ValueError as e:
            raise ValueError(f"not a float format spec: {value!r}") from e
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}, expected one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def _extract_section(data: dict[str, Any], path: Path) -> dict[str, Any]:
    if path.name == "pyproject.toml":
        section = data.get("tool", {}).get("calcline", {})
    else:
        section = data.get("calcline", {})
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: [calcline] must be a table")
    return section


def load_config(path: Path | None = None, **overrides: Any) -> CalclineConfig:
    """
    Load session configuration.

    Args:
        path: TOML file to read. When omitted, calcline.toml in the current
            directory is used if it exists, otherwise defaults.
        **overrides: Values that take precedence over the file (None is ignored).

    Returns:
        CalclineConfig with parsed values or defaults

    Raises:
        ConfigError: If an explicit file is missing, unreadable or invalid.
    """
    explicit = path is not None
    toml_path = path if path is not None else Path.cwd() / DEFAULT_CONFIG_NAME

    section: dict[str, Any] = {}
    if toml_path.exists():
        try:
            with open(toml_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"{toml_path}: invalid TOML: {e}") from e
        except OSError as e:
            raise ConfigError(f"{toml_path}: cannot read: {e}") from e
        section = _extract_section(data, toml_path)
    elif explicit:
        raise ConfigError(f"config file not found: {toml_path}")

    section.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return CalclineConfig(**section)
    except ValidationError as e:
        raise ConfigError(f"{toml_path}: {e}") from e
