# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parser settings and their TOML loader."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

DEFAULT_MARKER: Final[str] = "-"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "optscan"


class ParserSettings(BaseModel):
    """Behaviour and layout knobs shared by the registry, parser and formatter."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    marker: str = DEFAULT_MARKER
    validate_names: bool = False
    indent: int = Field(default=2, ge=0)
    gutter: int = Field(default=1, ge=1)

    @field_validator("marker")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1 or value.isspace():
            raise ValueError("marker must be a single non-whitespace character")
        return value

    def is_option_token(self, token: str) -> bool:
        """Return ``True`` when ``token`` looks like an option.

        Args:
            token: Raw command-line token.

        Returns:
            bool: ``True`` when ``token`` begins with the marker character.
        """

        return token.startswith(self.marker)


def settings_from_mapping(data: Mapping[str, Any], *, source: str = "<mapping>") -> ParserSettings:
    """Validate ``data`` into :class:`ParserSettings`.

    Args:
        data: Raw key/value pairs, usually a decoded TOML table.
        source: Description of where ``data`` came from, used in error messages.

    Returns:
        ParserSettings: Validated settings instance.

    Raises:
        ConfigError: If ``data`` contains unknown keys or invalid values.
    """

    try:
        return ParserSettings.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigError(f"Invalid optscan settings in {source}: {exc}") from exc


def read_toml(path: Path) -> Mapping[str, Any]:
    """Decode the TOML document at ``path``.

    Args:
        path: Location of the TOML document.

    Returns:
        Mapping[str, Any]: Decoded document.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """

    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc


def load_settings(path: Path) -> ParserSettings:
    """Load settings from ``path``.

    A ``pyproject.toml`` contributes its ``[tool.optscan]`` table; any other
    TOML file is read from its top level. Missing files and tables yield the
    defaults.

    Args:
        path: TOML file to read.

    Returns:
        ParserSettings: Settings assembled from the file or the defaults.
    """

    if not path.is_file():
        return ParserSettings()
    document = read_toml(path)
    if path.name == PYPROJECT_FILENAME:
        tool = document.get(PYPROJECT_TOOL_KEY, {})
        document = tool.get(PYPROJECT_SECTION_KEY, {}) if isinstance(tool, Mapping) else {}
    if not isinstance(document, Mapping):
        raise ConfigError(f"Expected a table in {path}")
    return settings_from_mapping(document, source=str(path))


__all__ = ["ParserSettings", "load_settings", "read_toml", "settings_from_mapping"]
