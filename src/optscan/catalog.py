# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Declarative TOML option catalogs.

A catalog lists options in the order they should be registered::

    [settings]
    validate_names = true

    [[options]]
    name = "-o"
    argument = "file"
    description = "output file"

Entries without ``argument`` become flags.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .config import ParserSettings, read_toml
from .errors import ConfigError
from .registry import OptionRegistry


class CatalogEntry(BaseModel):
    """Single option declared in a catalog."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    description: str = ""
    argument: str | None = Field(default=None, min_length=1)


class OptionCatalog(BaseModel):
    """Validated catalog document."""

    model_config = ConfigDict(extra="forbid")

    settings: ParserSettings = Field(default_factory=ParserSettings)
    options: list[CatalogEntry] = Field(default_factory=list)

    def build_registry(self) -> OptionRegistry:
        """Register every entry, in declaration order, on a new registry.

        Returns:
            OptionRegistry: Registry bound to the catalog settings.

        Raises:
            InvalidOptionNameError: If ``settings.validate_names`` is enabled
                and an entry does not start with the marker character.
        """

        registry = OptionRegistry(self.settings)
        for entry in self.options:
            if entry.argument is None:
                registry.register_flag(entry.name, entry.description)
            else:
                registry.register_value_option(entry.name, entry.argument, entry.description)
        return registry


def load_catalog(path: Path) -> OptionCatalog:
    """Read and validate the catalog stored at ``path``.

    Args:
        path: TOML catalog file.

    Returns:
        OptionCatalog: Validated catalog.

    Raises:
        ConfigError: If the file is unreadable or fails validation.
    """

    document = read_toml(path)
    try:
        return OptionCatalog.model_validate(document)
    except ValidationError as exc:
        raise ConfigError(f"Invalid option catalog {path}: {exc}") from exc


__all__ = ["CatalogEntry", "OptionCatalog", "load_catalog"]
