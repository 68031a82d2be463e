# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for TOML option catalogs."""

from __future__ import annotations

from pathlib import Path

import pytest

from optscan.catalog import CatalogEntry, OptionCatalog, load_catalog
from optscan.errors import ConfigError, InvalidOptionNameError
from optscan.usage import UsageFormatter


def test_load_catalog_builds_registry_in_order(catalog_file: Path) -> None:
    catalog = load_catalog(catalog_file)
    assert [entry.name for entry in catalog.options] == ["-x", "-o"]
    registry = catalog.build_registry()
    assert registry.names == ("-x", "-o")
    assert registry.requires_argument("-o")
    assert not registry.requires_argument("-x")
    assert registry.max_width == 9


def test_catalog_settings_reach_registry(tmp_path: Path) -> None:
    path = tmp_path / "options.toml"
    path.write_text(
        '[settings]\nindent = 0\n\n[[options]]\nname = "-q"\ndescription = "quiet"\n',
        encoding="utf-8",
    )
    registry = load_catalog(path).build_registry()
    assert UsageFormatter(registry).format_usage() == "-q quiet\n"


def test_catalog_validation_failure(tmp_path: Path) -> None:
    path = tmp_path / "options.toml"
    path.write_text('[[options]]\nname = "-q"\nhelp = "typo"\n', encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid option catalog"):
        load_catalog(path)


def test_missing_catalog_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Unable to read"):
        load_catalog(tmp_path / "missing.toml")


def test_eager_validation_from_catalog() -> None:
    catalog = OptionCatalog.model_validate(
        {"settings": {"validate_names": True}, "options": [{"name": "oops"}]}
    )
    with pytest.raises(InvalidOptionNameError):
        catalog.build_registry()


def test_duplicate_entries_are_kept() -> None:
    catalog = OptionCatalog(
        options=[CatalogEntry(name="-x", description="one"), CatalogEntry(name="-x", description="two")]
    )
    registry = catalog.build_registry()
    assert registry.names == ("-x", "-x")
    assert registry.description("-x") == "two"
