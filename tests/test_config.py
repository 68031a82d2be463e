# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for parser settings and their TOML loader."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from optscan.config import ParserSettings, load_settings, settings_from_mapping
from optscan.errors import ConfigError


def test_defaults_match_usage_layout() -> None:
    settings = ParserSettings()
    assert settings.marker == "-"
    assert settings.indent == 2
    assert settings.gutter == 1
    assert settings.validate_names is False


@pytest.mark.parametrize("marker", ["", "--", " "])
def test_marker_must_be_single_character(marker: str) -> None:
    with pytest.raises(ValidationError):
        ParserSettings(marker=marker)


def test_assignment_is_validated() -> None:
    settings = ParserSettings()
    with pytest.raises(ValidationError):
        settings.gutter = 0


def test_unknown_keys_rejected() -> None:
    with pytest.raises(ConfigError, match="Invalid optscan settings"):
        settings_from_mapping({"colour": True})


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    assert load_settings(tmp_path / "absent.toml") == ParserSettings()


def test_pyproject_section(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\n\n[tool.optscan]\nmarker = "/"\nindent = 4\n', encoding="utf-8")
    settings = load_settings(path)
    assert settings.marker == "/"
    assert settings.indent == 4


def test_pyproject_without_section(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\n', encoding="utf-8")
    assert load_settings(path) == ParserSettings()


def test_standalone_file_reads_top_level(tmp_path: Path) -> None:
    path = tmp_path / "optscan.toml"
    path.write_text("validate_names = true\ngutter = 2\n", encoding="utf-8")
    settings = load_settings(path)
    assert settings.validate_names is True
    assert settings.gutter == 2


def test_invalid_toml(tmp_path: Path) -> None:
    path = tmp_path / "optscan.toml"
    path.write_text("marker = \n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Unable to read"):
        load_settings(path)


def test_invalid_value(tmp_path: Path) -> None:
    path = tmp_path / "optscan.toml"
    path.write_text("indent = -1\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(path)
