# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from optscan.parser import RecordingHandler
from optscan.registry import OptionRegistry


@pytest.fixture
def registry() -> OptionRegistry:
    """Return a registry holding the ``-x`` flag and the ``-o <file>`` value option."""

    reg = OptionRegistry()
    reg.register_flag("-x", "disable X")
    reg.register_value_option("-o", "file", "output file")
    return reg


@pytest.fixture
def recorder() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """Write a small option catalog and return its path."""

    path = tmp_path / "options.toml"
    path.write_text(
        "\n".join(
            [
                "[[options]]",
                'name = "-x"',
                'description = "disable X"',
                "",
                "[[options]]",
                'name = "-o"',
                'argument = "file"',
                'description = "output file"',
                "",
            ]
        ),
        encoding="utf-8",
    )
    return path
