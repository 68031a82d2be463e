# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line option registry, scanner and usage formatter."""

from __future__ import annotations

from importlib import metadata

from .config import ParserSettings, load_settings
from .errors import (
    ConfigError,
    InvalidOptionNameError,
    MissingArgumentValueError,
    OptionError,
    OptionParseError,
    UnknownOptionError,
    UsageOverflowError,
)
from .interfaces import OptionHandler
from .models import OptionSpec
from .parser import CallbackHandler, CommandLineParser, DispatchRecord, RecordingHandler
from .registry import OptionRegistry
from .usage import UsageFormatter

__all__ = [
    "CallbackHandler",
    "CommandLineParser",
    "ConfigError",
    "DispatchRecord",
    "InvalidOptionNameError",
    "MissingArgumentValueError",
    "OptionError",
    "OptionHandler",
    "OptionParseError",
    "OptionRegistry",
    "OptionSpec",
    "ParserSettings",
    "RecordingHandler",
    "UnknownOptionError",
    "UsageFormatter",
    "UsageOverflowError",
    "__version__",
    "load_settings",
]

try:
    __version__ = metadata.version("optscan")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
