# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by option registration, parsing and rendering."""

from __future__ import annotations


class OptionError(RuntimeError):
    """Base class for every error raised by :mod:`optscan`."""


class OptionParseError(OptionError, ValueError):
    """Raised when a command line cannot be parsed against the registry.

    Attributes:
        option: Option token that triggered the failure.
    """

    def __init__(self, message: str, *, option: str) -> None:
        """Initialise the error with a message and the offending option.

        Args:
            message: Human-readable error message shown to the user.
            option: Option token that triggered the failure.
        """

        super().__init__(message)
        self.option = option


class UnknownOptionError(OptionParseError):
    """Raised when an option-shaped token has no registry entry."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Unknown option: {option}", option=option)


class MissingArgumentValueError(OptionParseError):
    """Raised when a value option is the final token of the command line."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Option {option} requires an argument", option=option)


class InvalidOptionNameError(OptionError, ValueError):
    """Raised when eager validation rejects an option name at registration."""

    def __init__(self, name: str, marker: str) -> None:
        super().__init__(f"Option name {name!r} must start with {marker!r}")
        self.name = name
        self.marker = marker


class UsageOverflowError(OptionError):
    """Raised when a usage token is wider than the registry's column width.

    The registry keeps ``max_width`` in step with every registration, so this
    signals a bookkeeping defect rather than a user error.
    """


class ConfigError(OptionError):
    """Raised when settings or catalog input is invalid."""


__all__ = [
    "ConfigError",
    "InvalidOptionNameError",
    "MissingArgumentValueError",
    "OptionError",
    "OptionParseError",
    "UnknownOptionError",
    "UsageOverflowError",
]
