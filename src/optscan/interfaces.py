# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Protocols implemented by callers embedding the parser."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OptionHandler(Protocol):
    """Receive the options matched by :class:`optscan.parser.CommandLineParser`."""

    def handle_flag(self, name: str) -> None:
        """Apply the effect of a flag that takes no value."""

        raise NotImplementedError

    def handle_value_option(self, name: str, value: str) -> None:
        """Apply the effect of an option together with its value."""

        raise NotImplementedError


@runtime_checkable
class TextSink(Protocol):
    """Minimal writable stream accepted by the usage formatter."""

    def write(self, text: str, /) -> int | None:
        """Write ``text`` to the underlying destination."""

        raise NotImplementedError


__all__ = ["OptionHandler", "TextSink"]
