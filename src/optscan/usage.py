# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Two-column usage text rendering for an :class:`OptionRegistry`."""

from __future__ import annotations

import io
from typing import BinaryIO, Final

from .config import ParserSettings
from .errors import UsageOverflowError
from .interfaces import TextSink
from .registry import OptionRegistry

LINE_TERMINATOR: Final[str] = "\n"
OUTPUT_ENCODING: Final[str] = "utf-8"


class UsageFormatter:
    """Render registered options as aligned help lines.

    Each line holds ``indent`` spaces, the option token padded to
    ``max_width + gutter`` columns, then the description.
    """

    def __init__(self, registry: OptionRegistry, *, settings: ParserSettings | None = None) -> None:
        self.registry = registry
        self.settings = settings or registry.settings

    @property
    def column_width(self) -> int:
        """Return the width of the padded option column."""

        return self.registry.max_width + self.settings.gutter

    def lines(self) -> list[str]:
        """Return the usage lines without terminators.

        Returns:
            list[str]: One line per registration, in registration order.

        Raises:
            UsageOverflowError: If a token is wider than the registry's ``max_width``.
        """

        limit = self.registry.max_width
        width = self.column_width
        prefix = " " * self.settings.indent
        return [f"{prefix}{_pad(spec.display_token, limit, width)}{spec.description}" for spec in self.registry]

    def format_usage(self) -> str:
        """Return the complete usage text."""

        return "".join(f"{line}{LINE_TERMINATOR}" for line in self.lines())

    def render_usage(self, output: TextSink | BinaryIO) -> None:
        """Write the usage text to ``output``.

        The stream is owned by the caller and is neither flushed nor closed.

        Args:
            output: Text stream, or binary stream receiving UTF-8 bytes.
        """

        text = self.format_usage()
        if isinstance(output, (io.RawIOBase, io.BufferedIOBase)):
            output.write(text.encode(OUTPUT_ENCODING))
        else:
            output.write(text)


def _pad(token: str, limit: int, width: int) -> str:
    if len(token) > limit:
        raise UsageOverflowError(f"Usage token {token!r} exceeds registered width {limit}")
    return token + " " * (width - len(token))


__all__ = ["UsageFormatter"]
