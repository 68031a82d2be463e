# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console reporting for parse results and catalog problems."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from rich.console import Console
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from .errors import OptionError, OptionParseError
from .parser import DispatchRecord

FAIL_PREFIX = "❌ "
WARN_PREFIX = "⚠️ "
INFO_PREFIX = "ℹ️ "
OK_PREFIX = "✅ "


def _stdout_is_tty() -> bool:
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def build_console(*, color: bool, emoji: bool) -> Console:
    """Return a Rich console honouring the colour and emoji flags.

    Colour is only enabled when stdout is a terminal. The console resolves
    ``sys.stdout`` at print time, so captured streams receive its output.

    Args:
        color: ``True`` when ANSI colour output is requested.
        emoji: ``True`` when Rich should render emoji glyphs.

    Returns:
        Console: Console configured for the requested presentation.
    """

    tty = _stdout_is_tty()
    return Console(
        color_system="auto" if color and tty else None,
        force_terminal=tty,
        no_color=not (color and tty),
        emoji=emoji,
        soft_wrap=True,
    )


@dataclass(slots=True)
class ParseReporter:
    """Render parser outcomes for the ``optscan`` tool.

    Attributes:
        console: Destination console.
        use_emoji: Prefix messages with status glyphs when ``True``.
        use_color: Apply Rich styles when ``True``.
    """

    console: Console
    use_emoji: bool = True
    use_color: bool = True

    @classmethod
    def for_terminal(cls, *, color: bool, emoji: bool) -> ParseReporter:
        return cls(build_console(color=color, emoji=emoji), use_emoji=emoji, use_color=color)

    def _line(self, prefix: str, message: str, style: str) -> None:
        text = Text(f"{prefix if self.use_emoji else ''}{message}")
        if self.use_color:
            text.stylize(style)
        self.console.print(text)

    def option_error(self, exc: OptionError) -> None:
        """Report a catalog or registration failure.

        Args:
            exc: Error raised while loading the catalog or building the registry.
        """

        self._line(FAIL_PREFIX, str(exc), "red")

    def parse_error(self, exc: OptionParseError, *, dispatched: Sequence[DispatchRecord] = ()) -> None:
        """Report a failed parse, noting handlers that already ran.

        Args:
            exc: Unknown-option or missing-value error.
            dispatched: Records captured before the failure.
        """

        self._line(FAIL_PREFIX, str(exc), "red")
        if dispatched:
            applied = ", ".join(record.option for record in dispatched)
            self._line(WARN_PREFIX, f"Already dispatched before {exc.option}: {applied}", "yellow")

    def duplicates(self, names: Iterable[str]) -> list[str]:
        """Warn once for every name registered more than once.

        Args:
            names: Option names in registration order.

        Returns:
            list[str]: Duplicated names in order of their second appearance.
        """

        seen: set[str] = set()
        repeated: list[str] = []
        for name in names:
            if name in seen and name not in repeated:
                repeated.append(name)
                self._line(WARN_PREFIX, f"Option {name} is declared more than once", "yellow")
            seen.add(name)
        return repeated

    def dispatches(self, records: Sequence[DispatchRecord]) -> None:
        """Print a table of dispatched options; nothing when ``records`` is empty."""

        if not records:
            return
        if self.use_color:
            self.console.print()
            self.console.print(Rule("Dispatched options"))
        else:
            self.console.print("\n--- Dispatched options ---")
        table = Table("option", "value")
        for record in records:
            table.add_row(record.option, record.value if record.value is not None else "")
        self.console.print(table)

    def summary(self, consumed: int, tokens: Sequence[str]) -> None:
        """Report the consumed count and any positional arguments left over.

        Args:
            consumed: Value returned by :meth:`CommandLineParser.parse`.
            tokens: Full token list handed to the parser.
        """

        remaining = tokens[consumed:]
        if remaining:
            self._line(INFO_PREFIX, f"Remaining arguments: {' '.join(remaining)}", "cyan")
        self._line(OK_PREFIX, f"Consumed {consumed} of {len(tokens)} arguments", "green")


__all__ = ["ParseReporter", "build_console"]
