# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Value objects describing registered options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

ARGUMENT_OPEN: Final[str] = " <"
ARGUMENT_CLOSE: Final[str] = ">"


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """Describe a single registered option.

    Attributes:
        name: Option token, normally starting with the marker character.
        description: Single-line help text.
        argument_label: Short descriptor of the option's value, ``None`` for flags.
    """

    name: str
    description: str
    argument_label: str | None = None

    @property
    def requires_argument(self) -> bool:
        """Return ``True`` when the option consumes the following token.

        Returns:
            bool: ``True`` for value options, ``False`` for flags.
        """

        return self.argument_label is not None

    @property
    def display_token(self) -> str:
        """Return the token shown in the left usage column.

        Returns:
            str: ``name`` for flags, ``name <label>`` for value options.
        """

        if self.argument_label is None:
            return self.name
        return f"{self.name}{ARGUMENT_OPEN}{self.argument_label}{ARGUMENT_CLOSE}"

    @property
    def display_width(self) -> int:
        """Return the number of columns occupied by :attr:`display_token`."""

        return len(self.display_token)


__all__ = ["OptionSpec"]
