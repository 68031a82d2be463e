# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry of recognised command-line options."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .config import ParserSettings
from .errors import InvalidOptionNameError
from .models import OptionSpec

LOGGER = logging.getLogger(__name__)


class OptionRegistry:
    """Ordered, queryable collection of registered options.

    Registration order drives usage output. Registering the same name twice
    replaces the lookup metadata but appends another usage line, so callers
    are expected to keep names unique.
    """

    def __init__(self, settings: ParserSettings | None = None) -> None:
        """Create an empty registry.

        Args:
            settings: Optional settings; ``validate_names`` enables eager
                marker validation during registration.
        """

        self.settings = settings or ParserSettings()
        self._names: list[str] = []
        self._descriptions: dict[str, str] = {}
        self._requires_argument: set[str] = set()
        self._argument_labels: dict[str, str] = {}
        self._max_width = 0

    def register_flag(self, name: str, description: str) -> None:
        """Register an option that takes no value.

        Args:
            name: Option token, normally starting with the marker character.
            description: Single-line help text.
        """

        self._check_name(name)
        self._names.append(name)
        self._descriptions[name] = description
        self._grow(len(name))
        LOGGER.debug("registered flag %s", name)

    def register_value_option(self, name: str, argument_label: str, description: str) -> None:
        """Register an option that consumes the following token as its value.

        Args:
            name: Option token, normally starting with the marker character.
            argument_label: Brief (one or two word) description of the value.
            description: Single-line help text.
        """

        self._check_name(name)
        self._names.append(name)
        self._descriptions[name] = description
        self._requires_argument.add(name)
        self._argument_labels[name] = argument_label
        self._grow(OptionSpec(name, description, argument_label).display_width)
        LOGGER.debug("registered value option %s <%s>", name, argument_label)

    @property
    def names(self) -> tuple[str, ...]:
        """Return option names in registration order, duplicates included."""

        return tuple(self._names)

    @property
    def max_width(self) -> int:
        """Return the widest usage token registered so far."""

        return self._max_width

    def description(self, name: str) -> str | None:
        """Return the help text from the latest registration of ``name``.

        Args:
            name: Option token to resolve.

        Returns:
            str | None: Description, or ``None`` when ``name`` is unknown.
        """

        return self._descriptions.get(name)

    def requires_argument(self, name: str) -> bool:
        """Return ``True`` when ``name`` consumes the following token.

        Args:
            name: Option token to resolve.

        Returns:
            bool: ``True`` once ``name`` has been registered as a value option.
        """

        return name in self._requires_argument

    def argument_label(self, name: str) -> str | None:
        """Return the value label shown in usage text for ``name``.

        Args:
            name: Option token to resolve.

        Returns:
            str | None: Label, or ``None`` when ``name`` never took a value.
        """

        return self._argument_labels.get(name)

    def lookup(self, name: str) -> OptionSpec | None:
        """Return the effective metadata registered for ``name``.

        Args:
            name: Option token to resolve.

        Returns:
            OptionSpec | None: Metadata from the latest registration, or
            ``None`` when ``name`` is unknown.
        """

        if name not in self._descriptions:
            return None
        label = self._argument_labels.get(name) if name in self._requires_argument else None
        return OptionSpec(name=name, description=self._descriptions[name], argument_label=label)

    def __contains__(self, name: object) -> bool:
        return name in self._descriptions

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[OptionSpec]:
        for name in self._names:
            spec = self.lookup(name)
            if spec is not None:
                yield spec

    def _check_name(self, name: str) -> None:
        if self.settings.validate_names and not self.settings.is_option_token(name):
            raise InvalidOptionNameError(name, self.settings.marker)

    def _grow(self, width: int) -> None:
        if width > self._max_width:
            self._max_width = width


__all__ = ["OptionRegistry"]
