# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Left-to-right command-line scanner dispatching to option handlers.

:class:`CommandLineParser` walks the argument list once, handing every matched
option to an injected :class:`~optscan.interfaces.OptionHandler`. Scanning stops
at the first token that does not start with the marker character, leaving the
remaining positional arguments to the caller::

    parser = CommandLineParser(registry, handler)
    consumed = parser.parse(argv)
    positionals = argv[consumed:]

Failures abort the scan immediately. Handlers already invoked for earlier
tokens are not rolled back.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from .config import ParserSettings
from .errors import MissingArgumentValueError, UnknownOptionError
from .interfaces import OptionHandler
from .registry import OptionRegistry

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CallbackHandler(OptionHandler):
    """Adapt two plain callables to the :class:`OptionHandler` protocol.

    Attributes:
        on_flag: Callable invoked with the name of each matched flag.
        on_value_option: Callable invoked with the name and value of each
            matched value option.
    """

    on_flag: Callable[[str], None]
    on_value_option: Callable[[str, str], None]

    def handle_flag(self, name: str) -> None:
        self.on_flag(name)

    def handle_value_option(self, name: str, value: str) -> None:
        self.on_value_option(name, value)


@dataclass(frozen=True, slots=True)
class DispatchRecord:
    """Single handler invocation captured by :class:`RecordingHandler`."""

    option: str
    value: str | None = None


@dataclass(slots=True)
class RecordingHandler(OptionHandler):
    """Handler that records every dispatch in order."""

    records: list[DispatchRecord] = field(default_factory=list)

    def handle_flag(self, name: str) -> None:
        self.records.append(DispatchRecord(name))

    def handle_value_option(self, name: str, value: str) -> None:
        self.records.append(DispatchRecord(name, value))


class CommandLineParser:
    """Scan argument lists against an :class:`OptionRegistry`."""

    def __init__(
        self,
        registry: OptionRegistry,
        handler: OptionHandler | None = None,
        *,
        settings: ParserSettings | None = None,
    ) -> None:
        """Bind the parser to a registry and a default handler.

        Args:
            registry: Registry used to resolve option tokens.
            handler: Default handler receiving matched options.
            settings: Optional settings overriding ``registry.settings``.
        """

        self.registry = registry
        self.handler = handler
        self.settings = settings or registry.settings

    def parse(self, args: Sequence[str], *, handler: OptionHandler | None = None) -> int:
        """Consume leading options from ``args``.

        Args:
            args: Command-line tokens with the program name already removed.
            handler: Handler for this call, defaulting to the bound handler.

        Returns:
            int: Number of tokens consumed. Equal to ``len(args)`` when the
            entire command line was parsed.

        Raises:
            UnknownOptionError: If an option-shaped token is not registered.
            MissingArgumentValueError: If a value option is the last token.
            ValueError: If no handler is bound or supplied.
        """

        target = handler if handler is not None else self.handler
        if target is None:
            raise ValueError("CommandLineParser.parse requires an option handler")

        index = 0
        while index < len(args):
            option = args[index]
            if not self.settings.is_option_token(option):
                break
            if option not in self.registry:
                raise UnknownOptionError(option)

            if self.registry.requires_argument(option):
                index += 1
                if index >= len(args):
                    raise MissingArgumentValueError(option)
                LOGGER.debug("dispatching %s=%r", option, args[index])
                target.handle_value_option(option, args[index])
            else:
                LOGGER.debug("dispatching %s", option)
                target.handle_flag(option)
            index += 1

        LOGGER.debug("consumed %d of %d arguments", index, len(args))
        return index


__all__ = ["CallbackHandler", "CommandLineParser", "DispatchRecord", "RecordingHandler"]
