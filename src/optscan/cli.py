# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line tool for previewing option catalogs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated, Final

import typer

from .catalog import OptionCatalog, load_catalog
from .errors import ConfigError, OptionError, OptionParseError
from .parser import CommandLineParser, RecordingHandler
from .registry import OptionRegistry
from .reporting import ParseReporter
from .usage import UsageFormatter

CONFIG_EXIT_CODE: Final[int] = 1
PARSE_EXIT_CODE: Final[int] = 2

app = typer.Typer(
    name="optscan",
    help="Preview usage text and parse results for option catalogs.",
    no_args_is_help=True,
    add_completion=False,
)

CatalogArgument = Annotated[
    Path,
    typer.Argument(metavar="CATALOG", help="TOML file declaring the options."),
]


@app.callback()
def main(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")] = False,
) -> None:
    """Preview usage text and parse results for option catalogs."""

    ctx.obj = ParseReporter.for_terminal(color=not no_color, emoji=not no_emoji)


def _reporter(ctx: typer.Context) -> ParseReporter:
    reporter = ctx.obj
    if isinstance(reporter, ParseReporter):
        return reporter
    return ParseReporter.for_terminal(color=True, emoji=True)


def _load(path: Path, reporter: ParseReporter) -> OptionCatalog:
    try:
        return load_catalog(path)
    except ConfigError as exc:
        reporter.option_error(exc)
        raise typer.Exit(code=CONFIG_EXIT_CODE) from exc


def _build(catalog: OptionCatalog, reporter: ParseReporter) -> OptionRegistry:
    try:
        return catalog.build_registry()
    except OptionError as exc:
        reporter.option_error(exc)
        raise typer.Exit(code=CONFIG_EXIT_CODE) from exc


@app.command("usage")
def usage_command(ctx: typer.Context, catalog: CatalogArgument) -> None:
    """Print the aligned usage text for CATALOG."""

    reporter = _reporter(ctx)
    registry = _build(_load(catalog, reporter), reporter)
    reporter.duplicates(registry.names)
    UsageFormatter(registry).render_usage(sys.stdout)


@app.command("parse")
def parse_command(
    ctx: typer.Context,
    catalog: CatalogArgument,
    args: Annotated[
        list[str] | None,
        typer.Argument(metavar="[-- ARGS...]", help="Command-line tokens to parse."),
    ] = None,
) -> None:
    """Parse ARGS against CATALOG and report every dispatched option."""

    reporter = _reporter(ctx)
    registry = _build(_load(catalog, reporter), reporter)
    tokens = list(args or [])
    handler = RecordingHandler()
    try:
        consumed = CommandLineParser(registry, handler).parse(tokens)
    except OptionParseError as exc:
        reporter.parse_error(exc, dispatched=handler.records)
        raise typer.Exit(code=PARSE_EXIT_CODE) from exc

    reporter.dispatches(handler.records)
    reporter.summary(consumed, tokens)


__all__ = ["app"]
