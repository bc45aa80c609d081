"""Main CLI application for restconnector."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path
from typing import Any

import msgspec
import typer
from rich.console import Console

from restconnector.cli.atyper import ATyper
from restconnector.config.connector import load_connector_config
from restconnector.config.settings import get_settings
from restconnector.core.orchestrator import fetch_paths
from restconnector.display.json import encode_json
from restconnector.display.json import output_json
from restconnector.display.json import output_json_error
from restconnector.errors.types import ConfigError
from restconnector.errors.types import FetchError
from restconnector.log import setup_logging
from restconnector.plugins.registry import list_plugin_names

app = ATyper(
    name="restconnector",
    help="Fetch REST resources through a connector descriptor",
    add_completion=False,
    no_args_is_help=True,
    invoke_without_command=True,
)


class ExitCode(IntEnum):
    """Exit codes for restconnector."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    FETCH_ERROR = 3
    CONFIG_ERROR = 4


@app.callback()
def main(
    ctx: typer.Context,
    json: bool = typer.Option(False, "--json", "-j", help="Enable JSON output mode"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose output"
    ),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """restconnector - fetch REST resources through a connector descriptor."""
    if version:
        from restconnector import __version__

        typer.echo(f"restconnector {__version__}")
        raise typer.Exit()

    level = "DEBUG" if verbose else get_settings().logging.level
    setup_logging(level)

    ctx.meta["json"] = json
    ctx.meta["verbose"] = verbose

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def parse_parameters(values: list[str]) -> dict[str, Any]:
    """Parse key=value pairs; values that are valid JSON are decoded."""
    parameters: dict[str, Any] = {}
    for item in values:
        key, sep, raw = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got {item!r}")
        try:
            parameters[key] = msgspec.json.decode(raw)
        except msgspec.DecodeError:
            parameters[key] = raw
    return parameters


@app.command("fetch")
async def fetch_command(
    ctx: typer.Context,
    config_path: Path = typer.Argument(..., help="Connector descriptor (JSON or TOML)"),
    paths: list[str] = typer.Argument(..., help="Resource paths to fetch, in order"),
    param: list[str] = typer.Option(
        [], "--param", "-p", help="Runtime parameter as key=value (repeatable)"
    ),
    plugin: list[str] = typer.Option(
        [], "--plugin", help="Extra registered plugin to enable (repeatable)"
    ),
) -> None:
    """Fetch resource paths and print the parsed results."""
    json_mode = ctx.meta.get("json", False)
    console = Console()

    try:
        config = load_connector_config(
            config_path, plugins=plugin, parameters=parse_parameters(param)
        )
        items = await fetch_paths(config, paths)
    except ConfigError as e:
        _report_error(console, e, json_mode)
        raise typer.Exit(ExitCode.CONFIG_ERROR) from e
    except FetchError as e:
        _report_error(console, e, json_mode)
        raise typer.Exit(ExitCode.FETCH_ERROR) from e

    if json_mode:
        output_json(items)
    else:
        console.print_json(encode_json(items).decode())
        console.print(f"[dim]{len(items)} of {len(paths)} paths returned data[/dim]")


@app.command("plugins")
def plugins_command(ctx: typer.Context) -> None:
    """List registered plugin names."""
    names = list_plugin_names()
    if ctx.meta.get("json", False):
        output_json(names)
        return

    console = Console()
    for name in names:
        console.print(f"[cyan]{name}[/cyan]")


def _report_error(console: Console, error: FetchError, json_mode: bool) -> None:
    if json_mode:
        output_json_error(error)
        return

    console.print(f"[red]Error {error.http_status_code}:[/red] {error.message}")
    if error.reference:
        console.print(f"[dim]{error.reference}[/dim]")


def run_app() -> None:
    """Run the CLI application."""
    app()
