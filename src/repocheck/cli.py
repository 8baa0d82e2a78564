"""repocheck CLI Tool - Main entry point."""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.text import Text

from repocheck import __version__
from repocheck.cli_utils import (
    EXIT_FAILURE,
    json_option,
    manifest_name_option,
    plugins_dir_option,
    root_option,
    wire_config,
)
from repocheck.reporter import render, render_json
from repocheck.validators import DiscoveryError, ValidationPipeline

app = typer.Typer(
    name="repocheck",
    help="repocheck - Syntax and structure checks for repository files, usable as a CI gate.",
    add_completion=False,
)

# Rich consoles for output
console = Console()
err_console = Console(stderr=True)


# -----------------------------------------------------------------------------
# Output Helpers
# -----------------------------------------------------------------------------


def _output_error(message: str) -> None:
    """Print an error message."""
    err_console.print(Text.assemble(("Error:", "red"), f" {message}"), soft_wrap=True)


def _exit_error(message: str, exit_code: int = EXIT_FAILURE) -> NoReturn:
    """Print error and exit."""
    _output_error(message)
    raise typer.Exit(code=exit_code)


def _run_validation(
    validation_class: str,
    root: str | None,
    plugins_dir: str | None,
    manifest_name: str | None,
    json_output: bool,
) -> None:
    """Run one validation class and exit with the report's exit code.

    Discovery and I/O failures abort the run before any report is printed.
    """
    start_dir = Path.cwd()
    config = wire_config(
        root=root,
        plugins_dir=plugins_dir,
        manifest_name=manifest_name,
        start_dir=start_dir,
    )

    try:
        pipeline = ValidationPipeline(config.get_root_path(start_dir), config)
        report = pipeline.run_class(validation_class)
    except (DiscoveryError, OSError) as e:
        if json_output:
            console.print_json(json.dumps({"success": False, "error": str(e)}))
        _exit_error(str(e))

    exit_code = render_json(report, console) if json_output else render(report, console)
    raise typer.Exit(code=exit_code)


# -----------------------------------------------------------------------------
# Version and Main Callbacks
# -----------------------------------------------------------------------------


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"repocheck version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """repocheck - Syntax and structure checks for repository files, usable as a CI gate."""
    pass


# -----------------------------------------------------------------------------
# Validation Commands
# -----------------------------------------------------------------------------


@app.command()
def scripts(
    root: str | None = root_option(),
    json_output: bool = json_option(),
) -> None:
    """Check the syntax of every shell script under the root.

    Each script is parsed by the shell in no-exec mode; nothing is run.
    Exits with code 1 if any script fails to parse.
    """
    _run_validation("scripts", root, None, None, json_output)


@app.command("json")
def check_json(
    root: str | None = root_option(),
    json_output: bool = json_option(),
) -> None:
    """Check that every JSON file under the root is well-formed.

    Exits with code 1 if any file fails to parse.
    """
    _run_validation("json", root, None, None, json_output)


@app.command()
def plugins(
    root: str | None = root_option(),
    plugins_dir: str | None = plugins_dir_option(),
    manifest_name: str | None = manifest_name_option(),
    json_output: bool = json_option(),
) -> None:
    """Check that every plugin directory contains its manifest.

    Plugin directories are the immediate subdirectories of the plugins
    directory. Exits with code 1 if any manifest is missing.
    """
    _run_validation("plugins", root, plugins_dir, manifest_name, json_output)


@app.command("all")
def check_all(
    root: str | None = root_option(),
    plugins_dir: str | None = plugins_dir_option(),
    manifest_name: str | None = manifest_name_option(),
    json_output: bool = json_option(),
) -> None:
    """Run script, JSON and plugin manifest checks in a single report.

    Exits with code 1 if any target fails.
    """
    _run_validation("all", root, plugins_dir, manifest_name, json_output)


if __name__ == "__main__":
    app()
