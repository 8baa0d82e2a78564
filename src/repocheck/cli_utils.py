"""CLI utility functions for repocheck.

Provides helper functions for:
- Config wiring: Extracting Typer CLI options and passing to load_config
- Error formatting: Consistent user-friendly error messages with exit codes
- Option factories: Fresh Typer options shared by every command
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, NoReturn

import typer

from repocheck.config import RepoCheckConfig, load_config

# Exit code conventions
EXIT_SUCCESS = 0
EXIT_FAILURE = 1  # A target failed, bad input, or the run was aborted


# -----------------------------------------------------------------------------
# Error Formatting Helpers
# -----------------------------------------------------------------------------


def error(msg: str, *, exit_code: int = EXIT_FAILURE) -> NoReturn:
    """Print an error message to stderr and exit with the given exit code.

    Args:
        msg: The error message to display.
        exit_code: Exit code to use (default: EXIT_FAILURE=1).

    Raises:
        typer.Exit: Always raises to exit the program.
    """
    styled_prefix = typer.style("Error:", fg=typer.colors.RED, bold=True)
    typer.echo(f"{styled_prefix} {msg}", err=True)
    raise typer.Exit(code=exit_code)


# -----------------------------------------------------------------------------
# Config Wiring Helper
# -----------------------------------------------------------------------------


def wire_config(
    root: str | None = None,
    plugins_dir: str | None = None,
    manifest_name: str | None = None,
    start_dir: Path | None = None,
) -> RepoCheckConfig:
    """Wire CLI options to load_config with appropriate overrides.

    Args:
        root: Override for the repository root.
        plugins_dir: Override for the plugins directory.
        manifest_name: Override for the required manifest file name.
        start_dir: Directory to start searching for config files.

    Returns:
        Fully resolved RepoCheckConfig instance.

    Raises:
        typer.Exit: If configuration is invalid.
    """
    cli_overrides: dict[str, Any] = {}

    if root is not None:
        cli_overrides["root"] = root
    if plugins_dir is not None:
        cli_overrides["plugins_dir"] = plugins_dir
    if manifest_name is not None:
        cli_overrides["manifest_name"] = manifest_name

    try:
        return load_config(cli_overrides=cli_overrides, start_dir=start_dir)
    except ValueError as e:
        error(f"Invalid configuration: {e}", exit_code=EXIT_FAILURE)


# -----------------------------------------------------------------------------
# Typer Option Factory Functions
# -----------------------------------------------------------------------------
# Typer consumes Option objects when decorating commands, so each command
# needs its own instance.


def root_option() -> Any:
    """Create a Typer Option for --root / -r."""
    return typer.Option(
        None,
        "--root",
        "-r",
        help="Repository root to validate (default: current directory).",
        envvar="REPOCHECK_ROOT",
    )


def plugins_dir_option() -> Any:
    """Create a Typer Option for --plugins-dir."""
    return typer.Option(
        None,
        "--plugins-dir",
        help="Plugins directory relative to the root (default: plugins).",
        envvar="REPOCHECK_PLUGINS_DIR",
    )


def manifest_name_option() -> Any:
    """Create a Typer Option for --manifest-name."""
    return typer.Option(
        None,
        "--manifest-name",
        help="Manifest file required in each plugin directory (default: plugin.json).",
        envvar="REPOCHECK_MANIFEST_NAME",
    )


def json_option() -> Any:
    """Create a Typer Option for --json."""
    return typer.Option(
        False,
        "--json",
        help="Output as JSON.",
    )
