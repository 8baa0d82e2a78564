"""Configuration management for the repocheck CLI tool.

Handles configuration loading from multiple sources with precedence:
CLI args > environment variables > .repocheckrc > pyproject.toml > defaults
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

# tomllib is only available in Python 3.11+
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found]

RC_FILE_NAME = ".repocheckrc"
ENV_PREFIX = "REPOCHECK_"


@dataclass
class RepoCheckConfig:
    """Configuration for the repocheck CLI tool.

    Attributes:
        root: Repository root to validate, relative to the start directory
            (default: ".").
        plugins_dir: Directory, relative to root, whose immediate
            subdirectories are plugins (default: "plugins").
        manifest_name: File name every plugin directory must contain
            (default: "plugin.json").
        script_pattern: Glob selecting script files (default: "*.sh").
        json_pattern: Glob selecting JSON files (default: "*.json").
        shell: Shell used in parse-only mode to check scripts (default: "bash").
    """

    root: str = "."
    plugins_dir: str = "plugins"
    manifest_name: str = "plugin.json"
    script_pattern: str = "*.sh"
    json_pattern: str = "*.json"
    shell: str = "bash"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If any configuration value is invalid.
        """
        for name in ("root", "plugins_dir", "manifest_name", "script_pattern", "json_pattern", "shell"):
            value = getattr(self, name)
            if not value or not isinstance(value, str):
                raise ValueError(f"{name} must be a non-empty string")

        if "/" in self.manifest_name or "\\" in self.manifest_name:
            raise ValueError("manifest_name must be a file name, not a path")

        for name in ("script_pattern", "json_pattern"):
            if "/" in getattr(self, name):
                raise ValueError(f"{name} must match file names, not paths")

    def get_root_path(self, base_path: Path | None = None) -> Path:
        """Get the absolute path to the repository root.

        Args:
            base_path: Base path to resolve from. Defaults to current directory.

        Returns:
            Resolved path to the repository root.
        """
        base = base_path or Path.cwd()
        return (base / self.root).resolve()


def _get_config_field_names() -> set[str]:
    """Get the set of valid configuration field names."""
    return {f.name for f in fields(RepoCheckConfig)}


def find_config_file(filename: str = RC_FILE_NAME, start_dir: Path | None = None) -> Path | None:
    """Find a configuration file by traversing up the directory tree.

    Args:
        filename: Name of the config file to find.
        start_dir: Directory to start searching from. Defaults to current directory.

    Returns:
        Path to the config file if found, None otherwise.
    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        config_path = current / filename
        if config_path.is_file():
            return config_path

        parent = current.parent
        if parent == current:
            return None
        current = parent


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents.

    Raises:
        OSError: If the file cannot be read.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    with open(path, "rb") as f:
        result: dict[str, Any] = tomllib.load(f)
        return result


def _load_from_rc(start_dir: Path | None = None) -> dict[str, Any]:
    """Load configuration from the .repocheckrc file, if any."""
    config_path = find_config_file(RC_FILE_NAME, start_dir)
    if config_path is None:
        return {}

    try:
        data = _load_toml_file(config_path)
    except (tomllib.TOMLDecodeError, OSError):
        return {}

    valid_fields = _get_config_field_names()
    return {k: v for k, v in data.items() if k in valid_fields}


def _load_from_pyproject(start_dir: Path | None = None) -> dict[str, Any]:
    """Load configuration from the pyproject.toml [tool.repocheck] section."""
    config_path = find_config_file("pyproject.toml", start_dir)
    if config_path is None:
        return {}

    try:
        data = _load_toml_file(config_path)
    except (tomllib.TOMLDecodeError, OSError):
        return {}

    section = data.get("tool", {}).get("repocheck", {})
    valid_fields = _get_config_field_names()
    return {k: v for k, v in section.items() if k in valid_fields}


def _load_from_env() -> dict[str, Any]:
    """Load configuration from environment variables.

    Variables are the upper-cased field names with the REPOCHECK_ prefix,
    e.g. REPOCHECK_ROOT, REPOCHECK_PLUGINS_DIR, REPOCHECK_MANIFEST_NAME.
    """
    result: dict[str, Any] = {}
    for name in sorted(_get_config_field_names()):
        value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if value is not None:
            result[name] = value
    return result


def _merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
    """Merge configuration dictionaries; later ones take precedence."""
    result: dict[str, Any] = {}
    for config in configs:
        for key, value in config.items():
            if value is not None:
                result[key] = value
    return result


def load_config(
    cli_overrides: dict[str, Any] | None = None,
    start_dir: Path | None = None,
) -> RepoCheckConfig:
    """Load configuration with full precedence chain.

    Precedence (highest to lowest):
    1. CLI arguments (cli_overrides)
    2. Environment variables (REPOCHECK_*)
    3. .repocheckrc file
    4. pyproject.toml [tool.repocheck] section
    5. Default values

    Args:
        cli_overrides: Configuration overrides from CLI arguments.
        start_dir: Directory to start searching for config files.

    Returns:
        Fully resolved RepoCheckConfig instance.

    Raises:
        ValueError: If the resulting configuration is invalid.
    """
    valid_fields = _get_config_field_names()
    cli_config = {
        k: v for k, v in (cli_overrides or {}).items() if k in valid_fields and v is not None
    }

    merged = _merge_configs(
        _load_from_pyproject(start_dir),
        _load_from_rc(start_dir),
        _load_from_env(),
        cli_config,
    )

    return RepoCheckConfig(**merged)
