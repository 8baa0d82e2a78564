"""Target discovery for the repocheck validation pipeline.

Finds scripts, JSON files and plugin directories under a repository root while
filtering out paths that should not be scanned (virtual environments, VCS
metadata, tool caches). Discovery only classifies candidates; it never reads
their contents.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from fnmatch import fnmatchcase
from pathlib import Path

from repocheck.config import RepoCheckConfig
from repocheck.validators.base import TargetKind, ValidationTarget

# Directories to exclude when scanning recursively
IGNORED_DIRS = frozenset(
    {
        ".venv",
        "venv",
        "node_modules",
        "__pycache__",
        ".git",
        ".tox",
        ".nox",
        ".mypy_cache",
        ".pytest_cache",
        ".ruff_cache",
        "site-packages",
    }
)


class DiscoveryError(Exception):
    """Raised when a discovery root is missing or is not a directory."""


def _ensure_directory(path: Path, label: str) -> None:
    if not path.exists():
        raise DiscoveryError(f"{label} does not exist: {path}")
    if not path.is_dir():
        raise DiscoveryError(f"{label} is not a directory: {path}")


def _raise_walk_error(e: OSError) -> None:
    raise e


def find_files(root: Path, pattern: str) -> list[Path]:
    """Find files matching a glob pattern anywhere under root.

    An unreadable directory stops the walk with the underlying OSError.

    Args:
        root: Directory to scan.
        pattern: File name glob, e.g. "*.json".

    Returns:
        Matching file paths, excluding ignored directories. Unsorted.

    Raises:
        OSError: If root or any directory below it cannot be listed.
    """
    found: list[Path] = []

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames[:] = [d for d in dirnames if d not in IGNORED_DIRS]
        for filename in filenames:
            if not fnmatchcase(filename, pattern):
                continue
            path = Path(dirpath) / filename
            if path.is_file():
                found.append(path)

    return found


def find_plugin_directories(plugins_root: Path) -> list[Path]:
    """List the immediate subdirectories of the plugins root.

    Raises:
        DiscoveryError: If plugins_root is missing or not a directory.
    """
    _ensure_directory(plugins_root, "Plugins directory")
    return [p for p in plugins_root.iterdir() if p.is_dir()]


def discover(
    root: Path,
    kinds: Iterable[TargetKind],
    config: RepoCheckConfig | None = None,
) -> list[ValidationTarget]:
    """Enumerate validation targets of the requested kinds under root.

    Targets are sorted lexicographically by their path relative to root, so
    two runs over an unchanged tree always yield the same sequence regardless
    of the order the filesystem returns entries in.

    Args:
        root: Repository root to scan.
        kinds: Target kinds to collect.
        config: Patterns and directory names to use. Defaults apply when None.

    Returns:
        Sorted list of ValidationTarget.

    Raises:
        DiscoveryError: If root (or the plugins directory, when plugin
            manifests are requested) does not exist.
    """
    config = config or RepoCheckConfig()
    _ensure_directory(root, "Root directory")

    targets: list[ValidationTarget] = []
    for kind in dict.fromkeys(kinds):
        if kind is TargetKind.SCRIPT:
            paths = find_files(root, config.script_pattern)
        elif kind is TargetKind.JSON:
            paths = find_files(root, config.json_pattern)
        else:
            paths = find_plugin_directories(root / config.plugins_dir)

        targets.extend(ValidationTarget(path=p, kind=kind, root=root) for p in paths)

    return sorted(targets, key=lambda t: (t.relative_path, t.kind.value))
