"""Pytest configuration and fixtures for repocheck tests."""

import os

import pytest

# Set a fixed terminal width to prevent line wrapping issues in CI
# This must be set before any Rich imports
os.environ.setdefault("COLUMNS", "200")
os.environ.setdefault("LINES", "50")
# Disable Rich's terminal detection to ensure consistent output
os.environ.setdefault("TERM", "dumb")


@pytest.fixture(autouse=True)
def _clean_repocheck_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep REPOCHECK_* variables from the caller's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("REPOCHECK_"):
            monkeypatch.delenv(key)
