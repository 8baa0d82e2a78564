"""repocheck - Repository validation pipeline for CI gates."""

__version__ = "0.1.0"
