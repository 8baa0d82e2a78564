"""Validation framework for repository checks.

Provides target discovery, per-kind validators, result aggregation and the
pipeline that ties them together.
"""

from __future__ import annotations

from repocheck.validators.aggregator import ResultAggregator
from repocheck.validators.base import (
    BaseValidator,
    Status,
    TargetKind,
    ValidationReport,
    ValidationResult,
    ValidationTarget,
)
from repocheck.validators.discovery import DiscoveryError, discover
from repocheck.validators.json_validator import JsonSyntaxValidator
from repocheck.validators.manifest_validator import PluginManifestValidator
from repocheck.validators.runner import VALIDATION_CLASSES, ValidationPipeline, build_validators
from repocheck.validators.script_validator import ScriptSyntaxValidator

__all__ = [
    # Base types
    "BaseValidator",
    "Status",
    "TargetKind",
    "ValidationReport",
    "ValidationResult",
    "ValidationTarget",
    # Discovery
    "DiscoveryError",
    "discover",
    # Validators
    "JsonSyntaxValidator",
    "PluginManifestValidator",
    "ScriptSyntaxValidator",
    # Aggregation and pipeline
    "ResultAggregator",
    "VALIDATION_CLASSES",
    "ValidationPipeline",
    "build_validators",
]
