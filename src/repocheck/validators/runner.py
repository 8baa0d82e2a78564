"""Validation pipeline orchestrating discovery, validation and aggregation.

The pipeline is a single linear pass: discover targets, validate each one in
order with the validator registered for its kind, then aggregate the results
into a report. Targets are processed sequentially; a failing target never
stops the run.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from repocheck.config import RepoCheckConfig
from repocheck.validators.aggregator import ResultAggregator
from repocheck.validators.base import (
    BaseValidator,
    TargetKind,
    ValidationReport,
    ValidationResult,
    ValidationTarget,
)
from repocheck.validators.discovery import discover
from repocheck.validators.json_validator import JsonSyntaxValidator
from repocheck.validators.manifest_validator import PluginManifestValidator
from repocheck.validators.script_validator import ScriptSyntaxValidator

# Validation classes selectable by name (CLI command names)
VALIDATION_CLASSES: dict[str, tuple[TargetKind, ...]] = {
    "scripts": (TargetKind.SCRIPT,),
    "json": (TargetKind.JSON,),
    "plugins": (TargetKind.PLUGIN_MANIFEST,),
    "all": (TargetKind.SCRIPT, TargetKind.JSON, TargetKind.PLUGIN_MANIFEST),
}


def build_validators(config: RepoCheckConfig) -> dict[TargetKind, BaseValidator]:
    """Build the kind -> validator dispatch table.

    Args:
        config: Configuration supplying the shell and manifest name.

    Returns:
        One validator instance per TargetKind.
    """
    return {
        TargetKind.SCRIPT: ScriptSyntaxValidator(shell=config.shell),
        TargetKind.JSON: JsonSyntaxValidator(),
        TargetKind.PLUGIN_MANIFEST: PluginManifestValidator(manifest_name=config.manifest_name),
    }


class ValidationPipeline:
    """Runs the discover -> validate -> aggregate flow over a repository.

    Attributes:
        root: Repository root being validated.
        config: Resolved configuration.
        validators: Dispatch table from target kind to validator, built once.
    """

    def __init__(self, root: Path, config: RepoCheckConfig | None = None) -> None:
        """Initialize the pipeline.

        Args:
            root: Root directory of the repository.
            config: Configuration to use. Defaults apply when None.
        """
        self.root = root
        self.config = config or RepoCheckConfig()
        self.validators = build_validators(self.config)

    def run(self, kinds: Iterable[TargetKind]) -> ValidationReport:
        """Validate every target of the given kinds.

        Args:
            kinds: Target kinds to discover and validate.

        Returns:
            ValidationReport with results in discovery order.

        Raises:
            DiscoveryError: If the root or plugins directory is missing.
            OSError: On I/O failures unrelated to content correctness.
        """
        targets = discover(self.root, kinds, self.config)

        aggregator = ResultAggregator()
        for target in targets:
            aggregator.add(self.validate_target(target))

        return aggregator.finalize()

    def run_class(self, name: str) -> ValidationReport:
        """Run a validation class by name ("scripts", "json", "plugins", "all").

        Raises:
            KeyError: If the name is not a known validation class.
        """
        return self.run(VALIDATION_CLASSES[name])

    def validate_target(self, target: ValidationTarget) -> ValidationResult:
        """Dispatch a single target to the validator for its kind."""
        return self.validators[target.kind].validate(target)
