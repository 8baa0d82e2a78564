"""Plugin manifest validator.

Checks that every plugin directory ships its manifest file. Only presence is
checked; the manifest's JSON content is covered by the JSON validator.
"""

from __future__ import annotations

from repocheck.validators.base import (
    BaseValidator,
    TargetKind,
    ValidationResult,
    ValidationTarget,
)


class PluginManifestValidator(BaseValidator):
    """Validates that a plugin directory contains its manifest.

    Attributes:
        manifest_name: File name required inside each plugin directory.
    """

    kind = TargetKind.PLUGIN_MANIFEST

    def __init__(self, manifest_name: str = "plugin.json") -> None:
        self.manifest_name = manifest_name

    def validate(self, target: ValidationTarget) -> ValidationResult:
        if (target.path / self.manifest_name).is_file():
            return ValidationResult.ok(target)

        return ValidationResult.fail(
            target, [f"Missing {self.manifest_name} in {target.name}"]
        )
