"""JSON syntax validator.

Parses each target as standard JSON text. The parser stops at the first
problem, so a failing result always carries exactly one message.
"""

from __future__ import annotations

import json

from repocheck.validators.base import (
    BaseValidator,
    TargetKind,
    ValidationResult,
    ValidationTarget,
)


def _reject_constant(name: str) -> None:
    raise ValueError(f"Invalid JSON constant: {name}")


class JsonSyntaxValidator(BaseValidator):
    """Validates that a file contains well-formed JSON."""

    kind = TargetKind.JSON

    def validate(self, target: ValidationTarget) -> ValidationResult:
        """Parse the target as JSON.

        ``NaN``, ``Infinity`` and ``-Infinity`` are rejected: Python's parser
        accepts them, but they are not JSON.

        Args:
            target: JSON file to check.

        Returns:
            OK if the content parses, otherwise FAIL with the parser's
            description of the first error.

        Raises:
            OSError: If the file cannot be read.
        """
        with open(target.path, "rb") as f:
            content = f.read()

        try:
            json.loads(content, parse_constant=_reject_constant)
        except ValueError as e:
            # JSONDecodeError, a non-standard constant, or bytes that are not UTF-8/16/32
            return ValidationResult.fail(target, [str(e)])
        except RecursionError:
            return ValidationResult.fail(target, ["nesting too deep to parse"])

        return ValidationResult.ok(target)
