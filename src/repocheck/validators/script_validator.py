"""Shell script syntax validator.

Runs the configured shell in parse-only mode (``-n``) over each script. The
shell reads and parses the commands without executing any of them, and may
report several diagnostics for one file; each diagnostic becomes one message,
in the order the shell emitted them. Bash follows an "unexpected token" error
with an echo of the offending source line under the same "line N:" prefix;
that echo is folded into the diagnostic it belongs to.
"""

from __future__ import annotations

import os
import re
import subprocess

from repocheck.validators.base import (
    BaseValidator,
    TargetKind,
    ValidationResult,
    ValidationTarget,
)

# "bash: line 2: ..." -> ("bash: line 2:", "...")
_LOCATION_RE = re.compile(r"^(.*?\bline \d+:)\s*(.*)$")


class ScriptSyntaxValidator(BaseValidator):
    """Validates shell script syntax with ``<shell> -n``.

    Attributes:
        shell: Executable used to parse scripts (e.g. "bash").
    """

    kind = TargetKind.SCRIPT

    def __init__(self, shell: str = "bash") -> None:
        self.shell = shell

    def validate(self, target: ValidationTarget) -> ValidationResult:
        """Parse the target script without executing it.

        Args:
            target: Script file to check.

        Returns:
            OK if the shell accepts the script, otherwise FAIL with one message
            per diagnostic.

        Raises:
            OSError: If the script cannot be read or the shell is not installed.
        """
        with open(target.path, "rb") as f:
            content = f.read()

        result = subprocess.run(
            [self.shell, "-n"],
            input=content,
            capture_output=True,
            check=False,
            env={**os.environ, "LC_ALL": "C"},
        )

        if result.returncode == 0:
            return ValidationResult.ok(target)

        diagnostics = self._parse_diagnostics(result.stderr)
        if not diagnostics:
            diagnostics = [f"{self.shell} -n exited with status {result.returncode}"]

        return ValidationResult.fail(target, diagnostics)

    @staticmethod
    def _parse_diagnostics(stderr: bytes) -> list[str]:
        """Split shell error output into one message per diagnostic.

        Consecutive lines with the same "line N:" location are one diagnostic;
        the later line is appended to the earlier one.
        """
        text = stderr.decode("utf-8", errors="replace")
        messages: list[str] = []
        last_location: str | None = None

        for raw in text.splitlines():
            line = raw.rstrip()
            if not line.strip():
                continue
            match = _LOCATION_RE.match(line)
            if match and match.group(1) == last_location:
                messages[-1] = f"{messages[-1]}: {match.group(2)}"
            else:
                messages.append(line)
            last_location = match.group(1) if match else None

        return messages
