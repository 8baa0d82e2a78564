"""Report rendering and exit-code derivation.

The reporter is a faithful renderer: it prints every result in report order,
never filters or reorders, and derives the process exit code from the
report's failure count.
"""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.text import Text

from repocheck.cli_utils import EXIT_FAILURE, EXIT_SUCCESS
from repocheck.validators.base import Status, ValidationReport

MESSAGE_INDENT = "  "


def exit_code_for(report: ValidationReport) -> int:
    """Return 0 if every target passed, 1 otherwise."""
    return EXIT_SUCCESS if report.is_success else EXIT_FAILURE


def summary_line(report: ValidationReport) -> str:
    """Build the final summary line for a report."""
    if report.is_success:
        return f"Validation passed: {report.total} target(s) checked"
    return f"Validation failed: {report.fail_count} of {report.total} target(s) failed"


def render(report: ValidationReport, console: Console) -> int:
    """Print a report as text lines and return the exit code.

    Emits ``OK: <path>`` or ``FAIL: <path>`` per result, one indented line per
    message under each failure, then a summary line.

    Args:
        report: Report to render.
        console: Rich console to print to.

    Returns:
        Process exit code (0 on success, 1 if any target failed).
    """
    for result in report.results:
        path = result.target.relative_path
        if result.status is Status.OK:
            console.print(Text.assemble(("OK", "green"), f": {path}"), soft_wrap=True)
            continue

        console.print(Text.assemble(("FAIL", "red"), f": {path}"), soft_wrap=True)
        for message in result.messages:
            console.print(Text(f"{MESSAGE_INDENT}{message}"), soft_wrap=True)

    style = "green" if report.is_success else "red"
    console.print(Text(summary_line(report), style=style), soft_wrap=True)

    return exit_code_for(report)


def report_to_dict(report: ValidationReport) -> dict[str, Any]:
    """Convert a report to a JSON-serializable dictionary."""
    return {
        "success": report.is_success,
        "fail_count": report.fail_count,
        "total": report.total,
        "results": [
            {
                "path": result.target.relative_path,
                "kind": result.target.kind.value,
                "status": result.status.value,
                "messages": list(result.messages),
            }
            for result in report.results
        ],
    }


def render_json(report: ValidationReport, console: Console) -> int:
    """Print a report as a JSON document and return the exit code."""
    console.print_json(json.dumps(report_to_dict(report)))
    return exit_code_for(report)
