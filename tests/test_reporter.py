"""Tests for repocheck.reporter module."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from repocheck.reporter import render, render_json, report_to_dict, summary_line
from repocheck.validators import (
    ResultAggregator,
    TargetKind,
    ValidationPipeline,
    ValidationReport,
    ValidationResult,
    ValidationTarget,
)


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=200, color_system=None, highlight=False), buffer


def _report(root: Path, *results: tuple[str, list[str]]) -> ValidationReport:
    aggregator = ResultAggregator()
    for rel, messages in results:
        target = ValidationTarget(path=root / rel, kind=TargetKind.JSON, root=root)
        if messages:
            aggregator.add(ValidationResult.fail(target, messages))
        else:
            aggregator.add(ValidationResult.ok(target))
    return aggregator.finalize()


class TestRender:
    """Tests for text rendering."""

    def test_success_report(self, tmp_path: Path) -> None:
        """Test OK lines, the success banner and exit code 0."""
        console, buffer = _console()
        report = _report(tmp_path, ("a.json", []), ("b.json", []))

        exit_code = render(report, console)

        assert exit_code == 0
        assert buffer.getvalue().splitlines() == [
            "OK: a.json",
            "OK: b.json",
            "Validation passed: 2 target(s) checked",
        ]

    def test_failure_report(self, tmp_path: Path) -> None:
        """Test FAIL lines are followed by one indented line per message."""
        console, buffer = _console()
        report = _report(
            tmp_path,
            ("broken.sh", ["line 3: syntax error", "line 3: `fi'"]),
            ("ok.json", []),
        )

        exit_code = render(report, console)

        assert exit_code == 1
        assert buffer.getvalue().splitlines() == [
            "FAIL: broken.sh",
            "  line 3: syntax error",
            "  line 3: `fi'",
            "OK: ok.json",
            "Validation failed: 1 of 2 target(s) failed",
        ]

    def test_empty_report(self, tmp_path: Path) -> None:
        """Test an empty report still prints a summary and passes."""
        console, buffer = _console()
        assert render(ResultAggregator().finalize(), console) == 0
        assert buffer.getvalue().splitlines() == ["Validation passed: 0 target(s) checked"]

    def test_paths_with_brackets_printed_verbatim(self, tmp_path: Path) -> None:
        """Test Rich markup in paths or messages is not interpreted."""
        console, buffer = _console()
        report = _report(tmp_path, ("[red]x[/red].json", ["Expecting value: [bold]"]))

        render(report, console)

        lines = buffer.getvalue().splitlines()
        assert lines[0] == "FAIL: [red]x[/red].json"
        assert lines[1] == "  Expecting value: [bold]"

    def test_rendering_is_idempotent(self, tmp_path: Path) -> None:
        """Test two runs over an unchanged tree render byte-identical output."""
        (tmp_path / "ok.json").write_text("{}")
        (tmp_path / "broken.json").write_text("{ invalid")
        pipeline = ValidationPipeline(tmp_path)

        outputs = []
        for _ in range(2):
            console, buffer = _console()
            render(pipeline.run([TargetKind.JSON]), console)
            outputs.append(buffer.getvalue())

        assert outputs[0] == outputs[1]


class TestSummaryLine:
    """Tests for summary_line."""

    @pytest.mark.parametrize(
        ("fail_count", "expected"),
        [
            (0, "Validation passed: 3 target(s) checked"),
            (2, "Validation failed: 2 of 3 target(s) failed"),
        ],
    )
    def test_summary(self, tmp_path: Path, fail_count: int, expected: str) -> None:
        """Test the summary reflects the failure count."""
        results = [("a.json", []), ("b.json", []), ("c.json", [])]
        for i in range(fail_count):
            results[i] = (results[i][0], ["bad"])
        assert summary_line(_report(tmp_path, *results)) == expected


class TestRenderJson:
    """Tests for JSON rendering."""

    def test_json_document(self, tmp_path: Path) -> None:
        """Test the JSON output carries every result in order."""
        console, buffer = _console()
        report = _report(tmp_path, ("broken.json", ["Expecting value"]), ("ok.json", []))

        exit_code = render_json(report, console)

        assert exit_code == 1
        data = json.loads(buffer.getvalue())
        assert data == report_to_dict(report)
        assert data["success"] is False
        assert data["fail_count"] == 1
        assert data["total"] == 2
        assert data["results"][0] == {
            "path": "broken.json",
            "kind": "json",
            "status": "fail",
            "messages": ["Expecting value"],
        }
        assert data["results"][1]["status"] == "ok"
