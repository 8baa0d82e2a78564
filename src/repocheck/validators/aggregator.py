"""Result aggregation for the repocheck validation pipeline."""

from __future__ import annotations

from repocheck.validators.base import Status, ValidationReport, ValidationResult


class ResultAggregator:
    """Collects per-target results in the order they are received.

    Results must be added in discovery order; the aggregator never reorders.
    Once finalized, no further results are accepted.
    """

    def __init__(self) -> None:
        self._results: list[ValidationResult] = []
        self._fail_count = 0
        self._finalized = False

    def add(self, result: ValidationResult) -> None:
        """Append a result.

        Raises:
            RuntimeError: If the aggregator has already been finalized.
        """
        if self._finalized:
            raise RuntimeError("cannot add results to a finalized aggregator")

        self._results.append(result)
        if result.status is Status.FAIL:
            self._fail_count += 1

    def is_success(self) -> bool:
        return self._fail_count == 0

    def finalize(self) -> ValidationReport:
        """Freeze the collected results into a ValidationReport."""
        self._finalized = True
        return ValidationReport(results=tuple(self._results), fail_count=self._fail_count)
