"""Base validator classes and models for the repocheck validation pipeline.

Provides the target/result/report data model and the abstract validator
contract every per-kind validator implements.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class TargetKind(str, Enum):
    """Kind of a validation target. Selects the validator in the dispatch table."""

    SCRIPT = "script"
    JSON = "json"
    PLUGIN_MANIFEST = "plugin-manifest"


class Status(str, Enum):
    """Outcome of validating one target."""

    OK = "ok"
    FAIL = "fail"


@dataclass(frozen=True)
class ValidationTarget:
    """One file or directory selected for validation.

    Attributes:
        path: Absolute path to the file or directory.
        kind: Kind of target, used for validator dispatch.
        root: Discovery root the target was found under.
    """

    path: Path
    kind: TargetKind
    root: Path

    @property
    def relative_path(self) -> str:
        """POSIX path relative to the discovery root."""
        try:
            return self.path.relative_to(self.root).as_posix()
        except ValueError:
            return self.path.as_posix()

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a single target.

    Attributes:
        target: The target that was validated.
        status: Status.OK or Status.FAIL.
        messages: Diagnostics in the order the validator produced them.
            Empty when status is OK.
    """

    target: ValidationTarget
    status: Status
    messages: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.status is Status.OK and self.messages:
            raise ValueError("an OK result cannot carry messages")
        if self.status is Status.FAIL and not self.messages:
            raise ValueError("a FAIL result needs at least one message")

    @classmethod
    def ok(cls, target: ValidationTarget) -> ValidationResult:
        return cls(target=target, status=Status.OK)

    @classmethod
    def fail(cls, target: ValidationTarget, messages: Iterable[str]) -> ValidationResult:
        return cls(target=target, status=Status.FAIL, messages=tuple(messages))

    @property
    def passed(self) -> bool:
        return self.status is Status.OK


@dataclass(frozen=True)
class ValidationReport:
    """Ordered, immutable collection of all per-target outcomes for one run.

    Attributes:
        results: Results in discovery order.
        fail_count: Number of results with status FAIL.
    """

    results: tuple[ValidationResult, ...]
    fail_count: int

    @property
    def is_success(self) -> bool:
        return self.fail_count == 0

    @property
    def total(self) -> int:
        return len(self.results)


class BaseValidator(ABC):
    """Abstract base class for all validators.

    A validator checks exactly one kind of target. It reads the target at most
    once, returns a ValidationResult, and never raises for content problems.
    Environment failures (OSError) are left to propagate.

    Attributes:
        kind: The target kind this validator handles.
    """

    kind: TargetKind

    @abstractmethod
    def validate(self, target: ValidationTarget) -> ValidationResult:
        """Validate one target.

        Must be implemented by subclasses to perform kind-specific checks.

        Args:
            target: Target to validate. Its kind matches self.kind.

        Returns:
            ValidationResult for the target.
        """
