"""Contract failure records and reporting sinks."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from loguru import logger

from regcheck.exceptions import ContractViolationError
from regcheck.protocols import Reporter


class ContractGuarantee(Enum):
    """Guarantees verified by the contract checks."""

    BASELINE_READ = "baseline_read"  # parameters(None) succeeds
    READ_LENGTH = "read_length"
    READ_BUFFER_CONSISTENCY = "read_buffer_consistency"  # None vs caller buffer
    READ_ALIASING = "read_aliasing"
    WRITE_INPUT_MUTATION = "write_input_mutation"
    ROUND_TRIP = "round_trip"
    WRITE_ALIASING = "write_aliasing"
    READ_TOO_LONG = "read_too_long"
    WRITE_TOO_LONG = "write_too_long"
    READ_TOO_SHORT = "read_too_short"
    WRITE_TOO_SHORT = "write_too_short"
    INPUT_DIM = "input_dim"
    OUTPUT_DIM = "output_dim"


_UNSET: Any = object()


@dataclass
class ContractFailure:
    """A single violated guarantee."""

    subject: str
    guarantee: ContractGuarantee
    description: str
    expected: Any = _UNSET
    actual: Any = _UNSET
    error: Exception | None = None

    @property
    def has_comparison(self) -> bool:
        return self.expected is not _UNSET and self.actual is not _UNSET

    @property
    def message(self) -> str:
        """Human-readable message naming the subject."""
        text = f"{self.subject}: {self.description}"
        if self.has_comparison:
            text += f". expected {self.expected}, found {self.actual}"
        if self.error is not None:
            text += f" ({type(self.error).__name__}: {self.error})"
        return text

    def __str__(self) -> str:
        return self.message


@dataclass
class ContractReport:
    """Outcome of one check invocation.

    A report is itself a Reporter, so checks record failures into it
    directly and callers can inspect it once the check returns.
    """

    subject: str
    check: str
    failures: list[ContractFailure] = field(default_factory=list)
    aborted: bool = False

    def report(self, failure: ContractFailure) -> None:
        self.failures.append(failure)

    @property
    def passed(self) -> bool:
        return not self.failures and not self.aborted

    def guarantees(self) -> list[ContractGuarantee]:
        """Violated guarantees, in the order they were reported."""
        return [failure.guarantee for failure in self.failures]

    def raise_if_failed(self) -> None:
        """Raise ContractViolationError if any guarantee was violated."""
        if self.failures:
            raise ContractViolationError(self.subject, list(self.failures))

    def summary(self) -> str:
        if self.passed:
            return f"{self.subject}: {self.check} passed"
        status = "aborted" if self.aborted else "failed"
        return f"{self.subject}: {self.check} {status} with {len(self.failures)} violation(s)"


class LoggingReporter:
    """Reporter that logs each failure at WARNING level."""

    def __init__(self, level: str = "WARNING"):
        self.level = level

    def report(self, failure: ContractFailure) -> None:
        logger.log(self.level, failure.message)


class MultiReporter:
    """Fan a failure out to several reporters, in order."""

    def __init__(self, reporters: Iterable[Reporter | None]):
        self.reporters = [r for r in reporters if r is not None]

    def report(self, failure: ContractFailure) -> None:
        for reporter in self.reporters:
            reporter.report(failure)


__all__ = [
    "ContractFailure",
    "ContractGuarantee",
    "ContractReport",
    "LoggingReporter",
    "MultiReporter",
]
