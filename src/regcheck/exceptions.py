"""Exception hierarchy for regcheck."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from regcheck.reporting import ContractFailure


class RegCheckError(Exception):
    """Base exception for regcheck."""


class ConfigError(RegCheckError):
    """Invalid or missing verifier configuration."""


class SubjectTypeError(RegCheckError, TypeError):
    """Subject does not expose the capability a check requires."""

    def __init__(self, name: str, capability: str, missing: list[str]):
        detail = ", ".join(missing) if missing else "unknown"
        super().__init__(f"{name}: does not implement {capability} (missing: {detail})")
        self.name = name
        self.capability = capability
        self.missing = missing


class ContractViolationError(RegCheckError, AssertionError):
    """One or more contract guarantees were violated by a subject."""

    def __init__(self, subject: str, failures: list[ContractFailure]):
        lines = [f"{subject}: {len(failures)} contract violation(s)"]
        lines.extend(f"  - {failure.message}" for failure in failures)
        super().__init__("\n".join(lines))
        self.subject = subject
        self.failures = failures
