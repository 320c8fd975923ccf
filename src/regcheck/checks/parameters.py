"""Parameter contract check.

Verifies that a ParameterGetterSetter reads and writes its parameter vector
with the right length, never aliases caller buffers or its own storage, round
trips written values exactly, and raises on buffers of the wrong length.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any

import numpy as np
from loguru import logger

from regcheck.config import VerifierConfig, load_verifier_config
from regcheck.constants import BUFFER_DTYPE, TOO_SHORT_TRIM
from regcheck.guards import maybe, raises
from regcheck.protocols import ParameterGetterSetter, Reporter, require_capability
from regcheck.reporting import (
    ContractFailure,
    ContractGuarantee,
    ContractReport,
    LoggingReporter,
    MultiReporter,
)

CHECK_NAME = "parameter contract"


def _equal(a: Sequence[float], b: Sequence[float]) -> bool:
    """Exact element-wise equality; differing lengths are never equal."""
    left = np.asarray(a, dtype=BUFFER_DTYPE)
    right = np.asarray(b, dtype=BUFFER_DTYPE)
    return bool(np.array_equal(left, right))


def _as_list(values: Sequence[float]) -> list[float]:
    return [float(v) for v in values]


def _scramble(values: Any, rng: np.random.Generator) -> bool:
    """Overwrite values in place with random numbers.

    Returns:
        False if values cannot be mutated in place (tuples, read-only arrays).
    """
    if isinstance(values, np.ndarray):
        if not values.flags.writeable:
            return False
        values[...] = rng.standard_normal(values.shape)
        return True
    if isinstance(values, MutableSequence):
        for i in range(len(values)):
            values[i] = float(rng.standard_normal())
        return True
    return False


def check_parameters(
    subject: ParameterGetterSetter,
    name: str,
    *,
    reporter: Reporter | None = None,
    config: VerifierConfig | None = None,
    rng: np.random.Generator | None = None,
) -> ContractReport:
    """Verify the parameter getter/setter contract of subject.

    Every violation is reported and checking carries on, except when the
    baseline parameters(None) read fails: the check then records the failure
    and stops, re-raising the subject's exception if
    config.reraise_baseline_errors is set.

    Exceptions raised by calls the contract requires to succeed (reads and
    writes with a correctly sized buffer) propagate to the caller.

    Args:
        subject: Implementation under test.
        name: Human-readable subject name used in failure messages.
        reporter: Optional sink that also receives every failure.
        config: Verifier settings. None loads defaults plus REGCHECK_* env vars.
        rng: Generator for perturbation values. None creates one from config.seed.

    Returns:
        ContractReport listing every violated guarantee.

    Raises:
        SubjectTypeError: If subject lacks one of the required methods.
    """
    require_capability(subject, ParameterGetterSetter, name)
    config = config or load_verifier_config()
    if rng is None:
        rng = np.random.default_rng(config.seed)

    report = ContractReport(subject=name, check=CHECK_NAME)
    sink = MultiReporter([report, LoggingReporter() if config.log_failures else None, reporter])

    def fail(guarantee: ContractGuarantee, description: str, **details: Any) -> None:
        sink.report(
            ContractFailure(subject=name, guarantee=guarantee, description=description, **details)
        )

    logger.debug(f"{name}: checking {CHECK_NAME}")
    n = subject.num_parameters()

    # Baseline read without a buffer; nothing later can be trusted if it fails
    baseline: list[Sequence[float]] = []

    def on_baseline_error(error: Exception) -> None:
        report.aborted = True
        logger.error(f"{name}: parameters raised with no buffer supplied, aborting check")
        fail(
            ContractGuarantee.BASELINE_READ,
            "parameters raised with no buffer supplied",
            error=error,
        )

    if maybe(
        lambda: baseline.append(subject.parameters(None)),
        reraise=config.reraise_baseline_errors,
        on_error=on_baseline_error,
    ):
        return report

    nil_param = baseline[0]
    if nil_param is None:
        report.aborted = True
        fail(ContractGuarantee.BASELINE_READ, "parameters returned None with no buffer supplied")
        return report

    if len(nil_param) != n:
        fail(
            ContractGuarantee.READ_LENGTH,
            "on no buffer, incorrect length returned from parameters",
            expected=n,
            actual=len(nil_param),
        )
    snapshot = np.array(nil_param, dtype=BUFFER_DTYPE)

    non_nil_param = np.zeros(n, dtype=BUFFER_DTYPE)
    subject.parameters(non_nil_param)
    if not _equal(nil_param, non_nil_param):
        fail(
            ContractGuarantee.READ_BUFFER_CONSISTENCY,
            "parameters with no buffer and with a caller buffer returned different values",
            expected=_as_list(nil_param),
            actual=_as_list(non_nil_param),
        )

    non_nil_param[:] = rng.standard_normal(n)
    if not _equal(nil_param, snapshot):
        fail(
            ContractGuarantee.READ_ALIASING,
            "modifying a buffer filled by parameters modified a previously returned value",
        )

    fresh = subject.parameters(None)
    if _scramble(fresh, rng) and not _equal(subject.parameters(None), snapshot):
        fail(
            ContractGuarantee.READ_ALIASING,
            "modifying the return from parameters modified the underlying parameters",
        )

    set_param = non_nil_param.copy()
    subject.set_parameters(set_param)
    if not _equal(set_param, non_nil_param):
        fail(
            ContractGuarantee.WRITE_INPUT_MUTATION,
            "input buffer modified during call to set_parameters",
        )

    after_param = subject.parameters(None)
    if not _equal(after_param, set_param):
        fail(
            ContractGuarantee.ROUND_TRIP,
            "set_parameters followed by parameters did not return the written values",
            expected=_as_list(set_param),
            actual=_as_list(after_param),
        )

    stored = np.array(after_param, dtype=BUFFER_DTYPE)
    _scramble(set_param, rng)
    if not _equal(subject.parameters(None), stored):
        fail(
            ContractGuarantee.WRITE_ALIASING,
            "modifying the buffer passed to set_parameters modified the underlying parameters",
        )

    # Wrong-length buffers must raise
    bad_length = np.zeros(n + config.too_long_padding, dtype=BUFFER_DTYPE)
    _check_bounds(subject, bad_length, n, "too long", fail)

    if n == 0:
        logger.debug(f"{name}: no parameters, skipping too-short probe")
        logger.debug(report.summary())
        return report

    bad_length = bad_length[: n - TOO_SHORT_TRIM]
    _check_bounds(subject, bad_length, n, "too short", fail)

    logger.debug(report.summary())
    return report


def _check_bounds(
    subject: ParameterGetterSetter,
    buffer: np.ndarray,
    n: int,
    kind: str,
    fail: Any,
) -> None:
    read_guarantee, write_guarantee = {
        "too long": (ContractGuarantee.READ_TOO_LONG, ContractGuarantee.WRITE_TOO_LONG),
        "too short": (ContractGuarantee.READ_TOO_SHORT, ContractGuarantee.WRITE_TOO_SHORT),
    }[kind]
    detail = f"length {len(buffer)} for {n} parameters"

    if not raises(lambda: subject.parameters(buffer)):
        fail(read_guarantee, f"parameters did not raise given a buffer {kind} ({detail})")
    if not raises(lambda: subject.set_parameters(buffer)):
        fail(write_guarantee, f"set_parameters did not raise given a buffer {kind} ({detail})")


def assert_parameter_contract(
    subject: ParameterGetterSetter,
    name: str,
    **kwargs: Any,
) -> ContractReport:
    """Run check_parameters and raise ContractViolationError on any failure.

    Keyword arguments are passed through to check_parameters.
    """
    report = check_parameters(subject, name, **kwargs)
    report.raise_if_failed()
    return report
