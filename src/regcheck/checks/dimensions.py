"""Dimension contract check."""

from __future__ import annotations

from typing import Any

from loguru import logger

from regcheck.config import VerifierConfig, load_verifier_config
from regcheck.protocols import InputOutputer, Reporter, require_capability
from regcheck.reporting import (
    ContractFailure,
    ContractGuarantee,
    ContractReport,
    LoggingReporter,
    MultiReporter,
)

CHECK_NAME = "dimension contract"


def check_dimensions(
    subject: InputOutputer,
    name: str,
    input_dim: int,
    output_dim: int,
    *,
    reporter: Reporter | None = None,
    config: VerifierConfig | None = None,
) -> ContractReport:
    """Verify subject reports the expected input and output dimensions.

    Each dimension is called once and compared independently; a mismatch on
    one never suppresses the other.

    Args:
        subject: Implementation under test.
        name: Human-readable subject name used in failure messages.
        input_dim: Expected input dimensionality.
        output_dim: Expected output dimensionality.
        reporter: Optional sink that also receives every failure.
        config: Verifier settings. None loads defaults plus REGCHECK_* env vars.

    Returns:
        ContractReport listing every mismatch.
    """
    require_capability(subject, InputOutputer, name)
    config = config or load_verifier_config()

    report = ContractReport(subject=name, check=CHECK_NAME)
    sink = MultiReporter([report, LoggingReporter() if config.log_failures else None, reporter])

    found_input = subject.input_dim()
    found_output = subject.output_dim()
    logger.debug(f"{name}: input_dim={found_input}, output_dim={found_output}")

    if found_input != input_dim:
        sink.report(
            ContractFailure(
                subject=name,
                guarantee=ContractGuarantee.INPUT_DIM,
                description="mismatch in input dimension",
                expected=input_dim,
                actual=found_input,
            )
        )
    if found_output != output_dim:
        sink.report(
            ContractFailure(
                subject=name,
                guarantee=ContractGuarantee.OUTPUT_DIM,
                description="mismatch in output dimension",
                expected=output_dim,
                actual=found_output,
            )
        )

    logger.debug(report.summary())
    return report


def assert_dimension_contract(
    subject: InputOutputer,
    name: str,
    input_dim: int,
    output_dim: int,
    **kwargs: Any,
) -> ContractReport:
    """Run check_dimensions and raise ContractViolationError on any mismatch."""
    report = check_dimensions(subject, name, input_dim, output_dim, **kwargs)
    report.raise_if_failed()
    return report
