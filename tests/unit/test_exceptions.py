"""Tests for exception hierarchy."""

import pytest

from regcheck.exceptions import (
    ConfigError,
    ContractViolationError,
    RegCheckError,
    SubjectTypeError,
)
from regcheck.reporting import ContractFailure, ContractGuarantee


class TestExceptionHierarchy:
    """All exceptions inherit from RegCheckError."""

    @pytest.mark.parametrize("exc_class", [ConfigError, ContractViolationError, SubjectTypeError])
    def test_inherits_from_base(self, exc_class):
        assert issubclass(exc_class, RegCheckError)

    def test_contract_violation_is_assertion_error(self):
        assert issubclass(ContractViolationError, AssertionError)

    def test_subject_type_error_is_type_error(self):
        assert issubclass(SubjectTypeError, TypeError)


class TestExceptionMessages:
    """Exception instantiation and messages."""

    def test_subject_type_error_message(self):
        err = SubjectTypeError("model", "InputOutputer", ["input_dim", "output_dim"])

        assert str(err) == "model: does not implement InputOutputer (missing: input_dim, output_dim)"
        assert err.missing == ["input_dim", "output_dim"]

    def test_contract_violation_lists_failures(self):
        failures = [
            ContractFailure("model", ContractGuarantee.READ_TOO_LONG, "read not checked"),
            ContractFailure("model", ContractGuarantee.WRITE_TOO_LONG, "write not checked"),
        ]
        err = ContractViolationError("model", failures)

        lines = str(err).splitlines()
        assert lines[0] == "model: 2 contract violation(s)"
        assert lines[1] == "  - model: read not checked"
        assert lines[2] == "  - model: write not checked"
        assert err.failures == failures
