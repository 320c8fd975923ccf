"""Tests for the dimension contract check."""

from __future__ import annotations

import pytest

from regcheck import ContractGuarantee
from regcheck.checks.dimensions import assert_dimension_contract, check_dimensions
from regcheck.exceptions import ContractViolationError, SubjectTypeError
from tests.fakes import FixedDims, RecordingReporter


class TestCheckDimensions:
    """Tests for check_dimensions."""

    def test_matching_dimensions_pass(self, config):
        report = check_dimensions(FixedDims(4, 1), "linear", 4, 1, config=config)

        assert report.passed
        assert report.failures == []

    def test_output_mismatch_only(self, config):
        report = check_dimensions(FixedDims(4, 1), "linear", 4, 2, config=config)

        assert report.guarantees() == [ContractGuarantee.OUTPUT_DIM]
        failure = report.failures[0]
        assert failure.expected == 2
        assert failure.actual == 1
        assert failure.message == "linear: mismatch in output dimension. expected 2, found 1"

    def test_input_mismatch_only(self, config):
        report = check_dimensions(FixedDims(3, 1), "linear", 4, 1, config=config)

        assert report.guarantees() == [ContractGuarantee.INPUT_DIM]
        assert report.failures[0].message == (
            "linear: mismatch in input dimension. expected 4, found 3"
        )

    def test_both_mismatches_reported_independently(self, config):
        report = check_dimensions(FixedDims(4, 1), "linear", 5, 2, config=config)

        assert report.guarantees() == [ContractGuarantee.INPUT_DIM, ContractGuarantee.OUTPUT_DIM]

    def test_each_accessor_called_once(self, config):
        subject = FixedDims()
        check_dimensions(subject, "linear", 4, 1, config=config)

        assert subject.calls == ["input_dim", "output_dim"]

    def test_reporter_receives_failures(self, config):
        reporter = RecordingReporter()
        check_dimensions(FixedDims(4, 1), "linear", 4, 2, reporter=reporter, config=config)

        assert len(reporter.failures) == 1

    def test_rejects_subject_without_capability(self, config):
        with pytest.raises(SubjectTypeError, match="InputOutputer"):
            check_dimensions(object(), "thing", 1, 1, config=config)


class TestAssertDimensionContract:
    """Tests for assert_dimension_contract."""

    def test_passes_silently(self, config):
        report = assert_dimension_contract(FixedDims(2, 3), "net", 2, 3, config=config)
        assert report.passed

    def test_raises_on_mismatch(self, config):
        with pytest.raises(ContractViolationError, match="mismatch in output dimension"):
            assert_dimension_contract(FixedDims(2, 3), "net", 2, 4, config=config)
