"""Contract checks for parameter access and dimension reporting."""

from regcheck.checks.dimensions import assert_dimension_contract, check_dimensions
from regcheck.checks.parameters import assert_parameter_contract, check_parameters

__all__ = [
    "assert_dimension_contract",
    "assert_parameter_contract",
    "check_dimensions",
    "check_parameters",
]
