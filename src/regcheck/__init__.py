"""regcheck -- contract checks for regression and optimisation components.

Public API:
    check_parameters, check_dimensions, assert_parameter_contract,
    assert_dimension_contract, ParameterGetterSetter, InputOutputer,
    ContractReport, VerifierConfig, __version__

Names not in __all__ are internal and may change without notice.
"""

from loguru import logger

from regcheck.checks import (
    assert_dimension_contract,
    assert_parameter_contract,
    check_dimensions,
    check_parameters,
)
from regcheck.config import VerifierConfig, load_verifier_config
from regcheck.exceptions import ContractViolationError, RegCheckError, SubjectTypeError
from regcheck.protocols import InputOutputer, ParameterGetterSetter, Reporter
from regcheck.reporting import ContractFailure, ContractGuarantee, ContractReport

# Library default: silent until setup_logging() or logger.enable("regcheck")
logger.disable("regcheck")

__version__: str = "0.1.0"

__all__ = [
    "ContractFailure",
    "ContractGuarantee",
    "ContractReport",
    "ContractViolationError",
    "InputOutputer",
    "ParameterGetterSetter",
    "RegCheckError",
    "Reporter",
    "SubjectTypeError",
    "VerifierConfig",
    "__version__",
    "assert_dimension_contract",
    "assert_parameter_contract",
    "check_dimensions",
    "check_parameters",
    "load_verifier_config",
]
