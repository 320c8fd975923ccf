"""Protocol definitions for regcheck.

These protocols define the capabilities a subject must expose to be checked,
and the sink a caller may supply to receive contract failures. They are
structural: any object with matching methods satisfies them at runtime.

Buffers are typed as Sequence[float] because subjects are free to store
parameters however they like (lists, numpy arrays, tensors converted on the
way out). The verifier itself always passes float64 numpy arrays.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from regcheck.reporting import ContractFailure


@runtime_checkable
class ParameterGetterSetter(Protocol):
    """Protocol for components with a fixed-length, mutable parameter vector."""

    def num_parameters(self) -> int:
        """Number of parameters. Non-negative and stable across calls."""
        ...

    def parameters(self, buffer: Sequence[float] | None = None) -> Sequence[float]:
        """Read the parameters.

        Args:
            buffer: None to have a fresh sequence allocated, or a caller-owned
                buffer of exactly num_parameters() elements to fill.

        Returns:
            The parameters, never aliasing internal storage.

        Raises:
            Exception: If buffer is given and its length differs from
                num_parameters().
        """
        ...

    def set_parameters(self, buffer: Sequence[float]) -> None:
        """Overwrite the parameters with a copy of buffer.

        Raises:
            Exception: If the length of buffer differs from num_parameters().
        """
        ...


@runtime_checkable
class InputOutputer(Protocol):
    """Protocol for components with fixed input/output dimensionality."""

    def input_dim(self) -> int: ...

    def output_dim(self) -> int: ...


@runtime_checkable
class Reporter(Protocol):
    """Protocol for sinks that receive contract failures.

    Reporting must not halt the caller; a sink records or forwards and returns.
    """

    def report(self, failure: ContractFailure) -> None: ...


def missing_methods(subject: object, protocol: type) -> list[str]:
    """List the protocol methods subject does not provide as callables."""
    names = [
        name
        for name, value in vars(protocol).items()
        if callable(value) and not name.startswith("_")
    ]
    return [name for name in names if not callable(getattr(subject, name, None))]


def require_capability(subject: object, protocol: type, name: str) -> None:
    """Raise SubjectTypeError if subject does not satisfy protocol.

    Args:
        subject: Object under test.
        protocol: Capability protocol the check needs.
        name: Subject name used in the error message.
    """
    from regcheck.exceptions import SubjectTypeError

    missing = missing_methods(subject, protocol)
    if missing:
        raise SubjectTypeError(name, protocol.__name__, missing)
