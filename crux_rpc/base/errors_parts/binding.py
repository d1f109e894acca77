"""
Argument binding failures.

All binding failures are raised before the target method is called, so a
failed bind never has side effects.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .rpc_error import RpcError


class BindingError(RpcError):
    """Common parent for failures mapping an argument document onto parameters."""

    code = ErrorCode.PARAMETER_BINDING


class MissingArgument(BindingError):
    """A required parameter was absent and declares no default provider."""

    code = ErrorCode.MISSING_ARGUMENT

    def __init__(self, parameter: str) -> None:
        super().__init__(f"missing argument for parameter '{parameter}'")
        self.parameter = parameter


class NullArgument(BindingError):
    """A non-nullable parameter received a null-like value."""

    code = ErrorCode.NULL_ARGUMENT

    def __init__(self, parameter: str) -> None:
        super().__init__(f"parameter '{parameter}' may not be null")
        self.parameter = parameter


class ParameterBindingError(BindingError):
    """Coercion failed, or unrecognized argument names were supplied.

    ``parameter`` is ``None`` for the unrecognized-names case.
    """

    code = ErrorCode.PARAMETER_BINDING

    def __init__(self, parameter: Optional[str], message: str) -> None:
        super().__init__(message)
        self.parameter = parameter


class TooManyPositionalArguments(BindingError):
    """A positional document is longer than the parameter list."""

    code = ErrorCode.TOO_MANY_POSITIONAL_ARGUMENTS

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"expected at most {expected} positional arguments but got {actual}")
        self.expected = expected
        self.actual = actual


__all__ = [
    "BindingError",
    "MissingArgument",
    "NullArgument",
    "ParameterBindingError",
    "TooManyPositionalArguments",
]
