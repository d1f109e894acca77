"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `crux_rpc.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .rpc_error import RpcError
from .lookup import MethodNotFound, UsageError
from .binding import (
    BindingError,
    MissingArgument,
    NullArgument,
    ParameterBindingError,
    TooManyPositionalArguments,
)
from .access import AccessFailure
from .classification import classify_exception

__all__ = [
    "ErrorCode",
    "RpcError",
    "UsageError",
    "MethodNotFound",
    "BindingError",
    "MissingArgument",
    "NullArgument",
    "ParameterBindingError",
    "TooManyPositionalArguments",
    "AccessFailure",
    "classify_exception",
]
