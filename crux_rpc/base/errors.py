"""Unified invocation error taxonomy public surface.

This module re-exports the implementations under
``crux_rpc.base.errors_parts`` to maintain a stable import path while keeping
each group of failures in its own small file.
"""

from .errors_parts import (
    AccessFailure,
    BindingError,
    ErrorCode,
    MethodNotFound,
    MissingArgument,
    NullArgument,
    ParameterBindingError,
    RpcError,
    TooManyPositionalArguments,
    UsageError,
    classify_exception,
)

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
