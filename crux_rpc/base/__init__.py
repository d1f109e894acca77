"""
crux_rpc Base Package

Exports the invocation core: method metadata, the document codec, the
argument binder, the invocation engine, name suggestions and the registry that
composes them.
"""

from .errors import (
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
from .models import DefaultProvider, MethodDescriptor, MethodHandle, ParameterDescriptor
from .codec import MISSING, CoercionError, DocumentCodec
from .binding import ArgumentBinder
from .invocation import InvocationEngine
from .suggestions import bounded_levenshtein, rank_suggestions, suggest
from .dto import InvocationResultDTO, MethodSummaryDTO, ParameterSummaryDTO
from .registry import MethodRegistry

__all__ = [
    # errors
    "AccessFailure",
    "BindingError",
    "ErrorCode",
    "MethodNotFound",
    "MissingArgument",
    "NullArgument",
    "ParameterBindingError",
    "RpcError",
    "TooManyPositionalArguments",
    "UsageError",
    "classify_exception",
    # metadata
    "DefaultProvider",
    "MethodDescriptor",
    "MethodHandle",
    "ParameterDescriptor",
    # codec
    "MISSING",
    "CoercionError",
    "DocumentCodec",
    # core
    "ArgumentBinder",
    "InvocationEngine",
    "bounded_levenshtein",
    "rank_suggestions",
    "suggest",
    "MethodRegistry",
    # dto
    "InvocationResultDTO",
    "MethodSummaryDTO",
    "ParameterSummaryDTO",
]
