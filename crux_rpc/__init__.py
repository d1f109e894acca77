"""crux_rpc package

Name-addressed invocation of registered methods with loosely typed argument
documents.

Purpose:
    Resolve a qualified method name, bind a positional or named argument
    document onto the method's typed parameters, call it, and encode the result
    as a document. Unknown names produce ranked "did you mean" suggestions.
    Transport, authentication and method discovery live outside this package.

Public API (re-exported):
    - Version: ``__version__``
    - Registry: :class:`MethodRegistry`
    - Metadata: :class:`MethodDescriptor`, :class:`ParameterDescriptor`,
      :class:`MethodHandle`
    - Codec: :class:`DocumentCodec`, ``MISSING``
    - Exceptions: :class:`RpcError` and the taxonomy below it, :class:`ErrorCode`
    - Configuration: :class:`RegistryConfig`, :func:`get_registry_config`
"""

from .base import (
    MISSING,
    AccessFailure,
    BindingError,
    DocumentCodec,
    ErrorCode,
    InvocationResultDTO,
    MethodDescriptor,
    MethodHandle,
    MethodNotFound,
    MethodRegistry,
    MissingArgument,
    NullArgument,
    ParameterBindingError,
    ParameterDescriptor,
    RpcError,
    TooManyPositionalArguments,
    UsageError,
    classify_exception,
    suggest,
)
from .config import RegistryConfig, get_registry_config

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "MethodRegistry",
    "MethodDescriptor",
    "ParameterDescriptor",
    "MethodHandle",
    "DocumentCodec",
    "MISSING",
    "InvocationResultDTO",
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
    "suggest",
    "RegistryConfig",
    "get_registry_config",
]
