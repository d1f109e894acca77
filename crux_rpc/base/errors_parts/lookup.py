"""
Failures raised before binding starts: malformed argument documents and
unknown method names.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from .error_code import ErrorCode
from .rpc_error import RpcError


class UsageError(RpcError, ValueError):
    """The caller handed over something that is not an argument document."""

    code = ErrorCode.USAGE

    @classmethod
    def for_shape(cls, kind: str) -> "UsageError":
        return cls(f"arguments must be ARRAY or OBJECT but encountered {kind}")


class MethodNotFound(RpcError, LookupError):
    """No method is registered under the requested qualified name.

    Attributes:
        name: The requested qualified name.
        suggestions: Up to five close registered names, or ``None`` when
            suggestion mode is disabled.
    """

    code = ErrorCode.METHOD_NOT_FOUND

    def __init__(self, name: str, suggestions: Optional[Sequence[str]] = None) -> None:
        self.name = name
        self.suggestions: Optional[List[str]] = list(suggestions) if suggestions is not None else None
        message = f"method not found: {name}"
        if self.suggestions:
            message += f" ; did you mean {self.suggestions}?"
        super().__init__(message)


__all__ = ["UsageError", "MethodNotFound"]
