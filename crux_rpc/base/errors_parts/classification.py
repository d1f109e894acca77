"""
Error classification helper mapping exceptions to normalized ErrorCode values.

Taxonomy exceptions carry their own code. Anything else reaching a caller of
the registry was raised by the target method itself and is classified as an
invocation failure.
"""
from __future__ import annotations

from .error_code import ErrorCode
from .rpc_error import RpcError


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ``RpcError`` passthrough (its class-level ``code``).
        2. ``INVOCATION_FAILURE`` fallback.
    """
    if isinstance(exc, RpcError):
        return exc.code
    return ErrorCode.INVOCATION_FAILURE


__all__ = ["classify_exception"]
