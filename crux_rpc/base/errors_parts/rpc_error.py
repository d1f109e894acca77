"""
Base exception type for the invocation taxonomy.

Every failure detected by the registry before the target method runs derives
from :class:`RpcError` and carries a normalized :class:`ErrorCode` so callers
and transports can branch on the kind rather than on message text.
"""
from __future__ import annotations

from typing import ClassVar

from .error_code import ErrorCode


class RpcError(Exception):
    """Root of the lookup, binding and access failures.

    Attributes:
        code: Normalized :class:`ErrorCode` for the failure kind.
        message: Human-readable description suitable for logs and envelopes.
    """

    code: ClassVar[ErrorCode]

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


__all__ = ["RpcError"]
