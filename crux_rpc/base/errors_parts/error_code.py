"""
Normalized invocation error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the registry, the result envelope
and structured logging. Values are lowercase snake_case and are considered a
stable public contract for transports and log consumers.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    USAGE = "usage"
    METHOD_NOT_FOUND = "method_not_found"
    MISSING_ARGUMENT = "missing_argument"
    NULL_ARGUMENT = "null_argument"
    PARAMETER_BINDING = "parameter_binding"
    TOO_MANY_POSITIONAL_ARGUMENTS = "too_many_positional_arguments"
    INVOCATION_FAILURE = "invocation_failure"
    ACCESS_FAILURE = "access_failure"


__all__ = ["ErrorCode"]
