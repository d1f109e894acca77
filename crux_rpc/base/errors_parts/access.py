"""
Access failure raised when a method handle cannot produce a callable.
"""
from __future__ import annotations

from .error_code import ErrorCode
from .rpc_error import RpcError


class AccessFailure(RpcError, AttributeError):
    """The target attribute could not be resolved to a callable on its owner.

    Attributes:
        owner_type: Name of the owner's type (or ``"<direct>"``).
        attribute: Attribute name the handle was asked to resolve.
    """

    code = ErrorCode.ACCESS_FAILURE

    def __init__(self, owner_type: str, attribute: str, reason: str) -> None:
        super().__init__(f"cannot access {owner_type}.{attribute}: {reason}")
        self.owner_type = owner_type
        self.attribute = attribute


__all__ = ["AccessFailure"]
