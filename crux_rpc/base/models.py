"""
Method metadata public surface.

This module re-exports the one-class-per-file implementations under
``crux_rpc.base.models_parts`` to keep a stable import path.
"""

from .models_parts.parameter_descriptor import DefaultProvider, ParameterDescriptor
from .models_parts.method_handle import MethodHandle
from .models_parts.method_descriptor import MethodDescriptor

__all__ = [
    "DefaultProvider",
    "ParameterDescriptor",
    "MethodHandle",
    "MethodDescriptor",
]
