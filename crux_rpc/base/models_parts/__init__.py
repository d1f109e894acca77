"""Method metadata parts: one descriptor type per file."""

from .parameter_descriptor import DefaultProvider, ParameterDescriptor
from .method_handle import MethodHandle
from .method_descriptor import MethodDescriptor

__all__ = [
    "DefaultProvider",
    "ParameterDescriptor",
    "MethodHandle",
    "MethodDescriptor",
]
