"""Invocation engine."""

from .engine import InvocationEngine, check_argument_shape

__all__ = ["InvocationEngine", "check_argument_shape"]
