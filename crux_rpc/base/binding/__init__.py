"""Argument binding."""

from .binder import ArgumentBinder, is_named, is_positional

__all__ = ["ArgumentBinder", "is_named", "is_positional"]
