"""Shared testing utilities for the invocation test suite.

Exports:
    - assert_true(condition: bool, message: str) -> None
"""
from __future__ import annotations


def assert_true(condition: bool, message: str) -> None:
    """Raise AssertionError with the provided message if condition is False.

    Parameters
    ----------
    condition: bool
        Boolean expression under test.
    message: str
        Contextual diagnostic message to display on failure.

    Raises
    ------
    AssertionError
        If `condition` evaluates false.
    """
    if not condition:
        raise AssertionError(message)
