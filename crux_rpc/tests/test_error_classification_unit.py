from __future__ import annotations

import pytest

from crux_rpc.base.errors import (
    AccessFailure,
    BindingError,
    ErrorCode,
    MethodNotFound,
    MissingArgument,
    NullArgument,
    ParameterBindingError,
    RpcError,
    TooManyPositionalArguments,
    UsageError,
    classify_exception,
)


@pytest.mark.parametrize(
    ("exc", "code"),
    [
        (UsageError.for_shape("NUMBER"), ErrorCode.USAGE),
        (MethodNotFound("x", ["y"]), ErrorCode.METHOD_NOT_FOUND),
        (MissingArgument("a"), ErrorCode.MISSING_ARGUMENT),
        (NullArgument("a"), ErrorCode.NULL_ARGUMENT),
        (ParameterBindingError("a", "bad"), ErrorCode.PARAMETER_BINDING),
        (TooManyPositionalArguments(1, 2), ErrorCode.TOO_MANY_POSITIONAL_ARGUMENTS),
        (AccessFailure("T", "m", "gone"), ErrorCode.ACCESS_FAILURE),
        (RuntimeError("boom"), ErrorCode.INVOCATION_FAILURE),
        (KeyError("k"), ErrorCode.INVOCATION_FAILURE),
    ],
)
def test_classify(exc: Exception, code: ErrorCode) -> None:
    assert classify_exception(exc) is code  # nosec B101 - assert is appropriate in unit tests


def test_binding_family() -> None:
    for exc in (MissingArgument("a"), NullArgument("a"), ParameterBindingError(None, "m"), TooManyPositionalArguments(0, 1)):
        assert isinstance(exc, BindingError) and isinstance(exc, RpcError)  # nosec B101


def test_builtin_bases_for_interop() -> None:
    assert isinstance(UsageError("m"), ValueError)  # nosec B101
    assert isinstance(MethodNotFound("m"), LookupError)  # nosec B101
    assert isinstance(AccessFailure("T", "m", "r"), AttributeError)  # nosec B101


def test_method_not_found_message() -> None:
    assert str(MethodNotFound("gret", ["greet"])) == "method not found: gret ; did you mean ['greet']?"  # nosec B101
    assert str(MethodNotFound("gret")) == "method not found: gret"  # nosec B101
    assert MethodNotFound("gret").suggestions is None  # nosec B101
