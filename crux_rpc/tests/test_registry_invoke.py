"""End-to-end invocation through ``MethodRegistry``.

Covers the greet scenario, positional/named binding failures, fresh default
providers, null handling, and the identity round trip through the codec.
"""

from __future__ import annotations

import itertools
from datetime import datetime, timezone
from typing import Any, Dict, List

import pytest
from pydantic import BaseModel

from crux_rpc import (
    MISSING,
    MethodDescriptor,
    MethodNotFound,
    MethodRegistry,
    MissingArgument,
    NullArgument,
    ParameterBindingError,
    ParameterDescriptor,
    RegistryConfig,
    TooManyPositionalArguments,
    UsageError,
)
from crux_rpc.tests.helpers import GreeterService, greeter_descriptors
from crux_rpc.tests.utils import assert_true


def test_greet_named_argument(registry: MethodRegistry) -> None:
    result = registry.invoke("greet", {"name": "henry"})
    assert_true(result == "Hello henry", f"unexpected result {result!r}")


def test_greet_empty_positional_uses_default(registry: MethodRegistry) -> None:
    result = registry.invoke("greet", [])
    assert_true(result == "Hello stranger", f"unexpected result {result!r}")


def test_greet_empty_named_uses_default(registry: MethodRegistry) -> None:
    assert registry.invoke("greet", {}) == "Hello stranger"  # nosec B101


def test_positional_exact_length_succeeds(registry: MethodRegistry) -> None:
    assert registry.invoke("repeat", ["ha", 3]) == ["ha", "ha", "ha"]  # nosec B101


def test_positional_tuple_is_accepted(registry: MethodRegistry) -> None:
    assert registry.invoke("repeat", ("ho", 2)) == ["ho", "ho"]  # nosec B101


def test_lax_coercion_of_numeric_string(registry: MethodRegistry) -> None:
    assert registry.invoke("repeat", {"word": "x", "times": "2"}) == ["x", "x"]  # nosec B101


def test_lax_coercion_of_number_to_string(registry: MethodRegistry) -> None:
    assert registry.invoke("greet", [5]) == "Hello 5"  # nosec B101


def test_named_missing_required_key(registry: MethodRegistry) -> None:
    with pytest.raises(MissingArgument) as info:
        registry.invoke("repeat", {"word": "ha"})
    assert info.value.parameter == "times"  # nosec B101


def test_positional_missing_required_slot(registry: MethodRegistry) -> None:
    with pytest.raises(MissingArgument) as info:
        registry.invoke("repeat", ["ha"])
    assert info.value.parameter == "times"  # nosec B101


def test_too_many_positional_arguments(registry: MethodRegistry) -> None:
    with pytest.raises(TooManyPositionalArguments) as info:
        registry.invoke("greet", ["a", "b", "c"])
    assert (info.value.expected, info.value.actual) == (1, 3)  # nosec B101


def test_extra_named_argument_is_reported_alone(registry: MethodRegistry) -> None:
    with pytest.raises(ParameterBindingError) as info:
        registry.invoke("repeat", {"word": "ha", "times": 2, "loud": True})
    assert info.value.parameter is None  # nosec B101
    assert info.value.message == "unrecognized argument names: ['loud']"  # nosec B101


def test_extra_named_arguments_are_sorted(registry: MethodRegistry) -> None:
    with pytest.raises(ParameterBindingError) as info:
        registry.invoke("greet", {"name": "x", "zeta": 1, "alpha": 2})
    assert info.value.message == "unrecognized argument names: ['alpha', 'zeta']"  # nosec B101


@pytest.mark.parametrize(
    "args",
    [
        ["ha", None],
        {"word": "ha", "times": None},
        ["ha", MISSING],
        {"word": "ha", "times": MISSING},
    ],
)
def test_null_for_non_nullable_parameter(registry: MethodRegistry, args: Any) -> None:
    with pytest.raises(NullArgument) as info:
        registry.invoke("repeat", args)
    assert info.value.parameter == "times"  # nosec B101


def test_null_for_nullable_parameter_binds_none(registry: MethodRegistry) -> None:
    assert registry.invoke("describe", [None, 2]) == "None:2"  # nosec B101
    assert registry.invoke("describe", {"label": None, "count": 1}) == "None:1"  # nosec B101


def test_coercion_failure_names_parameter(registry: MethodRegistry) -> None:
    with pytest.raises(ParameterBindingError) as info:
        registry.invoke("repeat", ["ha", "many"])
    err = info.value
    assert err.parameter == "times"  # nosec B101
    assert err.message.startswith("Can't bind parameter 'times' of type int to STRING value \"many\" : ")  # nosec B101
    assert "valid integer" in err.message  # nosec B101
    assert "errors.pydantic.dev" not in err.message  # nosec B101


def test_bad_top_level_shape_is_usage_error(registry: MethodRegistry) -> None:
    with pytest.raises(UsageError) as info:
        registry.invoke("greet", "henry")
    assert "STRING" in str(info.value)  # nosec B101
    with pytest.raises(UsageError):
        registry.invoke("no_such_method", 42)


def test_default_provider_invoked_fresh_each_time() -> None:
    counter = itertools.count()
    registry = MethodRegistry(config=RegistryConfig())
    registry.register(
        MethodDescriptor.of(
            "tick",
            lambda n: n,
            [ParameterDescriptor("n", int, default=lambda: next(counter))],
            return_type=int,
        )
    )
    assert [registry.invoke("tick", []), registry.invoke("tick", {}), registry.invoke("tick", [])] == [0, 1, 2]  # nosec B101


def test_mutable_default_is_not_shared() -> None:
    def collect(bucket: List[str], item: str) -> List[str]:
        bucket.append(item)
        return bucket

    registry = MethodRegistry(config=RegistryConfig())
    registry.register(
        MethodDescriptor.of(
            "collect",
            collect,
            [ParameterDescriptor("bucket", List[str], default=list), ParameterDescriptor("item", str)],
            return_type=List[str],
        )
    )
    assert registry.invoke("collect", {"item": "a"}) == ["a"]  # nosec B101
    assert registry.invoke("collect", {"item": "b"}) == ["b"]  # nosec B101


def test_failed_bind_has_no_side_effects() -> None:
    calls: List[int] = []
    registry = MethodRegistry(config=RegistryConfig())
    registry.register(
        MethodDescriptor.of("record", lambda n: calls.append(n), [ParameterDescriptor("n", int)], return_type=None)
    )
    with pytest.raises(ParameterBindingError):
        registry.invoke("record", ["not a number"])
    assert calls == []  # nosec B101


class Point(BaseModel):
    x: int
    y: int


@pytest.mark.parametrize(
    ("value", "value_type"),
    [
        (7, int),
        ("text", str),
        ([1, 2, 3], List[int]),
        ({"a": [1.5]}, Dict[str, List[float]]),
        (datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc), datetime),
        (Point(x=1, y=2), Point),
    ],
)
def test_identity_round_trip(value: Any, value_type: Any) -> None:
    registry = MethodRegistry(config=RegistryConfig())
    registry.register(
        MethodDescriptor.of("f", lambda x: x, [ParameterDescriptor("x", value_type)], return_type=value_type)
    )
    codec = registry.codec
    document = codec.encode([value], List[value_type])
    assert codec.decode(registry.invoke("f", document), value_type) == value  # nosec B101


def test_unknown_method_carries_suggestions(registry: MethodRegistry) -> None:
    with pytest.raises(MethodNotFound) as info:
        registry.invoke("gret", {})
    assert info.value.name == "gret"  # nosec B101
    assert info.value.suggestions[0] == "greet"  # nosec B101
    assert len(info.value.suggestions) <= 5  # nosec B101


def test_unknown_method_without_suggestion_mode(service: GreeterService) -> None:
    registry = MethodRegistry(config=RegistryConfig(suggest_methods=False))
    registry.register_all(greeter_descriptors(service))
    with pytest.raises(MethodNotFound) as info:
        registry.invoke("gret", [])
    assert info.value.suggestions is None  # nosec B101
