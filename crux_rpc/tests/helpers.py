"""Shared service and descriptors for registry tests.

Descriptors are built by hand here because method discovery is an external
concern.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

from crux_rpc import MethodDescriptor, MethodHandle, ParameterDescriptor


class GreeterService:
    """Service used across tests; ``greet`` mirrors the canonical example."""

    def greet(self, name: str) -> str:
        return f"Hello {name}"

    def repeat(self, word: str, times: int) -> List[str]:
        return [word] * times

    def describe(self, label: Optional[str], count: int) -> str:
        return f"{label}:{count}"

    def explode(self, message: str) -> str:
        raise RuntimeError(message)

    def __whisper(self, name: str) -> str:
        return f"psst {name}"


def greeter_descriptors(service: GreeterService, namespace: Tuple[str, ...] = ()) -> List[MethodDescriptor]:
    """Hand-built descriptors for ``GreeterService``."""
    return [
        MethodDescriptor(
            name="greet",
            parameters=(ParameterDescriptor("name", str, default=lambda: "stranger"),),
            return_type=str,
            handle=MethodHandle(service, "greet"),
            namespace=namespace,
        ),
        MethodDescriptor(
            name="repeat",
            parameters=(ParameterDescriptor("word", str), ParameterDescriptor("times", int)),
            return_type=List[str],
            handle=MethodHandle(service, "repeat"),
            namespace=namespace,
        ),
        MethodDescriptor(
            name="describe",
            parameters=(
                ParameterDescriptor("label", Optional[str], nullable=True),
                ParameterDescriptor("count", int),
            ),
            return_type=str,
            handle=MethodHandle(service, "describe"),
            namespace=namespace,
        ),
        MethodDescriptor(
            name="explode",
            parameters=(ParameterDescriptor("message", str),),
            return_type=str,
            handle=MethodHandle(service, "explode"),
            namespace=namespace,
        ),
        MethodDescriptor(
            name="whisper",
            parameters=(ParameterDescriptor("name", str),),
            return_type=str,
            handle=MethodHandle(service, "__whisper"),
            namespace=namespace,
        ),
    ]
