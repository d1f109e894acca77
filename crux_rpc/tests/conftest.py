"""Pytest configuration for the crux_rpc test suite.

Registry fixtures are isolated from the caller's environment so that
``CRUX_RPC_*`` variables in a developer shell cannot change behaviour.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from crux_rpc import DocumentCodec, MethodRegistry, RegistryConfig
from crux_rpc.tests.helpers import GreeterService, greeter_descriptors


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop any CRUX_RPC_* variables inherited from the caller's shell."""
    for var in (
        "CRUX_RPC_CONFIG_FILE",
        "CRUX_RPC_SUGGEST_METHODS",
        "CRUX_RPC_NAMESPACE_SEPARATOR",
        "CRUX_RPC_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture()
def codec() -> DocumentCodec:
    return DocumentCodec()


@pytest.fixture()
def service() -> GreeterService:
    return GreeterService()


@pytest.fixture()
def registry(codec: DocumentCodec, service: GreeterService) -> MethodRegistry:
    """Registry with the greeter methods registered under unqualified names."""
    reg = MethodRegistry(codec=codec, config=RegistryConfig())
    reg.register_all(greeter_descriptors(service))
    return reg
