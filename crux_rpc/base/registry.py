"""Method registry: qualified name -> descriptor, plus invocation entry points.

Contract:
    - ``register(descriptor)`` inserts or replaces by qualified name.
    - ``invoke(name, args)`` returns the encoded result document or raises a
      taxonomy error (or the target method's own exception).
    - ``dispatch(name, args)`` is the envelope form used by transports; it
      returns an :class:`InvocationResultDTO` instead of raising.
    - ``suggest(name)`` ranks registered names by edit distance.

Concurrency:
    The name mapping is a plain ``dict`` mutated only by ``register``. Finish
    registration (or synchronize externally) before invoking from multiple
    threads. Concurrent ``invoke``/``suggest`` calls on a stable registry are
    safe: lookups are read-only and every call binds its own argument list.

Example usage:
    registry = MethodRegistry()
    registry.register(
        MethodDescriptor.of(
            "greet",
            lambda name: f"Hello {name}",
            [ParameterDescriptor("name", str, default=lambda: "stranger")],
            return_type=str,
        )
    )
    registry.invoke("greet", {"name": "henry"})  # "Hello henry"
    registry.invoke("greet", [])                 # "Hello stranger"
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Optional, ValuesView

from ..config import RegistryConfig, get_registry_config
from .codec import CoercionError, DocumentCodec
from .dto import InvocationResultDTO, MethodSummaryDTO, ParameterSummaryDTO
from .errors import BindingError, MethodNotFound, RpcError, UsageError, classify_exception
from .invocation import InvocationEngine, check_argument_shape
from .logging import LogContext, get_logger, log_event
from .models import MethodDescriptor
from .suggestions import suggest as rank_names


class MethodRegistry:
    """Owns the name -> descriptor mapping and composes binder, engine and suggestions.

    Args:
        codec: Document codec used for argument coercion and result encoding.
            Defaults to a lax :class:`DocumentCodec`.
        config: Registry switches. Defaults to ``get_registry_config()``.
    """

    def __init__(self, codec: Optional[DocumentCodec] = None, config: Optional[RegistryConfig] = None) -> None:
        self._codec = codec or DocumentCodec()
        self._config = config or get_registry_config()
        self._engine = InvocationEngine(self._codec)
        self._methods: Dict[str, MethodDescriptor] = {}
        self._logger = get_logger("crux_rpc.registry")

    @property
    def codec(self) -> DocumentCodec:
        return self._codec

    @property
    def config(self) -> RegistryConfig:
        return self._config

    @property
    def suggest_methods(self) -> bool:
        return self._config.suggest_methods

    # ---- registration ----

    def register(self, descriptor: MethodDescriptor) -> str:
        """Register ``descriptor`` under its qualified name and return that name.

        A descriptor already registered under the same name is replaced.
        """
        name = descriptor.qualified_name(self._config.namespace_separator)
        if name in self._methods:
            # TODO: offer a strict mode that raises on duplicate registration instead of replacing
            log_event(self._logger, "registry.replace", LogContext(method=name), level=logging.WARNING)
        else:
            log_event(
                self._logger,
                "registry.register",
                LogContext(method=name),
                level=logging.DEBUG,
                parameters=list(descriptor.parameter_names),
            )
        self._methods[name] = descriptor
        return name

    def register_all(self, descriptors: Iterable[MethodDescriptor]) -> List[str]:
        """Register a batch of descriptors, typically the output of a discovery step."""
        return [self.register(d) for d in descriptors]

    # ---- lookup ----

    def get(self, name: str) -> Optional[MethodDescriptor]:
        return self._methods.get(name)

    def list_methods(self) -> ValuesView[MethodDescriptor]:
        """Read-only live view of every registered descriptor."""
        return MappingProxyType(self._methods).values()

    def describe(self) -> List[MethodSummaryDTO]:
        """Summaries of the registered methods, sorted by qualified name."""
        describe_type = self._codec.describe_type
        return [
            MethodSummaryDTO(
                name=name,
                parameters=[
                    ParameterSummaryDTO(
                        name=p.name,
                        type=describe_type(p.type),
                        nullable=p.nullable,
                        has_default=p.has_default,
                    )
                    for p in d.parameters
                ],
                return_type=describe_type(d.return_type),
            )
            for name, d in sorted(self._methods.items())
        ]

    def suggest(self, name: str) -> List[str]:
        """Up to five registered names closest to ``name`` by edit distance."""
        return rank_names(name, self._methods.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._methods

    def __len__(self) -> int:
        return len(self._methods)

    # ---- invocation ----

    def invoke(self, name: str, args: Any, request_id: Optional[str] = None) -> Any:
        """Invoke the method registered under ``name`` with an argument document."""
        check_argument_shape(self._codec, args)
        ctx = LogContext(method=name, request_id=request_id)

        descriptor = self._methods.get(name)
        if descriptor is None:
            suggestions = self.suggest(name) if self._config.suggest_methods else None
            log_event(self._logger, "invoke.not_found", ctx, suggestions=suggestions)
            raise MethodNotFound(name, suggestions)

        try:
            result = self._engine.invoke(descriptor, args, ctx)
        except BindingError as e:
            log_event(
                self._logger,
                "invoke.binding_failed",
                ctx,
                level=logging.DEBUG,
                error_code=e.code.value,
                parameter=getattr(e, "parameter", None),
            )
            raise
        log_event(self._logger, "invoke.ok", ctx, level=logging.DEBUG)
        return result

    def invoke_json(self, name: str, text: str | bytes, request_id: Optional[str] = None) -> Any:
        """Parse a JSON argument document and invoke ``name`` with it."""
        try:
            args = self._codec.loads(text)
        except CoercionError as e:
            raise UsageError(e.message) from e
        return self.invoke(name, args, request_id=request_id)

    def dispatch(self, name: str, args: Any, request_id: Optional[str] = None) -> InvocationResultDTO:
        """Invoke ``name`` and wrap the outcome in an :class:`InvocationResultDTO`.

        Taxonomy errors and exceptions raised by the target method become
        ``ok=False`` envelopes; nothing is raised for them.
        """
        try:
            content = self.invoke(name, args, request_id=request_id)
        except Exception as e:
            return self._failure_envelope(name, e)
        return InvocationResultDTO(name=name, ok=True, content=content)

    @staticmethod
    def _failure_envelope(name: str, error: Exception) -> InvocationResultDTO:
        metadata: Dict[str, Any] = {"error_type": type(error).__name__}
        if isinstance(error, MethodNotFound) and error.suggestions is not None:
            metadata["suggestions"] = error.suggestions
        parameter = getattr(error, "parameter", None) if isinstance(error, RpcError) else None
        if parameter is not None:
            metadata["parameter"] = parameter
        return InvocationResultDTO(
            name=name,
            ok=False,
            code=classify_exception(error).value,
            error=str(error),
            metadata=metadata,
        )


__all__ = ["MethodRegistry"]
