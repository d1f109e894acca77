"""Invocation engine: bind, resolve, call, encode.

The engine works on an already-resolved :class:`MethodDescriptor`; name lookup
and suggestions belong to the registry.

Failure semantics
-----------------
- Shape and binding failures are raised before the target is touched.
- An :class:`AccessFailure` while resolving the handle relaxes the handle once
  and retries the resolution; a second failure propagates unchanged.
- Exceptions raised by the target itself propagate as the original exception
  object. They are logged, never wrapped.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

from ..binding import ArgumentBinder, is_named, is_positional
from ..codec import DocumentCodec
from ..errors import AccessFailure, UsageError
from ..logging import LogContext, get_logger, log_event
from ..models import MethodDescriptor


class InvocationEngine:
    """Turns a descriptor plus an argument document into a result document."""

    def __init__(self, codec: DocumentCodec, binder: Optional[ArgumentBinder] = None) -> None:
        self._codec = codec
        self._binder = binder or ArgumentBinder(codec)
        self._logger = get_logger("crux_rpc.invocation")

    @property
    def binder(self) -> ArgumentBinder:
        return self._binder

    def invoke(self, descriptor: MethodDescriptor, args: Any, ctx: LogContext | None = None) -> Any:
        check_argument_shape(self._codec, args)
        bound = self._binder.bind(descriptor.parameters, args)
        result = self.call(descriptor, bound, ctx)
        return self._codec.encode(result, descriptor.return_type)

    def call(self, descriptor: MethodDescriptor, bound: List[Any], ctx: LogContext | None = None) -> Any:
        """Call the descriptor's target with a fully bound argument list."""
        target = self._resolve(descriptor, ctx)
        try:
            return target(*bound)
        except Exception as e:
            log_event(
                self._logger,
                "invoke.failed",
                ctx,
                level=logging.ERROR,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise

    def _resolve(self, descriptor: MethodDescriptor, ctx: LogContext | None) -> Callable[..., Any]:
        handle = descriptor.handle
        try:
            return handle.resolve()
        except AccessFailure as first:
            handle.relax()
            log_event(self._logger, "invoke.access_relaxed", ctx, level=logging.DEBUG, reason=str(first))
            return handle.resolve()


def check_argument_shape(codec: DocumentCodec, args: Any) -> None:
    """Raise :class:`UsageError` unless ``args`` is a sequence or a map."""
    if not (is_positional(args) or is_named(args)):
        raise UsageError.for_shape(codec.node_kind(args))


__all__ = ["InvocationEngine", "check_argument_shape"]
