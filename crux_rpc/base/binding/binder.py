"""Argument binder mapping an argument document onto a parameter list.

Contract:
    ``bind(parameters, args)`` returns exactly one value per parameter, in
    parameter order, or raises a :class:`~crux_rpc.base.errors.BindingError`.

Positional documents (lists/tuples) bind by index; missing trailing slots use
default providers. Named documents (mappings) bind by parameter name and
reject keys that match no parameter. Default providers are invoked on every
bind that needs them.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Sequence

from ..codec import CoercionError, DocumentCodec
from ..errors import (
    MissingArgument,
    NullArgument,
    ParameterBindingError,
    TooManyPositionalArguments,
    UsageError,
)
from ..models import ParameterDescriptor


def is_positional(args: Any) -> bool:
    return isinstance(args, (list, tuple))


def is_named(args: Any) -> bool:
    return isinstance(args, Mapping)


class ArgumentBinder:
    """Binds argument documents to typed positional argument lists."""

    def __init__(self, codec: DocumentCodec) -> None:
        self._codec = codec

    def bind(self, parameters: Sequence[ParameterDescriptor], args: Any) -> List[Any]:
        if is_positional(args):
            return self.bind_positional(parameters, args)
        if is_named(args):
            return self.bind_named(parameters, args)
        raise UsageError.for_shape(self._codec.node_kind(args))

    def bind_positional(self, parameters: Sequence[ParameterDescriptor], args: Sequence[Any]) -> List[Any]:
        if len(args) > len(parameters):
            raise TooManyPositionalArguments(len(parameters), len(args))

        bound: List[Any] = []
        for i, param in enumerate(parameters):
            if i >= len(args):
                bound.append(self._default_or_missing(param))
                continue
            bound.append(self._coerce(param, args[i]))
        return bound

    def bind_named(self, parameters: Sequence[ParameterDescriptor], args: Mapping[str, Any]) -> List[Any]:
        bound: List[Any] = []
        consumed = 0
        for param in parameters:
            if param.name not in args:
                bound.append(self._default_or_missing(param))
                continue
            bound.append(self._coerce(param, args[param.name]))
            consumed += 1

        if consumed < len(args):
            extra = sorted(set(args) - {p.name for p in parameters}, key=str)
            if extra:
                raise ParameterBindingError(None, f"unrecognized argument names: {extra}")
        return bound

    @staticmethod
    def _default_or_missing(param: ParameterDescriptor) -> Any:
        if param.has_default:
            return param.default_value()
        raise MissingArgument(param.name)

    def _coerce(self, param: ParameterDescriptor, node: Any) -> Any:
        if self._codec.is_null_like(node):
            if not param.nullable:
                raise NullArgument(param.name)
            return None
        try:
            return self._codec.convert(node, param.type)
        except CoercionError as e:
            raise ParameterBindingError(param.name, self.binding_error_message(param, node, e)) from e

    def binding_error_message(self, param: ParameterDescriptor, node: Any, error: CoercionError) -> str:
        return (
            f"Can't bind parameter '{param.name}' of type {self._codec.describe_type(param.type)}"
            f" to {self._codec.node_kind(node)} value {self._codec.render(node)} : {error.message}"
        )


__all__ = ["ArgumentBinder", "is_positional", "is_named"]
