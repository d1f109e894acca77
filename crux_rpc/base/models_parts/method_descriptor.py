"""
MethodDescriptor for a registered remotable method.

Descriptors are produced by an external discovery step and handed to the
registry. They are immutable after construction; only the handle's
accessibility flag may change.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence, Tuple

from .method_handle import MethodHandle
from .parameter_descriptor import ParameterDescriptor


@dataclass(frozen=True)
class MethodDescriptor:
    """A registered method and its call signature.

    Attributes:
        name: Unqualified method name.
        parameters: Ordered parameters; order defines positional binding.
        return_type: Declared return type used to encode results.
        handle: Resolves to the callable invoked with one positional argument
            per parameter.
        namespace: Namespace segments prefixed to ``name`` when qualifying.
    """

    name: str
    parameters: Tuple[ParameterDescriptor, ...]
    return_type: Any
    handle: MethodHandle
    namespace: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", tuple(self.parameters))
        object.__setattr__(self, "namespace", tuple(self.namespace))
        seen = set()
        for p in self.parameters:
            if p.name in seen:
                raise ValueError(f"duplicate parameter name '{p.name}' in method '{self.name}'")
            seen.add(p.name)

    @classmethod
    def of(
        cls,
        name: str,
        function: Callable[..., Any],
        parameters: Sequence[ParameterDescriptor] = (),
        return_type: Any = Any,
        namespace: Sequence[str] = (),
    ) -> "MethodDescriptor":
        """Convenience constructor wrapping ``function`` in a direct handle."""
        return cls(
            name=name,
            parameters=tuple(parameters),
            return_type=return_type,
            handle=MethodHandle.for_callable(function),
            namespace=tuple(namespace),
        )

    def qualified_name(self, separator: str = ".") -> str:
        return separator.join((*self.namespace, self.name))

    @property
    def parameter_names(self) -> Tuple[str, ...]:
        return tuple(p.name for p in self.parameters)


__all__ = ["MethodDescriptor"]
