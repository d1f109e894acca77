"""
ParameterDescriptor for a single method parameter.

Describes one positional slot of a registered method: its name, the type the
argument is coerced to, whether null-like values are accepted, and an optional
default provider.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

DefaultProvider = Callable[[], Any]


@dataclass(frozen=True)
class ParameterDescriptor:
    """A single parameter of a registered method.

    Attributes:
        name: Parameter name, unique within its method.
        type: Coercion target; anything pydantic can build a ``TypeAdapter`` for.
        nullable: Whether a null-like value may be bound to this parameter.
        default: Zero-argument provider invoked every time the argument is
            omitted. The produced value is never cached, so providers may
            return fresh mutable objects.
    """

    name: str
    type: Any
    nullable: bool = False
    default: Optional[DefaultProvider] = None

    @property
    def has_default(self) -> bool:
        return self.default is not None

    def default_value(self) -> Any:
        """Invoke the default provider. Callers must check ``has_default`` first."""
        if self.default is None:
            raise LookupError(f"parameter '{self.name}' has no default provider")
        return self.default()


__all__ = ["ParameterDescriptor", "DefaultProvider"]
