"""
MethodHandle: the owner + attribute pair a registered method is called through.

A handle is resolved to a bound callable on every invocation. Attributes whose
names start with two underscores are private to their defining class: Python
stores them under a mangled name (``_Owner__name``), so a plain lookup of the
declared name fails. ``relax()`` switches the handle to mangled-name
resolution. Relaxing only ever sets a flag, so concurrent callers relaxing the
same handle are harmless.
"""
from __future__ import annotations

from typing import Any, Callable, Optional

from ..errors import AccessFailure

_MISSING = object()


class MethodHandle:
    """Resolves to the callable a registered method dispatches to.

    Args:
        owner: Instance (or module/class) the attribute is looked up on.
        attribute: Declared attribute name of the method on ``owner``.
    """

    __slots__ = ("owner", "attribute", "_function", "_relaxed")

    def __init__(self, owner: Any, attribute: str) -> None:
        self.owner = owner
        self.attribute = attribute
        self._function: Optional[Callable[..., Any]] = None
        self._relaxed = False

    @classmethod
    def for_callable(cls, function: Callable[..., Any]) -> "MethodHandle":
        """Build a handle around an already-bound callable (function, bound method, lambda)."""
        handle = cls(getattr(function, "__self__", None), getattr(function, "__name__", repr(function)))
        handle._function = function
        return handle

    @property
    def relaxed(self) -> bool:
        return self._relaxed

    def relax(self) -> None:
        self._relaxed = True

    def resolve(self) -> Callable[..., Any]:
        """Return the bound callable or raise :class:`AccessFailure`."""
        if self._function is not None:
            return self._function
        name = self._private_name() if self._relaxed else self.attribute
        target = _MISSING if name is None else getattr(self.owner, name, _MISSING)
        if target is _MISSING:
            reason = "no such attribute" if self._relaxed else "attribute is not accessible"
            raise AccessFailure(self._owner_type(), self.attribute, reason)
        if not callable(target):
            raise AccessFailure(self._owner_type(), self.attribute, "attribute is not callable")
        return target

    def _private_name(self) -> Optional[str]:
        """Find the mangled name of the attribute along the owner's MRO."""
        if not self.attribute.startswith("__") or self.attribute.endswith("__"):
            return self.attribute
        owner_type = self.owner if isinstance(self.owner, type) else type(self.owner)
        for klass in owner_type.__mro__:
            mangled = f"_{klass.__name__.lstrip('_')}{self.attribute}"
            if hasattr(self.owner, mangled):
                return mangled
        return None

    def _owner_type(self) -> str:
        if self.owner is None:
            return "<direct>"
        return self.owner.__name__ if isinstance(self.owner, type) else type(self.owner).__name__

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"MethodHandle({self._owner_type()}.{self.attribute}, relaxed={self._relaxed})"


__all__ = ["MethodHandle"]
