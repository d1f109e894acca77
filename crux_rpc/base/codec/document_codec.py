"""Structured document codec backed by pydantic ``TypeAdapter``.

The document model is the JSON data model expressed with Python builtins:
``None``, ``str``, ``int``, ``float``, ``bool``, lists and string-keyed
mappings. :data:`MISSING` stands for a value-node that is absent rather than
null; both count as null-like.

External dependencies
---------------------
- Pydantic v2 ``TypeAdapter`` for lax coercion into arbitrary target types
  and for JSON-mode serialization of results. Lax adapters also accept
  numbers where a string is expected (``5`` -> ``"5"``). Models, dataclasses
  and TypedDicts keep their own config for their fields.

Failure modes
-------------
- ``convert``/``decode`` raise :class:`CoercionError` carrying pydantic's
  validation text with the trailing documentation link removed.
- ``encode`` lets pydantic serialization errors propagate.
"""
from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import is_dataclass
from typing import Annotated, Any, Dict, Optional, get_args, get_origin

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from typing_extensions import is_typeddict

# pydantic appends this locator line to every error; it carries no information
# about the offending value.
_DOC_URL_NOISE = re.compile(r"\n\s*For further information visit \S+")


class _Missing:
    """Singleton marking an absent value-node."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


class CoercionError(ValueError):
    """A value-node could not be converted to the requested type."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def strip_location_noise(message: str) -> str:
    """Remove pydantic's per-error documentation link lines."""
    return _DOC_URL_NOISE.sub("", message)


_LAX_CONFIG = ConfigDict(coerce_numbers_to_str=True)


def _carries_own_config(target_type: Any) -> bool:
    if get_origin(target_type) is Annotated:
        target_type = get_args(target_type)[0]
    if isinstance(target_type, type) and issubclass(target_type, BaseModel):
        return True
    return is_dataclass(target_type) or is_typeddict(target_type)


class DocumentCodec:
    """Bidirectional converter between value-nodes and typed Python values.

    Args:
        strict: Use pydantic strict mode (no ``"5"`` -> ``5`` style coercion).
    """

    def __init__(self, strict: bool = False) -> None:
        self._strict = strict
        self._adapters: Dict[Any, TypeAdapter] = {}

    @property
    def strict(self) -> bool:
        return self._strict

    def adapter(self, target_type: Any) -> TypeAdapter:
        """Return a cached ``TypeAdapter`` for ``target_type``."""
        try:
            cached = self._adapters.get(target_type)
        except TypeError:
            # unhashable type expressions are rebuilt every time
            return self._build_adapter(target_type)
        if cached is None:
            cached = self._build_adapter(target_type)
            self._adapters[target_type] = cached
        return cached

    def _build_adapter(self, target_type: Any) -> TypeAdapter:
        config: Optional[ConfigDict] = None
        if not self._strict and not _carries_own_config(target_type):
            config = _LAX_CONFIG
        return TypeAdapter(target_type, config=config)

    # ---- document model ----

    @staticmethod
    def is_null_like(node: Any) -> bool:
        return node is None or node is MISSING

    @staticmethod
    def node_kind(node: Any) -> str:
        """Name the document-model kind of a value-node."""
        if node is MISSING:
            return "MISSING"
        if node is None:
            return "NULL"
        if isinstance(node, bool):
            return "BOOLEAN"
        if isinstance(node, (int, float)):
            return "NUMBER"
        if isinstance(node, str):
            return "STRING"
        if isinstance(node, (bytes, bytearray)):
            return "BINARY"
        if isinstance(node, Mapping):
            return "OBJECT"
        if isinstance(node, (list, tuple)):
            return "ARRAY"
        return "POJO"

    @staticmethod
    def render(node: Any) -> str:
        """Literal textual form of a value-node."""
        if node is MISSING:
            return ""
        return json.dumps(node, ensure_ascii=False, default=repr)

    @staticmethod
    def describe_type(target_type: Any) -> str:
        if isinstance(target_type, type) and not get_args(target_type):
            return target_type.__qualname__
        return repr(target_type)

    def loads(self, text: str | bytes) -> Any:
        """Parse a JSON document into value-nodes."""
        try:
            return json.loads(text)
        except ValueError as e:
            raise CoercionError(f"malformed JSON document: {e}") from e

    # ---- conversion ----

    def convert(self, node: Any, target_type: Any) -> Any:
        """Coerce a value-node to ``target_type`` or raise :class:`CoercionError`."""
        value = None if node is MISSING else node
        try:
            return self.adapter(target_type).validate_python(value, strict=self._strict)
        except ValidationError as e:
            raise CoercionError(strip_location_noise(str(e))) from e

    decode = convert

    def encode(self, value: Any, declared_type: Any = Any) -> Any:
        """Serialize ``value`` as a JSON-compatible document using its declared type."""
        return self.adapter(declared_type).dump_python(value, mode="json")


__all__ = [
    "MISSING",
    "CoercionError",
    "DocumentCodec",
    "strip_location_noise",
]
