"""Standard invocation result DTO used by envelope-style dispatch.

This DTO defines a transport-agnostic, minimal shape for invocation outcomes so
that transports can serialize successes and failures uniformly without
catching the error taxonomy themselves.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class InvocationResultDTO(BaseModel):
    """Result envelope for a method invocation.

    Attributes:
        name: The qualified method name that was requested.
        ok: True when the method executed and its result was encoded.
        content: Encoded result document when ``ok`` is True.
        code: ``ErrorCode`` value when ``ok`` is False.
        error: Human-readable error string when ``ok`` is False.
        metadata: Free-form details (``suggestions``, ``parameter``, ``error_type``).
    """

    name: str
    ok: bool
    content: Any = None
    code: Optional[str] = None
    error: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)


__all__ = ["InvocationResultDTO"]
