"""Structured document codec."""

from .document_codec import MISSING, CoercionError, DocumentCodec, strip_location_noise

__all__ = ["MISSING", "CoercionError", "DocumentCodec", "strip_location_noise"]
