"""Read-only summaries of registered methods for diagnostics surfaces."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class ParameterSummaryDTO(BaseModel):
    """One parameter of a registered method as presented to callers."""

    name: str
    type: str
    nullable: bool = False
    has_default: bool = False


class MethodSummaryDTO(BaseModel):
    """A registered method: qualified name, parameters and return type."""

    name: str
    parameters: List[ParameterSummaryDTO] = Field(default_factory=list)
    return_type: str


__all__ = ["ParameterSummaryDTO", "MethodSummaryDTO"]
