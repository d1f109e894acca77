"""DTOs exchanged with transports and diagnostics surfaces."""

from .invocation_result import InvocationResultDTO
from .method_summary import MethodSummaryDTO, ParameterSummaryDTO

__all__ = [
    "InvocationResultDTO",
    "MethodSummaryDTO",
    "ParameterSummaryDTO",
]
