"""Name suggestion engine."""

from .engine import rank_suggestions, suggest
from .levenshtein import bounded_levenshtein

__all__ = ["bounded_levenshtein", "rank_suggestions", "suggest"]
