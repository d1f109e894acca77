"""Ranked "did you mean" suggestions for unknown method names.

Stateless: every call recomputes the ranking from the names it is given.
"""
from __future__ import annotations

import heapq
from typing import Iterable, Iterator, List, Tuple

from ...config.defaults import MAX_SUGGESTION_DISTANCE, MAX_SUGGESTIONS
from .levenshtein import bounded_levenshtein


def _scored(requested: str, known: Iterable[str], max_distance: int) -> Iterator[Tuple[int, str]]:
    for name in set(known):
        distance = bounded_levenshtein(name, requested, max_distance)
        if distance is not None:
            yield distance, name


def rank_suggestions(
    requested: str,
    known: Iterable[str],
    max_distance: int = MAX_SUGGESTION_DISTANCE,
) -> List[Tuple[int, str]]:
    """Return every ``(distance, name)`` pair ordered by distance, then name.

    Names further than ``max_distance`` edits away are skipped.
    """
    return sorted(_scored(requested, known, max_distance))


def suggest(
    requested: str,
    known: Iterable[str],
    limit: int = MAX_SUGGESTIONS,
    max_distance: int = MAX_SUGGESTION_DISTANCE,
) -> List[str]:
    """Return up to ``limit`` known names closest to ``requested``."""
    return [name for _, name in heapq.nsmallest(limit, _scored(requested, known, max_distance))]


__all__ = ["rank_suggestions", "suggest"]
