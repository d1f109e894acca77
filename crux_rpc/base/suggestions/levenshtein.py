"""Bounded Levenshtein distance.

Uses the banded two-row dynamic program: only cells within ``threshold`` of
the diagonal can hold a distance at or below the threshold, so the rest of
each row is never computed.
"""
from __future__ import annotations

from typing import List, Optional


def bounded_levenshtein(s: str, t: str, threshold: int) -> Optional[int]:
    """Return the edit distance between ``s`` and ``t``, or ``None`` when it exceeds ``threshold``."""
    if threshold < 0:
        raise ValueError("threshold must be non-negative")
    n, m = len(s), len(t)
    if n == 0:
        return m if m <= threshold else None
    if m == 0:
        return n if n <= threshold else None
    if abs(n - m) > threshold:
        return None
    if n > m:
        # keep the shorter string on the row axis
        s, t, n, m = t, s, m, n

    over = threshold + 1
    prev: List[int] = [i if i <= threshold else over for i in range(n + 1)]
    cur: List[int] = [over] * (n + 1)

    for j in range(1, m + 1):
        tj = t[j - 1]
        lo = max(1, j - threshold)
        hi = min(n, j + threshold)
        if lo > hi:
            return None
        cur[0] = j if j <= threshold else over
        if lo > 1:
            cur[lo - 1] = over
        row_min = cur[0] if lo == 1 else over
        for i in range(lo, hi + 1):
            if s[i - 1] == tj:
                d = prev[i - 1]
            else:
                d = 1 + min(prev[i - 1], prev[i], cur[i - 1])
            if d > over:
                d = over
            cur[i] = d
            if d < row_min:
                row_min = d
        if hi < n:
            cur[hi + 1] = over
        if row_min > threshold:
            return None
        prev, cur = cur, prev

    return prev[n] if prev[n] <= threshold else None


__all__ = ["bounded_levenshtein"]
