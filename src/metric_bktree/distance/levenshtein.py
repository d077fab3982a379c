from __future__ import annotations

from typing import Sequence

from metric_bktree.distance.base import DistanceFunction


def levenshtein(a: Sequence, b: Sequence) -> int:
    """Unit-cost edit distance over strings or token lists.

    Two-row DP; the shorter input indexes the columns.
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)
    row = list(range(len(b) + 1))
    nxt = [0] * (len(b) + 1)
    for i in range(1, len(a) + 1):
        nxt[0] = i
        for j in range(1, len(b) + 1):
            sub = row[j - 1] + (a[i - 1] != b[j - 1])
            nxt[j] = min(nxt[j - 1] + 1, row[j] + 1, sub)
        row, nxt = nxt, row
    return row[-1]


class LevenshteinDistance(DistanceFunction):
    """Insert, delete and substitute each cost 1."""

    name = "levenshtein"

    def __call__(self, left: Sequence, right: Sequence) -> int:
        return levenshtein(self._fold(left), self._fold(right))
