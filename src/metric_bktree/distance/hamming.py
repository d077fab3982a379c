from __future__ import annotations

from typing import Sequence

from metric_bktree.distance.base import DistanceFunction


def hamming(a: Sequence, b: Sequence) -> int:
    """Positions that differ over the shorter prefix, plus the length difference."""
    n = min(len(a), len(b))
    d = abs(len(a) - len(b))
    for i in range(n):
        if a[i] != b[i]:
            d += 1
    return d


class HammingDistance(DistanceFunction):
    name = "hamming"

    def __call__(self, left: Sequence, right: Sequence) -> int:
        return hamming(self._fold(left), self._fold(right))
