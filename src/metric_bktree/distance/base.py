from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

DistanceFn = Callable[[T, T], int]


def _upper_char(c: str) -> str:
    # keep one char per char so folding never changes lengths ("ß".upper() == "SS")
    u = c.upper()
    return u if len(u) == 1 else c


class DistanceFunction(ABC):
    """A metric over sequences, optionally folding case before comparison.

    Implementations must satisfy d(a, a) == 0, symmetry and the triangle
    inequality for BK-tree pruning to be correct.
    """

    name: str = ""

    def __init__(self, case_sensitive: bool = True):
        self.case_sensitive = case_sensitive

    @abstractmethod
    def __call__(self, left: Sequence, right: Sequence) -> int:
        """Return the distance between two sequences."""

    def _fold(self, seq: Sequence) -> Sequence:
        if self.case_sensitive:
            return seq
        if isinstance(seq, str):
            return "".join(_upper_char(c) for c in seq)
        return [x.upper() if isinstance(x, str) else x for x in seq]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(case_sensitive={self.case_sensitive})"
