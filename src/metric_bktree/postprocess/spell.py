from __future__ import annotations

import re
from collections import Counter
from typing import Iterable

from metric_bktree.core.bktree import BKTree, SearchResult
from metric_bktree.distance.base import DistanceFn
from metric_bktree.distance.levenshtein import LevenshteinDistance


def _tokenize(text: str) -> list[str]:
    return re.findall(r"\w+|[^\w\s]", text, re.UNICODE)


def _untokenize(words: list[str]) -> str:
    text = " ".join(words)
    text = re.sub(r" ([.,:;?!%]+)([ \'\"`])", r"\1\2", text)
    text = re.sub(r" ([.,:;?!%]+)$", r"\1", text)
    return text.strip()


def _match_case(original: str, word: str) -> str:
    if original.isupper() and len(original) > 1:
        return word.upper()
    if original[:1].isupper():
        return word[:1].upper() + word[1:]
    return word


class SpellCorrector:
    """Dictionary spell corrector backed by a BK-tree.

    A word is replaced by the closest dictionary word within `max_distance`;
    ties go to the more frequent word, then alphabetical order.
    """

    def __init__(self, words: Iterable[str], dist: DistanceFn | None = None, max_distance: int = 2):
        if max_distance < 0:
            raise ValueError(f"max_distance must be >= 0, got {max_distance}")
        self.max_distance = max_distance
        self.counts = Counter(w.lower() for w in words if w)
        self.tree: BKTree[str] = BKTree(dist or LevenshteinDistance()).build(self.counts)

    @classmethod
    def from_file(cls, path: str, **kwargs) -> "SpellCorrector":
        with open(path, "r", encoding="utf-8") as f:
            return cls(re.findall(r"\w+", f.read()), **kwargs)

    def candidates(self, word: str) -> tuple[SearchResult[str], ...]:
        return self.tree.search(word.lower(), self.max_distance)

    def correction(self, word: str) -> str:
        lowered = word.lower()
        if lowered in self.counts:
            return word
        found = self.candidates(lowered)
        if not found:
            return word
        best = min(found, key=lambda r: (r.distance, -self.counts[r.item], r.item))
        return _match_case(word, best.item)

    def sentence(self, text: str) -> str:
        tokens = _tokenize(text)
        return _untokenize([self.correction(t) if t.isalpha() else t for t in tokens])
