from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from tqdm import tqdm

from metric_bktree.core.bktree import BKTree
from metric_bktree.distance.base import DistanceFn

logger = logging.getLogger(__name__)


def read_words(path: Path) -> list[str]:
    """One word per line; blank lines and `#` comments are skipped."""
    words: list[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        w = line.strip()
        if w and not w.startswith("#"):
            words.append(w)
    logger.info("Read %d words from %s", len(words), path)
    return words


def build_tree(words: Iterable[str], dist: DistanceFn, progress: bool = False) -> BKTree[str]:
    tree: BKTree[str] = BKTree(dist)
    it = tqdm(words, desc="building tree", unit="word") if progress else words
    added = tree.update(it)
    logger.info("Built BK-tree with %d items", added)
    return tree
