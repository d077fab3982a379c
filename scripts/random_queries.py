#!/usr/bin/env python3
from __future__ import annotations

import argparse
import random
import string
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Args:
    words: str
    metric: str
    radius: int
    num_samples: int
    seed: int


def _parse_args() -> Args:
    p = argparse.ArgumentParser(
        description=(
            "Sample random words from a word list, perturb them, and compare BK-tree search "
            "against a brute-force scan."
        )
    )
    p.add_argument("--words", required=True, help="Word list, one per line.")
    p.add_argument("--metric", choices=["hamming", "levenshtein"], default="levenshtein")
    p.add_argument("--radius", type=int, default=2, help="Search radius.")
    p.add_argument("--num-samples", type=int, default=5, help="How many random queries to run.")
    p.add_argument("--seed", type=int, default=55, help="Random seed.")
    a = p.parse_args()
    return Args(
        words=str(a.words),
        metric=str(a.metric),
        radius=int(a.radius),
        num_samples=int(a.num_samples),
        seed=int(a.seed),
    )


def _perturb(word: str, rng: random.Random) -> str:
    if not word:
        return rng.choice(string.ascii_lowercase)
    i = rng.randrange(len(word))
    return word[:i] + rng.choice(string.ascii_lowercase) + word[i + 1 :]


def main() -> None:
    from metric_bktree.distance.registry import get_distance
    from metric_bktree.utils.wordlist import build_tree, read_words

    args = _parse_args()
    rng = random.Random(args.seed)
    dist = get_distance(args.metric)
    vocab = read_words(Path(args.words))
    tree = build_tree(vocab, dist, progress=True)

    for i in range(args.num_samples):
        query = _perturb(rng.choice(vocab), rng)
        hits = tree.search(query, args.radius)
        brute = sorted((dist(w, query), w) for w in set(vocab) if dist(w, query) <= args.radius)
        agree = sorted((r.distance, r.item) for r in hits) == brute

        print(f"\n[{i}] query={query!r} radius={args.radius} hits={len(hits)}")
        for r in hits[:10]:
            print(f"  {r.distance}\t{r.item}")
        print("MATCHES BRUTE FORCE:", agree)


if __name__ == "__main__":
    main()
