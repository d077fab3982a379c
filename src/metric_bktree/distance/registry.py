from __future__ import annotations

from metric_bktree.core.errors import UnknownMetricError
from metric_bktree.distance.base import DistanceFunction
from metric_bktree.distance.hamming import HammingDistance
from metric_bktree.distance.levenshtein import LevenshteinDistance

METRICS: dict[str, type[DistanceFunction]] = {
    HammingDistance.name: HammingDistance,
    LevenshteinDistance.name: LevenshteinDistance,
}


def get_distance(name: str, case_sensitive: bool = True) -> DistanceFunction:
    try:
        cls = METRICS[name.lower()]
    except KeyError:
        raise UnknownMetricError(f"Unknown metric {name!r}; expected one of {sorted(METRICS)}") from None
    return cls(case_sensitive=case_sensitive)
