from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from metric_bktree.core.errors import ConfigError
from metric_bktree.distance.registry import METRICS


def load_yaml(path: Path) -> dict[str, Any]:
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


@dataclass(frozen=True)
class TreeConfig:
    metric: str = "levenshtein"
    case_sensitive: bool = True
    radius: int = 2
    max_distance: int = 2

    def __post_init__(self):
        if self.metric.lower() not in METRICS:
            raise ConfigError(f"Unknown metric {self.metric!r}; expected one of {sorted(METRICS)}")
        if self.radius < 0:
            raise ConfigError(f"radius must be >= 0, got {self.radius}")
        if self.max_distance < 0:
            raise ConfigError(f"max_distance must be >= 0, got {self.max_distance}")


def load_tree_config(path: Path | None) -> TreeConfig:
    """Read the optional `tree:` section of a YAML config; missing keys use defaults."""
    if path is None:
        return TreeConfig()
    data = load_yaml(path)
    tree_cfg = data.get("tree", {}) or {}
    if not isinstance(tree_cfg, dict):
        raise ConfigError(f"`tree` section of {path} must be a mapping")
    defaults = TreeConfig()
    case_sensitive = tree_cfg.get("case_sensitive", defaults.case_sensitive)
    if not isinstance(case_sensitive, bool):
        raise ConfigError(f"case_sensitive in {path} must be true or false, got {case_sensitive!r}")
    try:
        radius = int(tree_cfg.get("radius", defaults.radius))
        max_distance = int(tree_cfg.get("max_distance", defaults.max_distance))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid tree config in {path}: {e}") from e
    return TreeConfig(
        metric=str(tree_cfg.get("metric", defaults.metric)),
        case_sensitive=case_sensitive,
        radius=radius,
        max_distance=max_distance,
    )
