from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from metric_bktree.core.errors import BKTreeError
from metric_bktree.distance.base import DistanceFunction
from metric_bktree.distance.registry import get_distance
from metric_bktree.utils.config import TreeConfig, load_tree_config
from metric_bktree.utils.wordlist import build_tree, read_words

app = typer.Typer(help="Fuzzy lookups against a word list (the tree is rebuilt on every run).")


def resolve_config(config: Optional[Path], metric: Optional[str], ignore_case: bool) -> tuple[TreeConfig, DistanceFunction]:
    """Merge the YAML config with command-line overrides and build the metric."""
    try:
        cfg = load_tree_config(config)
        name = metric or cfg.metric
        dist = get_distance(name, case_sensitive=cfg.case_sensitive and not ignore_case)
    except BKTreeError as e:
        raise typer.BadParameter(str(e)) from e
    return cfg, dist


@app.command("search")
def search_words(
    queries: list[str] = typer.Argument(..., help="Words to look up."),
    words: Path = typer.Option(..., exists=True, dir_okay=False, help="Word list (one per line)."),
    radius: Optional[int] = typer.Option(None, min=0, help="Max distance (default from config, else 2)."),
    metric: Optional[str] = typer.Option(None, help="hamming or levenshtein."),
    ignore_case: bool = typer.Option(False, "--ignore-case"),
    config: Path = typer.Option(None, exists=True, dir_okay=False, help="YAML config with a `tree:` section."),
    progress: bool = typer.Option(False, "--progress", help="Show a progress bar while building."),
):
    """Print every word within the radius of each query as `distance<TAB>word`."""
    cfg, dist = resolve_config(config, metric, ignore_case)
    r = cfg.radius if radius is None else radius
    tree = build_tree(read_words(words), dist, progress=progress)
    for q in queries:
        if len(queries) > 1:
            typer.echo(f"# {q}")
        for res in tree.search(q, r):
            typer.echo(f"{res.distance}\t{res.item}")


@app.command("nearest")
def nearest_word(
    query: str = typer.Argument(...),
    words: Path = typer.Option(..., exists=True, dir_okay=False, help="Word list (one per line)."),
    max_distance: Optional[int] = typer.Option(None, min=0),
    metric: Optional[str] = typer.Option(None, help="hamming or levenshtein."),
    ignore_case: bool = typer.Option(False, "--ignore-case"),
    config: Path = typer.Option(None, exists=True, dir_okay=False),
):
    """Print the closest word, or exit with code 1 if none is in range."""
    cfg, dist = resolve_config(config, metric, ignore_case)
    limit = cfg.max_distance if max_distance is None else max_distance
    tree = build_tree(read_words(words), dist)
    res = tree.nearest(query, limit)
    if res is None:
        typer.echo(f"No match for {query!r} within {limit}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{res.distance}\t{res.item}")


@app.command("distance")
def pair_distance(
    left: str = typer.Argument(...),
    right: str = typer.Argument(...),
    metric: str = typer.Option("levenshtein", help="hamming or levenshtein."),
    ignore_case: bool = typer.Option(False, "--ignore-case"),
):
    """Print the distance between two strings."""
    _cfg, dist = resolve_config(None, metric, ignore_case)
    typer.echo(str(dist(left, right)))
