from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from metric_bktree.cli.query import resolve_config
from metric_bktree.postprocess.spell import SpellCorrector
from metric_bktree.utils.wordlist import read_words

app = typer.Typer(help="Dictionary spell correction.")


@app.command("sentence")
def correct_sentence(
    text: str = typer.Argument(..., help="Text to correct."),
    words: Path = typer.Option(..., exists=True, dir_okay=False, help="Dictionary (one word per line)."),
    max_distance: Optional[int] = typer.Option(None, min=0),
    metric: Optional[str] = typer.Option(None, help="hamming or levenshtein."),
    config: Path = typer.Option(None, exists=True, dir_okay=False),
):
    """Replace each unknown word with its closest dictionary word."""
    cfg, dist = resolve_config(config, metric, ignore_case=False)
    limit = cfg.max_distance if max_distance is None else max_distance
    spell = SpellCorrector(read_words(words), dist=dist, max_distance=limit)
    typer.echo(spell.sentence(text))
