from __future__ import annotations

import logging

import typer

from metric_bktree.cli import query as query_cmd
from metric_bktree.cli import spell as spell_cmd

app = typer.Typer(help="BK-tree fuzzy matching CLI.")

app.add_typer(query_cmd.app, name="query")
app.add_typer(spell_cmd.app, name="spell")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging.")):
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s - %(name)s - %(message)s")
