"""Command-line interface for discriminative feature ranking.

Provides ``rank`` and ``classes`` commands. Rankings go to stdout, one
``<ratio> <label>`` line per term; progress and errors go to stderr.

Usage::

    discriminative-features rank features.yaml
    discriminative-features rank --numerator english --denominator chinese --top 50 features.yaml
    discriminative-features classes features.yaml
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import FeatureConfig, load_config
from .errors import FeatureRankingError
from .models import FeatureRanking
from .pipeline import FeaturePipeline

console = Console(stderr=True)


def _fail(error: Exception) -> None:
    console.print(f"[bold red]Error:[/] {escape(str(error))}", highlight=False)
    sys.exit(1)


def _load(config_file: Path) -> FeatureConfig:
    try:
        return load_config(config_file)
    except FeatureRankingError as e:
        _fail(e)


@click.group()
@click.version_option(package_name="discriminative-features")
def main() -> None:
    """Rank terms by how well they separate two classes of a corpus.

    Builds a language model per class, smooths it into relative
    frequencies, and scores each term with p(f|A)/p(f|B).
    """
    pass


@main.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--numerator", "-n", default=None,
              help="Numerator class (overrides the configuration).")
@click.option("--denominator", "-d", default=None,
              help="Denominator class (overrides the configuration).")
@click.option("--top", "-k", type=click.IntRange(min=1), default=None,
              help="Only emit the K highest-ranked features.")
@click.option("--output", "-o", type=click.Choice(["text", "json"]), default="text",
              help="Output format.")
@click.option("--save", "-s", type=click.Path(path_type=Path), default=None,
              help="Save the ranking to a JSON file.")
def rank(
    config_file: Path,
    numerator: str | None,
    denominator: str | None,
    top: int | None,
    output: str,
    save: Path | None,
) -> None:
    """Rank every term of two classes by p(f|numerator)/p(f|denominator).

    Example: discriminative-features rank features.yaml
    """
    config = _load(config_file)
    try:
        config = config.with_pair(numerator, denominator)
        ranking = FeaturePipeline(config, console=console).run(top=top)
    except FeatureRankingError as e:
        _fail(e)

    if output == "json":
        click.echo(json.dumps(ranking.to_dict(), indent=2))
    else:
        _render_ranking(ranking)

    if save:
        try:
            save.write_text(json.dumps(ranking.to_dict(), indent=2), encoding="utf-8")
        except OSError as e:
            _fail(e)
        console.print(f"[dim]Ranking saved to {escape(str(save))}[/]")


@main.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
def classes(config_file: Path, output: str) -> None:
    """List the corpus classes with document and token counts.

    Example: discriminative-features classes features.yaml
    """
    config = _load(config_file)
    try:
        models = FeaturePipeline(config, console=console).class_summary()
    except FeatureRankingError as e:
        _fail(e)

    if output == "json":
        click.echo(json.dumps([
            {
                "class": m.label,
                "documents": m.document_count,
                "tokens": m.total,
                "distinct_terms": m.vocabulary_size,
            }
            for m in models
        ], indent=2))
        return

    table = Table(title=f"Classes in {config.corpus_path}")
    table.add_column("Class", style="cyan")
    table.add_column("Documents", justify="right")
    table.add_column("Tokens", justify="right")
    table.add_column("Distinct terms", justify="right")
    for m in models:
        table.add_row(
            escape(m.label),
            str(m.document_count),
            str(m.total),
            str(m.vocabulary_size),
        )
    Console().print(table)


# ------------------------------------------------------------------
# Rendering helpers
# ------------------------------------------------------------------

def _render_ranking(ranking: FeatureRanking) -> None:
    """Write the ranking as plain lines for downstream tools."""
    for line in ranking.to_lines():
        click.echo(line)


if __name__ == "__main__":
    main()
