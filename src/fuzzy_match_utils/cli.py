"""CLI interface for fuzzy-match-utils."""

import json
import logging
from pathlib import Path
from typing import Any

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from fuzzy_match_utils import __version__
from fuzzy_match_utils.config import load_options, load_substitutions
from fuzzy_match_utils.matching.distance import full_string_distance
from fuzzy_match_utils.matching.normalizer import clean_up_text
from fuzzy_match_utils.matching.option_filter import filter_options
from fuzzy_match_utils.matching.similarity import typeahead_similarity

app = typer.Typer(
    name="fuzzy-match",
    help="Fuzzy typeahead matching and ranking for option lists",
    add_completion=False,
)
console = Console()

_CONFIG_ERRORS = (FileNotFoundError, yaml.YAMLError, ValidationError)


def output_json(data: Any) -> None:
    """Output JSON to stdout."""
    print(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"fuzzy-match-utils version {__version__}")
        raise typer.Exit()


def _load_substitutions_or_exit(path: Path | None) -> dict[str, str] | None:
    """Load a substitution table, exiting with status 1 on a config error."""
    if path is None:
        return None
    try:
        return load_substitutions(path)
    except _CONFIG_ERRORS as e:
        console.print(f"[red]Error loading substitutions: {e}[/red]")
        raise typer.Exit(1) from e


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable debug logging.",
    ),
) -> None:
    """Fuzzy typeahead matching for option lists."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@app.command(name="filter")
def filter_command(
    query: str = typer.Argument(..., help="Search text, as typed into a typeahead box."),
    options_path: Path = typer.Option(
        ...,
        "--options",
        "-o",
        help="YAML or JSON file with a list of {label, value} options.",
    ),
    substitutions_path: Path | None = typer.Option(
        None,
        "--substitutions",
        "-s",
        help="YAML file with a substitutions mapping.",
    ),
    limit: int | None = typer.Option(
        None,
        "--limit",
        "-n",
        min=1,
        help="Show at most this many matches.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON.",
    ),
) -> None:
    """Filter options by similarity to QUERY, best match first."""
    substitutions = _load_substitutions_or_exit(substitutions_path)
    try:
        options = load_options(options_path)
        matches = filter_options(options, query, substitutions)
    except _CONFIG_ERRORS as e:
        console.print(f"[red]Error filtering options: {e}[/red]")
        raise typer.Exit(1) from e

    if limit is not None:
        matches = matches[:limit]

    # Scores are recomputed for display only
    clean_query = clean_up_text(query, substitutions)
    rows = [
        {
            "label": option.label,
            "value": option.value,
            "score": typeahead_similarity(clean_up_text(option.label, substitutions), clean_query),
        }
        for option in matches
    ]

    if as_json:
        output_json(rows)
        return

    if not rows:
        console.print("[yellow]No matching options.[/yellow]")
        return

    table = Table(title=f"Matches for {query!r}")
    table.add_column("Label", style="cyan")
    table.add_column("Value")
    table.add_column("Score", justify="right")
    for row in rows:
        table.add_row(row["label"], str(row["value"]), f"{row['score']:.3f}")
    console.print(table)


@app.command()
def similarity(
    a: str = typer.Argument(..., help="First string, eg. an option label."),
    b: str = typer.Argument(..., help="Second string, eg. a search query."),
    clean: bool = typer.Option(
        False,
        "--clean",
        "-c",
        help="Clean up both strings before scoring.",
    ),
) -> None:
    """Print the typeahead similarity score of A and B."""
    if clean:
        a, b = clean_up_text(a), clean_up_text(b)
    print(typeahead_similarity(a, b))


@app.command()
def distance(
    a: str = typer.Argument(..., help="First string."),
    b: str = typer.Argument(..., help="Second string."),
    clean: bool = typer.Option(
        False,
        "--clean",
        "-c",
        help="Clean up both strings before measuring.",
    ),
) -> None:
    """Print the Levenshtein distance between A and B."""
    if clean:
        a, b = clean_up_text(a), clean_up_text(b)
    print(full_string_distance(a, b))


@app.command()
def clean(
    text: str = typer.Argument(..., help="Text to clean up."),
    substitutions_path: Path | None = typer.Option(
        None,
        "--substitutions",
        "-s",
        help="YAML file with a substitutions mapping.",
    ),
) -> None:
    """Print TEXT as it is compared during matching."""
    substitutions = _load_substitutions_or_exit(substitutions_path)
    print(clean_up_text(text, substitutions))


if __name__ == "__main__":
    app()
