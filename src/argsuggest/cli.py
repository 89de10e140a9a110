"""Command-line interface for argsuggest."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from typing import Any

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from argsuggest.candidates.source import CommandCandidates
from argsuggest.config import SuggestConfig
from argsuggest.handler.groups import ENGINE_META_KEY, SuggestingGroup, find_engine
from argsuggest.suggest.classifier import TokenKind
from argsuggest.suggest.engine import SuggestionEngine

console = Console()

LOG_LEVEL_ENV_VAR = "ARGSUGGEST_LOG_LEVEL"


def configure_logging(verbose: bool) -> None:
    """Configure root logging from ``--verbose`` or ``ARGSUGGEST_LOG_LEVEL``."""
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.getenv(LOG_LEVEL_ENV_VAR, "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _pool_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the candidate pool options shared by several commands."""
    func = click.option(
        "--hidden-subcommand", "hidden_subcommands", multiple=True,
        help="Hidden subcommand name (never suggested)",
    )(func)
    func = click.option(
        "--hidden-option", "hidden_options", multiple=True,
        help="Hidden option name (never suggested)",
    )(func)
    func = click.option(
        "--subcommand", "-s", "subcommands", multiple=True, help="Known subcommand name",
    )(func)
    func = click.option(
        "--option", "-o", "options", multiple=True, help="Known option name",
    )(func)
    return func


@click.group(cls=SuggestingGroup)
@click.option("--config", "-c", type=click.Path(), help="Configuration file path")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """argsuggest - did-you-mean suggestions for command-line typos."""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config
    ctx.meta[ENGINE_META_KEY] = SuggestionEngine(SuggestConfig.load(config))


@cli.command()
@_pool_options
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.argument("token")
@click.pass_context
def suggest(
    ctx: click.Context,
    options: tuple[str, ...],
    subcommands: tuple[str, ...],
    hidden_options: tuple[str, ...],
    hidden_subcommands: tuple[str, ...],
    as_json: bool,
    token: str,
) -> None:
    """Suggest known names for an unmatched TOKEN."""
    candidates = CommandCandidates.from_names(
        options=options,
        subcommands=subcommands,
        hidden_options=hidden_options,
        hidden_subcommands=hidden_subcommands,
    )
    result = find_engine(ctx).suggest_for(token, candidates)

    if as_json:
        click.echo(json.dumps({
            "token": result.token,
            "kind": result.kind.value,
            "suggestions": [{"name": e.name, "score": e.score} for e in result.entries],
            "message": result.render(),
        }))
        return

    hint = result.render()
    if hint is None:
        console.print(f"[yellow]No suggestions available for {escape(repr(token))}.[/yellow]")
        return

    console.print(hint, markup=False, highlight=False)
    if ctx.obj.get("verbose"):
        console.print(f"\nKind: {result.kind.value}")
        for entry in result.entries:
            console.print(f"  {entry.name}: {entry.score:.4f}", markup=False)


@cli.command()
@_pool_options
@click.argument("token")
@click.pass_context
def classify(
    ctx: click.Context,
    options: tuple[str, ...],
    subcommands: tuple[str, ...],
    hidden_options: tuple[str, ...],
    hidden_subcommands: tuple[str, ...],
    token: str,
) -> None:
    """Show whether TOKEN looks like an option or a subcommand."""
    candidates = CommandCandidates.from_names(
        options=options,
        subcommands=subcommands,
        hidden_options=hidden_options,
        hidden_subcommands=hidden_subcommands,
    )
    kind = find_engine(ctx).classify(
        token,
        candidates.visible_option_names,
        candidates.visible_subcommand_names,
    )
    color = {
        TokenKind.OPTION: "green",
        TokenKind.SUBCOMMAND: "cyan",
    }.get(kind, "yellow")
    console.print(f"[{color}]{kind.value}[/{color}]")


@cli.command()
@click.argument("first")
@click.argument("second")
@click.pass_context
def score(ctx: click.Context, first: str, second: str) -> None:
    """Show the bigram cosine similarity of FIRST and SECOND."""
    console.print(f"{find_engine(ctx).score(first, second):.4f}")


@cli.command()
@click.option("--options", "as_options", is_flag=True, help="Treat CANDIDATES as option names")
@click.option("--limit", type=click.IntRange(min=1), help="Maximum number of suggestions")
@click.option("--threshold", type=click.FloatRange(min=0.0, max=1.0, max_open=True),
              help="Minimum similarity (exclusive)")
@click.argument("token")
@click.argument("candidates", nargs=-1)
@click.pass_context
def rank(
    ctx: click.Context,
    as_options: bool,
    limit: int | None,
    threshold: float | None,
    token: str,
    candidates: tuple[str, ...],
) -> None:
    """Rank CANDIDATES by similarity to TOKEN."""
    engine = find_engine(ctx)
    overrides = {
        key: value
        for key, value in (("limit", limit), ("threshold", threshold))
        if value is not None
    }
    if overrides:
        engine = SuggestionEngine(engine.config.merge(overrides))

    kind = TokenKind.OPTION if as_options else TokenKind.SUBCOMMAND
    ranked = engine.rank(token, candidates, kind)

    if not ranked:
        console.print(f"[yellow]No candidate is similar to {escape(repr(token))}.[/yellow]")
        return

    console.print(Panel.fit(f"Token: {escape(token)}"))
    table = Table(title="Ranked Candidates")
    table.add_column("#", style="dim")
    table.add_column("Candidate", style="cyan")
    table.add_column("Score", style="green")
    for i, entry in enumerate(ranked, 1):
        table.add_row(str(i), entry.name, f"{entry.score:.4f}")
    console.print(table)


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
