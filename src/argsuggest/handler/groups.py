"""click command classes that answer unknown tokens with suggestions."""

from __future__ import annotations

import itertools
import logging
from typing import Any

import click
from click.utils import make_str

from argsuggest.candidates.source import CommandCandidates
from argsuggest.suggest.engine import SuggestionEngine

from .errors import UnmatchedArgumentError

logger = logging.getLogger(__name__)

ENGINE_META_KEY = "argsuggest.engine"


def find_engine(ctx: click.Context) -> SuggestionEngine:
    """Return the engine to use for ``ctx``.

    Lookup order: the nearest command created with ``engine=``, then an
    engine stored in ``ctx.meta`` under ``ENGINE_META_KEY``, then a default
    engine.
    """
    current: click.Context | None = ctx
    while current is not None:
        engine = getattr(current.command, "engine", None)
        if engine is not None:
            return engine
        current = current.parent
    return ctx.meta.get(ENGINE_META_KEY) or SuggestionEngine()


def typed_argument(args: list[str], option_name: str) -> str:
    """Recover the argument the user typed for a ``NoSuchOption`` name.

    click reports only the failing short flag for a run such as
    ``-verbose`` (``-v``), so the original argument is looked up in ``args``.
    A ``=value`` suffix is dropped.
    """
    options = list(itertools.takewhile(lambda arg: arg != "--", args))
    for arg in options:
        if arg.split("=", 1)[0] == option_name:
            return option_name
    for arg in options:
        if arg.startswith(option_name):
            return arg.split("=", 1)[0]
    return option_name


def unmatched_argument(ctx: click.Context, token: str, message: str) -> UnmatchedArgumentError:
    """Build the error for ``token`` with suggestions from ``ctx``'s command."""
    candidates = CommandCandidates.from_click(ctx)
    suggestions = find_engine(ctx).suggest_for(token, candidates)
    logger.debug(f"{ctx.command_path}: {message} -> {suggestions.names}")
    return UnmatchedArgumentError(message, suggestions, ctx=ctx)


class _SuggestingMixin:
    """Turn ``NoSuchOption`` into an ``UnmatchedArgumentError``."""

    engine: SuggestionEngine | None = None

    def __init__(self, *args: Any, engine: SuggestionEngine | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.engine = engine

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        # the parser consumes ``args`` in place
        typed = list(args)
        try:
            return super().parse_args(ctx, args)
        except click.NoSuchOption as err:
            token = typed_argument(typed, err.option_name)
            raise unmatched_argument(ctx, token, f"No such option: {token}") from err


class SuggestingCommand(_SuggestingMixin, click.Command):
    """A ``click.Command`` that suggests similar options on typos."""


class SuggestingGroup(_SuggestingMixin, click.Group):
    """A ``click.Group`` that suggests similar options and subcommands.

    Commands and subgroups declared through this group inherit the behaviour.
    """

    command_class = SuggestingCommand
    group_class = type

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        try:
            return super().resolve_command(ctx, args)
        except UnmatchedArgumentError:
            raise
        except click.UsageError as err:
            if not args:
                raise
            raise unmatched_argument(ctx, make_str(args[0]), err.message) from err
