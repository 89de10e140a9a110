"""Usage error carrying did-you-mean suggestions."""

from __future__ import annotations

import functools
from typing import IO, Any

import click

from argsuggest.suggest.engine import Suggestions


class UnmatchedArgumentError(click.UsageError):
    """An option or subcommand the parser could not match.

    ``show()`` prints the parser's message followed by the rendered
    suggestions, or by the full help text when there is nothing to suggest.
    """

    def __init__(
        self,
        message: str,
        suggestions: Suggestions,
        ctx: click.Context | None = None,
    ) -> None:
        super().__init__(message, ctx)
        self.suggestions = suggestions

    @property
    def token(self) -> str | None:
        """The unmatched token."""
        return self.suggestions.token

    def format_message(self) -> str:
        hint = self.suggestions.render()
        return f"{self.message}\n{hint}" if hint else self.message

    def show(self, file: IO[Any] | None = None) -> None:
        color = self.ctx.color if self.ctx is not None else None
        echo = functools.partial(click.echo, file=file, err=True, color=color)

        echo(click.style(self.message, fg="red"))
        hint = self.suggestions.render()
        if hint:
            echo(hint)
        elif self.ctx is not None:
            echo(self.ctx.get_help())
