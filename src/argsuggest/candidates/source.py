"""Visible option and subcommand names of a command context."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import click


@dataclass(frozen=True)
class OptionCandidate:
    """One option with all of its aliases."""

    names: tuple[str, ...]
    hidden: bool = False


@dataclass(frozen=True)
class SubcommandCandidate:
    """One subcommand name."""

    name: str
    hidden: bool = False


@dataclass(frozen=True)
class CommandCandidates:
    """Option and subcommand candidates of a single command context."""

    options: tuple[OptionCandidate, ...] = ()
    subcommands: tuple[SubcommandCandidate, ...] = ()

    @property
    def visible_option_names(self) -> list[str]:
        """Every alias of every visible option, in declaration order."""
        names = (
            name
            for option in self.options
            if not option.hidden
            for name in option.names
        )
        return list(dict.fromkeys(names))

    @property
    def visible_subcommand_names(self) -> list[str]:
        """Names of the visible subcommands, in declaration order."""
        return list(dict.fromkeys(s.name for s in self.subcommands if not s.hidden))

    @classmethod
    def from_names(
        cls,
        options: Iterable[str | Iterable[str]] = (),
        subcommands: Iterable[str] = (),
        hidden_options: Iterable[str | Iterable[str]] = (),
        hidden_subcommands: Iterable[str] = (),
    ) -> CommandCandidates:
        """Build candidates from plain name lists.

        An option entry is either a single name or a sequence of aliases of
        the same option, e.g. ``("-m", "--message")``.
        """
        def as_option(entry: str | Iterable[str], hidden: bool) -> OptionCandidate:
            names = (entry,) if isinstance(entry, str) else tuple(entry)
            return OptionCandidate(names=names, hidden=hidden)

        return cls(
            options=tuple(
                [as_option(entry, False) for entry in options]
                + [as_option(entry, True) for entry in hidden_options]
            ),
            subcommands=tuple(
                [SubcommandCandidate(name) for name in subcommands]
                + [SubcommandCandidate(name, hidden=True) for name in hidden_subcommands]
            ),
        )

    @classmethod
    def from_click(cls, ctx: click.Context) -> CommandCandidates:
        """Collect the candidates of the command bound to ``ctx``.

        Options include secondary names (``--no-flag``) and the automatic
        help option. Positional arguments are never candidates.
        """
        command = ctx.command
        options = tuple(
            OptionCandidate(
                names=tuple(param.opts) + tuple(param.secondary_opts),
                hidden=param.hidden,
            )
            for param in command.get_params(ctx)
            if isinstance(param, click.Option)
        )

        subcommands: list[SubcommandCandidate] = []
        if isinstance(command, click.Group):
            for name in command.list_commands(ctx):
                sub = command.get_command(ctx, name)
                if sub is None:
                    continue
                subcommands.append(SubcommandCandidate(name, hidden=sub.hidden))

        return cls(options=options, subcommands=tuple(subcommands))
