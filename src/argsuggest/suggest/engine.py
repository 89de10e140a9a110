"""Suggestion engine - classify, score and rank unmatched tokens."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from argsuggest.config import SuggestConfig

from .classifier import TokenKind, classify
from .ranker import prefix_matches, rank, strip_prefix
from .similarity import cosine_similarity

if TYPE_CHECKING:
    from argsuggest.candidates.source import CommandCandidates

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Suggestion:
    """A candidate name and its similarity to the token."""

    name: str
    score: float


@dataclass(frozen=True)
class Suggestions:
    """Outcome of one suggestion query."""

    token: str | None
    kind: TokenKind
    entries: tuple[Suggestion, ...] = ()

    @property
    def names(self) -> list[str]:
        """Suggested names, best first."""
        return [entry.name for entry in self.entries]

    def __bool__(self) -> bool:
        return bool(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def render(self) -> str | None:
        """Render the hint line shown under the parser's error message.

        Returns:
            The hint, or None when there is nothing to suggest and the
            caller should show the full usage instead
        """
        if not self.entries:
            return None
        if self.kind is TokenKind.OPTION:
            return "Possible solutions: " + ", ".join(self.names)
        if self.kind is TokenKind.SUBCOMMAND:
            return "Did you mean: " + " or ".join(self.names) + "?"
        return None


class SuggestionEngine:
    """Stateless did-you-mean engine for unmatched command-line tokens."""

    def __init__(self, config: SuggestConfig | None = None) -> None:
        """Initialize the engine.

        Args:
            config: Engine settings (defaults apply when omitted)
        """
        self.config = config or SuggestConfig()

    def classify(
        self,
        token: str | None,
        option_names: Iterable[str],
        subcommand_names: Iterable[str],
    ) -> TokenKind:
        """Decide which candidate pool ``token`` belongs to."""
        return classify(token, option_names, subcommand_names, self.config.option_prefix)

    def score(self, a: str, b: str) -> float:
        """Similarity of two names in [0, 1]."""
        return cosine_similarity(a, b, self.config.ngram_size)

    def rank(
        self,
        token: str,
        candidates: Iterable[str],
        kind: TokenKind = TokenKind.SUBCOMMAND,
    ) -> list[Suggestion]:
        """Rank one candidate pool against ``token``.

        Option tokens are stripped of their markers before scoring and use
        the configured option strategy. Other tokens are scored as typed.

        The ``prefix`` strategy selects names by their leading characters
        alone, so ``threshold`` and ``keep_ties`` do not apply to it. Its
        scores are the cosine similarity of each selected name, reported
        for information, and may be 0.0.

        Args:
            token: The unmatched token
            candidates: Visible names of a single pool
            kind: Which pool ``candidates`` is

        Returns:
            At most ``config.limit`` suggestions, best first
        """
        config = self.config
        if kind is TokenKind.NONE:
            return []

        if kind is TokenKind.OPTION and config.option_strategy == "prefix":
            names = prefix_matches(token, candidates, limit=config.limit)
            return [Suggestion(name, self.score(strip_prefix(token), name)) for name in names]

        ranked = rank(
            token,
            candidates,
            strip=kind is TokenKind.OPTION,
            threshold=config.threshold,
            limit=config.limit,
            degree=config.ngram_size,
            keep_ties=config.keep_ties,
        )
        return [Suggestion(name, score) for name, score in ranked]

    def suggest(
        self,
        token: str | None,
        option_names: Iterable[str],
        subcommand_names: Iterable[str],
    ) -> Suggestions:
        """Run the full pipeline for one unmatched token.

        Args:
            token: The unmatched token as typed
            option_names: Visible option names, aliases flattened
            subcommand_names: Visible subcommand names

        Returns:
            Suggestions carrying the classification and ranked names
        """
        options = list(option_names)
        subcommands = list(subcommand_names)

        kind = self.classify(token, options, subcommands)
        if token is None or kind is TokenKind.NONE:
            return Suggestions(token=token, kind=kind)

        pool = options if kind is TokenKind.OPTION else subcommands
        entries = self.rank(token, pool, kind)
        logger.debug(f"Suggestions for {token!r}: {[e.name for e in entries]}")
        return Suggestions(token=token, kind=kind, entries=tuple(entries))

    def suggest_for(self, token: str | None, candidates: CommandCandidates) -> Suggestions:
        """Run the pipeline against a candidate source."""
        return self.suggest(
            token,
            candidates.visible_option_names,
            candidates.visible_subcommand_names,
        )
