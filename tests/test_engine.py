"""Tests for the suggestion engine."""

import pytest

import argsuggest
from argsuggest.candidates.source import CommandCandidates
from argsuggest.config import SuggestConfig
from argsuggest.suggest.classifier import TokenKind
from argsuggest.suggest.engine import Suggestion, SuggestionEngine, Suggestions

AB_OPTIONS = ["--ab123", "--ab234", "--ac123"]


class TestSuggestionEngine:
    """Test the full suggestion pipeline."""

    @pytest.fixture
    def engine(self) -> SuggestionEngine:
        """Create an engine with default settings."""
        return SuggestionEngine()

    def test_init(self, engine: SuggestionEngine) -> None:
        """Test engine initialization."""
        assert engine.config == SuggestConfig()

    def test_option_suggestion(self, engine: SuggestionEngine) -> None:
        """Test suggesting an option."""
        result = engine.suggest("--foa", ["--foo", "--bar"], [])

        assert result.kind == TokenKind.OPTION
        assert result.names == ["--foo"]
        assert result.render() == "Possible solutions: --foo"

    def test_option_suggestion_not_limited_to_prefix(self, engine: SuggestionEngine) -> None:
        """Test suggesting an option from a substring."""
        result = engine.suggest("--uff", ["--bufferings", "--algorithm"], [])

        assert result.names == ["--bufferings"]

    def test_subcommand_suggestion(self, engine: SuggestionEngine) -> None:
        """Test suggesting a subcommand."""
        result = engine.suggest("mmit", ["--git-dir", "-h", "--help"], ["commit", "squash"])

        assert result.kind == TokenKind.SUBCOMMAND
        assert result.names == ["commit"]
        assert result.render() == "Did you mean: commit?"

    def test_multiple_subcommands_render(self, engine: SuggestionEngine) -> None:
        """Test joining several subcommands with 'or'."""
        result = engine.suggest("comit", [], ["commit", "comet", "commute", "squash"])

        assert result.render() == "Did you mean: commit or comet or commute?"

    def test_multiple_options_render(self, engine: SuggestionEngine) -> None:
        """Test joining several options with commas."""
        result = engine.suggest("--colr", ["--color", "--colour", "--cols"], [])

        assert result.render() == "Possible solutions: --cols, --color, --colour"

    def test_ab_options(self, engine: SuggestionEngine) -> None:
        """Test the cosine strategy on options sharing a prefix."""
        assert engine.suggest("--abx", AB_OPTIONS, []).names == ["--ab123", "--ab234"]
        assert engine.suggest("--ac", AB_OPTIONS, []).names == ["--ac123"]
        assert engine.suggest("--b1", AB_OPTIONS, []).names == ["--ab123"]

    @pytest.mark.parametrize("token", [None, "", "x", "-5", "-1.5"])
    def test_unclassifiable_tokens(self, engine: SuggestionEngine, token) -> None:
        """Test that short and numeric tokens get no suggestions."""
        result = engine.suggest(token, ["--foo", "-5x"], ["commit"])

        assert result.kind == TokenKind.NONE
        assert not result
        assert result.render() is None

    def test_nothing_similar(self, engine: SuggestionEngine) -> None:
        """Test falling back when nothing is similar."""
        result = engine.suggest("--bufferings", ["--foo", "--bar", "--help"], [])

        assert result.kind == TokenKind.OPTION
        assert len(result) == 0
        assert result.render() is None

    def test_pools_not_mixed(self, engine: SuggestionEngine) -> None:
        """Test that an option token is never answered with a subcommand."""
        result = engine.suggest("--commit", ["--foo"], ["commit"])

        assert result.kind == TokenKind.OPTION
        assert "commit" not in result.names

    def test_at_most_three(self, engine: SuggestionEngine) -> None:
        """Test the suggestion cap."""
        pool = [f"comm{i}" for i in range(10)]

        assert len(engine.suggest("comm", [], pool)) == 3

    def test_hidden_names_never_suggested(self, engine: SuggestionEngine) -> None:
        """Test that hidden candidates are filtered by the source."""
        candidates = CommandCandidates.from_names(
            options=["--foo"],
            subcommands=["commit"],
            hidden_options=["--fob"],
            hidden_subcommands=["comit-debug"],
        )

        assert engine.suggest_for("--foa", candidates).names == ["--foo"]
        assert engine.suggest_for("comit", candidates).names == ["commit"]

    def test_score(self, engine: SuggestionEngine) -> None:
        """Test the score operation."""
        assert engine.score("commit", "commit") == 1.0
        assert engine.score("abc", "xyz") == 0.0

    def test_rank_none_kind(self, engine: SuggestionEngine) -> None:
        """Test that NONE selects no pool."""
        assert engine.rank("commit", ["commit"], TokenKind.NONE) == []

    def test_rank_returns_scores(self, engine: SuggestionEngine) -> None:
        """Test rank entries carry their score."""
        ranked = engine.rank("mmit", ["commit"])

        assert ranked[0].name == "commit"
        assert 0.0 < ranked[0].score < 1.0

    def test_idempotent(self, engine: SuggestionEngine) -> None:
        """Test repeated queries."""
        first = engine.suggest("--abx", AB_OPTIONS, [])
        second = engine.suggest("--abx", AB_OPTIONS, [])

        assert first == second


class TestEngineConfig:
    """Test configuration-dependent behaviour."""

    def test_prefix_strategy(self) -> None:
        """Test the leading-two-characters option strategy."""
        engine = SuggestionEngine(SuggestConfig(option_strategy="prefix"))

        assert engine.suggest("--abx", AB_OPTIONS, []).names == ["--ab123", "--ab234"]
        assert engine.suggest("--ac", AB_OPTIONS, []).names == ["--ac123"]
        assert engine.suggest("--b1", AB_OPTIONS, []).names == []
        assert engine.suggest("--foo", AB_OPTIONS, []).names == []

    def test_prefix_strategy_ignores_threshold(self) -> None:
        """Test that prefix matches are kept whatever their cosine score."""
        engine = SuggestionEngine(SuggestConfig(option_strategy="prefix", threshold=0.9))

        assert engine.suggest("--abx", AB_OPTIONS, []).names == ["--ab123", "--ab234"]
        assert engine.rank("--a", ["--ab"], TokenKind.OPTION) == [Suggestion("--ab", 0.0)]

    def test_prefix_strategy_leaves_subcommands_alone(self) -> None:
        """Test that subcommands are still ranked by similarity."""
        engine = SuggestionEngine(SuggestConfig(option_strategy="prefix"))

        assert engine.suggest("mmit", ["--git-dir"], ["commit", "squash"]).names == ["commit"]

    def test_limit(self) -> None:
        """Test a custom suggestion cap."""
        engine = SuggestionEngine(SuggestConfig(limit=1))

        assert engine.suggest("comit", [], ["commit", "comet", "commute"]).names == ["commit"]

    def test_threshold(self) -> None:
        """Test a custom threshold."""
        engine = SuggestionEngine(SuggestConfig(threshold=0.45))

        assert engine.suggest("comit", [], ["commit", "comet", "commute"]).names == ["commit", "comet"]

    def test_collapsed_ties(self) -> None:
        """Test the score-bucket tie behaviour."""
        engine = SuggestionEngine(SuggestConfig(keep_ties=False))

        assert engine.suggest("--abx", AB_OPTIONS, []).names == ["--ab234"]


class TestSuggestions:
    """Test the result object."""

    def test_empty(self) -> None:
        """Test an empty result."""
        result = Suggestions(token="--x", kind=TokenKind.OPTION)

        assert not result
        assert result.names == []
        assert result.render() is None

    def test_none_kind_never_renders(self) -> None:
        """Test that NONE results have no template."""
        result = Suggestions(token="x", kind=TokenKind.NONE, entries=(Suggestion("y", 0.5),))

        assert result.render() is None

    def test_package_exports(self) -> None:
        """Test the lazy top-level exports."""
        assert argsuggest.SuggestionEngine is SuggestionEngine
        assert argsuggest.TokenKind is TokenKind
        with pytest.raises(AttributeError):
            argsuggest.DoesNotExist
