"""argsuggest - did-you-mean suggestions for mistyped command-line options and subcommands."""

__version__ = "0.1.0"

# Core components - lazy imports to keep ``import argsuggest`` free of click
def __getattr__(name: str):
    """Lazy import of the public API."""
    if name in ("SuggestionEngine", "Suggestions", "Suggestion"):
        from argsuggest.suggest import engine
        return getattr(engine, name)
    elif name == "TokenKind":
        from argsuggest.suggest.classifier import TokenKind
        return TokenKind
    elif name == "SuggestConfig":
        from argsuggest.config import SuggestConfig
        return SuggestConfig
    elif name == "CommandCandidates":
        from argsuggest.candidates.source import CommandCandidates
        return CommandCandidates
    elif name in ("SuggestingCommand", "SuggestingGroup", "UnmatchedArgumentError"):
        from argsuggest import handler
        return getattr(handler, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "SuggestionEngine",
    "Suggestions",
    "Suggestion",
    "TokenKind",
    "SuggestConfig",
    "CommandCandidates",
    "SuggestingCommand",
    "SuggestingGroup",
    "UnmatchedArgumentError",
]
