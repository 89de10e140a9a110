"""Did-you-mean suggestions for unmatched command-line tokens."""

from .classifier import TokenKind, classify
from .engine import Suggestion, SuggestionEngine, Suggestions
from .ranker import most_similar, prefix_matches, rank, strip_prefix
from .similarity import cosine_similarity

__all__ = [
    "TokenKind",
    "classify",
    "Suggestion",
    "SuggestionEngine",
    "Suggestions",
    "most_similar",
    "prefix_matches",
    "rank",
    "strip_prefix",
    "cosine_similarity",
]
