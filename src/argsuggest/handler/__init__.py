"""click integration for did-you-mean suggestions."""

from .errors import UnmatchedArgumentError
from .groups import SuggestingCommand, SuggestingGroup, find_engine

__all__ = ["UnmatchedArgumentError", "SuggestingCommand", "SuggestingGroup", "find_engine"]
