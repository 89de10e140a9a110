"""Candidate name sources for the suggestion engine."""

from .source import CommandCandidates, OptionCandidate, SubcommandCandidate

__all__ = ["CommandCandidates", "OptionCandidate", "SubcommandCandidate"]
