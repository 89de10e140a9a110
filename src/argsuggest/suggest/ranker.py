"""Rank candidate names by similarity to an unmatched token."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .similarity import DEFAULT_NGRAM_SIZE, cosine_similarity

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 3
DEFAULT_THRESHOLD = 0.0


def strip_prefix(token: str) -> str:
    """Drop leading marker characters such as ``--`` or ``/``.

    Letters, digits and ``_`` end the marker, so ``--_debug`` keeps its
    underscore. A token with none of them is returned unchanged.
    """
    for i, ch in enumerate(token):
        if ch.isalnum() or ch == "_":
            return token[i:]
    return token


def most_similar(
    pattern: str,
    candidates: Iterable[str],
    threshold: float = DEFAULT_THRESHOLD,
    degree: int = DEFAULT_NGRAM_SIZE,
    keep_ties: bool = True,
) -> list[tuple[str, float]]:
    """Score every candidate against ``pattern`` and sort best first.

    Candidates scoring at or below ``threshold`` are dropped. Equal scores
    keep their input order. With ``keep_ties=False`` only the last candidate
    seen for each distinct score survives.

    Args:
        pattern: The (already stripped) token
        candidates: Candidate names; duplicates are scored once
        threshold: Scores must be strictly greater than this
        degree: n-gram length
        keep_ties: Keep every candidate that shares a score

    Returns:
        List of (name, score) tuples, best first
    """
    pattern = pattern.casefold()
    scored: list[tuple[float, int, str]] = []
    for index, candidate in enumerate(dict.fromkeys(candidates)):
        score = cosine_similarity(pattern, candidate, degree)
        if score > threshold:
            scored.append((score, index, candidate))

    if not keep_ties:
        buckets: dict[float, tuple[float, int, str]] = {}
        for entry in scored:
            buckets[entry[0]] = entry
        scored = list(buckets.values())

    scored.sort(key=lambda entry: (-entry[0], entry[1]))
    return [(candidate, score) for score, _, candidate in scored]


def rank(
    token: str,
    candidates: Iterable[str],
    strip: bool = False,
    threshold: float = DEFAULT_THRESHOLD,
    limit: int = DEFAULT_LIMIT,
    degree: int = DEFAULT_NGRAM_SIZE,
    keep_ties: bool = True,
) -> list[tuple[str, float]]:
    """Return the top ``limit`` candidates for ``token``.

    Args:
        token: The unmatched token as typed
        candidates: One pool of visible names
        strip: Strip option markers from the token before scoring
        threshold: Minimum score (exclusive)
        limit: Maximum number of suggestions
        degree: n-gram length
        keep_ties: Keep every candidate that shares a score

    Returns:
        At most ``limit`` (name, score) tuples, best first
    """
    pattern = strip_prefix(token) if strip else token
    ranked = most_similar(pattern, candidates, threshold, degree, keep_ties)
    logger.debug(f"Ranked {token!r}: {len(ranked)} candidate(s) above {threshold}")
    return ranked[:limit]


def prefix_matches(
    token: str,
    candidates: Iterable[str],
    length: int = 2,
    limit: int = DEFAULT_LIMIT,
) -> list[str]:
    """Select candidates sharing the first ``length`` characters with ``token``.

    Markers are stripped from both sides, so ``--abx`` matches ``--ab123``.
    Candidates keep their input order.

    Args:
        token: The unmatched token as typed
        candidates: One pool of visible names
        length: Number of leading characters that must agree
        limit: Maximum number of suggestions

    Returns:
        Matching candidate names
    """
    head = strip_prefix(token).casefold()[:length]
    if not head:
        return []

    matches = [
        candidate
        for candidate in dict.fromkeys(candidates)
        if strip_prefix(candidate).casefold().startswith(head)
    ]
    return matches[:limit]
