"""Character n-gram cosine similarity."""

from __future__ import annotations

import math
from collections import Counter

DEFAULT_NGRAM_SIZE = 2


def ngram_frequency(sequence: str, degree: int = DEFAULT_NGRAM_SIZE) -> Counter[str]:
    """Count every contiguous substring of length ``degree`` in ``sequence``."""
    return Counter(sequence[i:i + degree] for i in range(len(sequence) - degree + 1))


def dot_product(m1: Counter[str], m2: Counter[str]) -> int:
    """Dot product of two sparse frequency vectors."""
    return sum(count * m2[gram] for gram, count in m1.items() if gram in m2)


def cosine_similarity(a: str, b: str, degree: int = DEFAULT_NGRAM_SIZE) -> float:
    """Compute the n-gram cosine similarity of two strings.

    Both strings are case-folded first. A string shorter than ``degree`` has
    no n-grams, so any comparison involving it scores 0.0.

    Args:
        a: First string
        b: Second string
        degree: n-gram length (bigrams by default)

    Returns:
        Similarity in [0.0, 1.0]
    """
    m1 = ngram_frequency(a.casefold(), degree)
    m2 = ngram_frequency(b.casefold(), degree)

    denominator = dot_product(m1, m1) * dot_product(m2, m2)
    if not denominator:
        return 0.0
    return dot_product(m1, m2) / math.sqrt(denominator)
