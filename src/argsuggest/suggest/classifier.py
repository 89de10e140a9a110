"""Decide whether an unmatched token looks like an option or a subcommand."""

from __future__ import annotations

import logging
import string
from collections.abc import Iterable
from enum import Enum

logger = logging.getLogger(__name__)

DEFAULT_OPTION_PREFIX = "-"

_FLOAT_SUFFIXES = "fFdD"


class TokenKind(Enum):
    """Which candidate pool an unmatched token should be compared against."""

    OPTION = "option"
    SUBCOMMAND = "subcommand"
    NONE = "none"


def is_numeric(token: str) -> bool:
    """Check if ``token`` is an integer or floating-point literal.

    Signed values, ``0x``/``#`` hex and ``0o``/``0b`` integers, exponent
    notation, ``nan`` and ``inf`` all count, as do floats with a trailing
    ``f`` or ``d`` type suffix (``1.5f``, ``2d``). Digit separators
    (``1_000``) do not.
    """
    if "_" in token or token != token.strip():
        return False

    unsigned = token[1:] if token[:1] in "+-" else token
    if unsigned.startswith("#"):
        digits = unsigned[1:]
        return bool(digits) and all(ch in string.hexdigits for ch in digits)

    try:
        int(token, 0)
        return True
    except ValueError:
        pass
    try:
        float(token)
        return True
    except ValueError:
        pass

    if len(unsigned) > 1 and unsigned[-1] in _FLOAT_SUFFIXES and (
        unsigned[-2].isdigit() or unsigned[-2] == "."
    ):
        try:
            float(token[:-1])
            return True
        except ValueError:
            pass
    return False


def common_prefix_length(a: str, b: str) -> int:
    """Length of the run of equal leading characters of ``a`` and ``b``."""
    length = 0
    for x, y in zip(a, b):
        if x != y:
            break
        length += 1
    return length


def resembles_option(
    token: str,
    option_names: Iterable[str],
    option_prefix: str = DEFAULT_OPTION_PREFIX,
) -> bool:
    """Check if ``token`` looks like a mistyped option.

    The prefix runs shared with every option name are summed, and the token
    counts as option-like when that total reaches 90% of the number of
    option names. This is an aggregate over the whole pool, not a best-match
    test against a single option.

    Args:
        token: The unmatched token
        option_names: Every visible option name, aliases included
        option_prefix: Marker used when there are no options at all

    Returns:
        True if the token should be compared against options
    """
    names = list(dict.fromkeys(option_names))
    if not names:
        return token.startswith(option_prefix)

    total = sum(common_prefix_length(token, name) for name in names)
    return total > 0 and total * 10 >= len(names) * 9


def classify(
    token: str | None,
    option_names: Iterable[str],
    subcommand_names: Iterable[str],
    option_prefix: str = DEFAULT_OPTION_PREFIX,
) -> TokenKind:
    """Classify an unmatched token.

    Args:
        token: The unmatched token as typed
        option_names: Visible option names, aliases flattened
        subcommand_names: Visible subcommand names
        option_prefix: Option marker character(s)

    Returns:
        The pool the token should be ranked against
    """
    if token is None or len(token) <= 1:
        return TokenKind.NONE

    # negative numbers are values, not unknown options
    if is_numeric(token):
        return TokenKind.NONE

    option_like = resembles_option(token, option_names, option_prefix)
    if not option_like and list(subcommand_names):
        kind = TokenKind.SUBCOMMAND
    elif option_like:
        kind = TokenKind.OPTION
    else:
        kind = TokenKind.NONE

    logger.debug(f"Classified {token!r} as {kind.value}")
    return kind
