"""
Comparable version values.

``Version`` orders version strings the way upstream release numbering usually
works: numeric runs compare as numbers, pre-release words sort before the
release they precede and patch-level words sort after it.
"""

from __future__ import annotations

import re
from functools import total_ordering
from typing import Any, Tuple, Union

TOKEN_PATTERN = re.compile(r"\d+|[A-Za-z]+")

PRE_RELEASE_RANKS = {
    "dev": -5,
    "alpha": -4,
    "a": -4,
    "beta": -3,
    "b": -3,
    "pre": -2,
    "rc": -1,
}
POST_RELEASE_WORDS = frozenset({"p", "patch", "post"})
OTHER_WORD_RANK = -0.5
NUMERIC_RANK = 1

# Post-release words sit between 0 and 1 so "1.0-p1" > "1.0" but < "1.0.1".
POST_RELEASE_VALUE = 0.5

Token = Tuple[float, Union[int, float], str]

ZERO: Token = (NUMERIC_RANK, 0, "")


def tokenize(text: str) -> Tuple[Token, ...]:
    """Split a version string into comparable ``(rank, number, word)`` tokens."""
    tokens = []
    for part in TOKEN_PATTERN.findall(text):
        if part.isdigit():
            tokens.append((NUMERIC_RANK, int(part), ""))
            continue
        word = part.lower()
        if word in PRE_RELEASE_RANKS:
            tokens.append((PRE_RELEASE_RANKS[word], 0, ""))
        elif word in POST_RELEASE_WORDS:
            tokens.append((NUMERIC_RANK, POST_RELEASE_VALUE, ""))
        else:
            tokens.append((OTHER_WORD_RANK, 0, word))
    return tuple(tokens)


def canonical_tokens(tokens: Tuple[Token, ...]) -> Tuple[Token, ...]:
    """Drop trailing zero tokens, so "1.0.0" and "1" share one form."""
    end = len(tokens)
    while end and tokens[end - 1] == ZERO:
        end -= 1
    return tokens[:end]


def compare_tokens(left: Tuple[Token, ...], right: Tuple[Token, ...]) -> int:
    """Return -1, 0 or 1 as ``left`` sorts before, equal to or after ``right``."""
    length = max(len(left), len(right))
    padded_left = left + (ZERO,) * (length - len(left))
    padded_right = right + (ZERO,) * (length - len(right))
    if padded_left == padded_right:
        return 0
    return -1 if padded_left < padded_right else 1


@total_ordering
class Version:
    """
    An ordered version value built from a version string.

    Examples:
        >>> Version("1.1.0") < Version("1.1.2")
        True
        >>> Version("1.0.3-rc1") < Version("1.0.3")
        True
        >>> Version("1.0") == Version("1.0.0")
        True
    """

    __slots__ = ("_text", "_tokens")

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"Version expects a string, got {type(text).__name__}")
        if not text.strip():
            raise ValueError("Version string must not be blank")
        self._text = text
        self._tokens = tokenize(text)

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self._tokens

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_tokens(self._tokens, other._tokens) == 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_tokens(self._tokens, other._tokens) < 0

    def __hash__(self) -> int:
        return hash(canonical_tokens(self._tokens))

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Version({self._text!r})"
