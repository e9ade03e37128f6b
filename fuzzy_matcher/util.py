"""Character helpers shared by the matchers."""

from __future__ import annotations

import enum
import unicodedata
from collections.abc import Iterable, Sequence

from fuzzy_matcher.base import FuzzyMatcher

_NORMALIZATION_GROUPS = {
    "a": "äÄáàâãåÁÀÂÃÅ",
    "o": "öÖóòôõÓÒÔÕ",
    "u": "üÜúùûÚÙÛ",
    "s": "ß",
    "e": "éèêëÉÈÊË",
    "i": "íìîïÍÌÎÏ",
    "y": "ýÿÝ",
    "n": "ñÑ",
}

_NORMALIZED = {
    accented: plain
    for plain, accented_chars in _NORMALIZATION_GROUPS.items()
    for accented in accented_chars
}


def _ascii_lower(c: str) -> str:
    return c.lower() if "A" <= c <= "Z" else c


def normalize_char(c: str) -> str:
    """Map common accented Latin letters to their plain lower-case base letter."""
    return _NORMALIZED.get(c, c)


def char_equal(a: str, b: str, case_sensitive: bool) -> bool:
    """Check whether two characters are equal, optionally ignoring ASCII case.

    Accented Latin letters compare equal to their base letter.
    """
    a_norm = normalize_char(a)
    b_norm = normalize_char(b)
    if case_sensitive:
        return a_norm == b_norm and a.isupper() == b.isupper()
    return _ascii_lower(a_norm) == _ascii_lower(b_norm)


def cheap_matches(
    choice: Sequence[str], pattern: Sequence[str], case_sensitive: bool
) -> list[int] | None:
    """Greedily locate the pattern in the choice.

    Returns the index of the first possible match of every pattern character,
    or None when the pattern is not a subsequence of the choice.
    """
    pattern_iter = iter(pattern)
    wanted = next(pattern_iter, None)
    first_match_indices: list[int] = []
    for idx, c in enumerate(choice):
        if wanted is None:
            break
        if char_equal(c, wanted, case_sensitive):
            first_match_indices.append(idx)
            wanted = next(pattern_iter, None)
    if wanted is not None:
        return None
    return first_match_indices


class CharType(enum.Enum):
    """Coarse classification of a character."""

    NON_WORD = "non_word"
    LOWER = "lower"
    UPPER = "upper"
    NUMBER = "number"


def char_type_of(ch: str) -> CharType:
    """Classify a single character."""
    if ch.islower():
        return CharType.LOWER
    if ch.isupper():
        return CharType.UPPER
    if unicodedata.category(ch) in ("Nd", "Nl", "No"):
        return CharType.NUMBER
    return CharType.NON_WORD


class CharRole(enum.Enum):
    """Role of a character within a word."""

    TAIL = "tail"
    HEAD = "head"


def char_role(prev: str, cur: str) -> CharRole:
    """Determine the role of ``cur`` given the character before it."""
    pair = (char_type_of(prev), char_type_of(cur))
    if pair in (
        (CharType.LOWER, CharType.UPPER),
        (CharType.NON_WORD, CharType.LOWER),
        (CharType.NON_WORD, CharType.UPPER),
    ):
        return CharRole.HEAD
    return CharRole.TAIL


def filter_and_sort(
    matcher: FuzzyMatcher, pattern: str, lines: Iterable[str]
) -> list[str]:
    """Keep the lines that match and order them from best to worst score."""
    scored = []
    for line in lines:
        score = matcher.fuzzy_match(line, pattern)
        if score is not None:
            scored.append((score, line))
    scored.sort(key=lambda item: -item[0])
    return [line for _, line in scored]


def wrap_matches(line: str, indices: Iterable[int]) -> str:
    """Surround the characters at the given (sorted) indices with brackets."""
    index_iter = iter(indices)
    next_id = next(index_iter, None)
    parts = []
    for idx, ch in enumerate(line):
        if next_id == idx:
            parts.append(f"[{ch}]")
            next_id = next(index_iter, None)
        else:
            parts.append(ch)
    return "".join(parts)