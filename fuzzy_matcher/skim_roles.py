"""Character types and roles used by the skim matchers."""

from __future__ import annotations

import enum

_HARD_SEPARATORS = frozenset(" /\\|()[]{}")


def _is_soft_separator(ch: str) -> bool:
    return (
        "!" <= ch <= "'"
        or "*" <= ch <= "."
        or ":" <= ch <= "@"
        or "^" <= ch <= "`"
        or ch == "~"
    )


class SkimCharType(enum.Enum):
    """Character categories.

    EMPTY marks the start of the string, HARD_SEP characters clearly separate
    content, SOFT_SEP is other ASCII punctuation, and LOWER covers ASCII lower
    case as well as every other character.
    """

    EMPTY = "empty"
    UPPER = "upper"
    LOWER = "lower"
    NUMBER = "number"
    HARD_SEP = "hard_sep"
    SOFT_SEP = "soft_sep"

    @staticmethod
    def of(ch: str) -> SkimCharType:
        """Classify a single character; ``"\\0"`` stands for the string start."""
        if ch == "\0":
            return SkimCharType.EMPTY
        if ch in _HARD_SEPARATORS:
            return SkimCharType.HARD_SEP
        if _is_soft_separator(ch):
            return SkimCharType.SOFT_SEP
        if "0" <= ch <= "9":
            return SkimCharType.NUMBER
        if "A" <= ch <= "Z":
            return SkimCharType.UPPER
        return SkimCharType.LOWER


class SkimCharRole(enum.Enum):
    """Role of a character, derived from its type and the type before it."""

    HEAD = "head"
    TAIL = "tail"
    CAMEL = "camel"
    BREAK = "break"

    @staticmethod
    def of(prev: str, cur: str) -> SkimCharRole:
        """Role of ``cur`` given the preceding character ``prev``."""
        return SkimCharRole.of_type(SkimCharType.of(prev), SkimCharType.of(cur))

    @staticmethod
    def of_type(prev: SkimCharType, cur: SkimCharType) -> SkimCharRole:
        """Role of a character of type ``cur`` following one of type ``prev``."""
        if prev in (SkimCharType.EMPTY, SkimCharType.HARD_SEP):
            return SkimCharRole.HEAD
        if prev is SkimCharType.SOFT_SEP:
            return SkimCharRole.BREAK
        if cur is SkimCharType.UPPER and prev in (
            SkimCharType.LOWER,
            SkimCharType.NUMBER,
        ):
            return SkimCharRole.CAMEL
        return SkimCharRole.TAIL