"""Common interface shared by all fuzzy matchers."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod

MatchResult = tuple[int, list[int]]


class CaseMatching(enum.Enum):
    """How a matcher treats letter case."""

    RESPECT = "respect"
    IGNORE = "ignore"
    SMART = "smart"


class FuzzyMatcher(ABC):
    """A matcher that scores how well a pattern fuzzily matches a choice."""

    @abstractmethod
    def fuzzy_indices(self, choice: str, pattern: str) -> MatchResult | None:
        """Return ``(score, indices)`` of the matched characters, or None."""

    def fuzzy_match(self, choice: str, pattern: str) -> int | None:
        """Return the score of matching ``pattern`` against ``choice``, or None."""
        result = self.fuzzy_indices(choice, pattern)
        if result is None:
            return None
        return result[0]