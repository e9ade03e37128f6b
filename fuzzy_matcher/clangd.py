"""Fuzzy matching with the scoring scheme used by the clangd code completer."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Sequence

from fuzzy_matcher.base import CaseMatching, FuzzyMatcher, MatchResult
from fuzzy_matcher.util import (
    CharRole,
    CharType,
    char_equal,
    char_role,
    char_type_of,
    cheap_matches,
)

AWFUL_SCORE = -(1 << 30)


class _Action(enum.Enum):
    MISS = "miss"
    MATCH = "match"


@dataclass(slots=True)
class _Cell:
    miss_score: int = AWFUL_SCORE
    last_action_miss: _Action = _Action.MISS
    match_score: int = AWFUL_SCORE
    last_action_match: _Action = _Action.MISS


class ClangdMatcher(FuzzyMatcher):
    """Fuzzy matcher that prefers word heads and consecutive matches.

    Case is ignored by default; the case methods change the mode in place
    and return the matcher so that calls can be chained.
    """

    def __init__(self, case: CaseMatching = CaseMatching.IGNORE) -> None:
        self.case = case

    def ignore_case(self) -> ClangdMatcher:
        """Match without regard to ASCII case."""
        self.case = CaseMatching.IGNORE
        return self

    def smart_case(self) -> ClangdMatcher:
        """Match case-sensitively only when the pattern has an ASCII capital."""
        self.case = CaseMatching.SMART
        return self

    def respect_case(self) -> ClangdMatcher:
        """Always match case-sensitively."""
        self.case = CaseMatching.RESPECT
        return self

    def is_case_sensitive(self, pattern: str) -> bool:
        """Whether matching ``pattern`` should respect case."""
        if self.case is CaseMatching.RESPECT:
            return True
        if self.case is CaseMatching.IGNORE:
            return False
        return any("A" <= ch <= "Z" for ch in pattern)

    def fuzzy_indices(self, choice: str, pattern: str) -> MatchResult | None:
        case_sensitive = self.is_case_sensitive(pattern)
        if cheap_matches(choice, pattern, case_sensitive) is None:
            return None

        dp = _build_graph(choice, pattern, False, case_sensitive)

        row = len(pattern)
        col = len(choice)
        cell = dp[row][col]
        if cell.match_score > cell.miss_score:
            last_action, score = _Action.MATCH, cell.match_score
        else:
            last_action, score = _Action.MISS, cell.miss_score

        indices: list[int] = []
        while row > 0 or col > 0:
            cell = dp[row][col]
            if last_action is _Action.MATCH:
                indices.append(col - 1)
                last_action = cell.last_action_match
                row -= 1
            else:
                last_action = cell.last_action_miss
            col -= 1

        indices.reverse()
        return _adjust_score(score, len(choice)), indices

    def fuzzy_match(self, choice: str, pattern: str) -> int | None:
        case_sensitive = self.is_case_sensitive(pattern)
        if cheap_matches(choice, pattern, case_sensitive) is None:
            return None

        dp = _build_graph(choice, pattern, True, case_sensitive)
        cell = dp[len(pattern) & 1][len(choice)]
        return _adjust_score(max(cell.match_score, cell.miss_score), len(choice))


def fuzzy_indices(line: str, pattern: str) -> MatchResult | None:
    """Match ``line`` against ``pattern`` ignoring case; return score and indices."""
    return ClangdMatcher().ignore_case().fuzzy_indices(line, pattern)


def fuzzy_match(line: str, pattern: str) -> int | None:
    """Match ``line`` against ``pattern`` ignoring case; return the score."""
    return ClangdMatcher().ignore_case().fuzzy_match(line, pattern)


def _build_graph(
    line: Sequence[str], pattern: Sequence[str], compressed: bool, case_sensitive: bool
) -> list[list[_Cell]]:
    num_line_chars = len(line)
    num_pattern_chars = len(pattern)
    max_rows = 2 if compressed else num_pattern_chars + 1

    dp = [[_Cell() for _ in range(num_line_chars + 1)] for _ in range(max_rows)]
    dp[0][0].miss_score = 0

    for idx, ch in enumerate(line):
        dp[0][idx + 1] = _Cell(
            miss_score=dp[0][idx].miss_score - _skip_penalty(ch, _Action.MISS),
            last_action_miss=_Action.MISS,
            match_score=AWFUL_SCORE,
            last_action_match=_Action.MISS,
        )

    pat_prev_ch = "\0"
    for pat_idx, pat_ch in enumerate(pattern):
        if compressed:
            current_row = dp[(pat_idx + 1) & 1]
            prev_row = dp[pat_idx & 1]
        else:
            current_row = dp[pat_idx + 1]
            prev_row = dp[pat_idx]
        not_last = pat_idx < num_pattern_chars - 1

        line_prev_ch = line[pat_idx - 1] if pat_idx > 0 else "\0"
        for line_idx in range(pat_idx, num_line_chars):
            line_ch = line[line_idx]

            # Skip the current line character.
            pre_miss = current_row[line_idx]
            match_miss_score = pre_miss.match_score
            miss_miss_score = pre_miss.miss_score
            if not_last:
                match_miss_score -= _skip_penalty(line_ch, _Action.MATCH)
                miss_miss_score -= _skip_penalty(line_ch, _Action.MISS)

            if match_miss_score > miss_miss_score:
                miss_score, last_action_miss = match_miss_score, _Action.MATCH
            else:
                miss_score, last_action_miss = miss_miss_score, _Action.MISS

            # Match the current line character.
            pre_match = prev_row[line_idx]
            if char_equal(pat_ch, line_ch, case_sensitive):
                bonus = _match_bonus(
                    pat_idx,
                    pat_ch,
                    pat_prev_ch,
                    line_idx,
                    line_ch,
                    line_prev_ch,
                    _Action.MATCH,
                )
                match_match_score = pre_match.match_score + bonus
                miss_match_score = pre_match.miss_score + bonus
            else:
                match_match_score = AWFUL_SCORE
                miss_match_score = AWFUL_SCORE

            if match_match_score > miss_match_score:
                match_score, last_action_match = match_match_score, _Action.MATCH
            else:
                match_score, last_action_match = miss_match_score, _Action.MISS

            current_row[line_idx + 1] = _Cell(
                miss_score=miss_score,
                last_action_miss=last_action_miss,
                match_score=match_score,
                last_action_match=last_action_match,
            )
            line_prev_ch = line_ch

        pat_prev_ch = pat_ch

    return dp


def _adjust_score(score: int, num_line_chars: int) -> int:
    return score - math.floor(math.log(num_line_chars + 1))


def _skip_penalty(ch: str, last_action: _Action) -> int:
    score = 1
    if last_action is _Action.MATCH:
        # Non-consecutive match.
        score += 3
    if char_type_of(ch) is CharType.NON_WORD:
        # Skipping a separator.
        score += 6
    return score


def _match_bonus(
    pat_idx: int,
    pat_ch: str,
    pat_prev_ch: str,
    line_idx: int,
    line_ch: str,
    line_prev_ch: str,
    last_action: _Action,
) -> int:
    score = 10
    pat_role = char_role(pat_prev_ch, pat_ch)
    line_role = char_role(line_prev_ch, line_ch)

    # The pattern so far is a prefix of the line.
    if pat_idx == line_idx:
        score += 10
    # Exact case match.
    if pat_ch == line_ch:
        score += 8
    # Matching a word head.
    if line_role is CharRole.HEAD:
        score += 9
    # A head in the pattern aligns with a head in the line.
    if pat_role is CharRole.HEAD and line_role is CharRole.HEAD:
        score += 10
    # Matching inside a segment when the previous character was not matched.
    if line_role is CharRole.TAIL and pat_idx > 0 and last_action is _Action.MISS:
        score -= 30
    # A head in the pattern matches in the middle of a segment.
    if pat_role is CharRole.HEAD and line_role is CharRole.TAIL:
        score -= 10
    # The first pattern character matches in the middle of a segment.
    if pat_idx == 0 and line_role is CharRole.TAIL:
        score -= 40

    return score