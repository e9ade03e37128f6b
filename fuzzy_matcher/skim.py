"""The skim fuzzy matching algorithm: sequence alignment with affine gaps.

Given a pattern (rows ``i``) and a choice (columns ``j``), two score
matrices are maintained::

    B[j]    = in-place bonus of choice[j] (word heads, camel humps, ...)
    M[i][j] = match(i, j) + max(M[i-1][j-1] + consecutive, P[i-1][j-1])
    M[i][j] = -infinity if pattern[i] and choice[j] do not match
    P[i][j] = max(gap_start + gap_extend + M[i][j-1], gap_extend + P[i][j-1])

``M`` holds the best alignment ending with a match at ``j`` and ``P`` the
best alignment in which ``choice[j]`` is skipped.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

from fuzzy_matcher.base import CaseMatching, FuzzyMatcher, MatchResult
from fuzzy_matcher.skim_roles import SkimCharRole, SkimCharType
from fuzzy_matcher.util import char_equal, cheap_matches

NEG_INFINITY = -(1 << 15)


@dataclass(frozen=True)
class SkimScoreConfig:
    """Scores and bonuses that drive :class:`SkimMatcherV2`.

    ``bonus_first_char_multiplier`` scales the in-place bonus of the very first
    character of the choice. ``bonus_head`` rewards the start of a word,
    ``bonus_break`` a character after soft punctuation and ``bonus_camel`` a
    camel-case hump. ``bonus_consecutive`` is the least bonus given to a
    character in a consecutive run, and ``penalty_case_mismatch`` applies to
    case-insensitive matches whose case differs.
    """

    score_match: int = 16
    gap_start: int = -3
    gap_extension: int = -1
    bonus_first_char_multiplier: int = 2
    bonus_head: int = 8
    bonus_break: int = 7
    bonus_camel: int = 6
    bonus_consecutive: int = 4
    penalty_case_mismatch: int = -2


class _Movement(enum.Enum):
    MATCH = "match"
    SKIP = "skip"


@dataclass(slots=True)
class _Cell:
    m_move: _Movement = _Movement.SKIP
    m_score: int = NEG_INFINITY
    p_move: _Movement = _Movement.SKIP
    p_score: int = NEG_INFINITY
    bonus: int = 0

    def reset(self) -> None:
        self.m_move = _Movement.SKIP
        self.m_score = NEG_INFINITY
        self.p_move = _Movement.SKIP
        self.p_score = NEG_INFINITY
        self.bonus = 0


class SkimMatcherV2(FuzzyMatcher):
    """Fuzzy matcher based on sequence alignment with affine gap penalties.

    Smart case is the default. When ``element_limit`` is positive and the
    score matrix would hold more cells than that, a cheaper linear scan is
    used instead. The case methods change the mode in place and return the
    matcher so that calls can be chained.
    """

    def __init__(
        self,
        score_config: SkimScoreConfig | None = None,
        element_limit: int = 0,
        case: CaseMatching = CaseMatching.SMART,
    ) -> None:
        self.score_config = score_config if score_config is not None else SkimScoreConfig()
        self.element_limit = element_limit
        self.case = case

    def ignore_case(self) -> SkimMatcherV2:
        """Match without regard to ASCII case."""
        self.case = CaseMatching.IGNORE
        return self

    def smart_case(self) -> SkimMatcherV2:
        """Match case-sensitively only when the pattern has an ASCII capital."""
        self.case = CaseMatching.SMART
        return self

    def respect_case(self) -> SkimMatcherV2:
        """Always match case-sensitively."""
        self.case = CaseMatching.RESPECT
        return self

    def _is_case_sensitive(self, pattern: str) -> bool:
        if self.case is CaseMatching.RESPECT:
            return True
        if self.case is CaseMatching.IGNORE:
            return False
        return any("A" <= ch <= "Z" for ch in pattern)

    def _in_place_bonus(self, prev_type: SkimCharType, cur_type: SkimCharType) -> int:
        role = SkimCharRole.of_type(prev_type, cur_type)
        config = self.score_config
        if role is SkimCharRole.HEAD:
            return config.bonus_head
        if role is SkimCharRole.CAMEL:
            return config.bonus_camel
        if role is SkimCharRole.BREAK:
            return config.bonus_break
        return 0

    def _in_place_bonuses(self, choice: Sequence[str]) -> list[int]:
        bonuses = [0]
        prev_ch = "\0"
        for ch in choice:
            bonuses.append(self._in_place_bonus(SkimCharType.of(prev_ch), SkimCharType.of(ch)))
            prev_ch = ch
        if len(bonuses) > 1:
            bonuses[1] *= self.score_config.bonus_first_char_multiplier
        return bonuses

    def _match_score(self, c: str, p: str, case_sensitive: bool) -> int | None:
        """Score of matching choice character ``c`` with pattern character ``p``."""
        if not char_equal(c, p, case_sensitive):
            return None
        bonus = 0
        if not case_sensitive and p != c:
            bonus += self.score_config.penalty_case_mismatch
        return max(0, self.score_config.score_match + bonus)

    def _build_score_matrix(
        self,
        cells: list[_Cell],
        rows: int,
        cols: int,
        choice: Sequence[str],
        pattern: Sequence[str],
        first_match_indices: Sequence[int],
        compressed: bool,
        case_sensitive: bool,
    ) -> None:
        config = self.score_config
        bonuses = self._in_place_bonuses(choice)

        cells[0].reset()
        for i in range(1, rows):
            cells[i * cols + first_match_indices[i - 1]].reset()
        for j in range(cols):
            cells[j].reset()
            cells[j].p_score = config.gap_extension

        for i, p_ch in enumerate(pattern):
            row = (i + 1) & 1 if compressed else i + 1
            row_prev = i & 1 if compressed else i
            for col in range(first_match_indices[i] + 1, cols):
                cur = cells[row * cols + col]
                last = cells[row * cols + col - 1]
                prev = cells[row_prev * cols + col - 1]

                cur_match_score = self._match_score(choice[col - 1], p_ch, case_sensitive)
                if cur_match_score is not None:
                    in_place_bonus = bonuses[col]
                    consecutive_bonus = max(
                        last.bonus, in_place_bonus, config.bonus_consecutive
                    )
                    last.bonus = consecutive_bonus
                    score_match = prev.m_score + consecutive_bonus
                    score_skip = prev.p_score + in_place_bonus
                    if score_match >= score_skip:
                        cur.m_score = score_match + cur_match_score
                        cur.m_move = _Movement.MATCH
                    else:
                        cur.m_score = score_skip + cur_match_score
                        cur.m_move = _Movement.SKIP
                else:
                    cur.m_score = NEG_INFINITY
                    cur.m_move = _Movement.SKIP
                    cur.bonus = 0

                gap_open = config.gap_start + config.gap_extension + last.m_score
                gap_extend = config.gap_extension + last.p_score
                if gap_open >= gap_extend:
                    cur.p_score = gap_open
                    cur.p_move = _Movement.MATCH
                else:
                    cur.p_score = gap_extend
                    cur.p_move = _Movement.SKIP

    def fuzzy(self, choice: str, pattern: str, with_pos: bool) -> MatchResult | None:
        """Match ``pattern`` against ``choice``.

        Returns ``(score, positions)`` or None when there is no match;
        positions are only computed when ``with_pos`` is true.
        """
        if not pattern:
            return 0, []

        case_sensitive = self._is_case_sensitive(pattern)
        first_match_indices = cheap_matches(choice, pattern, case_sensitive)
        if first_match_indices is None:
            return None

        compressed = not with_pos
        cols = len(choice) + 1
        num_pattern_chars = len(pattern)
        rows = 2 if compressed else num_pattern_chars + 1

        if 0 < self.element_limit < rows * cols:
            return self.simple_match(
                choice, pattern, first_match_indices, case_sensitive, with_pos
            )

        cells = [_Cell() for _ in range(rows * cols)]
        self._build_score_matrix(
            cells, rows, cols, choice, pattern, first_match_indices, compressed, case_sensitive
        )

        last_row_idx = num_pattern_chars & 1 if compressed else num_pattern_chars
        row_start = last_row_idx * cols
        best_col = first_match_indices[-1]
        best_score = cells[row_start + best_col].m_score
        for col in range(first_match_indices[-1], cols):
            score = cells[row_start + col].m_score
            if score >= best_score:
                best_col, best_score = col, score

        positions: list[int] = []
        if with_pos:
            i = rows - 1
            j = best_col
            track_m = True
            current_move = _Movement.MATCH
            first_col_first_row = first_match_indices[0]
            while i > 0 and j > first_col_first_row:
                if current_move is _Movement.MATCH:
                    positions.append(j - 1)
                cell = cells[i * cols + j]
                current_move = cell.m_move if track_m else cell.p_move
                if track_m:
                    i -= 1
                j -= 1
                track_m = current_move is _Movement.MATCH
            positions.reverse()

        return best_score, positions

    def simple_match(
        self,
        choice: Sequence[str],
        pattern: Sequence[str],
        first_match_indices: Sequence[int],
        case_sensitive: bool,
        with_pos: bool,
    ) -> MatchResult | None:
        """Score a match with a single linear scan instead of the full matrix."""
        if not pattern:
            return 0, []
        if len(pattern) == 1:
            match_idx = first_match_indices[0]
            prev_ch = choice[match_idx - 1] if match_idx > 0 else "\0"
            bonus = self._in_place_bonus(
                SkimCharType.of(prev_ch), SkimCharType.of(choice[match_idx])
            )
            return bonus, [match_idx]

        start_idx = first_match_indices[0]
        end_idx = first_match_indices[-1]

        pattern_iter = reversed(pattern)
        wanted = next(pattern_iter, None)
        window = choice[start_idx : end_idx + 1]
        for idx in range(len(window) - 1, -1, -1):
            if wanted is None:
                break
            if char_equal(window[idx], wanted, case_sensitive):
                wanted = next(pattern_iter, None)
                start_idx = idx

        return self._score_with_pos(
            choice, pattern, start_idx, end_idx, case_sensitive, with_pos
        )

    def _score_with_pos(
        self,
        choice: Sequence[str],
        pattern: Sequence[str],
        start_idx: int,
        end_idx: int,
        case_sensitive: bool,
        with_pos: bool,
    ) -> MatchResult:
        config = self.score_config
        positions: list[int] = []
        pattern_iter = iter(pattern)
        wanted = next(pattern_iter, None)

        # The character before the window is unknown, so treat it as the start.
        prev_ch = "\0"
        score = 0
        in_gap = False
        prev_match_bonus = 0

        for offset, c in enumerate(choice[start_idx : end_idx + 1]):
            if wanted is None:
                break
            in_place_bonus = self._in_place_bonus(SkimCharType.of(prev_ch), SkimCharType.of(c))
            match_score = self._match_score(c, wanted, case_sensitive)
            if match_score is not None:
                if with_pos:
                    positions.append(offset + start_idx)
                score += match_score
                consecutive_bonus = max(
                    prev_match_bonus, in_place_bonus, config.bonus_consecutive
                )
                prev_match_bonus = consecutive_bonus
                if not in_gap:
                    score += consecutive_bonus
                in_gap = False
                wanted = next(pattern_iter, None)
            else:
                if not in_gap:
                    score += config.gap_start
                score += config.gap_extension
                in_gap = True
                prev_match_bonus = 0
            prev_ch = c

        return score, positions

    def fuzzy_indices(self, choice: str, pattern: str) -> MatchResult | None:
        return self.fuzzy(choice, pattern, True)

    def fuzzy_match(self, choice: str, pattern: str) -> int | None:
        result = self.fuzzy(choice, pattern, False)
        if result is None:
            return None
        return result[0]