"""The first skim matching algorithm, kept for compatibility.

Superseded by :class:`fuzzy_matcher.skim.SkimMatcherV2`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace
from typing import TypeVar

from fuzzy_matcher.base import FuzzyMatcher, MatchResult
from fuzzy_matcher.skim_roles import SkimCharRole, SkimCharType

BONUS_MATCHED = 4
BONUS_CASE_MATCH = 4
BONUS_UPPER_MATCH = 6
BONUS_ADJACENCY = 10
BONUS_SEPARATOR = 8
BONUS_CAMEL = 8
PENALTY_CASE_UNMATCHED = -1
# Penalty applied for every letter before the first match.
PENALTY_LEADING = -6
# Cap on the penalty for leading letters.
PENALTY_MAX_LEADING = -18
PENALTY_UNMATCHED = -2

_T = TypeVar("_T")


@dataclass(frozen=True, slots=True)
class _Status:
    idx: int = 0
    score: int = 0
    final_score: int = 0
    adj_num: int = 1
    back_ref: int = 0


class SkimMatcher(FuzzyMatcher):
    """Matcher scoring in the style of Sublime Text's fuzzy search.

    Deprecated in favour of :class:`fuzzy_matcher.skim.SkimMatcherV2`.
    """

    def fuzzy_indices(self, choice: str, pattern: str) -> MatchResult | None:
        return fuzzy_indices(choice, pattern)

    def fuzzy_match(self, choice: str, pattern: str) -> int | None:
        return fuzzy_match(choice, pattern)


def fuzzy_match(choice: str, pattern: str) -> int | None:
    """Return the score of ``pattern`` against ``choice``, or None."""
    if not pattern:
        return 0
    scores = _build_graph(choice, pattern)
    if scores is None:
        return None
    _, best = _last_max(enumerate(scores[-1]), key=lambda item: item[1].final_score)
    return best.final_score


def fuzzy_indices(choice: str, pattern: str) -> MatchResult | None:
    """Return ``(score, indices)`` for ``pattern`` against ``choice``, or None."""
    if not pattern:
        return 0, []
    scores = _build_graph(choice, pattern)
    if scores is None:
        return None

    next_col, best = _last_max(
        enumerate(scores[-1]), key=lambda item: item[1].final_score
    )
    picked: list[int] = []
    for row in reversed(scores):
        status = row[next_col]
        next_col = status.back_ref
        picked.append(status.idx)
    picked.reverse()
    return best.final_score, picked


def _last_max(items: Iterable[_T], key: Callable[[_T], int]) -> _T:
    """Maximum element by ``key``; the last one wins on ties."""
    best: _T | None = None
    best_key = 0
    found = False
    for item in items:
        k = key(item)
        if not found or k >= best_key:
            best, best_key, found = item, k, True
    if not found:
        raise ValueError("empty sequence")
    return best  # type: ignore[return-value]


def _ascii_lower(c: str) -> str:
    return c.lower() if "A" <= c <= "Z" else c


def _build_graph(choice: Sequence[str], pattern: Sequence[str]) -> list[list[_Status]] | None:
    scores: list[list[_Status]] = []
    match_start_idx = 0
    pat_prev_ch = "\0"

    # Candidate positions and their in-place scores.
    for pat_idx, pat_ch in enumerate(pattern):
        pat_lower = _ascii_lower(pat_ch)
        row: list[_Status] = []
        choice_prev_ch = "\0"
        for idx, ch in enumerate(choice):
            if idx >= match_start_idx and _ascii_lower(ch) == pat_lower:
                score = _fuzzy_score(ch, idx, choice_prev_ch, pat_ch, pat_idx)
                row.append(_Status(idx=idx, score=score, final_score=score))
            choice_prev_ch = ch
        if not row:
            return None
        match_start_idx = row[0].idx + 1
        scores.append(row)
        pat_prev_ch = pat_ch  # noqa: F841 - kept for symmetry with the scorer

    # Best totals, taking adjacency of matched characters into account.
    for prev_row, cur_row in zip(scores, scores[1:]):
        for idx, nxt in enumerate(cur_row):
            prev = cur_row[idx - 1] if idx > 0 else _Status()

            score_before_idx = prev.final_score - prev.score + nxt.score
            score_before_idx += PENALTY_UNMATCHED * (nxt.idx - prev.idx)
            if prev.adj_num == 0:
                score_before_idx -= BONUS_ADJACENCY

            candidates = []
            for back_ref, cur in enumerate(prev_row):
                if cur.idx >= nxt.idx:
                    break
                if cur.idx < prev.idx:
                    continue
                adj_num = nxt.idx - cur.idx - 1
                final_score = cur.final_score + nxt.score
                if adj_num == 0:
                    final_score += BONUS_ADJACENCY
                else:
                    final_score += PENALTY_UNMATCHED * adj_num
                candidates.append((back_ref, final_score, adj_num))

            if candidates:
                back_ref, score, adj_num = _last_max(candidates, key=lambda c: c[1])
            else:
                back_ref, score, adj_num = prev.back_ref, score_before_idx, prev.adj_num

            if idx > 0 and score < score_before_idx:
                cur_row[idx] = replace(
                    nxt,
                    final_score=score_before_idx,
                    back_ref=prev.back_ref,
                    adj_num=adj_num,
                )
            else:
                cur_row[idx] = replace(
                    nxt, final_score=score, back_ref=back_ref, adj_num=adj_num
                )

    return scores


def _fuzzy_score(
    choice_ch: str, choice_idx: int, choice_prev_ch: str, pat_ch: str, pat_idx: int
) -> int:
    score = BONUS_MATCHED

    choice_prev_ch_type = SkimCharType.of(choice_prev_ch)
    choice_role = SkimCharRole.of(choice_prev_ch, choice_ch)

    if pat_ch == choice_ch:
        score += BONUS_UPPER_MATCH if pat_ch.isupper() else BONUS_CASE_MATCH
    else:
        score += PENALTY_CASE_UNMATCHED

    # Bonus for word starts and camel-case humps.
    if choice_role in (SkimCharRole.HEAD, SkimCharRole.BREAK, SkimCharRole.CAMEL):
        score += BONUS_CAMEL

    # Bonus for matches after a separator.
    if choice_prev_ch_type in (SkimCharType.HARD_SEP, SkimCharType.SOFT_SEP):
        score += BONUS_SEPARATOR

    if pat_idx == 0:
        score += max(choice_idx * PENALTY_LEADING, PENALTY_MAX_LEADING)

    return score