import pytest

from fuzzy_matcher.base import FuzzyMatcher


class _PrefixMatcher(FuzzyMatcher):
    def fuzzy_indices(self, choice, pattern):
        if not choice.startswith(pattern):
            return None
        return len(pattern), list(range(len(pattern)))


def test_abstract_matcher_cannot_be_instantiated():
    with pytest.raises(TypeError):
        FuzzyMatcher()


def test_fuzzy_match_returns_score_from_indices():
    matcher = _PrefixMatcher()
    assert FuzzyMatcher.fuzzy_match(matcher, "abcdef", "abc") == 3


def test_fuzzy_match_returns_none_without_match():
    matcher = _PrefixMatcher()
    assert FuzzyMatcher.fuzzy_match(matcher, "abc", "x") is None


def test_fuzzy_match_zero_score_is_kept():
    matcher = _PrefixMatcher()
    assert FuzzyMatcher.fuzzy_match(matcher, "abc", "") == 0