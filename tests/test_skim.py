import pytest

from fuzzy_matcher.base import CaseMatching
from fuzzy_matcher.skim import SkimMatcherV2, SkimScoreConfig
from fuzzy_matcher.util import cheap_matches, filter_and_sort, wrap_matches


def wrap_fuzzy_match(matcher, line, pattern):
    result = matcher.fuzzy_indices(line, pattern)
    if result is None:
        return None
    return wrap_matches(line, result[1])


def assert_order(matcher, pattern, choices):
    assert filter_and_sort(matcher, pattern, choices) == list(choices)


def run_simple_match(matcher, choice, pattern, case_sensitive, with_pos):
    first_match_indices = cheap_matches(choice, pattern, case_sensitive)
    if first_match_indices is None:
        return None
    return matcher.simple_match(
        choice, pattern, first_match_indices, case_sensitive, with_pos
    )


def test_match_or_not():
    matcher = SkimMatcherV2()
    assert matcher.fuzzy_match("", "") == 0
    assert matcher.fuzzy_match("abcdefaghi", "") == 0
    assert matcher.fuzzy_match("", "a") is None
    assert matcher.fuzzy_match("abcdefaghi", "中") is None
    assert matcher.fuzzy_match("abc", "abx") is None
    assert isinstance(matcher.fuzzy_match("axbycz", "abc"), int)
    assert isinstance(matcher.fuzzy_match("axbycz", "xyz"), int)

    assert wrap_fuzzy_match(matcher, "axbycz", "abc") == "[a]x[b]y[c]z"
    assert wrap_fuzzy_match(matcher, "axbycz", "xyz") == "a[x]b[y]c[z]"
    assert wrap_fuzzy_match(matcher, "Hello, 世界", "H世") == "[H]ello, [世]界"


def test_fuzzy_indices_of_example():
    _, indices = SkimMatcherV2().fuzzy_indices("axbycz", "abc")
    assert indices == [0, 2, 4]


def test_match_quality_ignore_case():
    matcher = SkimMatcherV2().ignore_case()
    assert_order(matcher, "ab", ["ab", "aoo_boo", "acb"])
    assert_order(matcher, "CC", ["CamelCase", "camelCase", "camelcase"])
    assert_order(matcher, "cC", ["camelCase", "CamelCase", "camelcase"])
    assert_order(
        matcher,
        "cc",
        ["camel case", "camelCase", "CamelCase", "camelcase", "camel ace"],
    )
    assert_order(
        matcher,
        "Da.Te",
        ["Data.Text", "Data.Text.Lazy", "Data.Aeson.Encoding.text"],
    )
    assert_order(matcher, "is", ["isIEEE", "inSuf"])
    assert_order(matcher, "ma", ["map", "many", "maximum"])
    assert_order(matcher, "print", ["printf", "sprintf"])
    assert_order(matcher, "ast", ["ast", "AST", "INT_FAST16_MAX"])
    assert_order(matcher, "Int", ["int", "INT", "PRINT"])


def test_match_or_not_simple():
    matcher = SkimMatcherV2()
    assert run_simple_match(matcher, "axbycz", "xyz", False, True)[1] == [1, 3, 5]
    assert run_simple_match(matcher, "", "", False, False) == (0, [])
    assert run_simple_match(matcher, "abcdefaghi", "", False, False) == (0, [])
    assert run_simple_match(matcher, "", "a", False, False) is None
    assert run_simple_match(matcher, "abcdefaghi", "中", False, False) is None
    assert run_simple_match(matcher, "abc", "abx", False, False) is None
    assert run_simple_match(matcher, "axbycz", "abc", False, True)[1] == [0, 2, 4]
    assert run_simple_match(matcher, "Hello, 世界", "H世", False, True)[1] == [0, 7]


@pytest.mark.parametrize(
    "choice, pattern, expected",
    [
        ("abc", "b", (0, [1])),
        ("a-b", "b", (7, [2])),
        ("a b", "b", (8, [2])),
        ("aB", "B", (6, [1])),
    ],
)
def test_simple_match_single_char_uses_in_place_bonus(choice, pattern, expected):
    assert run_simple_match(SkimMatcherV2(), choice, pattern, False, True) == expected


def test_simple_match_without_positions_returns_no_positions():
    score, positions = run_simple_match(SkimMatcherV2(), "axbycz", "abc", False, False)
    assert positions == []
    assert score == run_simple_match(SkimMatcherV2(), "axbycz", "abc", False, True)[0]


def test_element_limit_switches_to_simple_match():
    limited = SkimMatcherV2(element_limit=1)
    assert limited.fuzzy_indices("axbycz", "abc")[1] == [0, 2, 4]
    expected = run_simple_match(SkimMatcherV2(), "axbycz", "abc", False, True)
    assert limited.fuzzy_indices("axbycz", "abc") == expected


def test_match_or_not_v2():
    matcher = SkimMatcherV2()
    assert matcher.fuzzy_match("", "") == 0
    assert matcher.fuzzy_match("abcdefaghi", "") == 0
    assert matcher.fuzzy_match("", "a") is None
    assert matcher.fuzzy_match("abcdefaghi", "中") is None
    assert matcher.fuzzy_match("abc", "abx") is None
    assert wrap_fuzzy_match(matcher, "axbycz", "abc") == "[a]x[b]y[c]z"
    assert wrap_fuzzy_match(matcher, "axbycz", "xyz") == "a[x]b[y]c[z]"
    assert wrap_fuzzy_match(matcher, "Hello, 世界", "H世") == "[H]ello, [世]界"


def test_case_option_v2():
    matcher = SkimMatcherV2().ignore_case()
    assert matcher.case is CaseMatching.IGNORE
    assert matcher.fuzzy_match("aBc", "abc") is not None
    assert matcher.fuzzy_match("aBc", "aBc") is not None
    assert matcher.fuzzy_match("aBc", "aBC") is not None

    matcher = SkimMatcherV2().respect_case()
    assert matcher.fuzzy_match("aBc", "abc") is None
    assert matcher.fuzzy_match("aBc", "aBc") is not None
    assert matcher.fuzzy_match("aBc", "aBC") is None

    matcher = SkimMatcherV2().smart_case()
    assert matcher.fuzzy_match("aBc", "abc") is not None
    assert matcher.fuzzy_match("aBc", "aBc") is not None
    assert matcher.fuzzy_match("aBc", "aBC") is None


def test_matcher_quality_v2():
    matcher = SkimMatcherV2()
    assert_order(matcher, "ab", ["ab", "aoo_boo", "acb"])
    assert_order(
        matcher,
        "cc",
        ["camel case", "camelCase", "CamelCase", "camelcase", "camel ace"],
    )
    assert_order(
        matcher,
        "Da.Te",
        ["Data.Text", "Data.Text.Lazy", "Data.Aeson.Encoding.Text"],
    )
    assert_order(matcher, "is", ["isIEEE", "inSuf"])
    assert_order(matcher, "ma", ["map", "many", "maximum"])
    assert_order(matcher, "print", ["printf", "sprintf"])
    assert_order(matcher, "ast", ["ast", "AST", "INT_FAST16_MAX"])
    assert_order(matcher, "int", ["int", "INT", "PRINT"])


def test_reuse_should_not_affect_indices():
    matcher = SkimMatcherV2()
    matched = 0
    for num in range(10000):
        result = matcher.fuzzy_indices(str(num), "139")
        if result is not None:
            matched += 1
            assert len(result[1]) == 3
    assert matched > 0


@pytest.mark.parametrize(
    "choice, pattern",
    [
        ("axbycz", "abc"),
        ("Hello, 世界", "H世"),
        ("camelCase", "cc"),
        ("Data.Text.Lazy", "Da.Te"),
        ("sprintf", "print"),
    ],
)
def test_match_score_agrees_with_indices_score(choice, pattern):
    matcher = SkimMatcherV2()
    score, indices = matcher.fuzzy_indices(choice, pattern)
    assert matcher.fuzzy_match(choice, pattern) == score
    assert indices == sorted(indices)
    assert len(indices) == len(pattern)


def test_score_config_case_mismatch_penalty_lowers_score():
    default = SkimMatcherV2().ignore_case()
    harsh = SkimMatcherV2(score_config=SkimScoreConfig(penalty_case_mismatch=-10)).ignore_case()
    assert harsh.fuzzy_match("ABC", "abc") < default.fuzzy_match("ABC", "abc")
    assert harsh.fuzzy_match("abc", "abc") == default.fuzzy_match("abc", "abc")


def test_case_methods_chain_return_same_matcher():
    matcher = SkimMatcherV2()
    assert matcher.respect_case() is matcher
    assert matcher.case is CaseMatching.RESPECT