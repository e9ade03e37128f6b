# fuzzy_matcher

Fuzzy matching of a pattern against lines of text. A match gets an integer
score, where higher is better, together with the positions of the matched
characters. A line that does not contain the pattern as a subsequence gives
`None`.

## Matchers

All matchers derive from `fuzzy_matcher.base.FuzzyMatcher` and offer:

- `fuzzy_indices(choice, pattern)` – `(score, indices)` or `None`
- `fuzzy_match(choice, pattern)` – the score or `None`

Available matchers:

- `SkimMatcherV2` (`fuzzy_matcher.skim`): an alignment with affine gap
  penalties. It rewards word starts, camelCase humps and runs of consecutive
  matches. It uses smart case by default: matching is case-sensitive only
  when the pattern contains an ASCII upper-case letter. Its constructor takes
  an optional `SkimScoreConfig` (the scores and bonuses), an `element_limit`
  (when positive and the score matrix would exceed it, a cheaper linear scan
  is used) and a `CaseMatching` mode. `fuzzy(choice, pattern, with_pos)`
  computes positions only when `with_pos` is true. An empty pattern matches
  anything with score 0.
- `ClangdMatcher` (`fuzzy_matcher.clangd`): a clangd-style scoring model that
  favours word heads and consecutive matches and slightly penalises long
  lines. It ignores case by default. The module also has plain
  `fuzzy_match(line, pattern)` and `fuzzy_indices(line, pattern)` functions
  that ignore case.
- `SkimMatcher` (`fuzzy_matcher.skim_v1`): the older skim scoring, kept for
  compatibility, with module-level `fuzzy_match` and `fuzzy_indices` too. It
  always compares ASCII letters without regard to case.

`SkimMatcherV2` and `ClangdMatcher` have `ignore_case()`, `smart_case()` and
`respect_case()`. Each changes the matcher in place and returns it, so calls
can be chained.

Accented Latin letters such as `ä`, `é` or `ñ` compare equal to their plain
base letter (see `fuzzy_matcher.util.char_equal`).

## Library use

```python
from fuzzy_matcher.skim import SkimMatcherV2
from fuzzy_matcher.clangd import ClangdMatcher

matcher = SkimMatcherV2()
matcher.fuzzy_match("abc", "abx")            # None
score, indices = matcher.fuzzy_indices("axbycz", "abc")
indices                                       # [0, 2, 4]

clangd = ClangdMatcher().smart_case()
clangd.fuzzy_match("axbycz", "xyz")           # an int score
```

To rank a list of candidates, use `fuzzy_matcher.util.filter_and_sort`:

```python
from fuzzy_matcher.util import filter_and_sort

filter_and_sort(SkimMatcherV2(), "ma", ["maximum", "map", "many"])
# ['map', 'many', 'maximum']
```

`fuzzy_matcher.util.wrap_matches(line, indices)` puts brackets around the
matched characters, e.g. `"[a]x[b]y[c]z"`.

## Command line

`fz` reads lines from standard input and prints each line that matches,
preceded by its score. The matched characters are shown in reverse video.

```
printf 'foo_bar\nfizzbuzz\n' | fz --algo skim fb
printf 'foo_bar\nfizzbuzz\n' | fz --algo clangd fb
```

`--algo` accepts `skim` (the default), `skim_v2` or `clangd`. If no pattern
is given, `fz` prints a usage line to standard error and exits with status 1;
an unknown algorithm is reported the same way.

## Installation

```
pip install .
```