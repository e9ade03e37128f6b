"""Command-line filter: fuzzy-match lines from standard input against a pattern."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from fuzzy_matcher.base import FuzzyMatcher
from fuzzy_matcher.clangd import ClangdMatcher
from fuzzy_matcher.skim import SkimMatcherV2

INVERT = "\x1b[7m"
RESET = "\x1b[m"

USAGE = "Usage: echo <piped_input> | fz --algo [skim|clangd] <pattern>"


def highlight(line: str, indices: Iterable[int]) -> str:
    """Show the characters of ``line`` at the (sorted) ``indices`` in inverse video."""
    index_iter = iter(indices)
    next_id = next(index_iter, None)
    parts = []
    for idx, ch in enumerate(line):
        if next_id == idx:
            parts.append(f"{INVERT}{ch}{RESET}")
            next_id = next(index_iter, None)
        else:
            parts.append(ch)
    return "".join(parts)


def _make_matcher(algorithm: str | None) -> FuzzyMatcher:
    if algorithm in ("skim", "skim_v2"):
        return SkimMatcherV2()
    if algorithm == "clangd":
        return ClangdMatcher()
    raise ValueError(f"Algorithm not supported: {algorithm!r}")


def _parse_args(args: Sequence[str]) -> tuple[str, str | None]:
    pattern = ""
    algorithm: str | None = "skim"
    arg_iter = iter(args)
    for arg in arg_iter:
        if arg == "--algo":
            algorithm = next(arg_iter, None)
        else:
            pattern = arg
    return pattern, algorithm


def main(argv: Sequence[str] | None = None) -> int:
    """Print every line of standard input that matches, with its score."""
    args = list(sys.argv[1:] if argv is None else argv)
    pattern, algorithm = _parse_args(args)

    if not pattern:
        print(USAGE, file=sys.stderr)
        return 1

    try:
        matcher = _make_matcher(algorithm)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    for raw in sys.stdin:
        line = raw.rstrip("\n")
        if line.endswith("\r"):
            line = line[:-1]
        result = matcher.fuzzy_indices(line, pattern)
        if result is not None:
            score, indices = result
            print(f"{score:8d}: {highlight(line, indices)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())