"""Environment variable lookup and filename pattern expansion."""

import glob as globmod
import os
from collections.abc import Mapping
from enum import Enum


class GlobMode(Enum):
    PLAIN = "plain"
    HOME = "home"
    BRACE = "brace"


def lookup_variable(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Return the value of $name, or None if it is not defined.

    The empty name is never defined, even if the mapping has a "" key.
    """
    if not name:
        return None
    env = os.environ if environ is None else environ
    return env.get(name)


def glob_mode(word: str) -> GlobMode:
    """Pick the expansion mode from the first character of a word."""
    if word.startswith("~"):
        return GlobMode.HOME
    if word.startswith("{"):
        return GlobMode.BRACE
    return GlobMode.PLAIN


def expand_braces(pattern: str) -> list[str]:
    """Expand csh-style brace alternatives.

    '{one,two}.c' -> ['one.c', 'two.c']. Groups nest, and alternatives are
    produced left to right. A '{' without a matching '}' or a group with
    no top-level comma is kept literally.
    """
    start = pattern.find("{")
    while start != -1:
        end, parts = _split_brace_group(pattern, start)
        if end != -1 and len(parts) > 1:
            prefix, suffix = pattern[:start], pattern[end + 1 :]
            expanded: list[str] = []
            for part in parts:
                expanded.extend(expand_braces(prefix + part + suffix))
            return expanded
        start = pattern.find("{", start + 1)
    return [pattern]


def _split_brace_group(pattern: str, start: int) -> tuple[int, list[str]]:
    """Split the group opening at pattern[start] on its top-level commas.

    Returns (index_of_closing_brace, parts), or (-1, []) if unterminated.
    """
    depth = 0
    parts: list[str] = []
    part_start = start + 1
    for i in range(start + 1, len(pattern)):
        ch = pattern[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            if depth == 0:
                parts.append(pattern[part_start:i])
                return i, parts
            depth -= 1
        elif ch == "," and depth == 0:
            parts.append(pattern[part_start:i])
            part_start = i + 1
    return -1, []


def expand_pattern(pattern: str, mode: GlobMode = GlobMode.PLAIN) -> list[str]:
    """Return the paths matching pattern, possibly none.

    Results are sorted per pattern. In BRACE mode each alternative is
    matched on its own and the sorted results are concatenated in
    alternative order. In HOME mode the leading ~ or ~user is replaced
    first; an unknown user matches nothing.
    """
    match mode:
        case GlobMode.HOME:
            expanded = os.path.expanduser(pattern)
            if expanded == pattern:
                return []
            return sorted(globmod.glob(expanded))
        case GlobMode.BRACE:
            matches: list[str] = []
            for alternative in expand_braces(pattern):
                matches.extend(sorted(globmod.glob(alternative)))
            return matches
        case _:
            return sorted(globmod.glob(pattern))


def expand_word(word: str) -> list[str]:
    """Expand one argument word into the arguments it contributes.

    Words that match nothing are kept as-is. A matching word that ends in
    '/' is also kept as-is rather than replaced by its matches.
    """
    matches = expand_pattern(word, glob_mode(word))
    if not matches or word.endswith("/"):
        return [word]
    return matches
