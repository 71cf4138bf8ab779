"""Readline tab completion for commands, variables and paths."""

import os
import readline
from functools import lru_cache

from plaidsh.builtins import BUILTIN_REGISTRY
from plaidsh.tokenizer import DOLLAR, REDIRECTS

# '$' is left out so a whole "$NAME" reaches the completer
COMPLETER_DELIMS = ' \t\n"<>'

_matches: list[str] = []


def setup_completion() -> None:
    readline.set_completer(completer)
    readline.set_completer_delims(COMPLETER_DELIMS)
    readline.parse_and_bind("tab: complete")


def invalidate_path_cache() -> None:
    """Forget the cached PATH commands (call after PATH changes)."""
    _get_path_commands.cache_clear()


def completer(text: str, state: int) -> str | None:
    """Readline completer; computes all matches on state 0."""
    global _matches

    if state == 0:
        line = readline.get_line_buffer()
        _matches = complete(text, line[: readline.get_begidx()])

    if state < len(_matches):
        return _matches[state]
    return None


def complete(text: str, before_cursor: str) -> list[str]:
    """Return candidates for text, given the line up to where text starts."""
    if text.startswith(DOLLAR):
        return _complete_variable(text)
    before = before_cursor.rstrip()
    if before and before[-1] in REDIRECTS:
        return _complete_path(text)
    if not before:
        return _complete_command(text)
    return _complete_path(text)


def _complete_variable(text: str) -> list[str]:
    prefix = text[len(DOLLAR) :]
    return sorted(DOLLAR + name for name in os.environ if name.startswith(prefix))


def _complete_command(text: str) -> list[str]:
    """Complete a command name from builtins, PATH executables and paths."""
    matches = {name for name in BUILTIN_REGISTRY if name.startswith(text)}
    matches.update(cmd for cmd in _get_path_commands() if cmd.startswith(text))
    matches.update(_complete_path(text))
    return sorted(matches)


def _complete_path(text: str) -> list[str]:
    """Complete a file or directory name; directories get a trailing '/'."""
    dirname, basename = os.path.split(text)
    search_dir = os.path.expanduser(dirname) if dirname else "."

    try:
        entries = os.listdir(search_dir)
    except OSError:
        return []

    matches: list[str] = []
    for entry in entries:
        if not entry.startswith(basename):
            continue
        if entry.startswith(".") and not basename.startswith("."):
            continue
        full = os.path.join(dirname, entry) if dirname else entry
        if os.path.isdir(os.path.join(search_dir, entry)):
            full += "/"
        matches.append(full)
    return sorted(matches)


@lru_cache(maxsize=1)
def _get_path_commands() -> frozenset[str]:
    """Executable names found on PATH (cached)."""
    commands: set[str] = set()
    for directory in os.environ.get("PATH", "").split(os.pathsep):
        try:
            entries = os.listdir(directory or ".")
        except OSError:
            continue
        for entry in entries:
            if os.access(os.path.join(directory, entry), os.X_OK):
                commands.add(entry)
    return frozenset(commands)
