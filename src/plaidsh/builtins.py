"""Built-in shell commands."""

import os
import sys
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from plaidsh.shell import Shell

BuiltinHandler: TypeAlias = Callable[[list[str], "Shell"], int]

AUTHOR = "Okemawo Aniyikaiye Obadofin (OAO)"

BUILTINS_HELP: dict[str, str] = {
    "cd": "cd [dir]            - Change directory (default: $HOME)",
    "pwd": "pwd                 - Print working directory",
    "exit": "exit [code]         - Exit the shell",
    "quit": "quit [code]         - Exit the shell",
    "setenv": "setenv NAME VALUE   - Set environment variable",
    "author": "author              - Print the author of this shell",
    "help": "help                - Show this help message",
}


def builtin_cd(args: list[str], shell: "Shell") -> int:
    targets = args or [os.environ.get("HOME") or os.path.expanduser("~")]
    for target in targets:
        try:
            os.chdir(target)
        except FileNotFoundError:
            print(f"cd: no such file or directory: {target}", file=sys.stderr)
            return 1
        except NotADirectoryError:
            print(f"cd: not a directory: {target}", file=sys.stderr)
            return 1
        except OSError as e:
            print(f"cd: {target}: {e.strerror}", file=sys.stderr)
            return 1
    return 0


def builtin_pwd(args: list[str], shell: "Shell") -> int:
    print(os.getcwd())
    return 0


def builtin_exit(args: list[str], shell: "Shell") -> int:
    try:
        code = int(args[0]) if args else 0
    except ValueError:
        print(f"exit: numeric argument required: {args[0]}", file=sys.stderr)
        code = 2
    shell.save_history()
    sys.exit(code)


def builtin_setenv(args: list[str], shell: "Shell") -> int:
    if len(args) < 2:
        print("setenv: Incomplete arguments", file=sys.stderr)
        return 1
    name, value = args[0], args[1]
    if not name or not all(ch.isascii() and (ch.isalnum() or ch == "_") for ch in name):
        print(f"setenv: Illegal variable name: {name}", file=sys.stderr)
        return 1
    os.environ[name] = value
    if name == "PATH":
        from plaidsh.completion import invalidate_path_cache

        invalidate_path_cache()
    return 0


def builtin_author(args: list[str], shell: "Shell") -> int:
    print(f"Author: {AUTHOR}")
    return 0


def builtin_help(args: list[str], shell: "Shell") -> int:
    print("plaidsh - built-in commands:\n")
    for line in BUILTINS_HELP.values():
        print(f"  {line}")
    print()
    return 0


BUILTIN_REGISTRY: dict[str, BuiltinHandler] = {
    "cd": builtin_cd,
    "pwd": builtin_pwd,
    "exit": builtin_exit,
    "quit": builtin_exit,
    "setenv": builtin_setenv,
    "author": builtin_author,
    "help": builtin_help,
}
