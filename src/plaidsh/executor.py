"""Run a parsed Command with its redirections applied."""

import logging
import os
import subprocess
import sys
from typing import IO, TYPE_CHECKING

from plaidsh.builtins import BUILTIN_REGISTRY, BuiltinHandler
from plaidsh.command import Command

if TYPE_CHECKING:
    from plaidsh.shell import Shell

log = logging.getLogger(__name__)

# rw-rw---- for files created by output redirection
OUTPUT_MODE = 0o660


def execute_command(cmd: Command, shell: "Shell") -> int:
    """Execute cmd and return its exit status.

    cmd.argv[0] is looked up in the builtin registry first, and otherwise
    run as an external program with stdin/stdout redirected as requested.
    """
    if cmd.argc == 0:
        raise ValueError("cannot execute a command with no arguments")

    try:
        stdin_fh, stdout_fh = _open_redirects(cmd)
    except OSError:
        return 1

    try:
        handler = BUILTIN_REGISTRY.get(cmd.argv[0])
        if handler is not None:
            log.debug("running builtin %s", cmd.argv[0])
            return _run_builtin(handler, cmd, shell, stdin_fh, stdout_fh)
        log.debug("running external %s", cmd.argv)
        return _run_external(cmd, stdin_fh, stdout_fh)
    finally:
        if stdin_fh:
            stdin_fh.close()
        if stdout_fh:
            stdout_fh.close()


def _run_builtin(
    handler: BuiltinHandler,
    cmd: Command,
    shell: "Shell",
    stdin_fh: IO[str] | None,
    stdout_fh: IO[str] | None,
) -> int:
    """Run a builtin with sys.stdin/sys.stdout swapped for the redirect files."""
    old_stdin, old_stdout = sys.stdin, sys.stdout
    if stdin_fh:
        sys.stdin = stdin_fh
    if stdout_fh:
        sys.stdout = stdout_fh
    try:
        return handler(list(cmd.argv[1:]), shell)
    finally:
        sys.stdin, sys.stdout = old_stdin, old_stdout


def _run_external(cmd: Command, stdin_fh: IO[str] | None, stdout_fh: IO[str] | None) -> int:
    sys.stdout.flush()
    try:
        result = subprocess.run(cmd.argv, stdin=stdin_fh, stdout=stdout_fh)
    except FileNotFoundError:
        print(f"plaidsh: command not found: {cmd.argv[0]}", file=sys.stderr)
        return 127
    except PermissionError:
        print(f"plaidsh: permission denied: {cmd.argv[0]}", file=sys.stderr)
        return 126
    except OSError as e:
        print(f"plaidsh: {cmd.argv[0]}: {e.strerror}", file=sys.stderr)
        return 126
    if result.returncode < 0:
        print(
            f"plaidsh: {cmd.argv[0]} terminated by signal {-result.returncode}",
            file=sys.stderr,
        )
    return result.returncode


def _open_redirects(cmd: Command) -> tuple[IO[str] | None, IO[str] | None]:
    """Open file handles for redirections. Returns (stdin_fh, stdout_fh)."""
    stdin_fh = None
    stdout_fh = None

    if cmd.input is not None:
        try:
            stdin_fh = open(cmd.input)  # noqa: SIM115
        except OSError as e:
            print(f"plaidsh: {cmd.input}: {e.strerror}", file=sys.stderr)
            raise

    if cmd.output is not None:
        try:
            fd = os.open(cmd.output, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, OUTPUT_MODE)
            stdout_fh = os.fdopen(fd, "w")
        except OSError as e:
            print(f"plaidsh: {cmd.output}: {e.strerror}", file=sys.stderr)
            if stdin_fh:
                stdin_fh.close()
            raise

    return stdin_fh, stdout_fh
