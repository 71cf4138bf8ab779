"""Main shell loop: prompt, read, parse, execute, repeat."""

import contextlib
import logging
import os
import readline
import sys

from plaidsh.completion import setup_completion
from plaidsh.errors import ParseError
from plaidsh.executor import execute_command
from plaidsh.parser import parse_input
from plaidsh.tokenizer import WORD_LEN

log = logging.getLogger(__name__)

HISTORY_FILE = os.path.expanduser("~/.plaidsh_history")
HISTORY_LENGTH = 1000
PROMPT = "plaid-shell#> "
GREETING = "Welcome to Plaid Shell!"


class Shell:
    """Shell state and main loop."""

    def __init__(
        self,
        prompt: str = PROMPT,
        word_len: int = WORD_LEN,
        history_file: str | None = HISTORY_FILE,
    ) -> None:
        self.prompt = prompt
        self.word_len = word_len
        self.history_file = history_file
        self.last_exit_code: int = 0

    def load_history(self) -> None:
        if self.history_file is None:
            return
        with contextlib.suppress(OSError):
            readline.read_history_file(self.history_file)

    def save_history(self) -> None:
        if self.history_file is None:
            return
        with contextlib.suppress(OSError):
            readline.write_history_file(self.history_file)

    def run_command(self, line: str) -> None:
        """Parse one line and execute it.

        Parse errors are reported on stderr and leave last_exit_code at 2.
        A blank line does nothing.
        """
        try:
            cmd = parse_input(line, self.word_len)
        except ParseError as e:
            print(f" Error: {e}", file=sys.stderr)
            self.last_exit_code = 2
            return

        if cmd.is_empty():
            return

        log.debug("parsed command:\n%s", cmd.dump())
        self.last_exit_code = execute_command(cmd, self)

    def run(self, greeting: bool = True) -> None:
        """Main shell loop."""
        self.load_history()
        readline.set_history_length(HISTORY_LENGTH)
        setup_completion()

        if greeting:
            print(GREETING)

        while True:
            try:
                line = input(self.prompt)
            except (EOFError, KeyboardInterrupt):
                print()
                break

            if not line.strip():
                continue

            self.run_command(line)

        self.save_history()

