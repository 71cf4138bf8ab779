"""Parse one input line into a Command."""

import logging
from collections.abc import Mapping

from plaidsh.command import Command
from plaidsh.errors import MissingCommand, MultipleRedirections
from plaidsh.expansion import expand_word
from plaidsh.tokenizer import REDIRECT_IN, REDIRECT_OUT, WHITESPACE, WORD_LEN, read_word

log = logging.getLogger(__name__)


def parse_input(
    line: str,
    word_len: int = WORD_LEN,
    environ: Mapping[str, str] | None = None,
) -> Command:
    """Parse a line as typed by the user.

    Words are read left to right with read_word(). A word starting with
    '<' or '>' sets the input or output file; every other word is glob
    expanded and appended to the arguments. For example

        grep foo<bar
        grep foo <bar
        grep foo <   bar

    all give arguments ['grep', 'foo'] with input 'bar', while
    'echo "thirty > twenty"' is just two arguments.

    A blank line gives an empty Command. Errors from read_word are raised
    unchanged; in addition, a second input or output redirection raises
    MultipleRedirections, and a line holding only redirections raises
    MissingCommand.
    """
    cmd = Command()
    pos = 0

    while True:
        word, consumed = read_word(line[pos:], word_len, environ)
        if consumed == 0:
            break
        chunk = line[pos : pos + consumed]
        pos += consumed
        log.debug("read word %r (%d chars)", word, consumed)

        if not word and all(ch in WHITESPACE for ch in chunk):
            break

        if word.startswith(REDIRECT_IN):
            if cmd.input is not None:
                raise MultipleRedirections()
            cmd.set_input(word[1:])
            log.debug("input redirected from %r", cmd.input)
        elif word.startswith(REDIRECT_OUT):
            if cmd.output is not None:
                raise MultipleRedirections()
            cmd.set_output(word[1:])
            log.debug("output redirected to %r", cmd.output)
        else:
            for arg in expand_word(word):
                cmd.append_arg(arg)

        if cmd.argc == 0:
            raise MissingCommand()

    return cmd
