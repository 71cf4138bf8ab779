"""Read one word at a time from a shell input line.

Quotes, backslash escapes, $variables and the < and > redirection markers
are all handled in a single pass, because whether a < or > is a
redirection depends on the raw characters around it while variables are
still expanded inside quotes.
"""

import re
from collections.abc import Mapping

from plaidsh.errors import (
    IllegalEscape,
    RedirectionWithoutFilename,
    UndefinedVariable,
    UnterminatedQuote,
    WordTooLong,
)
from plaidsh.expansion import lookup_variable

REDIRECT_IN = "<"
REDIRECT_OUT = ">"
REDIRECTS = frozenset({REDIRECT_IN, REDIRECT_OUT})

QUOTE = '"'
BACKSLASH = "\\"
DOLLAR = "$"

# Default word buffer size; a word may hold at most WORD_LEN - 1 characters.
WORD_LEN = 512

WHITESPACE = frozenset(" \t\n\r\v\f")

# Character after a backslash -> character it stands for
ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    " ": " ",
    '"': '"',
    "\\": "\\",
    "$": "$",
    "<": "<",
    ">": ">",
}
_UNESCAPES = {value: code for code, value in ESCAPES.items()}

_VAR_NAME = re.compile(r"[A-Za-z0-9_]*")

# A redirection filename stops at any of these (or at whitespace)
_FILENAME_STOP = frozenset({REDIRECT_IN, REDIRECT_OUT, DOLLAR})


def escape(ch: str) -> str:
    """Return the escape sequence read_word translates into ch."""
    try:
        return BACKSLASH + _UNESCAPES[ch]
    except KeyError:
        raise ValueError(f"no escape sequence for {ch!r}") from None


def read_word(
    text: str,
    word_len: int = WORD_LEN,
    environ: Mapping[str, str] | None = None,
) -> tuple[str, int]:
    """Read the first word from text.

    Returns (word, consumed), where consumed is the number of characters
    of text that were processed. Leading whitespace counts toward
    consumed; the whitespace that ends the word does not. The next word
    can be read from text[consumed:]. At end of input, returns ("", n)
    where n is the amount of leading whitespace skipped.

    Examples:
        '   echo '          -> ('echo', 7)
        '"New York"'        -> ('New York', 10)
        ' New\\ York'       -> ('New York', 10)
        '< /from/file'      -> ('</from/file', 12)
        'cat<foo'           -> ('cat', 3)

    A word ends at unquoted whitespace. Double quotes group characters
    and are removed. $name (letters, digits, underscore) is replaced by
    the environment value, inside or outside quotes. An unquoted < or >
    ends the current word if it directly follows a letter or digit;
    otherwise it starts a redirection word: the marker followed by a
    filename, with any whitespace in between dropped.

    Raises a ParseError subclass for an illegal escape, an undefined
    variable, a redirection with no filename, a word of word_len
    characters or more, or an unterminated quote.
    """
    word: list[str] = []
    in_quote = False
    n = len(text)
    i = 0

    while i < n and text[i] in WHITESPACE:
        i += 1

    while i < n:
        ch = text[i]

        if ch in WHITESPACE and not in_quote:
            break

        if ch == QUOTE:
            in_quote = not in_quote
            i += 1

        elif ch == BACKSLASH:
            code = text[i + 1 : i + 2]
            if code not in ESCAPES:
                raise IllegalEscape(code)
            word.append(ESCAPES[code])
            i += 2

        elif ch == DOLLAR:
            name = _VAR_NAME.match(text, i + 1).group()
            value = lookup_variable(name, environ)
            if value is None:
                raise UndefinedVariable(name)
            word.extend(value)
            i += 1 + len(name)

        elif ch in REDIRECTS and not in_quote:
            if i > 0 and _is_alnum(text[i - 1]):
                break
            word.append(ch)
            i += 1
            while i < n and text[i] in WHITESPACE:
                i += 1
            if i == n:
                raise RedirectionWithoutFilename()
            while i < n and text[i] not in _FILENAME_STOP and text[i] not in WHITESPACE:
                word.append(text[i])
                i += 1

        else:
            word.append(ch)
            i += 1

        if len(word) >= word_len:
            raise WordTooLong()

    if in_quote:
        raise UnterminatedQuote()

    return "".join(word), i


def _is_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()
