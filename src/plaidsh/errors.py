"""Errors raised while turning an input line into a Command."""


class ParseError(ValueError):
    """Base class for every tokenizer and parser failure.

    ``str(exc)`` is the message shown to the user.
    """


class IllegalEscape(ParseError):
    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Illegal escape character: {char}")


class UndefinedVariable(ParseError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Undefined variable: '{name}'")


class RedirectionWithoutFilename(ParseError):
    def __init__(self) -> None:
        super().__init__("Redirection without filename")


class UnterminatedQuote(ParseError):
    def __init__(self) -> None:
        super().__init__("Unterminated quote")


class WordTooLong(ParseError):
    def __init__(self) -> None:
        super().__init__("Word too long")


class MultipleRedirections(ParseError):
    def __init__(self) -> None:
        super().__init__("Multiple redirections not allowed")


class MissingCommand(ParseError):
    def __init__(self) -> None:
        super().__init__("Missing command")
