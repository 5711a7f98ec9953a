"""Lexical and syntactic errors raised while parsing a program."""

from typing import Optional


class LangError(SyntaxError):
    """Base class for every error raised by the lexer or parser.

    pos is the UTF-8 byte offset of the offending character; line and
    column are 1-based and count characters.
    """

    code = "LangError"

    def __init__(
        self,
        message: str,
        *,
        pos: int = 0,
        line: int = 1,
        column: int = 1,
        filename: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.pos = pos
        self.line = line
        self.column = column
        self.filename = filename

    def __str__(self) -> str:
        return f"{self.message} at line {self.line}, column {self.column}"

    def format(self) -> str:
        where = f"{self.line}:{self.column}"
        if self.filename:
            where = f"{self.filename}:{where}"
        return f"{where}: {self.code}: {self.message}"


# --- Lexical ---

class LexError(LangError):
    code = "LexError"


class UnterminatedString(LexError):
    code = "UnterminatedString"


class IntegerOverflow(LexError):
    code = "IntegerOverflow"


# --- Syntactic ---

class ParseError(LangError):
    code = "ParseError"


class UnexpectedTopLevelForm(ParseError):
    code = "UnexpectedTopLevelForm"


class UnexpectedToken(ParseError):
    code = "UnexpectedToken"

    def __init__(self, expected: str, found: str, **kwargs):
        super().__init__(f"expected {expected}, found {found!r}", **kwargs)
        self.expected = expected
        self.found = found


class UnbalancedParens(ParseError):
    code = "UnbalancedParens"


class UnexpectedEndOfInput(ParseError):
    code = "UnexpectedEndOfInput"

    def __init__(self, expected: str, **kwargs):
        super().__init__(f"unexpected end of input, expected {expected}", **kwargs)
        self.expected = expected


class NestingTooDeep(ParseError):
    code = "NestingTooDeep"
