"""Tokenizer for program source text.

Tokens are produced lazily, left to right, each tagged with the UTF-8
byte offset of its first character. Line and column numbers count
characters. Whitespace and comments never produce tokens.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from .errors import IntegerOverflow, UnterminatedString

INT_MAX = 2**31 - 1
INT_MAX_DIGITS = len(str(INT_MAX))

WHITESPACE = frozenset(" \t\r\n")
DELIMITERS = WHITESPACE | frozenset('()"')


class TokenKind:
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    INT = "INT"
    STRING = "STRING"
    IDENT = "IDENT"


@dataclass(frozen=True)
class Token:
    kind: str
    text: str
    pos: int
    line: int
    column: int

    @property
    def value(self):
        """Literal value: int for INT, contents without quotes for STRING."""
        if self.kind == TokenKind.INT:
            return int(self.text.lstrip("0") or "0")
        if self.kind == TokenKind.STRING:
            return self.text[1:-1]
        return self.text


def byte_length(text: str) -> int:
    return len(text.encode("utf-8", "surrogatepass"))


def locate(source: str, index: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of character index in source."""
    line = source.count("\n", 0, index) + 1
    column = index - (source.rfind("\n", 0, index) + 1) + 1
    return line, column


def tokenize(source: str, filename: Optional[str] = None) -> Iterator[Token]:
    """Yield the tokens of source in order.

    Raises UnterminatedString or IntegerOverflow when the offending
    token is reached.
    """
    i = 0
    n = len(source)
    line = 1
    line_start = 0

    # Byte offsets are computed incrementally; i only moves forward.
    seen = 0
    seen_bytes = 0

    def offset(index: int) -> int:
        nonlocal seen, seen_bytes
        seen_bytes += byte_length(source[seen:index])
        seen = index
        return seen_bytes

    while i < n:
        ch = source[i]

        if ch in WHITESPACE:
            if ch == "\n":
                line += 1
                line_start = i + 1
            i += 1
            continue

        # ; and // comments run to end of line
        if ch == ";" or source.startswith("//", i):
            end = source.find("\n", i)
            i = n if end == -1 else end
            continue

        column = i - line_start + 1
        pos = offset(i)

        if ch == "(":
            yield Token(TokenKind.LPAREN, ch, pos, line, column)
            i += 1
            continue
        if ch == ")":
            yield Token(TokenKind.RPAREN, ch, pos, line, column)
            i += 1
            continue

        if ch == '"':
            end = source.find('"', i + 1)
            if end == -1:
                raise UnterminatedString(
                    "unterminated string literal",
                    pos=pos, line=line, column=column, filename=filename,
                )
            text = source[i:end + 1]
            yield Token(TokenKind.STRING, text, pos, line, column)
            # Strings may span lines
            newlines = text.count("\n")
            if newlines:
                line += newlines
                line_start = i + text.rfind("\n") + 1
            i = end + 1
            continue

        j = i
        while j < n and source[j] not in DELIMITERS:
            j += 1
        text = source[i:j]
        if _is_digits(text):
            if _overflows(text):
                shown = text if len(text) <= 20 else text[:20] + "..."
                raise IntegerOverflow(
                    f"integer literal {shown} does not fit in 32 bits",
                    pos=pos, line=line, column=column, filename=filename,
                )
            yield Token(TokenKind.INT, text, pos, line, column)
        else:
            yield Token(TokenKind.IDENT, text, pos, line, column)
        i = j


def _is_digits(text: str) -> bool:
    # str.isdigit() accepts non-ASCII digits
    return text.isascii() and text.isdigit()


def _overflows(text: str) -> bool:
    # Length check first: int() refuses very long digit strings
    digits = text.lstrip("0") or "0"
    return len(digits) > INT_MAX_DIGITS or int(digits) > INT_MAX
