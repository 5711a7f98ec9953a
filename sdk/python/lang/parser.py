"""Recursive-descent parser building a Program from source text."""

import logging
from typing import Any, Optional, Union

from .config import ParseOptions, resolve_options
from .errors import (
    LangError,
    NestingTooDeep,
    ParseError,
    UnbalancedParens,
    UnexpectedEndOfInput,
    UnexpectedToken,
    UnexpectedTopLevelForm,
)
from .grammar import DEFUN, DEFVAR, MAIN, is_keyword
from .lexer import Token, TokenKind, byte_length, locate, tokenize
from .types import Atom, DefOrMain, FnCall, FnDecl, Int, Main, Program, Str, Value, VarDecl

logger = logging.getLogger(__name__)


class Parser:
    """Parses a single source text. Not reusable."""

    def __init__(self, source: str, options: Union[ParseOptions, dict[str, Any], None] = None):
        self.source = source
        self.options = resolve_options(options)
        self._tokens = tokenize(source, self.options.filename)
        self._peeked: Optional[Token] = None
        self._done = False
        self._depth = 0

    # --- Token stream ---

    def _peek(self) -> Optional[Token]:
        if self._peeked is None and not self._done:
            self._peeked = next(self._tokens, None)
            self._done = self._peeked is None
        return self._peeked

    def _next(self, expected: str) -> Token:
        tok = self._peek()
        if tok is None:
            raise self._end_of_input(expected)
        self._peeked = None
        return tok

    def _expect(self, kind: str, expected: str) -> Token:
        tok = self._next(expected)
        if tok.kind != kind:
            raise self._mismatch(expected, tok)
        return tok

    def _identifier(self, expected: str) -> Token:
        tok = self._expect(TokenKind.IDENT, expected)
        if is_keyword(tok.text):
            raise UnexpectedToken(expected, tok.text, **self._where(tok))
        return tok

    # --- Errors ---

    def _where(self, tok: Token) -> dict[str, Any]:
        return {
            "pos": tok.pos,
            "line": tok.line,
            "column": tok.column,
            "filename": self.options.filename,
        }

    def _mismatch(self, expected: str, tok: Token) -> ParseError:
        if tok.kind == TokenKind.RPAREN:
            return UnbalancedParens(f"unexpected ')', expected {expected}", **self._where(tok))
        return UnexpectedToken(expected, tok.text, **self._where(tok))

    def _end_of_input(self, expected: str) -> UnexpectedEndOfInput:
        line, column = locate(self.source, len(self.source))
        return UnexpectedEndOfInput(
            expected, pos=byte_length(self.source), line=line, column=column, filename=self.options.filename,
        )

    # --- Rules ---

    def parse(self) -> Program:
        forms: list[DefOrMain] = []
        while self._peek() is not None:
            forms.append(self._def_or_main())
        return Program(tuple(forms))

    def _def_or_main(self) -> DefOrMain:
        opener = self._expect(TokenKind.LPAREN, "'(' starting a top-level form")
        head = self._peek()
        if head is None:
            raise self._end_of_input("'main', 'defun' or 'defvar'")
        if head.kind == TokenKind.IDENT:
            if head.text == MAIN:
                return self._main(opener)
            if head.text == DEFUN:
                return self._fn_decl(opener)
            if head.text == DEFVAR:
                return self._var_decl(opener)
        raise UnexpectedTopLevelForm(
            f"expected 'main', 'defun' or 'defvar' at top level, found {head.text!r}",
            **self._where(head),
        )

    def _main(self, opener: Token) -> Main:
        self._next(MAIN)
        self._expect(TokenKind.LPAREN, "'(' of main's empty argument list")
        self._expect(TokenKind.RPAREN, "')' closing main's empty argument list")
        body = self._value()
        self._expect(TokenKind.RPAREN, "')' closing main")
        return Main(body, pos=opener.pos)

    def _fn_decl(self, opener: Token) -> FnDecl:
        self._next(DEFUN)
        name = self._identifier("function name")
        self._expect(TokenKind.LPAREN, "'(' opening the parameter list")
        args: list[Atom] = []
        while True:
            tok = self._peek()
            if tok is None:
                raise self._end_of_input("parameter name or ')'")
            if tok.kind == TokenKind.RPAREN:
                self._next("')'")
                break
            param = self._identifier("parameter name or ')'")
            args.append(Atom(param.text, pos=param.pos))
        body = self._value()
        self._expect(TokenKind.RPAREN, f"')' closing function {name.text}")
        return FnDecl(name.text, tuple(args), body, pos=opener.pos)

    def _var_decl(self, opener: Token) -> VarDecl:
        self._next(DEFVAR)
        name = self._identifier("variable name")
        value = self._value()
        self._expect(TokenKind.RPAREN, f"')' closing variable {name.text}")
        return VarDecl(name.text, value, pos=opener.pos)

    def _value(self) -> Value:
        tok = self._next("a value")
        if tok.kind == TokenKind.INT:
            return Int(tok.value, pos=tok.pos)
        if tok.kind == TokenKind.STRING:
            return Str(tok.value, pos=tok.pos)
        if tok.kind == TokenKind.LPAREN:
            return self._fn_call(tok)
        if tok.kind == TokenKind.IDENT and not is_keyword(tok.text):
            return Atom(tok.text, pos=tok.pos)
        raise self._mismatch("a value", tok)

    def _fn_call(self, opener: Token) -> FnCall:
        self._depth += 1
        try:
            if self._depth > self.options.max_depth:
                raise NestingTooDeep(
                    f"function calls nested deeper than {self.options.max_depth} levels",
                    **self._where(opener),
                )
            name = self._identifier("function name")
            args: list[Value] = []
            while True:
                tok = self._peek()
                if tok is None:
                    raise self._end_of_input(f"argument or ')' closing call to {name.text}")
                if tok.kind == TokenKind.RPAREN:
                    self._next("')'")
                    break
                args.append(self._value())
            return FnCall(name.text, tuple(args), pos=opener.pos)
        finally:
            self._depth -= 1


def parse(source: str, options: Union[ParseOptions, dict[str, Any], None] = None) -> Program:
    """Parse source text into a Program.

    Raises the first LexError or ParseError encountered; no partial tree
    is ever returned.
    """
    parser = Parser(source, options)
    logger.debug("parsing %d characters from %s", len(source), parser.options.filename or "<string>")
    try:
        program = parser.parse()
    except LangError as exc:
        logger.debug("parse failed: %s", exc.format())
        raise
    logger.debug("parsed %d top-level forms", len(program.forms))
    return program
