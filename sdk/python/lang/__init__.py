from .parser import parse, Parser
from .lexer import tokenize, Token, TokenKind
from .printer import render, to_data
from .config import ParseOptions
from .errors import (
    LangError,
    LexError,
    UnterminatedString,
    IntegerOverflow,
    ParseError,
    UnexpectedTopLevelForm,
    UnexpectedToken,
    UnbalancedParens,
    UnexpectedEndOfInput,
    NestingTooDeep,
)
from .types import Program, Main, FnDecl, VarDecl, FnCall, Atom, Int, Str

__all__ = [
    "parse", "Parser", "tokenize", "Token", "TokenKind", "render", "to_data", "ParseOptions",
    "LangError", "LexError", "UnterminatedString", "IntegerOverflow",
    "ParseError", "UnexpectedTopLevelForm", "UnexpectedToken", "UnbalancedParens",
    "UnexpectedEndOfInput", "NestingTooDeep",
    "Program", "Main", "FnDecl", "VarDecl", "FnCall", "Atom", "Int", "Str",
]
