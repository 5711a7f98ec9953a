"""Grammar of the language: keywords and the rules the parser implements."""

MAIN = "main"
DEFUN = "defun"
DEFVAR = "defvar"

KEYWORDS = frozenset({MAIN, DEFUN, DEFVAR})

GRAMMAR = """\
Program    := DefOrMain*
DefOrMain  := FnDecl | VarDecl | Main
Main       := "(" "main" "(" ")" Value ")"
FnDecl     := "(" "defun" Identifier "(" Identifier* ")" Value ")"
VarDecl    := "(" "defvar" Identifier Value ")"
Value      := Int | Str | FnCall | Atom
FnCall     := "(" Identifier Value* ")"
Atom       := Identifier
Identifier := any run of characters other than whitespace, "(", ")" and '"'
              that is not an Int and not a keyword
Int        := ASCII digits, at most 2147483647
Str        := '"' any characters except '"' '"'
"""


def is_keyword(text: str) -> bool:
    return text in KEYWORDS
