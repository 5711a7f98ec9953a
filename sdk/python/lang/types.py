from dataclasses import dataclass, field
from typing import Optional, Union

# AST node types. Every node records the UTF-8 byte offset it started at;
# offsets do not take part in equality, so two trees compare equal when
# their structure and literal values match.

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


@dataclass(frozen=True)
class Atom:
    name: str
    pos: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Int:
    value: int
    pos: int = field(default=0, compare=False)

    def __post_init__(self):
        if not INT32_MIN <= self.value <= INT32_MAX:
            raise ValueError(f"{self.value} does not fit in a signed 32-bit integer")


@dataclass(frozen=True)
class Str:
    value: str
    pos: int = field(default=0, compare=False)


@dataclass(frozen=True)
class FnCall:
    name: str
    args: tuple["Value", ...] = ()
    pos: int = field(default=0, compare=False)


Value = Union[Atom, Int, Str, FnCall]


@dataclass(frozen=True)
class Main:
    body: Value
    pos: int = field(default=0, compare=False)


@dataclass(frozen=True)
class FnDecl:
    name: str
    args: tuple[Atom, ...]
    body: Value
    pos: int = field(default=0, compare=False)


@dataclass(frozen=True)
class VarDecl:
    name: str
    value: Value
    pos: int = field(default=0, compare=False)


DefOrMain = Union[FnDecl, VarDecl, Main]


@dataclass(frozen=True)
class Program:
    forms: tuple[DefOrMain, ...] = ()

    @property
    def main(self) -> Optional[Main]:
        for form in self.forms:
            if isinstance(form, Main):
                return form
        return None

    @property
    def functions(self) -> list[FnDecl]:
        return [f for f in self.forms if isinstance(f, FnDecl)]

    @property
    def variables(self) -> list[VarDecl]:
        return [f for f in self.forms if isinstance(f, VarDecl)]
