import json

import pytest
from lang.parser import parse
from lang.printer import render, to_data
from lang.types import Atom, Int, Main, Program

PROGRAMS = [
    "(main () true)",
    '(defun test (a b) "abc")',
    "(main () (eat 1 2 3))",
    '(defvar ALICE_ADDR "1LCZTUkMKSYN8oKWhh8oqTErEhTENpnXY6")',
    "(defun nop () (noop))\n(main () (nop))",
    '(defvar X b101)\n(defun f (a) (g (h a "s ; not a comment") 0 X))\n(main () (f X))',
]


@pytest.mark.parametrize("src", PROGRAMS)
def test_render_is_canonical(src):
    assert render(parse(src)) == src


@pytest.mark.parametrize("src", PROGRAMS)
def test_render_reparses_to_equal_tree(src):
    program = parse(src)
    assert parse(render(program)) == program


def test_render_normalizes_layout():
    assert render(parse("  (main\n ()\n\t(f  1   x))  ")) == "(main () (f 1 x))"


def test_render_constructed_tree():
    assert render(Program((Main(Int(5)),))) == "(main () 5)"


def test_render_rejects_non_nodes():
    with pytest.raises(TypeError):
        render(42)


def test_to_data():
    data = to_data(parse('(defvar V "s")\n(defun f (a) (g a 1))\n(main () (f V))'))
    assert data == {
        "type": "Program",
        "forms": [
            {"type": "VarDecl", "name": "V", "value": {"type": "Str", "value": "s"}},
            {
                "type": "FnDecl",
                "name": "f",
                "args": ["a"],
                "body": {
                    "type": "FnCall",
                    "name": "g",
                    "args": [{"type": "Atom", "value": "a"}, {"type": "Int", "value": 1}],
                },
            },
            {
                "type": "Main",
                "body": {"type": "FnCall", "name": "f", "args": [{"type": "Atom", "value": "V"}]},
            },
        ],
    }
    json.dumps(data)


def test_to_data_atom():
    assert to_data(Atom("true")) == {"type": "Atom", "value": "true"}
