import json
import logging
from pathlib import Path

import pytest
from lang.__main__ import main
from lang.grammar import GRAMMAR
from lang.parser import parse
from lang.types import FnCall, FnDecl, Main, Str, VarDecl

EXAMPLES_DIR = Path(__file__).resolve().parent.parent.parent.parent / "examples" / "programs"


def example(name):
    path = EXAMPLES_DIR / name
    if not path.exists():
        pytest.skip("example files not found")
    return path


def test_payment_program():
    program = parse(example("payment.lisp").read_text())
    assert [type(f) for f in program.forms] == [VarDecl, VarDecl, FnDecl, FnDecl, Main]
    assert program.variables[0].value == Str("1LCZTUkMKSYN8oKWhh8oqTErEhTENpnXY6")
    can_pay = program.functions[0]
    assert [a.name for a in can_pay.args] == ["balance", "amount"]
    assert isinstance(program.main.body, FnCall)
    assert program.main.body.name == "if"


def test_cli_renders_program(capsys):
    assert main([str(example("flags.lisp"))]) == 0
    out = capsys.readouterr().out
    assert out == (
        "(defvar MASK b101101)\n"
        "(defun masked (x) (bitand x MASK))\n"
        "(main () (masked b111111))\n"
    )


def test_cli_json(capsys):
    assert main(["--json", str(example("flags.lisp"))]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["forms"][2] == {
        "type": "Main",
        "body": {"type": "FnCall", "name": "masked", "args": [{"type": "Atom", "value": "b111111"}]},
    }


def test_cli_reports_errors(capsys):
    path = example("broken.lisp")
    assert main([str(path)]) == 1
    err = capsys.readouterr().err
    assert err.strip() == f"{path}:1:18: UnterminatedString: unterminated string literal"


def test_cli_missing_file(capsys, tmp_path):
    assert main([str(tmp_path / "missing.lisp")]) == 1
    assert "missing.lisp" in capsys.readouterr().err


def test_cli_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err
    assert main(["--bogus", "x.lisp"]) == 1


def test_cli_grammar(capsys):
    assert main(["--grammar"]) == 0
    assert capsys.readouterr().out == GRAMMAR


def test_debug_logging(caplog, tmp_path):
    path = tmp_path / "prog.lisp"
    path.write_text("(main () 1)")
    with caplog.at_level(logging.DEBUG, logger="lang.parser"):
        parse(path.read_text(), {"filename": str(path)})
    assert "parsed 1 top-level forms" in caplog.text


def test_cli_rejects_invalid_utf8(capsys, tmp_path):
    path = tmp_path / "bad.lisp"
    path.write_bytes(b"(main () \xff)")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err.strip() == f"{path}: not valid UTF-8"
