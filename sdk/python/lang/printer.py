"""Render ASTs back to canonical source text or plain data."""

from typing import Any

from .types import Atom, FnCall, FnDecl, Int, Main, Program, Str, VarDecl


def render(node: Any) -> str:
    """Render a node as source text that parses back to an equal node."""
    if isinstance(node, Program):
        return "\n".join(render(form) for form in node.forms)
    if isinstance(node, Main):
        return f"(main () {render(node.body)})"
    if isinstance(node, FnDecl):
        params = " ".join(a.name for a in node.args)
        return f"(defun {node.name} ({params}) {render(node.body)})"
    if isinstance(node, VarDecl):
        return f"(defvar {node.name} {render(node.value)})"
    if isinstance(node, FnCall):
        return "(" + " ".join([node.name] + [render(a) for a in node.args]) + ")"
    if isinstance(node, Atom):
        return node.name
    if isinstance(node, Int):
        return str(node.value)
    if isinstance(node, Str):
        return f'"{node.value}"'
    raise TypeError(f"cannot render {type(node).__name__}")


def to_data(node: Any) -> Any:
    """Convert a node to JSON-serializable dicts tagged with "type"."""
    if isinstance(node, Program):
        return {"type": "Program", "forms": [to_data(f) for f in node.forms]}
    if isinstance(node, Main):
        return {"type": "Main", "body": to_data(node.body)}
    if isinstance(node, FnDecl):
        return {
            "type": "FnDecl",
            "name": node.name,
            "args": [a.name for a in node.args],
            "body": to_data(node.body),
        }
    if isinstance(node, VarDecl):
        return {"type": "VarDecl", "name": node.name, "value": to_data(node.value)}
    if isinstance(node, FnCall):
        return {"type": "FnCall", "name": node.name, "args": [to_data(a) for a in node.args]}
    if isinstance(node, Atom):
        return {"type": "Atom", "value": node.name}
    if isinstance(node, Int):
        return {"type": "Int", "value": node.value}
    if isinstance(node, Str):
        return {"type": "Str", "value": node.value}
    raise TypeError(f"cannot convert {type(node).__name__}")
