"""CLI: python -m lang [--json] [--grammar] [-v] <program>"""

import json
import logging
import sys
from pathlib import Path

from .errors import LangError
from .grammar import GRAMMAR
from .parser import parse
from .printer import render, to_data

USAGE = "Usage: python -m lang [--json] [--grammar] [-v] <program>"


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)
    flags = {a for a in args if a.startswith("-")}
    paths = [a for a in args if not a.startswith("-")]

    unknown = flags - {"--json", "--grammar", "-v", "--verbose"}
    if unknown:
        print(f"Unknown option: {sorted(unknown)[0]}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    if "--grammar" in flags:
        print(GRAMMAR, end="")
        return 0

    if len(paths) != 1:
        print(USAGE, file=sys.stderr)
        return 1

    if flags & {"-v", "--verbose"}:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    path = Path(paths[0])
    try:
        source = path.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"{path}: {exc.strerror}", file=sys.stderr)
        return 1
    except UnicodeDecodeError:
        print(f"{path}: not valid UTF-8", file=sys.stderr)
        return 1

    try:
        program = parse(source, {"filename": str(path)})
    except LangError as exc:
        print(exc.format(), file=sys.stderr)
        return 1

    if "--json" in flags:
        print(json.dumps(to_data(program), indent=2))
    else:
        print(render(program))
    return 0


if __name__ == "__main__":
    sys.exit(main())
