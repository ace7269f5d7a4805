"""Interactive console for Eta."""

from __future__ import annotations

import argparse
import logging
import sys

from eta import __version__
from eta.config import get_log_level
from eta.errors import EtaError, EtaFault
from eta.interpreter import Interpreter

PROMPT = "eta> "


def respond(interp: Interpreter, code: str) -> tuple[int, str]:
    """Evaluate `code` and return (exit status, text to print)."""
    try:
        return 0, interp.evaluate(code)
    except EtaError as ex:
        return 1, str(ex)
    except EtaFault as ex:
        return 2, f"internal fault: {ex}"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="eta", description="Eta Lisp console")
    parser.add_argument("-e", "--expr", help="evaluate one expression and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_log_level())
    interp = Interpreter()

    if args.expr is not None:
        status, text = respond(interp, args.expr)
        print(text, file=sys.stdout if status == 0 else sys.stderr)
        return status

    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return 0
        if not line.strip():
            continue
        _, text = respond(interp, line)
        print(text)


if __name__ == "__main__":
    sys.exit(main())
