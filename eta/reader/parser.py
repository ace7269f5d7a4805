"""
  Eta Reader: lexer and parser

- Streaming, lazy tokenising
- Emits the runtime value representation directly:

    - lists   -> Python list
    - integers that fit in 64 bits -> int
    - everything else that is not a paren -> Symbol

  A numeral too large for 64 bits is read as a Symbol, not an error, so it
  fails later as an unknown symbol if it is evaluated.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, Iterable

from eta import SExpression
from eta.errors import EtaSyntaxError
from eta.types.symbol import Symbol
from eta.types.value import INT64_MAX, INT64_MIN


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<symbol>[^\s();]+)"  # atoms: integers and symbols
    r")",
)

INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only trailing whitespace is left
            break
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in ("lparen", "rparen", "symbol"):
            if m.group(nm):
                yield nm, m.group(nm)
                break


def read_atom(text: str) -> SExpression:
    if INTEGER_RE.fullmatch(text):
        value = int(text)
        if INT64_MIN <= value <= INT64_MAX:
            return value
    return Symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[SExpression]:
        """Read one expression, or return None when the stream is exhausted."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            return read_atom(tok_val)

        if tok_type == "rparen":
            raise EtaSyntaxError("Unmatched ')'")

        # List: read items until the matching ')'
        items: list[SExpression] = []
        while True:
            next_type, _ = self.peek()
            if next_type is None:
                raise EtaSyntaxError("Unmatched '('")
            if next_type == "rparen":
                self.advance()
                return items
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while (expr := self.parse_expr()) is not None:
            yield expr


def parse(source: str) -> SExpression:
    """Read exactly one parenthesised program from `source`."""
    stream = TokenStream(lex(source))
    if stream.peek()[0] != "lparen":
        raise EtaSyntaxError("Expected (")
    expr = stream.parse_expr()
    if stream.peek()[0] is not None:
        raise EtaSyntaxError(f"Unexpected input after expression: {stream.peek()[1]}")
    return expr


def parse_all(source: str) -> list[SExpression]:
    """Read every top-level expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())
