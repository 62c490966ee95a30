"""
  Reader: lexer and parser for minischeme source text.

- Streaming, lazy tokenizing
- Emits Python primitives instead of Cons cells:

    - lists -> Python list
    - symbols -> Symbol
    - strings -> str
    - numbers -> int/float
    - #t / #f -> True / False
    - 'x -> [quote, x]
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from minischeme import SExpression
from minischeme.errors import SchemeSyntaxError, IncompleteInputError
from minischeme.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"(?P<whitespace>\s+)"
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<quote>')"  # 'x shorthand
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<open_string>")'  # a quote that never closes
    r'|(?P<atom>[^\s()\'";]+)',  # symbols, numbers, booleans
    re.DOTALL,
)

INT_RE = re.compile(r"[+-]?\d+")
FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+(?=[eE]))(?:[eE][+-]?\d+)?")

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "\\": "\\",
    '"': '"',
}

QUOTE = Symbol("quote")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        kind = m.lastgroup
        if kind == "open_string":
            raise IncompleteInputError("Unterminated string literal")
        pos = m.end()
        if kind in ("whitespace", "comment"):
            continue
        yield kind, m.group(kind)


def _unescape(body: str) -> str:
    return re.sub(r"\\(.)", lambda m: STRING_ESCAPES.get(m.group(1), m.group(1)), body, flags=re.DOTALL)


def parse_atom(token: str) -> SExpression:
    """Turn a bare token into a boolean, number or Symbol."""
    if token == "#t":
        return True
    if token == "#f":
        return False
    if INT_RE.fullmatch(token):
        try:
            return int(token)
        except ValueError as e:
            raise SchemeSyntaxError(f"Integer literal too long ({len(token)} digits)") from e
    if FLOAT_RE.fullmatch(token):
        return float(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
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

    def parse_expr(self) -> SExpression:
        """Read the next complete expression; None at end of input."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "atom":
            return parse_atom(tok_val)

        if tok_type == "string":
            return _unescape(tok_val[1:-1])

        if tok_type == "quote":
            if self.peek()[0] is None:
                raise IncompleteInputError("Expected an expression after '")
            if self.peek()[0] == "rparen":
                raise SchemeSyntaxError("Expected an expression after ', got ')'")
            return [QUOTE, self.parse_expr()]

        if tok_type == "lparen":
            items = []
            while True:
                next_type = self.peek()[0]
                if next_type is None:
                    raise IncompleteInputError("Unmatched '('")
                if next_type == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise SchemeSyntaxError("Unexpected ')'")

        raise SchemeSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str) -> list[SExpression]:
    """Parse every top-level expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())


def parse_one(source: str) -> SExpression:
    """Parse exactly one expression; empty or trailing input is an error."""
    exprs = parse(source)
    if not exprs:
        raise SchemeSyntaxError("Expected an expression, got empty input")
    if len(exprs) > 1:
        raise SchemeSyntaxError(f"Expected one expression, got {len(exprs)}")
    return exprs[0]
