"""
  Silence Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits the Expression model directly:

    - integers, n/d rationals, decimals -> Number (exact, 0.1 is 1/10)
    - #t / #f -> Bool
    - () -> Null
    - lists -> right-nested Cell chains
    - dotted lists (a . b) -> Cell chain ending in b; a leading "." is the
      composition atom, so (. f g) is an ordinary call
    - strings -> (quote <proper list of Numbers holding character codes>),
      so a literal evaluates to its own text
    - 'x -> (quote x)
    - anything else -> Atom
"""

from __future__ import annotations

import re
from fractions import Fraction
from typing import Iterator, Optional

from silence import Expression
from silence.errors import SilenceSyntaxError
from silence.types.expression import (
    FALSE,
    TRUE,
    Atom,
    Number,
    to_cons_list,
    to_lisp_str,
)


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # quote shorthand
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s()\'";]+)'  # fallback: atoms, numbers, booleans
    r")",
    re.DOTALL,
)

NUMBER_RE = re.compile(
    r"[+-]?(?:\d+/\d+|\d*\.\d+(?:[eE][+-]?\d+)?|\d+(?:[eE][+-]?\d+)?)\Z"
)

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}

BOOLEANS = {"#t": TRUE, "#f": FALSE}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos:].isspace():
                break
            bad = source[pos:].lstrip()[0]
            raise SilenceSyntaxError(f"Unexpected character {bad!r} (unterminated string?)")
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        yield kind, m.group(kind)


def _unescape(literal: str) -> str:
    body = literal[1:-1]
    out = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\" and i + 1 < len(body):
            nxt = body[i + 1]
            out.append(ESCAPES.get(nxt, nxt))
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def _atom_or_literal(token: str) -> Expression:
    if token in BOOLEANS:
        return BOOLEANS[token]
    if NUMBER_RE.match(token):
        try:
            return Number(Fraction(token))
        except ZeroDivisionError:
            raise SilenceSyntaxError(f"Zero denominator in literal {token}")
    return Atom(token)


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

    def parse_expr(self) -> Optional[Expression]:
        """Parse the next expression, or return None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            return _atom_or_literal(tok_val)

        if tok_type == "string":
            self.advance()
            return to_cons_list([Atom("quote"), to_lisp_str(_unescape(tok_val))])

        # 'x -> (quote x)
        if tok_type == "quote":
            self.advance()
            expr = self.parse_expr()
            if expr is None:
                raise SilenceSyntaxError("Expected an expression after quote")
            return to_cons_list([Atom("quote"), expr])

        # List or dotted list
        if tok_type == "lparen":
            self.advance()
            items = []
            while True:
                kind, value = self.peek()
                if kind == "rparen":
                    self.advance()
                    return to_cons_list(items)
                if kind is None:
                    raise SilenceSyntaxError("Unmatched '('")
                # In head position "." is the composition primitive
                if kind == "symbol" and value == "." and items:
                    self.advance()
                    tail = self.parse_expr()
                    if tail is None or self.peek()[0] != "rparen":
                        raise SilenceSyntaxError("Expected ')' after dotted cdr")
                    self.advance()
                    return to_cons_list(items, tail)
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise SilenceSyntaxError("Unexpected ')'")

        raise SilenceSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[Expression]:
        while (expr := self.parse_expr()) is not None:
            yield expr


def parse_all(source: str) -> Iterator[Expression]:
    """Lazily parse every top-level expression in `source`."""
    return TokenStream(lex(source)).parse_all()


def parse(source: str) -> Expression:
    """Parse exactly one expression from `source`."""
    exprs = list(parse_all(source))
    if len(exprs) != 1:
        raise SilenceSyntaxError(f"Expected exactly one expression, found {len(exprs)}")
    return exprs[0]
