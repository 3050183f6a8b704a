"""Expression model for Silence.

A closed union of value types shared by the reader, the evaluator and the
primitive table. Code and data use the same representation:

    - Atom(name)           symbolic identifier, resolved by lookup
    - Number(value)        exact rational (fractions.Fraction)
    - Bool(value)          #t / #f
    - Null                 the empty list terminator (singleton)
    - Cell(head, tail)     cons pair; proper lists end in Null
    - Procedure(...)       callable value with an arity and evaluation policy

Strings have no type of their own: text is a proper list of Numbers holding
character codes. `to_lisp_str` and `from_lisp_str` convert to and from host
text.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from fractions import Fraction
from io import StringIO
from typing import Iterable, Optional

from silence import Expression, PrimitiveBody

# Arity of a procedure that accepts any number of arguments.
VARIADIC = -1

_MAX_CODE_POINT = 0x10FFFF


@dataclass(frozen=True, slots=True)
class Atom:
    name: str

    def __post_init__(self):
        # Intern to ensure fast equality/hash and reduce memory
        object.__setattr__(self, "name", sys.intern(self.name))

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Number:
    value: Fraction

    def __post_init__(self):
        if not isinstance(self.value, Fraction):
            object.__setattr__(self, "value", Fraction(self.value))

    def __str__(self) -> str:
        return show_expr(self)


@dataclass(frozen=True, slots=True)
class Bool:
    value: bool

    def __str__(self) -> str:
        return "#t" if self.value else "#f"


class NullType:
    __slots__ = ()
    __match_args__ = ()
    _instance: Optional[NullType] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "Null"

    def __str__(self):
        return "()"

    def __eq__(self, other):
        return isinstance(other, NullType)

    def __hash__(self):
        return hash(NullType)

    def __reduce__(self):
        return NullType, ()


Null = NullType()
TRUE = Bool(True)
FALSE = Bool(False)


@dataclass(frozen=True, slots=True, eq=False)
class Cell:
    head: Expression
    tail: Expression

    # Walk the tail iteratively; only heads recurse, so long lists compare
    # and hash in constant stack depth.
    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        a, b = self, other
        while isinstance(a, Cell):
            if not isinstance(b, Cell):
                return False
            if a is b:
                return True
            if a.head != b.head:
                return False
            a, b = a.tail, b.tail
        return a == b

    def __hash__(self):
        heads = []
        expr = self
        while isinstance(expr, Cell):
            heads.append(hash(expr.head))
            expr = expr.tail
        return hash((tuple(heads), expr))

    def __str__(self) -> str:
        return show_expr(self)


@dataclass(eq=False)
class Procedure:
    """A callable value.

    `evaluate_args` selects whether call-site operands are evaluated before
    `body` runs; `arity` is the exact argument count, or VARIADIC. `body`
    receives the resolved argument list and the active EnvironmentStack.
    Procedures compare by identity only.
    """

    evaluate_args: bool
    arity: int
    body: PrimitiveBody
    name: str = "lambda"

    def __post_init__(self):
        if self.arity < VARIADIC:
            raise ValueError(f"Invalid arity {self.arity} for procedure {self.name}")

    @property
    def variadic(self) -> bool:
        return self.arity == VARIADIC

    def __str__(self) -> str:
        return show_expr(self)


# -------------------------------
# List encoding
# -------------------------------
def to_cons_list(items: Iterable[Expression], tail: Expression = Null) -> Expression:
    """Build a right-nested Cell chain from `items`, terminated by `tail`."""
    result = tail
    for item in reversed(list(items)):
        result = Cell(item, result)
    return result


def from_cons_list(expr: Expression) -> Optional[list[Expression]]:
    """Return the elements of a proper list, or None for an improper chain."""
    items: list[Expression] = []
    while isinstance(expr, Cell):
        items.append(expr.head)
        expr = expr.tail
    if expr is not Null:
        return None
    return items


def is_proper_list(expr: Expression) -> bool:
    while isinstance(expr, Cell):
        expr = expr.tail
    return expr is Null


# -------------------------------
# String encoding
# -------------------------------
def to_lisp_str(text: str) -> Expression:
    return to_cons_list(Number(ord(ch)) for ch in text)


def from_lisp_str(expr: Expression) -> Optional[str]:
    """Decode a list of character codes; None if `expr` is not a string."""
    items = from_cons_list(expr)
    if items is None:
        return None
    chars = []
    for item in items:
        if not isinstance(item, Number) or item.value.denominator != 1:
            return None
        code = item.value.numerator
        if not 0 <= code <= _MAX_CODE_POINT:
            return None
        chars.append(chr(code))
    return "".join(chars)


# -------------------------------
# Printed representation
# -------------------------------
def _write_number(value: Fraction, buffer: StringIO) -> None:
    if value.denominator == 1:
        buffer.write(str(value.numerator))
    else:
        buffer.write(f"{value.numerator}/{value.denominator}")


def _write_expr(expr: Expression, buffer: StringIO) -> None:
    match expr:
        case Atom(name):
            buffer.write(name)
        case Number(value):
            _write_number(value, buffer)
        case Bool(value):
            buffer.write("#t" if value else "#f")
        case NullType():
            buffer.write("()")
        case Cell():
            buffer.write("(")
            _write_expr(expr.head, buffer)
            rest = expr.tail
            while isinstance(rest, Cell):
                buffer.write(" ")
                _write_expr(rest.head, buffer)
                rest = rest.tail
            if rest is not Null:
                buffer.write(" . ")
                _write_expr(rest, buffer)
            buffer.write(")")
        case Procedure():
            arity = "*" if expr.variadic else str(expr.arity)
            buffer.write(f"#<procedure {expr.name}/{arity}>")
        case _:
            buffer.write(repr(expr))


def show_expr(expr: Expression) -> str:
    """Render `expr` the way the REPL prints it."""
    with StringIO() as buffer:
        _write_expr(expr, buffer)
        return buffer.getvalue()
