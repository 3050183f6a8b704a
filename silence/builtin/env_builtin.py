"""Built-in procedures for the Silence runtime environment.

This module defines exact-rational arithmetic, comparison, list processing,
predicates, conversion, printing and composition, and the registration
helpers that seed the global frame (together with the special forms).
"""
from __future__ import annotations

import math
import operator
from fractions import Fraction
from typing import Callable

from silence import Expression
from silence.errors import SilenceArithmeticError, SilenceInvalidForm, SilenceTypeError
from silence.evaluation.apply import compose
from silence.evaluation.evaluator import evaluate
from silence.evaluation.special_forms import SPECIAL_FORMS
from silence.types.environment import EnvironmentStack
from silence.types.expression import (
    Atom,
    Bool,
    Cell,
    Null,
    Number,
    Procedure,
    from_lisp_str,
    is_proper_list,
    show_expr,
    to_lisp_str,
)

Body = Callable[[list[Expression], EnvironmentStack], Expression]


def _numbers(name: str, args: list[Expression]) -> list[Fraction]:
    """Unwrap Number arguments; any other tag is a type mismatch."""
    values = []
    for arg in args:
        if not isinstance(arg, Number):
            raise SilenceTypeError(name, f"expected a number, got {show_expr(arg)}")
        values.append(arg.value)
    return values


def _to_exact(name: str, value: float) -> Fraction:
    if not math.isfinite(value):
        raise SilenceArithmeticError(f"{name}: result {value} is not a finite number")
    return Fraction(value)


# -------------------------------
# Arithmetic
# -------------------------------
def _binary_math(name: str, fn: Callable[[Fraction, Fraction], Fraction]) -> Body:
    def body(args: list[Expression], stack: EnvironmentStack) -> Expression:
        match _numbers(name, args):
            case [a, b]:
                return Number(fn(a, b))
        raise SilenceInvalidForm(name)

    return body


def divide(a: Fraction, b: Fraction) -> Fraction:
    if b == 0:
        raise SilenceArithmeticError("/: division by zero")
    return a / b


def _float_unary(name: str, fn: Callable[[float], float]) -> Body:
    """Transcendental function via a float intermediate; precision loss accepted."""
    def body(args: list[Expression], stack: EnvironmentStack) -> Expression:
        match _numbers(name, args):
            case [x]:
                try:
                    return Number(_to_exact(name, fn(float(x))))
                except (ValueError, OverflowError, ZeroDivisionError) as e:
                    raise SilenceArithmeticError(f"{name}: {e}") from e
        raise SilenceInvalidForm(name)

    return body


def log_base(args: list[Expression], stack: EnvironmentStack) -> Expression:
    """(log base x) => logarithm of x in the given base."""
    match _numbers("log", args):
        case [base, x]:
            try:
                return Number(_to_exact("log", math.log(float(x), float(base))))
            except (ValueError, OverflowError, ZeroDivisionError) as e:
                raise SilenceArithmeticError(f"log: {e}") from e
    raise SilenceInvalidForm("log")


def numerator(args: list[Expression], stack: EnvironmentStack) -> Expression:
    match _numbers("numerator", args):
        case [v]:
            return Number(v.numerator)
    raise SilenceInvalidForm("numerator")


def denominator(args: list[Expression], stack: EnvironmentStack) -> Expression:
    match _numbers("denominator", args):
        case [v]:
            return Number(v.denominator)
    raise SilenceInvalidForm("denominator")


# -------------------------------
# Comparison
# -------------------------------
def equals(args: list[Expression], stack: EnvironmentStack) -> Expression:
    """Structural equality over any two values; procedures compare by identity."""
    match args:
        case [a, b]:
            return Bool(a == b)
    raise SilenceInvalidForm("=")


def _compare(name: str, op: Callable[[Fraction, Fraction], bool]) -> Body:
    def body(args: list[Expression], stack: EnvironmentStack) -> Expression:
        match _numbers(name, args):
            case [a, b]:
                return Bool(op(a, b))
        raise SilenceInvalidForm(name)

    return body


# -------------------------------
# Lists
# -------------------------------
def cons(args: list[Expression], stack: EnvironmentStack) -> Expression:
    match args:
        case [head, tail]:
            return Cell(head, tail)
    raise SilenceInvalidForm("cons")


def car(args: list[Expression], stack: EnvironmentStack) -> Expression:
    match args:
        case [Cell(head, _)]:
            return head
        case [other]:
            raise SilenceTypeError("car", f"expected a pair, got {show_expr(other)}")
    raise SilenceInvalidForm("car")


def cdr(args: list[Expression], stack: EnvironmentStack) -> Expression:
    match args:
        case [Cell(_, tail)]:
            return tail
        case [other]:
            raise SilenceTypeError("cdr", f"expected a pair, got {show_expr(other)}")
    raise SilenceInvalidForm("cdr")


# -------------------------------
# Predicates
# -------------------------------
def _predicate(name: str, test: Callable[[Expression], bool]) -> Body:
    def body(args: list[Expression], stack: EnvironmentStack) -> Expression:
        match args:
            case [x]:
                return Bool(test(x))
        raise SilenceInvalidForm(name)

    return body


# -------------------------------
# Conversion and I/O
# -------------------------------
def to_str(args: list[Expression], stack: EnvironmentStack) -> Expression:
    """(to-str x) -> printed form of x as a string."""
    match args:
        case [x]:
            return to_lisp_str(show_expr(x))
    raise SilenceInvalidForm("to-str")


def to_atom(args: list[Expression], stack: EnvironmentStack) -> Expression:
    """(to-atom x) -> atom named by the printed form of x."""
    match args:
        case [x]:
            return Atom(show_expr(x))
    raise SilenceInvalidForm("to-atom")


def print_builtin(args: list[Expression], stack: EnvironmentStack) -> Expression:
    """Write a string without a trailing newline; returns Null."""
    match args:
        case [x]:
            text = from_lisp_str(x)
            if text is None:
                raise SilenceTypeError("print", f"expected a string, got {show_expr(x)}")
            print(text, end="", flush=True)
            return Null
    raise SilenceInvalidForm("print")


# -------------------------------
# Composition
# -------------------------------
def compose_builtin(args: list[Expression], stack: EnvironmentStack) -> Expression:
    """((. b a) <args>) => (b (a <args>))"""
    match args:
        case [Procedure() as outer, Procedure() as inner]:
            return compose(outer, inner, evaluate)
    raise SilenceInvalidForm(".")


def _proc(name: str, evaluate_args: bool, arity: int, body: Body) -> tuple[str, Procedure]:
    return name, Procedure(evaluate_args, arity, body, name)


def primitives() -> dict[str, Procedure]:
    """Return the primitive table: builtins plus special forms."""
    table = dict(
        [
            _proc(".", True, 2, compose_builtin),
            _proc("=", True, 2, equals),
            _proc(">", True, 2, _compare(">", operator.gt)),
            _proc(">=", True, 2, _compare(">=", operator.ge)),
            _proc("<", True, 2, _compare("<", operator.lt)),
            _proc("<=", True, 2, _compare("<=", operator.le)),
            _proc("+", True, 2, _binary_math("+", operator.add)),
            _proc("-", True, 2, _binary_math("-", operator.sub)),
            _proc("*", True, 2, _binary_math("*", operator.mul)),
            _proc("/", True, 2, _binary_math("/", divide)),
            _proc("log", True, 2, log_base),
            _proc("exp", True, 1, _float_unary("exp", math.exp)),
            _proc("sin", True, 1, _float_unary("sin", math.sin)),
            _proc("cos", True, 1, _float_unary("cos", math.cos)),
            _proc("tan", True, 1, _float_unary("tan", math.tan)),
            _proc("asin", True, 1, _float_unary("asin", math.asin)),
            _proc("acos", True, 1, _float_unary("acos", math.acos)),
            _proc("atan", True, 1, _float_unary("atan", math.atan)),
            _proc("numerator", True, 1, numerator),
            _proc("denominator", True, 1, denominator),
            _proc("to-str", True, 1, to_str),
            _proc("to-atom", True, 1, to_atom),
            _proc("cons", True, 2, cons),
            _proc("car", True, 1, car),
            _proc("cdr", True, 1, cdr),
            _proc("print", True, 1, print_builtin),
            _proc("proc?", True, 1, _predicate("proc?", lambda x: isinstance(x, Procedure))),
            _proc("number?", True, 1, _predicate("number?", lambda x: isinstance(x, Number))),
            _proc("string?", True, 1, _predicate("string?", lambda x: from_lisp_str(x) is not None)),
            _proc("atom?", True, 1, _predicate("atom?", lambda x: isinstance(x, Atom))),
            _proc("null?", True, 1, _predicate("null?", lambda x: x is Null)),
            _proc("list?", True, 1, _predicate("list?", is_proper_list)),
            _proc("pair?", True, 1, _predicate("pair?", lambda x: isinstance(x, Cell))),
        ]
    )
    table.update(SPECIAL_FORMS)
    return table


def register(stack: EnvironmentStack) -> None:
    """Register all primitives into the outermost frame, creating it if needed."""
    if stack.depth == 0:
        stack.push()
    stack.outermost().update(primitives())
