"""Core evaluator for the Silence interpreter.

A strictly sequential recursive-descent walk over the expression tree. Atoms
are looked up in the environment stack, Cells are calls, everything else
evaluates to itself.
"""

from __future__ import annotations

from typing import Iterable

from silence import Expression
from silence.errors import SilenceInvalidForm, SilenceNotCallable
from silence.evaluation.apply import apply
from silence.types.environment import EnvironmentStack
from silence.types.expression import Atom, Cell, Null, Procedure, from_cons_list, show_expr


def evaluate(expr: Expression, stack: EnvironmentStack) -> Expression:
    """Evaluate `expr` against `stack` and return the resulting value."""
    match expr:
        case Atom(name):
            return stack.lookup(name)
        case Cell(head, tail):
            proc = evaluate(head, stack)
            if not isinstance(proc, Procedure):
                raise SilenceNotCallable(proc)
            args = from_cons_list(tail)
            if args is None:
                raise SilenceInvalidForm(show_expr(head), "improper argument list")
            return apply(proc, args, stack, evaluate)

    # --- Numbers, booleans, Null and procedures evaluate to themselves ---
    return expr


def evaluate_all(exprs: Iterable[Expression], stack: EnvironmentStack) -> Expression:
    """Evaluate a sequence of top-level expressions, returning the last value."""
    result: Expression = Null
    for expr in exprs:
        result = evaluate(expr, stack)
    return result
