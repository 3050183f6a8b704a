"""Application engine for Silence.

This module centralizes the procedure-application protocol:
- Arity checking against the callee's declared arity (VARIADIC accepts any).
- The evaluated-vs-unevaluated argument policy of each Procedure.
- Function composition, which builds a new Procedure from two others.

Keeping this logic in one place prevents duplication between the evaluator,
special forms, and builtin helpers.
"""

from __future__ import annotations

from silence import Expression, EvaluatorFn
from silence.errors import SilenceArityError, SilenceNotCallable
from silence.types.environment import EnvironmentStack
from silence.types.expression import Procedure, VARIADIC


def apply(
    proc: Procedure,
    args: list[Expression],
    stack: EnvironmentStack,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """Apply `proc` to the call-site operand list `args`.

    Parameters:
    - proc: The Procedure being applied.
    - args: Unevaluated argument expressions from the call site.
    - stack: The active environment stack.
    - evaluate_fn: Evaluator used when the procedure evaluates its arguments.

    Operands are evaluated left to right against the current stack; the first
    failure propagates before the body runs.
    """
    if not isinstance(proc, Procedure):
        raise SilenceNotCallable(proc)
    if proc.arity != VARIADIC and len(args) != proc.arity:
        raise SilenceArityError(proc.name, proc.arity, len(args))
    if proc.evaluate_args:
        args = [evaluate_fn(arg, stack) for arg in args]
    return proc.body(args, stack)


def compose(outer: Procedure, inner: Procedure, evaluate_fn: EvaluatorFn) -> Procedure:
    """Build `(outer (inner <args>))` as a single Procedure.

    The result takes the arity and argument policy of `inner`. The value
    produced by `inner` is passed to `outer` unevaluated, since it is already
    a result and not source code.
    """
    suppressed = Procedure(False, outer.arity, outer.body, outer.name)

    def composed(args: list[Expression], stack: EnvironmentStack) -> Expression:
        return apply(suppressed, [inner.body(args, stack)], stack, evaluate_fn)

    return Procedure(inner.evaluate_args, inner.arity, composed, f"{outer.name}.{inner.name}")
