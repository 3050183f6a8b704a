"""The lambda family: lambda, lambda!, mk-lambda, mk-lambda!.

All four take a parameter spec and a single body expression and return a
closure over the stack that was active when the form was evaluated. They
differ in two independent choices:

    form          spec/body evaluated?   closure evaluates its arguments?
    lambda        no                     yes
    lambda!       no                     no
    mk-lambda     yes                    yes
    mk-lambda!    yes                    no

The parameter spec is a proper list of atoms, e.g. (a b c), or the variadic
marker (*) (a bare * is accepted too). A variadic closure binds its whole
argument list to the name `args`.
"""

from __future__ import annotations

from typing import Callable, Optional

from silence import Expression
from silence.errors import SilenceInvalidForm
from silence.evaluation.evaluator import evaluate
from silence.types.environment import EnvironmentStack, Frame
from silence.types.expression import (
    VARIADIC,
    Atom,
    Procedure,
    from_cons_list,
    to_cons_list,
)

VARIADIC_MARKER = "*"
VARIADIC_BINDING = "args"


def _param_names(spec: Expression) -> Optional[list[str]]:
    if spec == Atom(VARIADIC_MARKER):
        return [VARIADIC_MARKER]
    items = from_cons_list(spec)
    if items is None or not all(isinstance(item, Atom) for item in items):
        return None
    return [item.name for item in items]


def _run_body(
    body: Expression, frame: Frame, captured: tuple[Frame, ...], stack: EnvironmentStack
) -> Expression:
    # The call-site stack is replaced by the captured one for the duration
    # of the body and restored afterwards, on success or failure.
    with stack.scope(frame, base=captured):
        return evaluate(body, stack)


def make_closure(
    names: list[str], body: Expression, captured: tuple[Frame, ...], evaluate_args: bool
) -> Procedure:
    if names == [VARIADIC_MARKER]:
        def variadic_closure(args: list[Expression], stack: EnvironmentStack) -> Expression:
            return _run_body(body, {VARIADIC_BINDING: to_cons_list(args)}, captured, stack)

        return Procedure(evaluate_args, VARIADIC, variadic_closure)

    def closure(args: list[Expression], stack: EnvironmentStack) -> Expression:
        return _run_body(body, dict(zip(names, args)), captured, stack)

    return Procedure(evaluate_args, len(names), closure)


def make_lambda_form(
    name: str, evaluate_args: bool
) -> Callable[[list[Expression], EnvironmentStack], Expression]:
    """Build the body of one member of the lambda family."""

    def lambda_form(args: list[Expression], stack: EnvironmentStack) -> Expression:
        match args:
            case [spec, body]:
                names = _param_names(spec)
                if names is None:
                    raise SilenceInvalidForm(name, "invalid argument names")
                return make_closure(names, body, stack.snapshot(), evaluate_args)
        raise SilenceInvalidForm(name)

    return lambda_form
