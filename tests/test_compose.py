import pytest

from silence.errors import SilenceArityError, SilenceInvalidForm
from silence.types.expression import Number, Procedure, show_expr


@pytest.fixture
def with_inc_double(run):
    run("(let! 'inc (lambda (x) (+ x 1)))")
    run("(let! 'double (lambda (x) (* x 2)))")
    return run


def test_compose_applies_inner_first(with_inc_double):
    run = with_inc_double
    assert run("((. double inc) 3)") == Number(8)
    assert run("((. inc double) 3)") == Number(7)


def test_composed_procedure_takes_inner_arity_and_policy(with_inc_double):
    run = with_inc_double
    composed = run("(. double +)")
    assert isinstance(composed, Procedure)
    assert composed.arity == 2
    assert composed.evaluate_args
    assert run("((. double +) 2 3)") == Number(10)
    with pytest.raises(SilenceArityError):
        run("((. double inc) 1 2)")


def test_compose_with_primitives(run):
    assert run("((. car cdr) '(1 2 3))") == Number(2)


def test_outer_receives_value_unevaluated(run):
    # the inner result is a list that would fail if it were evaluated again
    assert show_expr(run("((. (lambda (x) x) (lambda! (x) x)) (car nothing))")) == "(car nothing)"


def test_outer_arity_is_still_checked(with_inc_double):
    run = with_inc_double
    with pytest.raises(SilenceArityError):
        run("((. + inc) 1)")


def test_compose_requires_procedures(run):
    with pytest.raises(SilenceInvalidForm):
        run("(. 1 car)")
