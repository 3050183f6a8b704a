from fractions import Fraction

import pytest

from silence import errors
from silence.evaluation.evaluator import evaluate, evaluate_all
from silence.reader.parser import parse
from silence.types.expression import FALSE, TRUE, Atom, Cell, Null, Number, Procedure, to_cons_list

# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(stack):
    assert evaluate(Number(1), stack) == Number(1)
    assert evaluate(Number(Fraction(1, 3)), stack) == Number(Fraction(1, 3))
    assert evaluate(TRUE, stack) == TRUE
    assert evaluate(FALSE, stack) == FALSE
    assert evaluate(Null, stack) is Null


def test_procedures_evaluate_to_themselves(stack):
    car = stack.lookup("car")
    assert evaluate(car, stack) is car


def test_atom_lookup(stack):
    stack.bind_innermost("x", Number(42))
    assert evaluate(Atom("x"), stack) == Number(42)
    with pytest.raises(errors.SilenceUnboundName):
        evaluate(Atom("z"), stack)


def test_simple_call(stack):
    expr = to_cons_list([Atom("+"), Number(1), Number(2)])
    assert evaluate(expr, stack) == Number(3)


def test_nested_calls(stack):
    assert evaluate(parse("(+ (* 2 3) (- 10 4))"), stack) == Number(12)


def test_operator_position_is_evaluated(stack):
    assert evaluate(parse("((if #t + *) 2 3)"), stack) == Number(5)
    assert evaluate(parse("((if #f + *) 2 3)"), stack) == Number(6)


def test_procedure_value_in_operator_position(stack):
    plus = stack.lookup("+")
    expr = Cell(plus, to_cons_list([Number(4), Number(5)]))
    assert evaluate(expr, stack) == Number(9)


def test_not_callable(stack):
    with pytest.raises(errors.SilenceNotCallable) as exc:
        evaluate(parse("(5 1 2)"), stack)
    assert exc.value.value == Number(5)


def test_improper_argument_list(stack):
    with pytest.raises(errors.SilenceInvalidForm):
        evaluate(parse("(+ 1 . 2)"), stack)


def test_arity_mismatch(stack):
    with pytest.raises(errors.SilenceArityError) as exc:
        evaluate(parse("(+ 1)"), stack)
    assert (exc.value.name, exc.value.expected, exc.value.got) == ("+", 2, 1)


def test_arguments_are_evaluated_left_to_right_and_short_circuit(stack, capsys):
    with pytest.raises(errors.SilenceUnboundName):
        evaluate(parse('(cons (print "a") (cons missing (print "b")))'), stack)
    assert capsys.readouterr().out == "a"


def test_evaluate_all_returns_last_value(stack):
    exprs = [parse("(let! 'a 10)"), parse("(let! 'b 20)"), parse("(+ a b)")]
    assert evaluate_all(exprs, stack) == Number(30)
    assert evaluate_all([], stack) is Null


def test_evaluation_does_not_change_stack_depth(stack):
    evaluate(parse("((lambda (x) ((lambda (y) (+ x y)) 2)) 1)"), stack)
    assert stack.depth == 1
    with pytest.raises(errors.SilenceTypeError):
        evaluate(parse("((lambda (x) ((lambda (y) (car y)) x)) 1)"), stack)
    assert stack.depth == 1


def test_custom_procedure_body_receives_stack(stack):
    seen = []

    def body(args, s):
        seen.append((args, s))
        return Null

    stack.bind_innermost("probe", Procedure(False, 1, body, "probe"))
    evaluate(parse("(probe (+ 1 2))"), stack)
    args, s = seen[0]
    assert args == [parse("(+ 1 2)")]
    assert s is stack


def test_interpreter_evaluates_parsed_expressions_in_global_stack(interp):
    assert interp.evaluate(parse("(let! 'base 40)")) == Number(40)
    assert interp.evaluate(parse("(+ base 2)")) == Number(42)
    assert interp.eval("base") == Number(40)
    assert interp.stack.depth == 1
