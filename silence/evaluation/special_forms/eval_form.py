from silence import Expression
from silence.errors import SilenceInvalidForm
from silence.evaluation.evaluator import evaluate
from silence.types.environment import EnvironmentStack


def eval_form(args: list[Expression], stack: EnvironmentStack) -> Expression:
    """(evaluate x): x arrives evaluated once; evaluate the result again."""
    match args:
        case [expr]:
            return evaluate(expr, stack)
    raise SilenceInvalidForm("evaluate")
