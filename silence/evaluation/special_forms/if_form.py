from silence import Expression
from silence.errors import SilenceInvalidForm
from silence.evaluation.evaluator import evaluate
from silence.types.environment import EnvironmentStack
from silence.types.expression import FALSE


def if_form(args: list[Expression], stack: EnvironmentStack) -> Expression:
    match args:
        case [condition, then_branch, else_branch]:
            # Only #f selects the else-branch; every other value is true
            if evaluate(condition, stack) == FALSE:
                return evaluate(else_branch, stack)
            return evaluate(then_branch, stack)
    raise SilenceInvalidForm("if")
