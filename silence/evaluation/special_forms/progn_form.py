from silence import Expression
from silence.errors import SilenceInvalidForm
from silence.types.environment import EnvironmentStack


def begin_form(args: list[Expression], stack: EnvironmentStack) -> Expression:
    # Arguments were already evaluated in order by the application engine.
    if not args:
        raise SilenceInvalidForm("begin", "requires at least one expression")
    return args[-1]
