from silence import Expression
from silence.errors import SilenceInvalidForm
from silence.types.environment import EnvironmentStack


def quote_form(args: list[Expression], stack: EnvironmentStack) -> Expression:
    match args:
        case [expr]:
            return expr
    raise SilenceInvalidForm("quote")
