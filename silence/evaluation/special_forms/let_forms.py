from silence import Expression
from silence.errors import SilenceInvalidForm
from silence.types.environment import EnvironmentStack
from silence.types.expression import Atom


def let_form(args: list[Expression], stack: EnvironmentStack) -> Expression:
    """(let! 'name value): bind in the innermost frame and return value."""
    match args:
        case [Atom(name), value]:
            stack.bind_innermost(name, value)
            return value
    raise SilenceInvalidForm("let!", "first argument must be an atom")


def let_parent_form(args: list[Expression], stack: EnvironmentStack) -> Expression:
    """(let-parent! 'name value): bind in the frame just below the innermost."""
    match args:
        case [Atom(name), value]:
            stack.bind_parent(name, value)
            return value
    raise SilenceInvalidForm("let-parent!", "first argument must be an atom")
