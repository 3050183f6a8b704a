from silence import Expression
from silence.errors import SilenceInvalidForm, SilenceTypeError
from silence.reader.parser import parse
from silence.types.environment import EnvironmentStack
from silence.types.expression import from_lisp_str


def read_form(args: list[Expression], stack: EnvironmentStack) -> Expression:
    """(read "code"): parse a string into an expression without evaluating it."""
    match args:
        case [source]:
            text = from_lisp_str(source)
            if text is None:
                raise SilenceTypeError("read", "argument must be a string")
            return parse(text)
    raise SilenceInvalidForm("read")
