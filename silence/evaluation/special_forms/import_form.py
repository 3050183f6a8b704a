from __future__ import annotations

from silence import Expression
from silence.errors import SilenceInvalidForm, SilenceTypeError
from silence.modules.source_loader import load_source
from silence.types.environment import EnvironmentStack
from silence.types.expression import from_lisp_str


def import_form(args: list[Expression], stack: EnvironmentStack) -> Expression:
    """
    Usage:
        (import "path/to/file.sil")

    Evaluates every expression of the file in the current stack and returns
    the value of the last one.
    """
    match args:
        case [path_expr]:
            path = from_lisp_str(path_expr)
            if path is None:
                raise SilenceTypeError("import", "argument must be a string")
            return load_source(path, stack)
    raise SilenceInvalidForm("import")
