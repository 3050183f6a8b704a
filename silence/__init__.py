# Core type aliases for the Silence interpreter.
# Code and data share one representation: the closed Expression union defined
# in silence.types.expression (Atom, Number, Bool, Null, Cell, Procedure).
#
# Naming guidance:
# - Expression: both parsed source (code-as-data) and evaluated values.
# - PrimitiveBody: the callable stored inside a Procedure; receives the
#   resolved argument list and the active EnvironmentStack.
# - EvaluatorFn: the evaluator entry point, passed to the application engine
#   so the two modules do not import each other.

from typing import Any, Callable

# Runtime value alias
Expression = Any

# Procedure body: (args, stack) -> Expression
PrimitiveBody = Callable[..., Expression]

# Evaluator function type: (expr, stack) -> Expression
EvaluatorFn = Callable[..., Expression]
