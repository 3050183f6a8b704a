"""Registry of special forms for the Silence evaluator.

Special forms are ordinary Procedures; most of them suppress argument
evaluation and evaluate their operands themselves to implement custom
control flow. The primitive table merges this registry into the global
frame alongside the plain builtins.
"""

from silence.types.expression import Procedure, VARIADIC
from silence.evaluation.special_forms.if_form import if_form
from silence.evaluation.special_forms.quote_forms import quote_form
from silence.evaluation.special_forms.lambda_form import make_lambda_form
from silence.evaluation.special_forms.eval_form import eval_form
from silence.evaluation.special_forms.import_form import import_form
from silence.evaluation.special_forms.progn_form import begin_form
from silence.evaluation.special_forms.let_forms import let_form, let_parent_form
from silence.evaluation.special_forms.read_form import read_form

SPECIAL_FORMS = {
    "if": Procedure(False, 3, if_form, "if"),
    "quote": Procedure(False, 1, quote_form, "quote"),
    "lambda": Procedure(False, 2, make_lambda_form("lambda", True), "lambda"),
    "lambda!": Procedure(False, 2, make_lambda_form("lambda!", False), "lambda!"),
    "mk-lambda": Procedure(True, 2, make_lambda_form("mk-lambda", True), "mk-lambda"),
    "mk-lambda!": Procedure(True, 2, make_lambda_form("mk-lambda!", False), "mk-lambda!"),
    "evaluate": Procedure(True, 1, eval_form, "evaluate"),
    "import": Procedure(True, 1, import_form, "import"),
    "begin": Procedure(True, VARIADIC, begin_form, "begin"),
    "read": Procedure(True, 1, read_form, "read"),
    "let!": Procedure(True, 2, let_form, "let!"),
    "let-parent!": Procedure(True, 2, let_parent_form, "let-parent!"),
}
