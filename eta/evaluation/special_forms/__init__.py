"""Registry of special forms for the Eta evaluator.

Maps special-form names to handler functions that implement non-standard
evaluation rules. Handlers receive the unevaluated operands (already
checked against the form's fixed arity), the current environment, the
evaluator to recurse with and the current nesting depth.
"""

from eta.evaluation.special_forms.quote_form import quote_form
from eta.evaluation.special_forms.progn_form import progn_form
from eta.evaluation.special_forms.let_form import let_form
from eta.evaluation.special_forms.if_form import if_form
from eta.evaluation.special_forms.define_form import define_form
from eta.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "progn": progn_form,
    "let": let_form,
    "if": if_form,
    "def": define_form,
    "fn": lambda_form,
}
