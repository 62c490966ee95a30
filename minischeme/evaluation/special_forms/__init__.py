"""Registry of special forms for the minischeme evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
procedure application. Every handler takes (tail, env, evaluate_fn).
"""

from minischeme.types.symbol import Symbol
from minischeme.evaluation.special_forms.quote_form import quote_form
from minischeme.evaluation.special_forms.if_form import if_form
from minischeme.evaluation.special_forms.define_form import define_form
from minischeme.evaluation.special_forms.set_form import set_form
from minischeme.evaluation.special_forms.lambda_form import lambda_form
from minischeme.evaluation.special_forms.begin_form import begin_form
from minischeme.evaluation.special_forms.let_form import let_form
from minischeme.evaluation.special_forms.cond_form import cond_form
from minischeme.evaluation.special_forms.logic_forms import and_form, or_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("set!"): set_form,
    Symbol("lambda"): lambda_form,
    Symbol("begin"): begin_form,
    Symbol("let"): let_form,
    Symbol("cond"): cond_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
}
