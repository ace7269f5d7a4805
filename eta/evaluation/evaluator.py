"""Core evaluator for the Eta interpreter.

A direct recursive tree walker: no trampoline, no continuation objects.
Dispatch is on the shape of the value being evaluated, and for a non-empty
list on the shape of its evaluated head (user function, primitive or
special form).

Nesting depth is counted per list evaluation and capped at MAX_DEPTH so
runaway recursion surfaces as EtaRecursionLimitExceeded instead of
exhausting the Python stack.
"""

from __future__ import annotations

from eta import SExpression, LispValue
from eta.config import get_max_depth
from eta.errors import (
    EtaArityMismatch,
    EtaCannotEvalCallable,
    EtaNotCallable,
    EtaRecursionLimitExceeded,
    EtaUnboundSymbol,
    EtaUnknownSpecialForm,
)
from eta.evaluation.primitives import apply_primitive
from eta.evaluation.special_forms import SPECIAL_FORMS
from eta.types.environment import Environment
from eta.types.function import Function, PrimitiveFunction, SpecialForm
from eta.types.symbol import Symbol
from eta.types.value import render

MAX_DEPTH: int = get_max_depth()


def evaluate(expr: SExpression, env: Environment, depth: int = 0) -> LispValue:
    """Evaluate `expr` in `env` and return the resulting value."""
    match expr:
        case bool() | int():
            return expr
        case Symbol():
            return eval_symbol(expr, env)
        case []:
            return []
        case [head, *arguments]:
            if depth >= MAX_DEPTH:
                raise EtaRecursionLimitExceeded(MAX_DEPTH)
            return eval_call(head, arguments, env, depth + 1)
        case Function():
            raise EtaCannotEvalCallable("function", render(expr))
        case PrimitiveFunction():
            raise EtaCannotEvalCallable("primitive function", render(expr))
        case SpecialForm():
            raise EtaCannotEvalCallable("special form", render(expr))
    raise TypeError(f"Not an Eta value: {expr!r}")


def eval_symbol(symbol: Symbol, env: Environment) -> LispValue:
    """Resolve `symbol`, following symbol-to-symbol aliases until a non-symbol is found."""
    name = symbol.name
    for _ in range(MAX_DEPTH):
        value = env.get(name)
        if value is None:
            raise EtaUnboundSymbol(name)
        if not isinstance(value, Symbol):
            return value
        name = value.name
    raise EtaRecursionLimitExceeded(MAX_DEPTH, f"resolution of {symbol.name}")


def eval_call(
    head: SExpression, arguments: list[SExpression], env: Environment, depth: int
) -> LispValue:
    """Evaluate the head of a call and apply it with its protocol."""
    fn = evaluate(head, env, depth)
    match fn:
        case Function():
            return apply_function(fn, arguments, env, depth)
        case PrimitiveFunction(arity=2):
            if len(arguments) != fn.arity:
                raise EtaArityMismatch(fn.name, fn.arity, len(arguments))
            operands = [evaluate(arg, env, depth) for arg in arguments]
            return apply_primitive(fn.name, *operands)
        case SpecialForm():
            return apply_special_form(fn, arguments, env, depth)
    raise EtaNotCallable(render(fn))


def apply_function(
    fn: Function, arguments: list[SExpression], env: Environment, depth: int
) -> LispValue:
    """Call a user function.

    The call scope extends the caller's environment, not one captured when
    the function was built. Arguments are bound as written, without being
    evaluated; extra arguments are ignored and missing ones stay unbound.
    """
    scope = env.extend()
    for param, argument in zip(fn.params, arguments):
        scope.set(param, argument)
    return evaluate(fn.body, scope, depth)


def apply_special_form(
    form: SpecialForm, operands: list[SExpression], env: Environment, depth: int
) -> LispValue:
    if form.arity is not None and len(operands) != form.arity:
        raise EtaArityMismatch(form.name, form.arity, len(operands))
    handler = SPECIAL_FORMS.get(form.name)
    if handler is None:
        raise EtaUnknownSpecialForm(form.name)
    return handler(operands, env, evaluate, depth)
