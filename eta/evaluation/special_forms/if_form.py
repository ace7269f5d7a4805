from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.types.environment import Environment
from eta.types.value import into_boolean


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int = 0,
) -> LispValue:
    cond, then_expr, else_expr = tail
    # Strict: the condition must be a boolean, there is no truthiness
    if into_boolean(evaluate_fn(cond, env, depth)):
        return evaluate_fn(then_expr, env, depth)
    return evaluate_fn(else_expr, env, depth)
