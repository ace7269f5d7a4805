from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.types.environment import Environment


def progn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int = 0,
) -> LispValue:
    result: LispValue = []
    for e in tail:
        result = evaluate_fn(e, env, depth)
    return result
