from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.types.environment import Environment


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int = 0,
) -> LispValue:
    """(quote datum) returns datum without evaluating it."""
    return tail[0]
