from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.types.environment import Environment
from eta.types.function import Function
from eta.types.value import into_list, into_symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int = 0,
) -> LispValue:
    # (fn (params...) body): the body is a single list, evaluated as one
    # expression at call time. Nothing is evaluated here and no environment
    # is captured.
    params = [into_symbol(p) for p in into_list(tail[0])]
    body = into_list(tail[1])
    return Function(params, body)
