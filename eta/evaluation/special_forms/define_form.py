from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.types.environment import Environment
from eta.types.value import into_symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int = 0,
) -> LispValue:
    """
    (def name value)
    Binds in the innermost scope of `env` only, and always returns #true.
    """
    name = into_symbol(tail[0])
    value = evaluate_fn(tail[1], env, depth)
    env.set(name, value)
    return True
