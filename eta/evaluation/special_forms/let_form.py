from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.errors import EtaArityMismatch
from eta.types.environment import Environment
from eta.types.value import into_list, into_symbol


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int = 0,
) -> LispValue:
    """
    (let ((name expr) ...) body)
    Every expr is evaluated in the enclosing environment, so bindings in the
    same let cannot refer to each other. All names go into one new scope and
    body is evaluated there.
    """
    bindings, body = tail
    scope = env.extend()
    for binding in into_list(bindings):
        pair = into_list(binding)
        if len(pair) != 2:
            raise EtaArityMismatch("let binding", 2, len(pair))
        name = into_symbol(pair[0])
        scope.set(name, evaluate_fn(pair[1], env, depth))
    return evaluate_fn(body, scope, depth)
