"""Binary integer primitives.

Each primitive takes two already-evaluated operands, unwraps them to
integers and returns either an integer (arithmetic) or a boolean
(comparison). Integers are signed 64-bit: leaving that range or dividing by
zero is a fault, not an ordinary evaluation error.
"""
from __future__ import annotations

import operator
from typing import Callable

from eta import LispValue
from eta.errors import EtaDivisionByZero, EtaIntegerOverflow, EtaNotCallable
from eta.types.value import INT64_MAX, INT64_MIN, into_integer


def _checked(name: str, result: int) -> int:
    if not INT64_MIN <= result <= INT64_MAX:
        raise EtaIntegerOverflow(f"Integer overflow in {name}: {result} does not fit in 64 bits")
    return result


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise EtaDivisionByZero(f"Division by zero: {a} / 0")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


ARITHMETIC: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": truncating_div,
}

COMPARISON: dict[str, Callable[[int, int], bool]] = {
    "=": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    ">": operator.gt,
    "<=": operator.le,
    ">=": operator.ge,
}


def apply_primitive(name: str, a: LispValue, b: LispValue) -> LispValue:
    """Apply the primitive called `name` to two evaluated operands."""
    x = into_integer(a)
    y = into_integer(b)
    if name in ARITHMETIC:
        return _checked(name, ARITHMETIC[name](x, y))
    if name in COMPARISON:
        return COMPARISON[name](x, y)
    # A PrimitiveFunction tag built outside the base environment
    raise EtaNotCallable(f"{name}/2")
