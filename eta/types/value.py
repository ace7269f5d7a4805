"""Conversion, comparison and rendering helpers for Eta values.

The ``into_*`` helpers are the single place where runtime type errors are
raised: the evaluator unwraps operands through them instead of inspecting
shapes itself.
"""

from __future__ import annotations

from eta import LispValue
from eta.errors import EtaTypeMismatch
from eta.types.function import Function, PrimitiveFunction, SpecialForm
from eta.types.symbol import Symbol

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

CALLABLE_TYPES = (Function, PrimitiveFunction, SpecialForm)


def is_integer(value: LispValue) -> bool:
    # bool is a subclass of int in Python; it is never an Eta integer
    return isinstance(value, int) and not isinstance(value, bool)


def is_callable(value: LispValue) -> bool:
    return isinstance(value, CALLABLE_TYPES)


def into_integer(value: LispValue) -> int:
    if not is_integer(value):
        raise EtaTypeMismatch("integer", value)
    return value


def into_boolean(value: LispValue) -> bool:
    if not isinstance(value, bool):
        raise EtaTypeMismatch("boolean", value)
    return value


def into_symbol(value: LispValue) -> str:
    if not isinstance(value, Symbol):
        raise EtaTypeMismatch("symbol", value)
    return value.name


def into_list(value: LispValue) -> list[LispValue]:
    if not isinstance(value, list):
        raise EtaTypeMismatch("list", value)
    return value


def values_equal(a: LispValue, b: LispValue) -> bool:
    """Deep structural equality that keeps integers and booleans apart."""
    if a is b:
        return True
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(values_equal(x, y) for x, y in zip(a, b))
    if type(a) != type(b):
        return False
    return a == b


def render(value: LispValue) -> str:
    """Canonical textual form of a value."""
    if isinstance(value, bool):
        return "#true" if value else "#false"
    if isinstance(value, list):
        return "(" + " ".join(render(item) for item in value) + ")"
    if isinstance(value, (int, Symbol) + CALLABLE_TYPES):
        return str(value)
    raise TypeError(f"Not an Eta value: {value!r}")
