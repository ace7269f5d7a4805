"""Builtin bindings for the Eta root environment.

Registers the binary primitives, the special forms and the two boolean
literals. Everything here is a tag; the behaviour lives in
eta.evaluation.primitives and eta.evaluation.special_forms.
"""
from __future__ import annotations

from eta.types.environment import Environment
from eta.types.function import PrimitiveFunction, SpecialForm

PRIMITIVE_NAMES = ("+", "-", "*", "/", "=", "!=", "<", ">", "<=", ">=")

# name -> arity (None for variadic)
SPECIAL_FORM_ARITIES: dict[str, int | None] = {
    "quote": 1,
    "progn": None,
    "let": 2,
    "if": 3,
    "def": 2,
    "fn": 2,
}

LITERALS = {
    "#true": True,
    "#false": False,
}


def register(env: Environment) -> None:
    """Bind every builtin into `env`."""
    for name in PRIMITIVE_NAMES:
        env.set(name, PrimitiveFunction(name, 2))
    for name, arity in SPECIAL_FORM_ARITIES.items():
        env.set(name, SpecialForm(name, arity))
    env.update(LITERALS)
