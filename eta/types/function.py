"""Callable value tags: user functions, primitive functions and special forms.

None of these capture an environment. A user Function is only a parameter
list and a body; free names in the body are looked up in whatever scope is
active when it is called.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from eta import SExpression


class Function:
    """A user-defined function built by ``fn``."""

    __slots__ = ("params", "body")

    def __init__(self, params: list[str], body: list[SExpression]):
        self.params: list[str] = list(params)
        self.body: list[SExpression] = list(body)

    def __eq__(self, other: object) -> bool:
        from eta.types.value import values_equal
        return (
            isinstance(other, Function)
            and self.params == other.params
            and values_equal(self.body, other.body)
        )

    def __hash__(self) -> int:
        return hash(("fn", tuple(self.params), len(self.body)))

    def __str__(self) -> str:
        from eta.types.value import render
        with StringIO() as buffer:
            buffer.write("(fn (")
            buffer.write(" ".join(self.params))
            buffer.write(") (")
            buffer.write(" ".join(render(form) for form in self.body))
            buffer.write("))")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


class PrimitiveFunction:
    """A builtin operator; operands are evaluated before it is applied."""

    __slots__ = ("name", "arity")

    def __init__(self, name: str, arity: int):
        self.name = name
        self.arity = arity

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, PrimitiveFunction)
            and self.name == other.name
            and self.arity == other.arity
        )

    def __hash__(self) -> int:
        return hash(("primitive", self.name, self.arity))

    def __str__(self) -> str:
        return f"{self.name}/{self.arity}"

    def __repr__(self) -> str:
        return str(self)


class SpecialForm:
    """A builtin control structure; ``arity`` of None means any number of operands."""

    __slots__ = ("name", "arity")

    def __init__(self, name: str, arity: Optional[int]):
        self.name = name
        self.arity = arity

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, SpecialForm)
            and self.name == other.name
            and self.arity == other.arity
        )

    def __hash__(self) -> int:
        return hash(("special", self.name, self.arity))

    def __str__(self) -> str:
        arity = "*" if self.arity is None else str(self.arity)
        return f"{self.name}/{arity}"

    def __repr__(self) -> str:
        return str(self)
