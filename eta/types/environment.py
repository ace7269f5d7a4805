"""Runtime environment for Eta.

An Environment is one scope of name -> value bindings plus a link to the
scope it was extended from. Lookups walk outwards to the root; writes only
ever touch the scope they are made on. A scope's ``outer`` link is fixed at
construction and parents never point at their children.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator, Optional, Union

from eta import LispValue
from eta.types.symbol import Symbol

logger = logging.getLogger(__name__)

Name = Union[str, Symbol]


def _key(name: Name) -> str:
    return name.name if isinstance(name, Symbol) else name


class Environment:
    """One scope in a parent-linked chain of scopes."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    @classmethod
    def base(cls) -> Environment:
        """Build a root scope seeded with the builtin primitives, special forms and literals."""
        from eta.builtin.env_builtin import register

        env = cls()
        register(env)
        logger.debug("Built base environment with %d bindings", len(env.vars))
        return env

    def extend(self) -> Environment:
        """Return a new, empty child scope of this one."""
        return Environment(outer=self)

    def find(self, name: Name) -> Optional[Environment]:
        """Find the nearest scope in the chain that binds `name`."""
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Name) -> Optional[LispValue]:
        """Return the innermost binding of `name`, or None when it is unbound.

        A Symbol bound to `name` is returned as-is; following alias chains is
        left to the evaluator.
        """
        env = self.find(name)
        if env is None:
            return None
        return env.vars[_key(name)]

    def set(self, name: Name, value: LispValue) -> None:
        """Bind `name` in this scope, shadowing any outer binding."""
        self.vars[_key(name)] = value

    def update(self, mapping: dict[Name, LispValue]) -> None:
        """Bulk-define a mapping of names to values in this scope."""
        for k, v in mapping.items():
            self.vars[_key(k)] = v

    def __contains__(self, name: Name) -> bool:
        return self.find(name) is not None

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def depth(self) -> int:
        """Number of scopes between this one and the root (the root has depth 0)."""
        n = 0
        env = self
        while env.outer is not None:
            env = env.outer
            n += 1
        return n

    def chain(self) -> Iterator[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def names(self) -> set[str]:
        """All names visible from this scope."""
        visible: set[str] = set()
        for env in self.chain():
            visible.update(env.vars)
        return visible

    def _write_vars(self, buffer: StringIO) -> None:
        from eta.types.value import render

        buffer.write("{")
        buffer.write(", ".join(f"{k}: {render(v)}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Full chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            frames = []
            for env in self.chain():
                frame = StringIO()
                env._write_vars(frame)
                frames.append(frame.getvalue())
            buffer.write(" -> ".join(frames))
            buffer.write(">")
            return buffer.getvalue()
