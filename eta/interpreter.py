from __future__ import annotations

import logging
import threading
from typing import Literal

from eta import LispValue
from eta.config import get_prelude_path
from eta.errors import EtaFault, EtaStackExhausted
from eta.evaluation.evaluator import evaluate
from eta.reader.parser import parse, parse_all
from eta.types.environment import Environment
from eta.types.value import render

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Owns one root Environment and evaluates programs against it.

    Definitions persist across calls. Calls are serialised with a lock, so
    one Interpreter can be shared between threads; each call either finishes
    or raises, and nothing is rolled back when it raises.
    """

    def __init__(
        self,
        env: Environment | None = None,
        prelude: str | None | Literal['auto'] = 'auto',
    ):
        self.env: Environment = env if env is not None else Environment.base()
        self.lock = threading.Lock()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = get_prelude_path()
            if path is not None:
                try:
                    self.eval_prelude(path.read_text(encoding="utf-8"))
                except FileNotFoundError:
                    # Be permissive: no prelude found -> proceed
                    logger.warning("Prelude %s not found, continuing without it", path)
        elif prelude:
            self.eval_prelude(prelude)

    def _run(self, expr) -> LispValue:
        try:
            return evaluate(expr, self.env)
        except RecursionError:
            raise EtaStackExhausted("Call stack exhausted during evaluation") from None

    @staticmethod
    def _read(code: str) -> list:
        # the reader and the renderer recurse once per nesting level too
        try:
            return list(parse_all(code))
        except RecursionError:
            raise EtaStackExhausted("Call stack exhausted while reading") from None

    @staticmethod
    def _render(value: LispValue) -> str:
        try:
            return render(value)
        except RecursionError:
            raise EtaStackExhausted("Call stack exhausted while rendering") from None

    def eval_prelude(self, code: str) -> None:
        """Evaluate every top-level form in `code`."""
        exprs = self._read(code)
        with self.lock:
            for expr in exprs:
                self._run(expr)
        logger.debug("Prelude evaluated")

    def eval(self, code: str) -> LispValue:
        """Parse one program and return its value."""
        try:
            expr = parse(code)
        except RecursionError:
            raise EtaStackExhausted("Call stack exhausted while reading") from None
        with self.lock:
            return self._run(expr)

    def evaluate(self, code: str) -> str:
        """Parse, evaluate and render one program.

        Raises EtaError for ordinary errors (the message is meant for the
        user) and EtaFault when the request had to be aborted.
        """
        logger.debug("Evaluating %r", code)
        try:
            return self._render(self.eval(code))
        except EtaFault as fault:
            logger.warning("Evaluation aborted by fault: %s", fault)
            raise
