"""Error hierarchy for Eta.

Two families are kept apart on purpose:

- ``EtaError`` and its subclasses are ordinary, typed evaluation errors. They
  short-circuit the current evaluation and their message is what the host
  shows to the user.
- ``EtaFault`` and its subclasses abort the whole request. The host reports
  them as an internal fault, never as a normal result string.
"""

from __future__ import annotations


class EtaError(Exception):
    """ Base class for all Eta errors"""
    pass


class EtaSyntaxError(EtaError):
    """ Raised when source text cannot be read into a value"""


class EtaUnboundSymbol(EtaError):
    """ Raised when a symbol has no binding in the active scope chain"""

    def __init__(self, name: str):
        super().__init__(f"Unknown symbol: {name}")
        self.name = name


class EtaTypeMismatch(EtaError):
    """ Raised when a value does not have the shape an operation expects"""

    def __init__(self, expected: str, value=None):
        if value is None:
            message = f"Expected {expected}"
        else:
            from eta.types.value import render
            message = f"Expected {expected}, got {render(value)}"
        super().__init__(message)
        self.expected = expected
        self.value = value


class EtaArityMismatch(EtaError):
    """ Raised when a primitive or fixed-arity special form gets the wrong number of operands"""

    def __init__(self, form: str, expected: int, actual: int):
        super().__init__(f"Expected {expected} arguments to {form}, got {actual}")
        self.form = form
        self.expected = expected
        self.actual = actual


class EtaNotCallable(EtaError):
    """ Raised when the head of a list does not evaluate to something callable"""

    def __init__(self, rendered: str):
        super().__init__(f"Expected callable, got {rendered}")
        self.rendered = rendered


class EtaCannotEvalCallable(EtaError):
    """ Raised when a callable tag is evaluated outside of call position"""

    def __init__(self, kind: str, rendered: str):
        super().__init__(f"Cannot eval {kind} {rendered}")
        self.kind = kind
        self.rendered = rendered


class EtaUnknownSpecialForm(EtaError):
    """ Raised when a special form tag has no handler"""

    def __init__(self, name: str):
        super().__init__(f"Unknown special form: {name}")
        self.name = name


class EtaRecursionLimitExceeded(EtaError):
    """ Raised when evaluation nests deeper than the configured limit"""

    def __init__(self, limit: int, detail: str = "evaluation"):
        super().__init__(f"Recursion limit of {limit} exceeded during {detail}")
        self.limit = limit


class EtaFault(Exception):
    """ Base class for fatal faults that abort the current request"""
    pass


class EtaDivisionByZero(EtaFault):
    """ Raised when an integer is divided by zero"""


class EtaIntegerOverflow(EtaFault):
    """ Raised when integer arithmetic leaves the signed 64-bit range"""


class EtaStackExhausted(EtaFault):
    """ Raised when the host call stack runs out during evaluation"""
