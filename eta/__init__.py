# Core type aliases for Eta's data model.
# Values are plain Python objects where Python has a natural counterpart
# (int, bool, list) and small slotted classes otherwise (Symbol, Function,
# PrimitiveFunction, SpecialForm). The same representation is used for code
# (parsed forms) and for runtime values.
#
# Naming guidance:
# - SExpression: use in reader/special-form code for unevaluated forms.
# - LispValue:  use in evaluator/runtime code for evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type passed into special forms and primitives
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
