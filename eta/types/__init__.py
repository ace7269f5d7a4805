from eta.types.symbol import Symbol
from eta.types.function import Function, PrimitiveFunction, SpecialForm
from eta.types.environment import Environment
from eta.types.value import (
    into_integer,
    into_boolean,
    into_symbol,
    into_list,
    is_callable,
    is_integer,
    render,
    values_equal,
)
