"""Four-function calculator — pure arithmetic, no I/O.

Division by zero does not raise: it yields the sentinel text
:data:`DIVISION_BY_ZERO` in place of a number.
"""

from __future__ import annotations

import operator
from collections.abc import Callable

from console_app.core.models import Calculation, Operation

DIVISION_BY_ZERO: str = "Error: Division by zero"

_OPERATORS: dict[Operation, Callable[[float, float], float]] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: operator.truediv,
}


def calculate(operation: Operation, num1: float, num2: float) -> Calculation:
    """Apply *operation* to ``num1`` and ``num2``."""
    result: float | str
    if operation is Operation.DIVIDE and num2 == 0:
        result = DIVISION_BY_ZERO
    else:
        result = _OPERATORS[operation](num1, num2)
    return Calculation(num1=num1, operation=operation, num2=num2, result=result)


def format_number(value: float | str) -> str:
    """Render a number the way a user typed it: ``3`` rather than ``3.0``."""
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_calculation(calc: Calculation) -> str:
    """Build the ``Result: a Op b = r`` line shown after a calculation."""
    return (
        f"Result: {format_number(calc.num1)} {calc.operation.value} "
        f"{format_number(calc.num2)} = {format_number(calc.result)}"
    )
