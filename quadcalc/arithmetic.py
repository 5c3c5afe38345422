"""The four arithmetic primitives.

Each is a pure function of two operands. No validation or coercion happens
here; division by zero raises Python's own ZeroDivisionError.
"""

from __future__ import annotations

from typing import Callable

from quadcalc.models import Number, Operation


def add(a: Number, b: Number) -> Number:
    return a + b


def subtract(a: Number, b: Number) -> Number:
    return a - b


def multiply(a: Number, b: Number) -> Number:
    return a * b


def divide(a: Number, b: Number) -> Number:
    return a / b


PRIMITIVES: dict[Operation, Callable[[Number, Number], Number]] = {
    Operation.ADD: add,
    Operation.SUBTRACT: subtract,
    Operation.MULTIPLY: multiply,
    Operation.DIVIDE: divide,
}
