"""Data models for the quadcalc calculator.

Operation enum, ZeroDivisionPolicy, Calculation — the typed structures that
flow through calculator → report → CLI.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

Number = Union[int, float]


class Operation(str, Enum):
    """Supported arithmetic operations."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    Operation.ADD: "+",
    Operation.SUBTRACT: "-",
    Operation.MULTIPLY: "*",
    Operation.DIVIDE: "/",
}

ALL_OPERATIONS = [Operation.ADD, Operation.SUBTRACT, Operation.MULTIPLY, Operation.DIVIDE]


class ZeroDivisionPolicy(str, Enum):
    """What the calculator does when asked to divide by zero."""

    RAISE = "raise"
    IEEE = "ieee"


# Integral floats at or above this print in exponent form instead of a digit string.
_PLAIN_INT_LIMIT = 1e16


def format_number(n: Number) -> str:
    """Format a result for display, dropping the '.0' of integral floats.

    10 / 2 → '5', 7 / 2 → '3.5', inf → 'inf', 1e300 → '1e+300'
    """
    if isinstance(n, float) and n.is_integer() and abs(n) < _PLAIN_INT_LIMIT:
        return str(int(n))
    return str(n)


def _json_number(n: Number) -> Number | str:
    """Non-finite floats become 'inf', '-inf' or 'nan' so the dict stays valid JSON."""
    if isinstance(n, float) and not math.isfinite(n):
        return str(n)
    return n


@dataclass
class Calculation:
    """One executed operation and its result."""

    operation: Operation
    a: Number
    b: Number
    result: Number

    @property
    def line(self) -> str:
        """Render as '<Label>: <a> <symbol> <b> = <result>'."""
        return (
            f"{self.operation.label}: {format_number(self.a)} "
            f"{self.operation.symbol} {format_number(self.b)} = {format_number(self.result)}"
        )

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "operation": self.operation.value,
            "a": _json_number(self.a),
            "b": _json_number(self.b),
            "result": _json_number(self.result),
        }
