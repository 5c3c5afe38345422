"""Operation dispatcher.

Calculator.execute() resolves an operation name to one of the arithmetic
primitives, stores the value it returns as the current result, and returns
it. Unknown names raise InvalidOperation and leave the stored result alone.
"""

from __future__ import annotations

import logging
import math

from quadcalc.arithmetic import PRIMITIVES
from quadcalc.models import Calculation, Number, Operation, ZeroDivisionPolicy

logger = logging.getLogger(__name__)


class InvalidOperation(ValueError):
    """Raised when execute() is given a name outside the supported set."""

    def __init__(self, operation: object) -> None:
        self.operation = operation
        super().__init__(f"Invalid operation: {operation}")


def _ieee_quotient(a: Number, b: Number) -> float:
    """Result of a / 0 under IEEE 754: infinity signed by both operands, or nan for 0 / 0."""
    if a == 0 or (isinstance(a, float) and math.isnan(a)):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


class Calculator:
    """Stateful dispatcher holding the last computed result."""

    def __init__(self, zero_division: ZeroDivisionPolicy = ZeroDivisionPolicy.RAISE) -> None:
        self.result: Number = 0
        self.zero_division = ZeroDivisionPolicy(zero_division)

    def execute(self, operation: str, a: Number, b: Number) -> Number:
        """Run the named operation on (a, b) and store the result.

        Args:
            operation: One of 'add', 'subtract', 'multiply', 'divide'
                (exact, case-sensitive match).
            a: Left operand.
            b: Right operand.

        Returns:
            The computed value, which is also the new ``result``.

        Raises:
            InvalidOperation: operation is not a supported name.
            ZeroDivisionError: dividing by zero under ZeroDivisionPolicy.RAISE.
        """
        try:
            op = Operation(operation)
        except ValueError:
            logger.warning("Rejected operation %r", operation)
            raise InvalidOperation(operation) from None

        try:
            value = PRIMITIVES[op](a, b)
        except ZeroDivisionError:
            if self.zero_division != ZeroDivisionPolicy.IEEE:
                raise
            value = _ieee_quotient(a, b)

        logger.debug("%s(%r, %r) -> %r", op.value, a, b, value)
        self.result = value
        return value

    def calculate(self, operation: str, a: Number, b: Number) -> Calculation:
        """Like execute(), but return the full Calculation record."""
        value = self.execute(operation, a, b)
        return Calculation(operation=Operation(operation), a=a, b=b, result=value)
