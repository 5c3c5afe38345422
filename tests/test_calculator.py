"""Tests for Calculator dispatch, stored result, and error handling."""

import logging
import math

import pytest

from quadcalc.calculator import Calculator, InvalidOperation
from quadcalc.models import Calculation, Operation, ZeroDivisionPolicy


@pytest.fixture
def calc():
    return Calculator()


# --- Construction ---

def test_initial_result_is_zero(calc):
    assert calc.result == 0


def test_default_policy_is_raise(calc):
    assert calc.zero_division == ZeroDivisionPolicy.RAISE


# --- Sample scenarios ---

@pytest.mark.parametrize(
    "operation, a, b, expected",
    [
        ("add", 3, 2, 5),
        ("subtract", 5, 3, 2),
        ("multiply", 4, 2, 8),
        ("divide", 10, 2, 5),
    ],
)
def test_execute_samples(calc, operation, a, b, expected):
    assert calc.execute(operation, a, b) == expected


def test_execute_matches_native_arithmetic(calc):
    pairs = [(1, 2), (-3, 7), (2.5, -0.5), (1e10, 3)]
    for a, b in pairs:
        assert calc.execute("add", a, b) == a + b
        assert calc.execute("subtract", a, b) == a - b
        assert calc.execute("multiply", a, b) == a * b
        assert calc.execute("divide", a, b) == a / b


def test_execute_accepts_operation_member(calc):
    assert calc.execute(Operation.MULTIPLY, 6, 7) == 42


# --- Stored result ---

def test_result_tracks_last_return(calc):
    value = calc.execute("add", 3, 2)
    assert calc.result == value
    value = calc.execute("divide", 9, 4)
    assert calc.result == value == pytest.approx(2.25)


# --- Invalid operations ---

def test_unknown_operation_raises(calc):
    with pytest.raises(InvalidOperation) as exc_info:
        calc.execute("unknown", 1, 2)
    assert exc_info.value.operation == "unknown"
    assert str(exc_info.value) == "Invalid operation: unknown"


def test_unknown_operation_leaves_result_unchanged(calc):
    calc.execute("multiply", 4, 2)
    with pytest.raises(InvalidOperation):
        calc.execute("unknown", 1, 2)
    assert calc.result == 8


def test_operation_match_is_case_sensitive(calc):
    with pytest.raises(InvalidOperation):
        calc.execute("Add", 1, 2)


def test_invalid_operation_is_value_error(calc):
    with pytest.raises(ValueError):
        calc.execute("power", 2, 3)


def test_invalid_operation_logs_warning(calc, caplog):
    with caplog.at_level(logging.WARNING, logger="quadcalc.calculator"):
        with pytest.raises(InvalidOperation):
            calc.execute("modulo", 5, 2)
    assert "modulo" in caplog.text


# --- Division by zero ---

def test_divide_by_zero_raises_by_default(calc):
    calc.execute("add", 1, 1)
    with pytest.raises(ZeroDivisionError):
        calc.execute("divide", 1, 0)
    assert calc.result == 2


def test_divide_by_zero_ieee():
    calc = Calculator(zero_division=ZeroDivisionPolicy.IEEE)
    assert calc.execute("divide", 1, 0) == math.inf
    assert calc.result == math.inf
    assert calc.execute("divide", -3, 0.0) == -math.inf
    assert math.isnan(calc.execute("divide", 0, 0))


def test_divide_by_negative_zero_ieee():
    calc = Calculator(zero_division=ZeroDivisionPolicy.IEEE)
    assert calc.execute("divide", 1, -0.0) == -math.inf
    assert calc.execute("divide", -1, -0.0) == math.inf
    assert math.isnan(calc.execute("divide", 0.0, -0.0))


def test_policy_accepts_plain_string():
    assert Calculator(zero_division="ieee").zero_division == ZeroDivisionPolicy.IEEE


# --- Calculation records ---

def test_calculate_returns_record(calc):
    record = calc.calculate("subtract", 5, 3)
    assert record == Calculation(operation=Operation.SUBTRACT, a=5, b=3, result=2)
    assert calc.result == 2


def test_calculate_invalid_operation(calc):
    with pytest.raises(InvalidOperation):
        calc.calculate("nope", 1, 1)
    assert calc.result == 0
