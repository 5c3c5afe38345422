"""quadcalc report — runs the sample calculations and renders them with Rich.

The sample driver executes a fixed list of calculations in the order add,
subtract, multiply, divide and prints one labeled line per result.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from quadcalc.calculator import Calculator
from quadcalc.models import ALL_OPERATIONS, Calculation, Operation

# (operation, a, b) in display order.
SAMPLES: list[tuple[Operation, int, int]] = [
    (Operation.ADD, 3, 2),
    (Operation.SUBTRACT, 5, 3),
    (Operation.MULTIPLY, 4, 2),
    (Operation.DIVIDE, 10, 2),
]


def run_samples(calculator: Calculator | None = None) -> list[Calculation]:
    """Execute every sample on one calculator and return the records."""
    calc = calculator or Calculator()
    return [calc.calculate(op, a, b) for op, a, b in SAMPLES]


def render_samples(calculations: list[Calculation], console: Console) -> None:
    """Print one '<Label>: <a> <symbol> <b> = <result>' line per calculation."""
    for c in calculations:
        console.print(c.line, markup=False, highlight=False)


def render_operations(console: Console) -> None:
    """Render a Rich table of the supported operations."""
    table = Table(title="Supported Operations", show_header=True, header_style="bold")
    table.add_column("Name", style="green", min_width=10)
    table.add_column("Label")
    table.add_column("Symbol", justify="center")

    for op in ALL_OPERATIONS:
        table.add_row(op.value, op.label, op.symbol)

    console.print()
    console.print(table)
    console.print()
