"""CLI for the quadcalc calculator.

Usage:
    python -m quadcalc demo                    # Print the four sample results
    python -m quadcalc exec add 3 2            # Execute a single operation
    python -m quadcalc exec divide 1 0 --zero-division ieee
    python -m quadcalc exec multiply 4 2 --json
    python -m quadcalc ops                     # Show supported operations
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from quadcalc.calculator import Calculator, InvalidOperation
from quadcalc.models import ZeroDivisionPolicy
from quadcalc.report import render_operations, render_samples, run_samples

app = typer.Typer(
    name="quadcalc",
    help="Four-function arithmetic calculator",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every dispatch at DEBUG level"),
) -> None:
    """Four-function arithmetic calculator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command("demo")
def cmd_demo() -> None:
    """Print the sample results for add, subtract, multiply and divide."""
    render_samples(run_samples(), out)


# Negative operands like -3 are positional values, not options.
@app.command("exec", context_settings={"ignore_unknown_options": True})
def cmd_exec(
    operation: str = typer.Argument(help="Operation name: add, subtract, multiply, divide"),
    a: float = typer.Argument(help="Left operand"),
    b: float = typer.Argument(help="Right operand"),
    zero_division: str = typer.Option("raise", "--zero-division", "-z", help="Division by zero: raise or ieee"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Execute a single operation on two operands."""
    try:
        policy = ZeroDivisionPolicy(zero_division)
    except ValueError:
        console.print(f"[red]Invalid zero-division policy: {escape(zero_division)}[/red]. Choose: raise, ieee")
        raise typer.Exit(1)

    calc = Calculator(zero_division=policy)
    try:
        calculation = calc.calculate(operation, a, b)
    except InvalidOperation as e:
        console.print(f"[red]{escape(str(e))}[/red]. Choose: add, subtract, multiply, divide")
        raise typer.Exit(1)
    except ZeroDivisionError:
        console.print("[red]Division by zero[/red] (use --zero-division ieee for inf/nan)")
        raise typer.Exit(1)

    if as_json:
        out.print_json(data=calculation.to_dict())
    else:
        out.print(calculation.line, markup=False, highlight=False)


@app.command("ops")
def cmd_ops() -> None:
    """Show supported operations."""
    render_operations(out)


if __name__ == "__main__":
    app()
