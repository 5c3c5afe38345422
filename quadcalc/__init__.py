"""quadcalc — four-function arithmetic calculator.

A Calculator dispatches an operation name and two operands to one of four
pure arithmetic primitives (add, subtract, multiply, divide) and keeps the
last result.

Usage:
    python -m quadcalc demo                 # Print the sample results
    python -m quadcalc exec add 3 2         # Execute one operation
    python -m quadcalc ops                  # Show supported operations
"""
