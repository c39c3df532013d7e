"""Four-function calculator and operations passed as callables."""

import operator as _op
import sys

_OPERATIONS = {
    "+": _op.add,
    "-": _op.sub,
    "*": _op.mul,
    "/": _op.truediv,
}


def add(a, b):
    """Return a + b."""
    return a + b


def multiply(a, b):
    """Return a * b."""
    return a * b


def compute(x, y, operation):
    """Apply a two-argument operation to x and y."""
    return operation(x, y)


def calculate(operator, left, right):
    """Apply one of ``+ - * /`` to two numbers.

    Raises ZeroDivisionError for division by zero and ValueError for any
    other operator.
    """
    try:
        function = _OPERATIONS[operator]
    except KeyError:
        raise ValueError(f"invalid operator: {operator!r}") from None
    if operator == "/" and right == 0:
        raise ZeroDivisionError("Error! Division by zero.")
    return function(left, right)


def main(argv=None):
    """Run the calculator on ``OPERATOR LEFT RIGHT`` or ask for them."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        if len(args) != 3:
            print("usage: calculator OPERATOR LEFT RIGHT", file=sys.stderr)
            return 2
        operator, *numbers = args
    else:
        operator = input("Enter operator (+, -, *, /): ").strip()
        numbers = input("Enter two numbers: ").split()
    try:
        left, right = (float(number) for number in numbers)
    except ValueError:
        print("Expected two numbers.", file=sys.stderr)
        return 2
    try:
        result = calculate(operator, left, right)
    except ZeroDivisionError:
        print("Error! Division by zero.")
        return 1
    except ValueError:
        print("Invalid operator")
        return 1
    print(f"Result = {result:.2f}")
    return 0