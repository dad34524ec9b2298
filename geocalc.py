#!/usr/bin/env python3

import argparse
import math
import os
import sys
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Optional


class T:
    """Terminal color helper with ANSI escape sequences."""

    red, green, grey, clear = (
        "\033[31m",
        "\033[32m",
        "\033[90m",
        "\033[0m",
    )


# Fixed literal, not math.pi
PI = 3.1416

# Multiplications power() performs one by one before finishing in closed form
EXACT_POWER_STEPS = 100_000

MENU_PROMPT = "Option: "
VALUE_PROMPT = "Value: "

# Global verbose flag
verbose = False

# A line source takes a prompt and returns one line of input (raises EOFError at end)
LineSource = Callable[[str], str]


class Shape(IntEnum):
    EXIT = 0
    CIRCLE = 1
    SQUARE = 2
    TRIANGLE = 3
    RECTANGLE = 4
    PENTAGON = 5


class Operation(IntEnum):
    BACK = 0
    AREA = 1
    PERIMETER = 2
    POWER = 3


SHAPE_LABELS = {
    Shape.CIRCLE: "Circle",
    Shape.SQUARE: "Square",
    Shape.TRIANGLE: "Triangle",
    Shape.RECTANGLE: "Rectangle",
    Shape.PENTAGON: "Pentagon",
    Shape.EXIT: "Exit",
}

OPERATION_LABELS = {
    Operation.AREA: "Area",
    Operation.PERIMETER: "Perimeter",
    Operation.POWER: "Power",
    Operation.BACK: "Back",
}


def get_terminal_width():
    """Get the terminal width, with fallback."""
    try:
        return os.get_terminal_size().columns
    except OSError:
        return 80  # fallback width if terminal size can't be determined


def print_with_left_border(text, border_char="│", border_color=None, text_color=None):
    """Print text with a left border, wrapping lines to terminal width."""
    width = get_terminal_width()
    border_prefix = f"{border_color or ''}{border_char}{T.clear} {text_color or ''}"
    content_width = max(width - len(border_char) - 1, 1)

    for line in text.split("\n"):
        if not line.strip():
            print(f"{border_prefix}{T.clear}")
            continue
        while line:
            chunk = line[:content_width]
            line = line[content_width:]
            print(f"{border_prefix}{chunk}{T.clear}")


def print_error(message: str):
    """Print a user-facing diagnostic in red."""
    print(f"{T.red}{message}{T.clear}")


def verbose_note(text: str):
    """Print a grey bordered diagnostic, only in verbose mode."""
    if verbose:
        print_with_left_border(text, border_color=T.grey, text_color=T.grey)


def verbose_check(description, condition):
    """Print check description and result in verbose mode, return condition value."""
    if verbose:
        if condition:
            print(f"{T.green}▸ {description} ✓{T.clear}")
        else:
            print(f"{T.red}▸ {description} ✗{T.clear}")
    return condition


# ---------------------------------------------------------------------------
# Formulas
# ---------------------------------------------------------------------------


def power(base: float, exponent: int) -> float:
    """
    Raise base to a non-negative integer exponent by repeated multiplication.

    The loop stops early once the product settles (unchanged, 0.0 or inf),
    and after EXACT_POWER_STEPS multiplications the remaining factor is
    applied in closed form, so huge exponents return promptly.
    """
    if exponent < 0:
        raise ValueError(f"Exponent must be 0 or greater, got {exponent}")
    result = 1.0
    for step in range(exponent):
        if step == EXACT_POWER_STEPS:
            return _power_tail(result, base, exponent - step)
        next_result = result * base
        if next_result == result or next_result == 0.0 or math.isinf(next_result):
            return next_result
        result = next_result
    return result


def _power_tail(result: float, base: float, remaining: int) -> float:
    try:
        return result * math.pow(base, remaining)
    except OverflowError:
        return math.inf if base > 1 else 0.0


def circle_area(radius: float) -> float:
    return PI * radius * radius


def circle_perimeter(radius: float) -> float:
    return 2 * PI * radius


def square_area(side: float) -> float:
    return side * side


def square_perimeter(side: float) -> float:
    return 4 * side


def triangle_area(base: float, height: float) -> float:
    return 0.5 * base * height


def triangle_perimeter(a: float, b: float, c: float) -> float:
    # Independent of triangle_area's base/height; no consistency check between them
    return a + b + c


def rectangle_area(base: float, height: float) -> float:
    return base * height


def rectangle_perimeter(base: float, height: float) -> float:
    return 2 * (base + height)


def pentagon_area(side: float, apothem: float) -> float:
    return (5 * side * apothem) / 2


def pentagon_perimeter(side: float) -> float:
    return 5 * side


class ParamKind(Enum):
    POSITIVE = "positive"
    NON_NEGATIVE_INT = "non_negative_int"


@dataclass
class Parameter:
    label: str
    kind: ParamKind = ParamKind.POSITIVE


@dataclass
class Formula:
    name: str
    parameters: list[Parameter]
    function: Callable[..., float]

    def evaluate(self, *values) -> float:
        if len(values) != len(self.parameters):
            raise ValueError(
                f"{self.name} takes {len(self.parameters)} values, got {len(values)}"
            )
        result = self.function(*values)
        args_str = ", ".join(
            f"{param.label}={value}" for param, value in zip(self.parameters, values)
        )
        verbose_check(f"{self.name}({args_str}) = {result}", math.isfinite(result))
        return result


def _lengths(*labels: str) -> list[Parameter]:
    return [Parameter(label) for label in labels]


POWER_FORMULA = Formula(
    "power",
    [
        Parameter("Base"),
        Parameter("Exponent (integer)", ParamKind.NON_NEGATIVE_INT),
    ],
    power,
)

FORMULAS: dict[tuple[Shape, Operation], Formula] = {
    (Shape.CIRCLE, Operation.AREA): Formula(
        "circle area", _lengths("Radius"), circle_area
    ),
    (Shape.CIRCLE, Operation.PERIMETER): Formula(
        "circle perimeter", _lengths("Radius"), circle_perimeter
    ),
    (Shape.SQUARE, Operation.AREA): Formula(
        "square area", _lengths("Side"), square_area
    ),
    (Shape.SQUARE, Operation.PERIMETER): Formula(
        "square perimeter", _lengths("Side"), square_perimeter
    ),
    (Shape.TRIANGLE, Operation.AREA): Formula(
        "triangle area", _lengths("Base", "Height"), triangle_area
    ),
    (Shape.TRIANGLE, Operation.PERIMETER): Formula(
        "triangle perimeter",
        _lengths("Side 1", "Side 2", "Side 3"),
        triangle_perimeter,
    ),
    (Shape.RECTANGLE, Operation.AREA): Formula(
        "rectangle area", _lengths("Base", "Height"), rectangle_area
    ),
    (Shape.RECTANGLE, Operation.PERIMETER): Formula(
        "rectangle perimeter", _lengths("Base", "Height"), rectangle_perimeter
    ),
    (Shape.PENTAGON, Operation.AREA): Formula(
        "pentagon area", _lengths("Side", "Apothem"), pentagon_area
    ),
    (Shape.PENTAGON, Operation.PERIMETER): Formula(
        "pentagon perimeter", _lengths("Side"), pentagon_perimeter
    ),
}


def resolve_formula(shape: int, operation: int) -> Formula:
    """
    Map a (shape, operation) menu pair to its formula.
    Power ignores the shape entirely. Raises ValueError for anything the
    menus would never produce.
    """
    if operation == Operation.POWER:
        return POWER_FORMULA
    if operation not in (Operation.AREA, Operation.PERIMETER):
        raise ValueError("Unknown operation.")
    formula = FORMULAS.get((shape, operation))
    if formula is None:
        raise ValueError("Unknown shape.")
    return formula


def compute(shape: int, operation: int, *values) -> float:
    """Resolve and evaluate a formula without any prompting."""
    return resolve_formula(shape, operation).evaluate(*values)


# ---------------------------------------------------------------------------
# Input readers
# ---------------------------------------------------------------------------


def read_menu_option(max_option: int, read_line: LineSource = input) -> int:
    """Read an integer in [0, max_option], re-prompting until one arrives."""
    while True:
        text = read_line(MENU_PROMPT)
        try:
            option = int(text.strip())
        except ValueError:
            verbose_note(f"rejected menu input: {text!r}")
            print_error("Please enter a valid number.")
            continue
        if 0 <= option <= max_option:
            return option
        verbose_note(f"rejected menu option {option}, expected 0..{max_option}")
        print_error("Option out of range.")


def read_positive_float(read_line: LineSource = input) -> float:
    """Read a finite decimal strictly greater than 0."""
    while True:
        text = read_line(VALUE_PROMPT)
        try:
            value = float(text.strip())
            if math.isinf(value):
                raise ValueError(f"not a finite number: {text!r}")
        except ValueError:
            verbose_note(f"rejected value input: {text!r}")
            print_error("Invalid input. Enter a valid number.")
            continue
        if value > 0:
            return value
        verbose_note(f"rejected non-positive value {value}")
        print_error("The value must be greater than 0.")


def read_non_negative_int(read_line: LineSource = input) -> int:
    """Read an integer greater than or equal to 0."""
    while True:
        text = read_line(VALUE_PROMPT)
        try:
            value = int(text.strip())
        except ValueError:
            verbose_note(f"rejected integer input: {text!r}")
            print_error("Invalid number.")
            continue
        if value >= 0:
            return value
        verbose_note(f"rejected negative integer {value}")
        print_error("Must be 0 or greater.")


READERS = {
    ParamKind.POSITIVE: read_positive_float,
    ParamKind.NON_NEGATIVE_INT: read_non_negative_int,
}


def ask_shape_menu(read_line: LineSource = input) -> int:
    print("\nChoose a shape:")
    for shape in list(Shape)[1:] + [Shape.EXIT]:
        print(f"{shape.value}. {SHAPE_LABELS[shape]}")
    return read_menu_option(max(Shape), read_line)


def ask_operation_menu(read_line: LineSource = input) -> int:
    print("Choose an operation:")
    for operation in list(Operation)[1:] + [Operation.BACK]:
        print(f"{operation.value}. {OPERATION_LABELS[operation]}")
    return read_menu_option(max(Operation), read_line)


def collect_parameters(formula: Formula, read_line: LineSource = input) -> list:
    """Prompt for each parameter of the formula, in order."""
    values = []
    for param in formula.parameters:
        print(f"{param.label}:")
        values.append(READERS[param.kind](read_line))
    return values


# ---------------------------------------------------------------------------
# Session loop
# ---------------------------------------------------------------------------


class Session:
    """One interactive run: menus, computations and the result history."""

    def __init__(self, read_line: Optional[LineSource] = None):
        self.read_line = read_line or input
        self.history: list[float] = []

    def run(self) -> list[float]:
        """Loop until the user exits (or input ends), then print the history."""
        try:
            while True:
                shape = ask_shape_menu(self.read_line)
                if shape == Shape.EXIT:
                    break

                operation = ask_operation_menu(self.read_line)
                if operation == Operation.BACK:
                    continue

                self.run_operation(shape, operation)
        except EOFError:
            verbose_note("end of input, leaving session")
            print()

        self.print_history()
        return self.history

    def run_operation(self, shape: int, operation: int) -> Optional[float]:
        """Compute one result and record it. Returns None if the attempt was aborted."""
        try:
            formula = resolve_formula(shape, operation)
        except ValueError as e:
            print_error(str(e))
            return None

        values = collect_parameters(formula, self.read_line)
        result = formula.evaluate(*values)
        self.history.append(result)
        print(f"Result: {result}")
        return result

    def print_history(self):
        print("Stored results:")
        for value in self.history:
            print(value)


def main():
    global verbose

    parser = argparse.ArgumentParser(
        description="Interactive area, perimeter and power calculator"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print a diagnostic line for every evaluation and rejected input",
    )
    args = parser.parse_args()

    verbose = args.verbose

    Session().run()
    sys.exit(0)


if __name__ == "__main__":
    main()
