"""2024 day 7: bridge repair calibration equations."""

import re
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

_INTEGER = re.compile(r"[+-]?[0-9]+")


class Operation(IntEnum):
    """An operator that may be placed between two numbers."""

    ADDITION = 1
    MULTIPLICATION = 2
    CONCATENATION = 3

    def apply(self, a, b):
        """Combine ``a`` and ``b`` left to right."""
        if self is Operation.ADDITION:
            return a + b
        if self is Operation.MULTIPLICATION:
            return a * b
        if b == 0:
            return a * 10
        return a * 10 ** len(str(abs(b))) + b


PART1_OPERATIONS = (Operation.ADDITION, Operation.MULTIPLICATION)
PART2_OPERATIONS = (
    Operation.ADDITION,
    Operation.MULTIPLICATION,
    Operation.CONCATENATION,
)


@dataclass(frozen=True)
class CalibrationEquation:
    """A test value and the numbers that should combine into it."""

    test_value: int
    numbers: tuple

    def validate(self, operations):
        """True when some choice of ``operations``, applied left to right, reaches the test value."""
        if not self.numbers:
            raise ValueError("equation has no numbers")
        numbers = self.numbers

        def reaches(current, index):
            if index == len(numbers):
                return current == self.test_value
            return any(
                reaches(operation.apply(current, numbers[index]), index + 1)
                for operation in operations
            )

        return reaches(numbers[0], 1)


def _parse_int(text):
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"Error parsing number [{text}]")
    return int(text)


def parse_equations(text):
    """Parse lines of the form 'value: n1 n2 ...'."""
    equations = []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        parts = line.split(":")
        if len(parts) != 2:
            raise ValueError(f"Couldn't split equation [{line}] into 2 parts")
        numbers = tuple(
            _parse_int(part.strip()) for part in parts[1].split(" ") if part.strip()
        )
        equations.append(CalibrationEquation(_parse_int(parts[0]), numbers))
    return equations


def total_calibration(equations, operations):
    """Sum of the test values of the equations that can be made true."""
    return sum(
        equation.test_value
        for equation in equations
        if equation.validate(operations)
    )


def run(path):
    """Solve both parts for the input file at ``path``."""
    equations = parse_equations(Path(path).read_bytes().decode("utf-8"))
    first = total_calibration(equations, PART1_OPERATIONS)
    print(f"Part 1 | Calibration result: {first}")
    second = total_calibration(equations, PART2_OPERATIONS)
    print(f"Part 2 | Calibration result: {second}")
    return first, second