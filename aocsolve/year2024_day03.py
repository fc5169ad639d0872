"""2024 day 3: corrupted multiplication instructions."""

import re
from pathlib import Path

_MUL = re.compile(r"mul\((\d+),(\d+)\)", re.ASCII)
_INSTRUCTION = re.compile(r"(do\(\))|(don't\(\))|(mul\((\d+),(\d+)\))", re.ASCII)


def sum_multiplications(text):
    """Sum of the products of every well-formed mul(a,b)."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def sum_enabled_multiplications(text):
    """Like sum_multiplications, but do() and don't() switch multiplications on and off."""
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(text):
        if match[1]:
            enabled = True
        elif match[2]:
            enabled = False
        elif enabled:
            total += int(match[4]) * int(match[5])
    return total


def run(path):
    """Solve both parts for the input file at ``path``."""
    text = Path(path).read_bytes().decode("utf-8")
    first = sum_multiplications(text)
    print(f"Result of part 1: {first}")
    second = sum_enabled_multiplications(text)
    print(f"Result of part 2: {second}")
    return first, second