"""Reading puzzle input files and reporting answers."""

import re
from pathlib import Path

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _to_int(text):
    """Parse a base-10 integer strictly: an optional sign and ASCII digits only."""
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def read_lines(path):
    """Return the lines of a newline-terminated file.

    Whatever follows the final newline is dropped, so a file is expected
    to end with one.
    """
    text = Path(path).read_bytes().decode("utf-8")
    return text.split("\n")[:-1]


def read_ints(path):
    """Return one integer per line of the file."""
    return [_to_int(line) for line in read_lines(path)]


def parse_csv_numbers(line):
    """Parse a comma separated line of integers."""
    try:
        return [_to_int(part) for part in line.split(",")]
    except ValueError as exc:
        raise ValueError(f"Error parsing num: {exc}") from exc


def read_csv_numbers(path):
    """Return all comma separated integers of every line, in order."""
    numbers = []
    for line in read_lines(path):
        numbers.extend(parse_csv_numbers(line))
    return numbers


def read_digit_grid(path):
    """Return the file as rows of single-digit integers."""
    try:
        return [[_to_int(char) for char in line] for line in read_lines(path)]
    except ValueError as exc:
        raise ValueError(f"Error parsing num: {exc}") from exc


def log_result(day, part, message, answer):
    """Print an answer in the standard report format."""
    print(f"Day {day} | Part {part} | {message}: {answer}")