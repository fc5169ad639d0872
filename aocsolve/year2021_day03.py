"""2021 day 3: binary diagnostic report."""

import re

from aocsolve.inputs import log_result, read_lines

_BINARY = re.compile(r"[+-]?[01]+")


def _parse_binary(text):
    if not _BINARY.fullmatch(text):
        raise ValueError(f"invalid binary number: {text!r}")
    return int(text, 2)


def binary_product(x, y):
    """Multiply two numbers written in binary."""
    return _parse_binary(x) * _parse_binary(y)


def most_and_least_common(report):
    """Return (most common bits, least common bits) per position; ties favour 1."""
    if not report:
        raise ValueError("empty report")
    most = []
    least = []
    for position in range(len(report[0])):
        column = [line[position] for line in report]
        if column.count("0") > column.count("1"):
            most.append("0")
            least.append("1")
        else:
            most.append("1")
            least.append("0")
    return "".join(most), "".join(least)


def filter_by_bit(report, position, most_common):
    """Keep the lines whose bit at ``position`` is the most (or least) common one.

    Ties keep the ones for the most common criterion and the zeros otherwise.
    """
    zeros = [line for line in report if line[position] == "0"]
    ones = [line for line in report if line[position] == "1"]
    if len(zeros) > len(ones):
        return zeros if most_common else ones
    return ones if most_common else zeros


def _rating(report, most_common):
    candidates = list(report)
    for position in range(len(report[0])):
        candidates = filter_by_bit(candidates, position, most_common)
        if len(candidates) == 1:
            return candidates[0]
    return ""


def life_support_ratings(report):
    """Return (oxygen generator rating, CO2 scrubber rating) as binary strings."""
    if not report:
        raise ValueError("empty report")
    return _rating(report, True), _rating(report, False)


def run(path):
    """Solve both parts for the input file at ``path``."""
    report = read_lines(path)
    power = binary_product(*most_and_least_common(report))
    log_result(3, 1, "Power consumption is: ", power)
    life = binary_product(*life_support_ratings(report))
    log_result(3, 2, "Life support rating is: ", life)
    return power, life