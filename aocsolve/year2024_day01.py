"""2024 day 1: comparing two lists of location IDs."""

import re
from collections import Counter
from pathlib import Path

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text, line_number):
    if not _INTEGER.fullmatch(text):
        raise ValueError(
            f"Failed parsing index: {line_number} | location ID: {text!r}"
        )
    return int(text)


def _lines(text):
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_location_lists(text):
    """Return (left list, right list) from lines of two IDs separated by three spaces."""
    left = []
    right = []
    for number, line in enumerate(_lines(text), start=1):
        ids = line.split("   ")
        if len(ids) != 2:
            raise ValueError(f"Parsed line doesn't have 2 elements: {ids!r}")
        left.append(_parse_int(ids[0], number))
        right.append(_parse_int(ids[1], number))
    return left, right


def total_distance(left, right):
    """Sum of distances between the lists' values paired off in sorted order."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left, right):
    """Sum of each left value times how often it appears in the right list."""
    occurrences = Counter(right)
    return sum(value * occurrences[value] for value in left)


def run(path):
    """Solve both parts for the input file at ``path``."""
    left, right = parse_location_lists(Path(path).read_bytes().decode("utf-8"))
    distance = total_distance(left, right)
    print(f"Result for part 1: {distance}")
    similarity = similarity_score(left, right)
    print(f"Result for part 2: {similarity}")
    return distance, similarity