"""2020 day 1: entries that sum to a target."""

from aocsolve.inputs import log_result, read_ints

TARGET = 2020


def find_matching_pair(numbers, target):
    """Return the product of the first two entries summing to ``target``."""
    seen = set()
    for number in numbers:
        if target - number in seen:
            return number * (target - number)
        seen.add(number)
    raise ValueError("Not found")


def find_matching_triplet(numbers, target):
    """Return the product of three entries summing to ``target``."""
    seen = set()
    for i, first in enumerate(numbers):
        for second in numbers[i + 1:]:
            third = target - first - second
            if third in seen:
                return first * second * third
            seen.add(first)
            seen.add(second)
    raise ValueError("Not found")


def run(path):
    """Solve both parts for the input file at ``path``."""
    numbers = read_ints(path)
    pair = find_matching_pair(numbers, TARGET)
    log_result(1, 1, "Product (2) is", pair)
    triplet = find_matching_triplet(numbers, TARGET)
    log_result(1, 2, "Product (3) is", triplet)
    return pair, triplet