"""2020 day 9: XMAS encoding weakness."""

from aocsolve.inputs import log_result, read_ints

PREAMBLE = 25


def find_invalid_number(numbers, preamble_length):
    """Return (first number not a sum of two of the preceding window, its index).

    When every number is valid the result is (0, len(numbers)).
    """
    window = set(numbers[:preamble_length])
    for index in range(preamble_length, len(numbers)):
        window.add(numbers[index - 1])
        if not has_pair_sum(numbers[index], window):
            return numbers[index], index
        window.discard(numbers[index - preamble_length])
    return 0, max(preamble_length, len(numbers))


def has_pair_sum(number, pieces):
    """True when two different values in ``pieces`` add up to ``number``."""
    return any(number - piece in pieces and piece != number - piece for piece in pieces)


def find_encryption_weakness(numbers, invalid_position):
    """Sum of the smallest and largest of the contiguous run adding to the invalid number."""
    span = find_contiguous_sum(numbers, numbers[invalid_position])
    if span is None:
        return 0
    start, end = span
    smallest, largest = smallest_and_largest(numbers[start:end + 1])
    return smallest + largest


def find_contiguous_sum(numbers, target):
    """Return (start, end) of the shortest, then earliest, run of two or more numbers summing to ``target``."""
    count = len(numbers)
    for extra in range(1, count):
        for start in range(count - extra):
            if sum(numbers[start:start + extra + 1]) == target:
                return start, start + extra
    return None


def smallest_and_largest(numbers):
    """Return (min, max) of a non-empty sequence."""
    return min(numbers), max(numbers)


def run(path):
    """Solve both parts for the input file at ``path``."""
    numbers = read_ints(path)
    invalid, position = find_invalid_number(numbers, PREAMBLE)
    log_result(9, 1, "First invalid number in the sequence", invalid)
    weakness = find_encryption_weakness(numbers, position)
    log_result(9, 2, "Encryption weakness", weakness)
    return invalid, weakness