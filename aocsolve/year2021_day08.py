"""2021 day 8: decoding scrambled seven-segment displays."""

import logging
from dataclasses import dataclass

from aocsolve.inputs import log_result, read_lines

logger = logging.getLogger(__name__)

# Signal length -> digit, for the digits whose segment count is unique.
_UNIQUE_LENGTHS = {2: 1, 3: 7, 4: 4, 7: 8}

# (signal length, segments left after removing those of 4, after removing those of 7) -> digit
_SHAPES = {
    (5, 3, 3): 2,
    (5, 2, 2): 3,
    (5, 2, 3): 5,
    (6, 3, 3): 0,
    (6, 3, 4): 6,
    (6, 2, 3): 9,
}


@dataclass(frozen=True)
class DisplayItem:
    """One display: its ten signal patterns and four output digits, letters sorted."""

    signals: tuple
    digits: tuple


def _sorted_letters(word):
    return "".join(sorted(word))


def parse_display_items(lines):
    """Parse lines of the form '<ten patterns> | <four digits>'."""
    items = []
    for line in lines:
        parts = line.split(" | ")
        if len(parts) != 2:
            raise ValueError(f"Error parsing input line: {line!r}")
        signals = parts[0].split(" ")
        digits = parts[1].split(" ")
        if len(signals) != 10:
            logger.warning("Error parsing signals: %s %d", signals, len(signals))
        if len(digits) != 4:
            logger.warning("Error parsing digits: %s %d", digits, len(digits))
        items.append(
            DisplayItem(
                signals=tuple(_sorted_letters(signal) for signal in signals),
                digits=tuple(_sorted_letters(digit) for digit in digits),
            )
        )
    return items


def count_unique_digits(items):
    """Number of output digits that are 1, 4, 7 or 8 (unique segment counts)."""
    return sum(
        1 for item in items for digit in item.digits if len(digit) in _UNIQUE_LENGTHS
    )


def _stripped_length(signal, pattern):
    return len([char for char in signal if char not in pattern])


def decode_item(item):
    """Work out the wiring from the signals and return the four-digit output value.

    Output patterns that cannot be decoded are skipped.
    """
    mapping = {}
    four = seven = ""
    pending = []
    for signal in item.signals:
        length = len(signal)
        if length in _UNIQUE_LENGTHS:
            mapping[signal] = _UNIQUE_LENGTHS[length]
            if length == 4:
                four = signal
            elif length == 3:
                seven = signal
        else:
            pending.append(signal)
    for signal in pending:
        shape = (
            len(signal),
            _stripped_length(signal, four),
            _stripped_length(signal, seven),
        )
        digit = _SHAPES.get(shape)
        if digit is not None:
            mapping[signal] = digit
    if len(mapping) != 10:
        logger.warning("Missing mappings: %d", 10 - len(mapping))
    result = 0
    factor = 1000
    for pattern in item.digits:
        value = mapping.get(pattern)
        if value is None:
            logger.warning("Missing interpretation for: %s", pattern)
            continue
        result += factor * value
        factor //= 10
    return result


def sum_all_items(items):
    """Sum of the decoded output values of every display."""
    return sum(decode_item(item) for item in items)


def run(path):
    """Solve both parts for the input file at ``path``."""
    items = parse_display_items(read_lines(path))
    unique = count_unique_digits(items)
    log_result(8, 1, "Count of unique digits: ", unique)
    total = sum_all_items(items)
    log_result(8, 2, "Sum of all displayed digits: ", total)
    return unique, total