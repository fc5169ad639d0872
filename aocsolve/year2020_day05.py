"""2020 day 5: binary boarding passes."""

import logging

from aocsolve.inputs import log_result, read_lines

logger = logging.getLogger(__name__)


def _partition(chars, size, low_char, high_char, boarding_pass):
    low = 0
    span = size
    for char in chars:
        span //= 2
        if char == high_char:
            low += span
        elif char != low_char:
            logger.warning("Invalid char: %s | Pass: %s", char, boarding_pass)
    return low


def seat_id(boarding_pass):
    """Decode a boarding pass into its seat ID (row * 8 + column)."""
    row = _partition(boarding_pass[:7], 128, "F", "B", boarding_pass)
    column = _partition(boarding_pass[7:], 8, "L", "R", boarding_pass)
    return row * 8 + column


def highest_seat_id(passes):
    """Return the highest seat ID, or 0 when there are none."""
    return max((seat_id(boarding_pass) for boarding_pass in passes), default=0)


def find_missing_seat(passes):
    """Return the missing seat whose neighbours are both taken, or 0."""
    seats = {seat_id(boarding_pass) for boarding_pass in passes}
    low = min(seats, default=1024)
    high = max(seats, default=0)
    for candidate in range(low + 1, high):
        if candidate not in seats and candidate - 1 in seats and candidate + 1 in seats:
            return candidate
    return 0


def run(path):
    """Solve both parts for the input file at ``path``."""
    passes = read_lines(path)
    highest = highest_seat_id(passes)
    log_result(5, 1, "Highest Seat ID", highest)
    missing = find_missing_seat(passes)
    log_result(5, 2, "Missing Seat ID", missing)
    return highest, missing