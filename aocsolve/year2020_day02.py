"""2020 day 2: password policies."""

import re

from aocsolve.inputs import log_result, read_lines

_POLICY = re.compile(r"(\d+)-(\d+)\s(\w+):\s(\w+)", re.ASCII)


def count_valid_passwords(lines, positional):
    """Count lines whose password meets its policy.

    With ``positional`` false the numbers bound the occurrence count; with it
    true exactly one of the two 1-based positions must hold the key.
    """
    verify = verify_position_policy if positional else verify_count_policy
    count = 0
    for line in lines:
        match = _POLICY.search(line)
        if match is None:
            raise ValueError(f"Invalid pattern with p: 0 | line: {line!r}")
        low, high, key, password = match.groups()
        if verify(int(low), int(high), key, password):
            count += 1
    return count


def verify_count_policy(low, high, key, password):
    """True when ``key`` occurs between ``low`` and ``high`` times."""
    return low <= password.count(key) <= high


def verify_position_policy(pos1, pos2, key, password):
    """True when exactly one of the 1-based positions holds ``key``."""
    hits = sum(
        1
        for pos in (pos1, pos2)
        if 1 <= pos <= len(password) and password[pos - 1] == key
    )
    return hits == 1


def run(path):
    """Solve both parts for the input file at ``path``."""
    lines = read_lines(path)
    first = count_valid_passwords(lines, False)
    log_result(2, 1, "Valid password count", first)
    second = count_valid_passwords(lines, True)
    log_result(2, 2, "Valid password count", second)
    return first, second