"""2021 day 1: sonar sweep depth increases."""

from aocsolve.inputs import log_result, read_ints


def count_increases(depths):
    """Number of measurements larger than the one before."""
    return sum(1 for previous, current in zip(depths, depths[1:]) if current > previous)


def count_window_increases(depths):
    """Number of three-measurement window sums larger than the previous window."""
    if len(depths) < 3:
        return 0
    sums = [a + b + c for a, b, c in zip(depths, depths[1:], depths[2:])]
    return count_increases(sums)


def run(path):
    """Solve both parts for the input file at ``path``."""
    depths = read_ints(path)
    single = count_increases(depths)
    log_result(1, 1, "Result is", single)
    windowed = count_window_increases(depths)
    log_result(1, 2, "Result is", windowed)
    return single, windowed