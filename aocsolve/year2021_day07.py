"""2021 day 7: aligning crab submarines."""

import time

from aocsolve.inputs import log_result, read_csv_numbers


def linear_cost(start, end):
    """Fuel for moving from ``start`` up to ``end`` when each step costs one more."""
    distance = max(0, end - start)
    return distance * (distance + 1) // 2


def fuel_cost(positions, target, constant_rate):
    """Total fuel to move every crab to ``target``."""
    total = 0
    for position in positions:
        low, high = sorted((position, target))
        total += high - low if constant_rate else linear_cost(low, high)
    return total


def min_fuel_cost(positions, constant_rate):
    """Smallest total fuel over targets from the lowest position up to, not including, the highest."""
    if not positions:
        raise ValueError("no positions given")
    targets = range(min(positions), max(positions))
    return min(
        (fuel_cost(positions, target, constant_rate) for target in targets),
        default=0,
    )


def run(path):
    """Solve both parts for the input file at ``path``."""
    started = time.perf_counter()
    positions = read_csv_numbers(path)
    constant = min_fuel_cost(positions, True)
    log_result(7, 1, "Minimum fuel with contant rate: ", constant)
    linear = min_fuel_cost(positions, False)
    log_result(7, 2, "Minimum fuel with linear rate: ", linear)
    print("Time taken: ", time.perf_counter() - started)
    return constant, linear