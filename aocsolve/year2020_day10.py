"""2020 day 10: joltage adapter chains."""

from aocsolve.inputs import log_result, read_ints


def jolt_difference(jolts):
    """Product of 1-jolt differences and 3-jolt differences (device included)."""
    ordered = sorted(jolts)
    counts = {1: 0, 2: 0, 3: 0}
    previous = 0
    for jolt in ordered:
        diff = jolt - previous
        if diff in counts:
            counts[diff] += 1
        previous = jolt
    return counts[1] * (counts[3] + 1)


def count_arrangements(jolts):
    """Number of distinct adapter chains from the outlet to the last adapter."""
    ordered = sorted(jolts)
    if not ordered:
        raise ValueError("no adapters given")
    position = {jolt: index for index, jolt in enumerate(ordered)}
    ways = [0] * len(ordered)
    ways[-1] = 1
    for index, jolt in reversed(list(enumerate(ordered[:-1]))):
        ways[index] = sum(
            ways[position[jolt + diff]] for diff in (1, 2, 3) if jolt + diff in position
        )
    return sum(ways[position[start]] for start in (1, 2, 3) if start in position)


def run(path):
    """Solve both parts for the input file at ``path``."""
    jolts = read_ints(path)
    difference = jolt_difference(jolts)
    log_result(10, 1, "Jolt Difference (Product) is", difference)
    arrangements = count_arrangements(jolts)
    log_result(10, 2, "Permutations: ", arrangements)
    return difference, arrangements