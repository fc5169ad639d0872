"""2021 day 9: smoke basins in a height map."""

import heapq

from aocsolve.inputs import log_result, read_digit_grid

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))
_PEAK = 9


def _neighbours(heights, x, y):
    for dx, dy in _STEPS:
        a, b = x + dx, y + dy
        if 0 <= a < len(heights) and 0 <= b < len(heights[a]):
            yield a, b


def sum_low_points(heights):
    """Sum of risk levels (height + 1) of points lower than all their neighbours."""
    return sum(
        height + 1
        for x, row in enumerate(heights)
        for y, height in enumerate(row)
        if all(heights[a][b] > height for a, b in _neighbours(heights, x, y))
    )


def basin_size(heights, seen, x, y):
    """Count points reachable from (x, y) by strictly rising steps below 9.

    Points already in ``seen`` are not counted; counted points are added to it.
    """
    if heights[x][y] == _PEAK:
        return 0
    count = 0
    explored = set()
    stack = [(x, y)]
    while stack:
        point = stack.pop()
        if point in explored:
            continue
        explored.add(point)
        a, b = point
        height = heights[a][b]
        if height == _PEAK:
            continue
        if point not in seen:
            seen.add(point)
            count += 1
        stack.extend(
            (c, d) for c, d in _neighbours(heights, a, b) if heights[c][d] > height
        )
    return count


def largest_basins_product(heights):
    """Product of the three largest basin sizes, starting from every non-9 point."""
    sizes = [
        basin_size(heights, set(), x, y)
        for x, row in enumerate(heights)
        for y, height in enumerate(row)
        if height != _PEAK
    ]
    if len(sizes) < 3:
        raise ValueError("fewer than three basins")
    first, second, third = heapq.nlargest(3, sizes)
    return first * second * third


def run(path):
    """Solve both parts for the input file at ``path``."""
    heights = read_digit_grid(path)
    risk = sum_low_points(heights)
    log_result(9, 1, "Sum of risk level of low points: ", risk)
    product = largest_basins_product(heights)
    log_result(9, 2, "Product of top 3 basins: ", product)
    return risk, product