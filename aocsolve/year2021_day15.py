"""2021 day 15: lowest-risk path through a cave (Dijkstra)."""

import heapq

from aocsolve.inputs import log_result, read_digit_grid

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))
_MULTIPLIER = 5


def lowest_risk(grid):
    """Lowest total risk from the top-left to the bottom-right, not counting the start."""
    if not grid or not grid[0]:
        raise ValueError("empty risk map")
    rows, cols = len(grid), len(grid[0])
    end = (rows - 1, len(grid[-1]) - 1)
    best = {(0, 0): 0}
    queue = [(0, 0, 0)]
    while queue:
        risk, x, y = heapq.heappop(queue)
        if (x, y) == end:
            return risk
        if risk > best[(x, y)]:
            continue
        for dx, dy in _STEPS:
            a, b = x + dx, y + dy
            if not (0 <= a < rows and 0 <= b < cols):
                continue
            candidate = risk + grid[a][b]
            if candidate < best.get((a, b), float("inf")):
                best[(a, b)] = candidate
                heapq.heappush(queue, (candidate, a, b))
    raise ValueError("end of the cave is unreachable")


def _tile_value(value, increment):
    if increment == 0:
        return value
    value += increment
    return value % 10 + 1 if value > 9 else value


def expand_cave(grid):
    """Tile the map five times each way, each tile one riskier, wrapping past 9 to 1."""
    height = len(grid)
    return [
        [
            _tile_value(
                grid[i % height][j % len(grid[i % height])],
                i // height + j // len(grid[i % height]),
            )
            for j in range(len(grid[i % height]) * _MULTIPLIER)
        ]
        for i in range(height * _MULTIPLIER)
    ]


def lowest_risk_full_cave(grid):
    """Lowest total risk through the five-fold expanded map."""
    return lowest_risk(expand_cave(grid))


def run(path):
    """Solve both parts for the input file at ``path``."""
    grid = read_digit_grid(path)
    risk = lowest_risk(grid)
    log_result(15, 1, "Lowest risk: ", risk)
    full = lowest_risk_full_cave(grid)
    log_result(15, 2, "Lowest risk for full map: ", full)
    return risk, full