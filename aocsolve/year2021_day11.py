"""2021 day 11: flashing dumbo octopuses."""

from aocsolve.inputs import log_result, read_digit_grid

STEPS = 100


def _neighbours(grid, i, j):
    for x in range(i - 1, i + 2):
        if not 0 <= x < len(grid):
            continue
        for y in range(j - 1, j + 2):
            if 0 <= y < len(grid[x]) and (x, y) != (i, j):
                yield x, y


def count_flashes(energy_levels, steps):
    """Return (flashes during the first ``steps`` steps, first step where all flash).

    The given grid is left untouched.
    """
    grid = [list(row) for row in energy_levels]
    cells = sum(len(row) for row in grid)
    flashes = 0
    step = 0
    while True:
        for row in grid:
            row[:] = [energy + 1 for energy in row]
        flashed = set()
        pending = [
            (i, j) for i, row in enumerate(grid) for j, energy in enumerate(row) if energy > 9
        ]
        while pending:
            cell = pending.pop()
            if cell in flashed:
                continue
            flashed.add(cell)
            for x, y in _neighbours(grid, *cell):
                grid[x][y] += 1
                if grid[x][y] > 9 and (x, y) not in flashed:
                    pending.append((x, y))
        if step < steps:
            flashes += len(flashed)
        for x, y in flashed:
            grid[x][y] = 0
        step += 1
        if len(flashed) == cells:
            return flashes, step


def run(path):
    """Solve both parts for the input file at ``path``."""
    flashes, all_flash = count_flashes(read_digit_grid(path), STEPS)
    log_result(11, 1, "Total flashes: ", flashes)
    log_result(11, 2, "All flash step: ", all_flash)
    return flashes, all_flash