"""2024 day 6: a patrolling guard."""

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path


class Direction(IntEnum):
    """Heading of the guard; turning goes clockwise."""

    UP = 1
    RIGHT = 2
    DOWN = 3
    LEFT = 4

    def turn(self):
        """The heading after a right turn."""
        return Direction(self % 4 + 1)

    def step(self):
        """The (row, column) change of one step in this heading."""
        return _STEPS[self]


_STEPS = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}

_SYMBOLS = {
    "^": Direction.UP,
    ">": Direction.RIGHT,
    "v": Direction.DOWN,
    "<": Direction.LEFT,
}


@dataclass(frozen=True)
class Position:
    """A grid cell, with the heading when it matters."""

    x: int
    y: int
    direction: Direction = None


def _lines(text):
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def find_start(grid):
    """Return the guard's starting position and heading."""
    for x, line in enumerate(grid):
        for symbol, direction in _SYMBOLS.items():
            y = line.find(symbol)
            if y != -1:
                return Position(x, y, direction)
    raise ValueError("no guard found in the grid")


def _patrol(grid, start, obstruction=None):
    """Yield (x, y, heading) after every move until the guard leaves the grid."""
    if start.direction is None:
        raise ValueError("start position needs a direction")
    x, y, direction = start.x, start.y, start.direction
    while True:
        dx, dy = direction.step()
        nx, ny = x + dx, y + dy
        if not (0 <= nx < len(grid) and 0 <= ny < len(grid[nx])):
            return
        if grid[nx][ny] == "#" or (nx, ny) == obstruction:
            direction = direction.turn()
        else:
            x, y = nx, ny
            yield x, y, direction


def count_visited(grid, start):
    """Number of distinct cells the guard stands on, the start included."""
    visited = {(start.x, start.y)}
    visited.update((x, y) for x, y, _ in _patrol(grid, start))
    return len(visited)


def is_loop(grid, start, obstruction):
    """True when an extra obstruction makes the guard walk in a loop."""
    seen = set()
    for state in _patrol(grid, start, (obstruction.x, obstruction.y)):
        if state in seen:
            return True
        seen.add(state)
    return False


def count_obstructions(grid, start):
    """Number of cells on the guard's path where one obstruction causes a loop."""
    return len(
        {
            (x, y)
            for x, y, _ in _patrol(grid, start)
            if is_loop(grid, start, Position(x, y))
        }
    )


def run(path):
    """Solve both parts for the input file at ``path``."""
    grid = _lines(Path(path).read_bytes().decode("utf-8"))
    start = find_start(grid)
    visited = count_visited(grid, start)
    print(f"Part 1 | Visit count: {visited}")
    obstructions = count_obstructions(grid, start)
    print(f"Part 2 | Obstruction count: {obstructions}")
    return visited, obstructions