"""2021 day 5: hydrothermal vent lines."""

from dataclasses import dataclass

from aocsolve.inputs import log_result, read_lines


@dataclass(frozen=True)
class Segment:
    """A line of vents from (x1, y1) to (x2, y2), both ends included."""

    x1: int
    y1: int
    x2: int
    y2: int


def _parse_point(text, line):
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError as exc:
        raise ValueError(f"Failed parsing coordinate in line: {line!r}") from exc
    return x, y


def parse_segments(lines):
    """Return (segments, largest x, largest y)."""
    segments = []
    x_max = y_max = 0
    for line in lines:
        parts = line.split(" -> ")
        if len(parts) != 2:
            raise ValueError(f"Failed to parse line: {line!r}")
        (x1, y1), (x2, y2) = (_parse_point(part, line) for part in parts)
        segments.append(Segment(x1, y1, x2, y2))
        x_max = max(x_max, x1, x2)
        y_max = max(y_max, y1, y2)
    return segments, x_max, y_max


def mark_segments(segments, x_max, y_max, include_diagonal):
    """Count vent lines over each point of a square grid indexed [x][y].

    Diagonal segments are only drawn when ``include_diagonal`` is true.
    """
    size = max(x_max, y_max) + 1
    grid = [[0] * size for _ in range(size)]
    for segment in segments:
        if segment.x1 == segment.x2:
            low, high = sorted((segment.y1, segment.y2))
            for y in range(low, high + 1):
                grid[segment.x1][y] += 1
        elif segment.y1 == segment.y2:
            low, high = sorted((segment.x1, segment.x2))
            for x in range(low, high + 1):
                grid[x][segment.y1] += 1
        elif include_diagonal:
            dx = 1 if segment.x1 < segment.x2 else -1
            dy = 1 if segment.y1 < segment.y2 else -1
            x, y = segment.x1, segment.y1
            while True:
                grid[x][y] += 1
                if x == segment.x2 or y == segment.y2:
                    break
                x += dx
                y += dy
    return grid


def count_overlaps(grid, threshold):
    """Number of points covered by at least ``threshold`` lines."""
    return sum(1 for row in grid for count in row if count >= threshold)


def run(path):
    """Solve both parts for the input file at ``path``."""
    segments, x_max, y_max = parse_segments(read_lines(path))
    print("Bounds are: ", x_max, y_max)
    straight = count_overlaps(mark_segments(segments, x_max, y_max, False), 2)
    log_result(5, 1, "Overlap count is: ", straight)
    diagonal = count_overlaps(mark_segments(segments, x_max, y_max, True), 2)
    log_result(5, 2, "Overlap count (with diagonals) is: ", diagonal)
    return straight, diagonal