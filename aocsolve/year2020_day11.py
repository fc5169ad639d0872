"""2020 day 11: seating system."""

from aocsolve.inputs import log_result, read_lines

_DIRECTIONS = [
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
]


def _adjacent_occupied(seats, row, col, reach):
    width = len(seats[row])
    return sum(
        1
        for r in range(max(0, row - reach), min(len(seats), row + reach + 1))
        for c in range(max(0, col - reach), min(width, col + reach + 1))
        if (r, c) != (row, col) and seats[r][c] == "#"
    )


def _visible_occupied(seats, row, col):
    width = len(seats[row])
    count = 0
    for dr, dc in _DIRECTIONS:
        r, c = row + dr, col + dc
        while 0 <= r < len(seats) and 0 <= c < width:
            if seats[r][c] != ".":
                if seats[r][c] == "#":
                    count += 1
                break
            r += dr
            c += dc
    return count


def apply_seating_rules(seats, threshold, reach):
    """Apply one round of rules; return (new layout, whether anything changed).

    ``reach`` is the neighbourhood radius; 0 means the first seat visible in
    each of the eight directions.
    """
    changed = False
    result = []
    for row, line in enumerate(seats):
        cells = []
        for col, cell in enumerate(line):
            if cell == ".":
                cells.append(".")
                continue
            if reach == 0:
                occupied = _visible_occupied(seats, row, col)
            else:
                occupied = _adjacent_occupied(seats, row, col, reach)
            if cell == "L" and occupied == 0:
                changed = True
                cells.append("#")
            elif cell == "#" and occupied >= threshold:
                changed = True
                cells.append("L")
            else:
                cells.append(cell)
        result.append("".join(cells))
    return result, changed


def stable_seat_count(seats, threshold, reach):
    """Number of occupied seats once the layout stops changing."""
    while True:
        following, changed = apply_seating_rules(seats, threshold, reach)
        if not changed:
            break
        seats = following
    return sum(line.count("#") for line in seats)


def run(path):
    """Solve both parts for the input file at ``path``."""
    seats = read_lines(path)
    adjacent = stable_seat_count(seats, 4, 1)
    log_result(11, 1, "Seat count", adjacent)
    visible = stable_seat_count(seats, 5, 0)
    log_result(11, 2, "Seat count", visible)
    return adjacent, visible