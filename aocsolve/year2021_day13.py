"""2021 day 13: folding transparent origami paper."""

from aocsolve.inputs import log_result, parse_csv_numbers, read_lines


def parse_origami(lines):
    """Return (canvas indexed [y][x], fold instructions such as 'y=7').

    Dot coordinates come first, then a blank line, then the fold lines.
    """
    dots = []
    steps = []
    folding = False
    for line in lines:
        if not line:
            folding = True
            continue
        if folding:
            steps.append(line.lstrip("fold along "))
            continue
        numbers = parse_csv_numbers(line)
        if len(numbers) < 2:
            raise ValueError(f"Error parsing dots: {line!r}")
        x, y = numbers[0], numbers[1]
        if x < 0 or y < 0:
            raise ValueError(f"negative dot coordinate: {line!r}")
        dots.append((x, y))
    width = max((x for x, _ in dots), default=0) + 1
    height = max((y for _, y in dots), default=0) + 1
    canvas = [[False] * width for _ in range(height)]
    for x, y in dots:
        canvas[y][x] = True
    return canvas, steps


def fold_up(canvas, y):
    """Fold the rows below row ``y`` up onto the rows above it."""
    folded = [list(row) for row in canvas[:y]]
    target = y - 1
    for row in canvas[y + 1:]:
        if target < 0:
            raise ValueError(f"fold at y={y} leaves more rows below than above")
        for col, dot in enumerate(row):
            if dot:
                folded[target][col] = True
        target -= 1
    return folded


def fold_left(canvas, x):
    """Fold the columns right of column ``x`` over onto the columns left of it."""
    folded = []
    for row in canvas:
        left = list(row[:x])
        right = row[x + 1:]
        if len(right) > x:
            raise ValueError(f"fold at x={x} leaves more columns right than left")
        for offset, dot in enumerate(right):
            if dot:
                left[x - 1 - offset] = True
        folded.append(left)
    return folded


def count_dots(canvas):
    """Number of visible dots."""
    return sum(1 for row in canvas for dot in row if dot)


def render_canvas(canvas):
    """Draw the canvas with '#' for dots and '.' for empty points, one line per row."""
    return "\n".join("".join("#" if dot else "." for dot in row) for row in canvas)


def _parse_step(step):
    axis, sep, value = step.partition("=")
    if not sep:
        raise ValueError(f"Error parsing step instruction: {step!r}")
    try:
        position = int(value)
    except ValueError as exc:
        raise ValueError(f"Error parsing step instruction: {step!r}") from exc
    return axis, position


def count_origami_dots(lines):
    """Apply every fold, print the result, and return the dots left after the first fold."""
    canvas, steps = parse_origami(lines)
    count = 0
    for index, step in enumerate(steps):
        axis, position = _parse_step(step)
        if axis == "x":
            canvas = fold_left(canvas, position)
        elif axis == "y":
            canvas = fold_up(canvas, position)
        else:
            raise ValueError(f"Invalid folding axis found: {axis!r}")
        if index == 0:
            count = count_dots(canvas)
    print(f"\n{render_canvas(canvas)}\n")
    return count


def run(path):
    """Solve the puzzle for the input file at ``path``."""
    count = count_origami_dots(read_lines(path))
    log_result(13, 1, "Count is: ", count)
    return count