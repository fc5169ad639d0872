"""2024 day 4: word search puzzles."""

from pathlib import Path

_ALL_DIRECTIONS = [
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
]
_DIAGONALS = [(dx, dy) for dx in (-1, 1) for dy in (-1, 1)]


def _lines(text):
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _matched_length(grid, width, row, col, d_row, d_col, word):
    """How many leading characters of ``word`` lie along a line from (row, col)."""
    matched = 0
    for char in word:
        if not (0 <= row < len(grid) and 0 <= col < width):
            break
        if grid[row][col] != char:
            break
        matched += 1
        row += d_row
        col += d_col
    return matched


def word_search(grid, word):
    """Count occurrences of ``word`` in any of the eight directions."""
    if not word:
        raise ValueError("empty search word")
    rest = word[1:]
    count = 0
    for i, line in enumerate(grid):
        width = len(line)
        for j, char in enumerate(line):
            if char != word[0]:
                continue
            count += sum(
                1
                for dx, dy in _ALL_DIRECTIONS
                if _matched_length(grid, width, i + dx, j + dy, dx, dy, rest) == len(rest)
            )
    return count


def cross_search(grid, word):
    """Count cells where ``word`` crosses itself diagonally in an X, centred on its second letter."""
    if len(word) < 2:
        raise ValueError("search word needs at least two characters")
    centre = 1
    count = 0
    for i, line in enumerate(grid):
        width = len(line)
        for j, char in enumerate(line):
            if char != word[centre]:
                continue
            matches = sum(
                1
                for dx, dy in _DIAGONALS
                if _matched_length(
                    grid, width, i + dx * centre, j + dy * centre, -dx, -dy, word
                )
                == len(word)
            )
            if matches >= 2:
                count += 1
    return count


def run(path):
    """Solve both parts for the input file at ``path``."""
    grid = _lines(Path(path).read_bytes().decode("utf-8"))
    words = word_search(grid, "XMAS")
    print(f"Part 1 | Match count: {words}")
    crosses = cross_search(grid, "MAS")
    print(f"Part 2 | Match count: {crosses}")
    return words, crosses