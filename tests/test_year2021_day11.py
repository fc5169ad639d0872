import copy

from aocsolve.year2021_day11 import count_flashes, run

EXAMPLE = [
    [5, 4, 8, 3, 1, 4, 3, 2, 2, 3],
    [2, 7, 4, 5, 8, 5, 4, 7, 1, 1],
    [5, 2, 6, 4, 5, 5, 6, 1, 7, 3],
    [6, 1, 4, 1, 3, 3, 6, 1, 4, 6],
    [6, 3, 5, 7, 3, 8, 5, 4, 7, 8],
    [4, 1, 6, 7, 5, 2, 4, 6, 4, 5],
    [2, 1, 7, 6, 8, 4, 1, 7, 2, 1],
    [6, 8, 8, 2, 8, 8, 1, 1, 3, 4],
    [4, 8, 4, 6, 8, 4, 8, 5, 5, 4],
    [5, 2, 8, 3, 7, 5, 1, 5, 2, 6],
]


def test_example():
    assert count_flashes(copy.deepcopy(EXAMPLE), 100) == (1656, 195)


def test_input_not_modified():
    grid = copy.deepcopy(EXAMPLE)
    count_flashes(grid, 100)
    assert grid == EXAMPLE


def test_zero_steps_counts_no_flashes():
    assert count_flashes(EXAMPLE, 0) == (0, 195)


def test_run(tmp_path):
    path = tmp_path / "11.txt"
    path.write_text("\n".join("".join(map(str, row)) for row in EXAMPLE) + "\n")
    assert run(path) == (1656, 195)