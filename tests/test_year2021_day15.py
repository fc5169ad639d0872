import pytest

from aocsolve.year2021_day15 import (
    expand_cave,
    lowest_risk,
    lowest_risk_full_cave,
    run,
)

EXAMPLE = [
    [1, 1, 6, 3, 7, 5, 1, 7, 4, 2],
    [1, 3, 8, 1, 3, 7, 3, 6, 7, 2],
    [2, 1, 3, 6, 5, 1, 1, 3, 2, 8],
    [3, 6, 9, 4, 9, 3, 1, 5, 6, 9],
    [7, 4, 6, 3, 4, 1, 7, 1, 1, 1],
    [1, 3, 1, 9, 1, 2, 8, 1, 3, 7],
    [1, 3, 5, 9, 9, 1, 2, 4, 2, 1],
    [3, 1, 2, 5, 4, 2, 1, 6, 3, 9],
    [1, 2, 9, 3, 1, 3, 8, 5, 2, 1],
    [2, 3, 1, 1, 9, 4, 4, 5, 8, 1],
]


def test_lowest_risk_example():
    assert lowest_risk(EXAMPLE) == 40


def test_lowest_risk_full_cave_example():
    assert lowest_risk_full_cave(EXAMPLE) == 315


def test_single_cell_has_no_risk():
    assert lowest_risk([[7]]) == 0


def test_empty_grid_raises():
    with pytest.raises(ValueError):
        lowest_risk([])


def test_expand_cave_shape_and_first_tile():
    expanded = expand_cave(EXAMPLE)
    assert len(expanded) == 50
    assert all(len(row) == 50 for row in expanded)
    assert [row[:10] for row in expanded[:10]] == EXAMPLE


def test_expand_cave_wraps_to_one():
    assert expand_cave([[8]])[0] == [8, 9, 1, 2, 3]
    assert [row[0] for row in expand_cave([[9]])] == [9, 1, 2, 3, 4]


def test_run_reads_file(tmp_path):
    path = tmp_path / "15.txt"
    path.write_text("".join("".join(map(str, row)) + "\n" for row in EXAMPLE))
    assert run(path) == (40, 315)