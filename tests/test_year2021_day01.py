from aocsolve.year2021_day01 import count_increases, count_window_increases, run

DEPTHS = [199, 200, 208, 210, 200, 207, 240, 269, 260, 263]


def test_worked_example():
    assert count_increases(DEPTHS) == 7
    assert count_window_increases(DEPTHS) == 5


def test_strictly_increasing():
    depths = list(range(10, 20))
    assert count_increases(depths) == len(depths) - 1
    assert count_window_increases(depths) == len(depths) - 3


def test_strictly_decreasing_has_no_increases():
    depths = list(range(20, 10, -1))
    assert count_increases(depths) == 0
    assert count_window_increases(depths) == 0


def test_short_inputs():
    assert count_increases([]) == 0
    assert count_window_increases([1, 2]) == 0


def test_window_never_exceeds_single_pairs_bound():
    assert count_window_increases(DEPTHS) <= len(DEPTHS) - 3


def test_run(tmp_path, capsys):
    path = tmp_path / "1.txt"
    path.write_text("\n".join(str(d) for d in DEPTHS) + "\n")
    assert run(path) == (count_increases(DEPTHS), count_window_increases(DEPTHS))
    assert "Day 1 | Part 1 | Result is" in capsys.readouterr().out