import pytest

from aocsolve.year2021_day06 import population_count, run, simulate

AGES = [3, 4, 3, 1, 2]


def test_example_80_days():
    assert simulate(AGES, 80) == 5934


def test_example_256_days():
    assert simulate(AGES, 256) == 26984457539


def test_zero_days_keeps_population():
    assert simulate(AGES, 0) == len(AGES)


def test_empty_school():
    assert simulate([], 80) == simulate([], 0)


@pytest.mark.parametrize("days", [0, 3, 8])
def test_no_reproduction_before_timer(days):
    assert population_count(days + 1, days) == 1


def test_population_never_shrinks():
    counts = [simulate(AGES, days) for days in range(0, 60, 5)]
    assert counts == sorted(counts)


def test_population_is_additive():
    assert simulate(AGES, 40) == sum(simulate([age], 40) for age in AGES)


def test_run(tmp_path):
    path = tmp_path / "6.txt"
    path.write_text(",".join(map(str, AGES)) + "\n")
    assert run(path) == (5934, 26984457539)