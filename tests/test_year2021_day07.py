import pytest

from aocsolve.year2021_day07 import fuel_cost, linear_cost, min_fuel_cost, run

POSITIONS = [16, 1, 2, 0, 4, 2, 7, 1, 2, 14]


def test_constant_rate_minimum():
    assert min_fuel_cost(POSITIONS, True) == 37


def test_linear_rate_minimum():
    assert min_fuel_cost(POSITIONS, False) == 168


@pytest.mark.parametrize("constant_rate", [True, False])
def test_minimum_bounds_every_target(constant_rate):
    best = min_fuel_cost(POSITIONS, constant_rate)
    for target in range(min(POSITIONS), max(POSITIONS)):
        assert best <= fuel_cost(POSITIONS, target, constant_rate)


def test_linear_cost_depends_only_on_distance():
    assert linear_cost(3, 9) == linear_cost(0, 6)


def test_linear_cost_backwards_is_free():
    assert linear_cost(5, 1) == linear_cost(1, 1)


def test_linear_cost_grows_by_distance():
    assert linear_cost(0, 5) - linear_cost(0, 4) == 5


@pytest.mark.parametrize("constant_rate", [True, False])
def test_fuel_cost_is_symmetric(constant_rate):
    assert fuel_cost([2], 9, constant_rate) == fuel_cost([9], 2, constant_rate)


def test_equal_positions_cost_nothing():
    assert min_fuel_cost([4, 4, 4], True) == fuel_cost([4, 4, 4], 4, True)


def test_empty_positions_raise():
    with pytest.raises(ValueError):
        min_fuel_cost([], True)


def test_run(tmp_path):
    path = tmp_path / "7.txt"
    path.write_text(",".join(map(str, POSITIONS)) + "\n")
    assert run(path) == (37, 168)