import pytest

from aocsolve.year2020_day10 import count_arrangements, jolt_difference, run

SMALL = [16, 10, 15, 5, 1, 11, 7, 19, 6, 12, 4]
LARGE = [
    28, 33, 18, 42, 31, 14, 46, 20, 48, 47, 24, 23, 49, 45, 19, 38,
    39, 11, 1, 32, 25, 35, 8, 17, 7, 9, 4, 2, 34, 10, 3,
]


@pytest.mark.parametrize(
    "jolts, difference, arrangements",
    [(SMALL, 7 * 5, 8), (LARGE, 22 * 10, 19208)],
)
def test_examples(jolts, difference, arrangements):
    assert jolt_difference(jolts) == difference
    assert count_arrangements(jolts) == arrangements


def test_input_is_not_reordered():
    jolts = list(SMALL)
    jolt_difference(jolts)
    count_arrangements(jolts)
    assert jolts == SMALL


def test_single_chain_has_one_arrangement():
    assert count_arrangements([3, 6, 9]) == 1


def test_empty_adapters_raise():
    with pytest.raises(ValueError):
        count_arrangements([])


def test_run(tmp_path):
    path = tmp_path / "10.txt"
    path.write_text("\n".join(str(n) for n in SMALL) + "\n")
    assert run(path) == (35, 8)