import pytest

from aocsolve.year2021_day08 import (
    DisplayItem,
    count_unique_digits,
    decode_item,
    parse_display_items,
    run,
    sum_all_items,
)

CANONICAL = {
    0: "abcefg",
    1: "cf",
    2: "acdeg",
    3: "acdfg",
    4: "bcdf",
    5: "abdfg",
    6: "abdefg",
    7: "acf",
    8: "abcdefg",
    9: "abcdfg",
}

EXAMPLE = (
    "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | "
    "cdfeb fcadb cdfeb cdbaf"
)


def make_line(outputs, wiring="abcdefg", reverse=False):
    table = str.maketrans("abcdefg", wiring)
    patterns = [CANONICAL[d].translate(table) for d in range(10)]
    if reverse:
        patterns.reverse()
    digits = [CANONICAL[d].translate(table) for d in outputs]
    return " ".join(patterns) + " | " + " ".join(digits)


def test_parse_sorts_letters():
    [item] = parse_display_items([EXAMPLE])
    assert len(item.signals) == 10
    assert len(item.digits) == 4
    for word in item.signals + item.digits:
        assert word == "".join(sorted(word))
    assert item.signals[-1] == "ab"


def test_parse_rejects_missing_separator():
    with pytest.raises(ValueError):
        parse_display_items(["abc def ghi"])


@pytest.mark.parametrize("wiring", ["abcdefg", "gfedcba", "dcbagef", "bdfaceg"])
@pytest.mark.parametrize("outputs", [(1, 2, 3, 4), (9, 0, 5, 6), (8, 7, 0, 0)])
@pytest.mark.parametrize("reverse", [False, True])
def test_decode_any_wiring(wiring, outputs, reverse):
    [item] = parse_display_items([make_line(outputs, wiring, reverse)])
    assert decode_item(item) == int("".join(str(d) for d in outputs))


def test_decode_worked_example():
    [item] = parse_display_items([EXAMPLE])
    assert decode_item(item) == 5353


def test_count_unique_digits():
    items = parse_display_items(
        [make_line((1, 4, 7, 8), "gfedcba"), make_line((0, 2, 3, 5)), make_line((1, 6, 9, 8))]
    )
    assert count_unique_digits(items) == 6


def test_count_unique_digits_empty():
    assert count_unique_digits([DisplayItem(signals=(), digits=())]) == 0


def test_sum_all_items_is_sum_of_decoded():
    items = parse_display_items([make_line((1, 2, 3, 4)), make_line((5, 6, 7, 8), "dcbagef")])
    assert sum_all_items(items) == decode_item(items[0]) + decode_item(items[1])
    assert sum_all_items([]) == 0


def test_run(tmp_path):
    path = tmp_path / "8.txt"
    path.write_text(EXAMPLE + "\n")
    assert run(path) == (0, 5353)