import pytest

from aocsolve.year2021_day14 import (
    apply_growth_rules,
    element_count_difference,
    grow_polymer,
    max_element_difference,
    measure_polymer_growth,
    pair_counts,
    parse_polymer_input,
    polymerize,
    run,
)

EXAMPLE = [
    "NNCB",
    "",
    "CH -> B",
    "HH -> N",
    "CB -> H",
    "NH -> C",
    "HB -> C",
    "HC -> B",
    "HN -> C",
    "NN -> C",
    "BH -> H",
    "NC -> B",
    "NB -> B",
    "BN -> B",
    "BB -> N",
    "BC -> B",
    "CC -> N",
    "CN -> C",
]


def test_grow_polymer_ten_steps():
    assert grow_polymer(EXAMPLE, 10) == 1588


def test_grow_polymer_forty_steps():
    assert grow_polymer(EXAMPLE, 40) == 2188189693529


def test_parse_polymer_input():
    template, rules = parse_polymer_input(EXAMPLE)
    assert template == "NNCB"
    assert len(rules) == 16
    assert rules["CH"] == "B"


def test_parse_invalid_rule_raises():
    with pytest.raises(ValueError):
        parse_polymer_input(["AB", "", "AB => C"])


def test_polymerize_steps():
    template, rules = parse_polymer_input(EXAMPLE)
    first = polymerize(template, rules)
    assert first == "NCNBCHB"
    assert polymerize(first, rules) == "NBCCNBBBCBHCB"


def test_pair_counts_match_string_growth():
    template, rules = parse_polymer_input(EXAMPLE)
    counts = pair_counts(template)
    for _ in range(4):
        template = polymerize(template, rules)
        counts = apply_growth_rules(counts, rules)
    assert counts == pair_counts(template)
    assert max_element_difference(counts, "NNCB") == (
        max(template.count(c) for c in set(template))
        - min(template.count(c) for c in set(template))
    )


def test_pair_counts_simple():
    assert pair_counts("NNCB") == {"NN": 1, "NC": 1, "CB": 1}


def test_pairs_without_rules_vanish():
    assert apply_growth_rules({"AB": 2, "XY": 1}, {"AB": "C"}) == {"AC": 2, "CB": 2}


@pytest.mark.parametrize("template, expected", [("AAB", 1), ("BAA", 1), ("NNNN", 0), ("", 0)])
def test_element_count_difference(template, expected):
    assert element_count_difference(template) == expected


def test_measure_polymer_growth_zero_steps():
    assert measure_polymer_growth(EXAMPLE, 0) == element_count_difference("NNCB")


def test_run_reads_file(tmp_path):
    path = tmp_path / "14.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert run(path) == (1588, 2188189693529)