from aocsolve.year2020_day06 import count_customs_answers, run

EXAMPLE = ["abc", "", "a", "b", "c", "", "ab", "ac", "", "a", "a", "a", "a", "", "b"]


def test_count_customs_answers():
    assert count_customs_answers(EXAMPLE) == (11, 6)


def test_everyone_never_exceeds_anyone():
    anyone, everyone = count_customs_answers(EXAMPLE[:5])
    assert everyone <= anyone
    assert (anyone, everyone) == (6, 3)


def test_run(tmp_path):
    path = tmp_path / "6.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert run(path) == (11, 6)