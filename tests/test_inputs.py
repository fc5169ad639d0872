import pytest

from aocsolve.inputs import (
    log_result,
    parse_csv_numbers,
    read_csv_numbers,
    read_digit_grid,
    read_ints,
    read_lines,
)


def _write(tmp_path, text):
    path = tmp_path / "input.txt"
    path.write_bytes(text.encode("utf-8"))
    return path


def test_read_lines_splits_on_newlines(tmp_path):
    path = _write(tmp_path, "abc\n\ndef\n")
    assert read_lines(path) == ["abc", "", "def"]


def test_read_lines_drops_text_after_last_newline(tmp_path):
    path = _write(tmp_path, "first\nsecond")
    assert read_lines(path) == ["first"]


def test_read_lines_keeps_carriage_returns(tmp_path):
    path = _write(tmp_path, "a\r\nb\r\n")
    assert read_lines(path) == ["a\r", "b\r"]


def test_read_ints(tmp_path):
    path = _write(tmp_path, "1721\n-979\n+366\n")
    assert read_ints(path) == [1721, -979, 366]


def test_read_ints_rejects_garbage(tmp_path):
    path = _write(tmp_path, "12\nabc\n")
    with pytest.raises(ValueError):
        read_ints(path)


def test_read_ints_rejects_underscores(tmp_path):
    path = _write(tmp_path, "1_000\n")
    with pytest.raises(ValueError):
        read_ints(path)


def test_parse_csv_numbers():
    assert parse_csv_numbers("3,4,3,1,2") == [3, 4, 3, 1, 2]


def test_parse_csv_numbers_rejects_empty_field():
    with pytest.raises(ValueError, match="Error parsing num"):
        parse_csv_numbers("3,,4")


def test_read_csv_numbers_joins_lines(tmp_path):
    path = _write(tmp_path, "1,2\n3\n")
    assert read_csv_numbers(path) == [1, 2, 3]


def test_read_digit_grid(tmp_path):
    path = _write(tmp_path, "219\n398\n")
    assert read_digit_grid(path) == [[2, 1, 9], [3, 9, 8]]


def test_read_digit_grid_rejects_non_digit(tmp_path):
    path = _write(tmp_path, "21x\n")
    with pytest.raises(ValueError):
        read_digit_grid(path)


def test_log_result_format(capsys):
    log_result(3, 1, "Trees encountered", 7)
    assert capsys.readouterr().out == "Day 3 | Part 1 | Trees encountered: 7\n"