"""2020 day 4: passport validation."""

import re

from aocsolve.inputs import log_result, read_lines

_FIELD = re.compile(r"(\w+):(#*\w+)\s*", re.ASCII)
_DIGITS = re.compile(r"[0-9]+")
_EYE_COLOURS = frozenset({"amb", "blu", "brn", "gry", "grn", "hzl", "oth"})
_HEX_CHARS = "#0123456789abcdef"


def _number(value):
    return int(value) if _DIGITS.fullmatch(value) else None


def _in_range(value, low, high):
    number = _number(value)
    return number is not None and low <= number <= high


def _valid_height(value):
    if value.endswith("cm"):
        return _in_range(value[:-2], 150, 193)
    if value.endswith("in"):
        return _in_range(value[:-2], 59, 76)
    return False


def _valid_hair(value):
    return value.startswith("#") and len(value) == 7 and not value.strip(_HEX_CHARS)


def _valid_pid(value):
    return len(value) == 9 and not value.strip("0123456789")


_STRICT_CHECKS = {
    "byr": lambda value: _in_range(value, 1920, 2002),
    "iyr": lambda value: _in_range(value, 2010, 2020),
    "eyr": lambda value: _in_range(value, 2020, 2030),
    "hgt": _valid_height,
    "hcl": _valid_hair,
    "ecl": lambda value: value in _EYE_COLOURS,
    "pid": _valid_pid,
}


def _parse_fields(text):
    return _FIELD.findall(text)


def count_valid_passports(lines, strict):
    """Count valid passports among blank-line separated records."""
    count = 0
    record = ""
    for line in lines:
        if line:
            record += " " + line
            continue
        if is_valid_document(_parse_fields(record), strict):
            count += 1
        record = ""
    if record and is_valid_document(_parse_fields(record), strict):
        count += 1
    return count


def is_valid_document(fields, strict):
    """Check a passport given as (key, value) pairs.

    Seven required fields must be valid; ``cid`` is optional.
    """
    valid = 0
    has_country = False
    for key, value in fields:
        if key == "cid":
            valid += 1
            has_country = True
        elif key in _STRICT_CHECKS:
            if not strict or _STRICT_CHECKS[key](value):
                valid += 1
    if valid < 7:
        return False
    if valid >= 8:
        return True
    return not has_country


def run(path):
    """Solve both parts for the input file at ``path``."""
    lines = read_lines(path)
    loose = count_valid_passports(lines, False)
    log_result(4, 1, "Valid passport count", loose)
    strict = count_valid_passports(lines, True)
    log_result(4, 2, "Valid passport count", strict)
    return loose, strict