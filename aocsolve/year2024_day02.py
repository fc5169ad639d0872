"""2024 day 2: safety of reactor level reports."""

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _lines(text):
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_reports(text):
    """Parse one report of space separated levels per line."""
    reports = []
    for line in _lines(text):
        levels = []
        for index, level in enumerate(line.split(" ")):
            if not _INTEGER.fullmatch(level):
                raise ValueError(f"Error parsing index: {index} | level: {level!r}")
            levels.append(int(level))
        reports.append(levels)
    return reports


def is_safe(report):
    """True when levels all rise or all fall by 1 to 3 at each step.

    The direction is set by the first two levels.
    """
    if len(report) < 2:
        return True
    increasing = report[1] > report[0]
    for previous, current in zip(report, report[1:]):
        diff = current - previous
        if increasing and not 1 <= diff <= 3:
            return False
        if not increasing and not -3 <= diff <= -1:
            return False
    return True


def is_safe_with_dampener(report):
    """True when the report is safe, or becomes safe without one of its levels."""
    if is_safe(report):
        return True
    return any(
        is_safe(report[:index] + report[index + 1:]) for index in range(len(report))
    )


def run(path):
    """Solve both parts for the input file at ``path``."""
    reports = parse_reports(Path(path).read_bytes().decode("utf-8"))
    safe = 0
    dampened = 0
    for report in reports:
        if is_safe(report):
            safe += 1
        elif is_safe_with_dampener(report):
            dampened += 1
        else:
            logger.info("Invalid report. Report: %s", report)
    print(f"Result for part 1: {safe}")
    print(f"Result for part 2: {safe + dampened}")
    return safe, safe + dampened