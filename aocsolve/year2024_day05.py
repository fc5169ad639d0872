"""2024 day 5: ordering safety manual page updates."""

import logging
import re
from functools import cmp_to_key, partial
from pathlib import Path

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(part, line):
    if not _INTEGER.fullmatch(part):
        raise ValueError(f"Error parsing line: [{line}] | part: [{part}]")
    return int(part)


def parse_manual(text):
    """Return (ordering rules as tuples, updates as lists of page numbers)."""
    rules = []
    updates = []
    for line in text.split("\n"):
        if not line:
            continue
        parts = line.split("|")
        if len(parts) > 1:
            rules.append(tuple(_parse_int(part, line) for part in parts))
        parts = line.split(",")
        if len(parts) > 1:
            updates.append([_parse_int(part, line) for part in parts])
    return rules, updates


def flatten_rules(rules):
    """Map each page to the pages that must come after it."""
    rule_map = {}
    for rule in rules:
        rule_map.setdefault(rule[0], []).append(rule[1])
    return rule_map


def is_ordered(update, rule_map):
    """True when no page is directly preceded by one that must come after it."""
    return not any(
        previous in rule_map.get(current, ())
        for previous, current in zip(update, update[1:])
    )


def _rule_order(rule_map, first, second):
    """Order ``first`` before ``second`` only when a rule demands it."""
    followers = rule_map.get(first, ())
    if second in followers:
        return -1
    return 1


def fix_order(update, rule_map):
    """Return the update sorted so that pages follow the rules."""
    return sorted(update, key=cmp_to_key(partial(_rule_order, rule_map)))


def run(path):
    """Solve both parts for the input file at ``path``."""
    rules, updates = parse_manual(Path(path).read_bytes().decode("utf-8"))
    rule_map = flatten_rules(rules)
    verified = 0
    fixed = 0
    for index, update in enumerate(updates):
        logger.info("Checking update at [%d]: %s", index, update)
        if is_ordered(update, rule_map):
            verified += update[len(update) // 2]
        else:
            repaired = fix_order(update, rule_map)
            logger.info("Fixed update: %s", repaired)
            fixed += repaired[len(repaired) // 2]
    print(f"Part 1 | Sum of middle pages: [{verified}]")
    print(f"Part 2 | Sum of fixed pages: [{fixed}]")
    return verified, fixed