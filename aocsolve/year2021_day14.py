"""2021 day 14: extended polymerization."""

import logging
from collections import Counter

from aocsolve.inputs import log_result, read_lines

logger = logging.getLogger(__name__)


def parse_polymer_input(lines):
    """Return (template, rules mapping a pair to the element inserted between)."""
    template = lines[0]
    rules = {}
    for line in lines[2:]:
        parts = line.split(" -> ")
        if len(parts) != 2:
            raise ValueError(f"Invalid rule: {line!r}")
        rules[parts[0]] = parts[1]
    return template, rules


def polymerize(template, rules):
    """Apply one insertion step to the whole template."""
    if not template:
        return ""
    result = [template[0]]
    for first, second in zip(template, template[1:]):
        inserted = rules.get(first + second)
        if inserted is not None:
            result.append(inserted)
        result.append(second)
    return "".join(result)


def element_count_difference(template):
    """Count of the most common element minus that of the least common.

    The leaders are tracked while scanning, so an element only takes the lead
    at the moment its own count is compared.
    """
    counts = Counter()
    most = least = None
    for element in template:
        counts[element] += 1
        if most is None or counts[most] < counts[element]:
            most = element
        if least is None or counts[least] > counts[element]:
            least = element
    if most is None:
        return 0
    logger.debug("counts: %s", dict(counts))
    return counts[most] - counts[least]


def measure_polymer_growth(lines, steps):
    """Grow the polymer string itself and return the element count difference."""
    template, rules = parse_polymer_input(lines)
    for step in range(steps):
        template = polymerize(template, rules)
        logger.debug("step: %d length: %d", step + 1, len(template))
    return element_count_difference(template)


def pair_counts(template):
    """Occurrences of each adjacent pair of elements."""
    counts = {}
    for first, second in zip(template, template[1:]):
        pair = first + second
        counts[pair] = counts.get(pair, 0) + 1
    return counts


def apply_growth_rules(counts, rules):
    """Pair counts after one step; pairs without a rule do not carry over."""
    following = {}
    for pair, inserted in rules.items():
        count = counts.get(pair)
        if count is None:
            continue
        for new_pair in (pair[0] + inserted, inserted + pair[1]):
            following[new_pair] = following.get(new_pair, 0) + count
    return following


def max_element_difference(counts, template):
    """Most minus least common element, from pair counts and the unchanging first element."""
    elements = {}
    for pair, count in counts.items():
        elements[pair[1]] = elements.get(pair[1], 0) + count
    elements[template[0]] = elements.get(template[0], 0) + 1
    return max(elements.values()) - min(elements.values())


def grow_polymer(lines, steps):
    """Element count difference after ``steps`` steps, tracked through pair counts."""
    template, rules = parse_polymer_input(lines)
    counts = pair_counts(template)
    for _ in range(steps):
        counts = apply_growth_rules(counts, rules)
    return max_element_difference(counts, template)


def run(path):
    """Solve both parts for the input file at ``path``."""
    lines = read_lines(path)
    short = grow_polymer(lines, 10)
    log_result(14, 1, "Count after 10 steps: ", short)
    long = grow_polymer(lines, 40)
    log_result(14, 2, "Count after 40 steps: ", long)
    return short, long