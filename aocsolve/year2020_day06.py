"""2020 day 6: customs declaration answers."""

from collections import Counter

from aocsolve.inputs import log_result, read_lines


def _tally(answers, members):
    anyone = len(answers)
    everyone = sum(1 for count in answers.values() if count == members)
    return anyone, everyone


def count_customs_answers(lines):
    """Return (questions anyone answered, questions everyone answered) summed over groups."""
    anyone = everyone = 0
    answers = Counter()
    members = 0
    for line in lines:
        if not line:
            group_any, group_every = _tally(answers, members)
            anyone += group_any
            everyone += group_every
            answers = Counter()
            members = 0
            continue
        answers.update(line)
        members += 1
    if answers:
        group_any, group_every = _tally(answers, members)
        anyone += group_any
        everyone += group_every
    return anyone, everyone


def run(path):
    """Solve both parts for the input file at ``path``."""
    anyone, everyone = count_customs_answers(read_lines(path))
    log_result(6, 1, "Total Customs answer count (anyone answered)", anyone)
    log_result(6, 2, "Total Customs answer count (everyone answered)", everyone)
    return anyone, everyone