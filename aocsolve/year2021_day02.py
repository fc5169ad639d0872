"""2021 day 2: piloting the submarine."""

import logging

from aocsolve.inputs import log_result, read_lines

logger = logging.getLogger(__name__)


def _parse_command(command):
    parts = command.split(" ")
    if len(parts) != 2:
        raise ValueError(f"Invalid line: {command!r}")
    name, value = parts
    try:
        amount = int(value)
    except ValueError as exc:
        raise ValueError(f"Error parsing command: {command!r}") from exc
    return name, amount


def calc_coordinates(commands, use_aim):
    """Follow the commands and return the final (horizontal position, depth).

    With ``use_aim`` the up and down commands steer an aim value that
    ``forward`` applies to the depth; otherwise they change depth directly.
    Unknown commands are skipped.
    """
    x = y = aim = 0
    for command in commands:
        name, amount = _parse_command(command)
        if name == "forward":
            x += amount
            if use_aim:
                y += aim * amount
        elif name == "down":
            if use_aim:
                aim += amount
            else:
                y += amount
        elif name == "up":
            if use_aim:
                aim -= amount
            else:
                y -= amount
        else:
            logger.warning("Invalid command: %s", name)
    return x, y


def run(path):
    """Solve both parts for the input file at ``path``."""
    commands = read_lines(path)
    x, y = calc_coordinates(commands, False)
    simple = x * y
    log_result(2, 1, "Simple product is: ", simple)
    x, y = calc_coordinates(commands, True)
    aimed = x * y
    log_result(2, 2, "Aimed product is: ", aimed)
    return simple, aimed