"""2021 day 12: paths through a cave system."""

import logging
from dataclasses import dataclass, field

from aocsolve.inputs import log_result, read_lines

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Cave:
    """A cave and the caves reachable from it in one step."""

    name: str
    connections: list = field(default_factory=list, repr=False)

    @property
    def is_small(self):
        return self.name == self.name.lower()

    @property
    def is_start(self):
        return self.name == "start"

    @property
    def is_end(self):
        return self.name == "end"

    def add_connection(self, other):
        """Link to ``other`` unless already linked, it is the start, or this is the end."""
        if any(conn.name == other.name for conn in self.connections):
            return
        if other.is_start or self.is_end:
            return
        self.connections.append(other)


def parse_cave_system(lines):
    """Build the caves from 'a-b' lines; malformed lines are skipped."""
    caves = {}
    for line in lines:
        ends = line.split("-")
        if len(ends) != 2:
            logger.warning("Error parsing cave connection: %s", line)
            continue
        first, second = (caves.setdefault(name, Cave(name)) for name in ends)
        first.add_connection(second)
        second.add_connection(first)
    return caves


def is_cave_visited(cave, twice_cave, visited):
    """True when ``cave`` may not be entered again given the path so far.

    ``twice_cave`` is the one small cave allowed a second visit, or None.
    """
    seen = sum(1 for name in visited if name == cave.name)
    if twice_cave is None or cave.name != twice_cave.name:
        return seen >= 1
    return seen >= 2


def count_paths(cave, twice_cave, visited):
    """Number of paths from ``cave`` to the end, given the small caves already visited."""
    if cave.is_end:
        return 1
    visited = tuple(visited)
    if cave.is_small and not cave.is_start and not is_cave_visited(cave, twice_cave, visited):
        visited += (cave.name,)
    total = 0
    for conn in cave.connections:
        if (
            conn.is_small
            and not conn.is_end
            and not cave.is_start
            and is_cave_visited(conn, twice_cave, visited)
        ):
            continue
        total += count_paths(conn, twice_cave, visited)
    return total


def count_cave_paths(lines):
    """Return (paths visiting small caves once, paths allowing one small cave twice)."""
    caves = parse_cave_system(lines)
    logger.debug("Number of caves: %d", len(caves))
    start = caves.get("start")
    if start is None:
        raise ValueError("cave system has no start")
    paths = count_paths(start, None, ())
    with_twice = paths
    for cave in caves.values():
        if cave.is_start or cave.is_end or not cave.is_small:
            continue
        with_twice += count_paths(start, cave, ()) - paths
    return paths, with_twice


def run(path):
    """Solve both parts for the input file at ``path``."""
    paths, with_twice = count_cave_paths(read_lines(path))
    log_result(12, 1, "Count of paths: ", paths)
    log_result(12, 2, "Count of paths (with double traversal): ", with_twice)
    return paths, with_twice