"""2020 day 8: handheld console boot code."""

import logging
import re
from dataclasses import dataclass, replace

from aocsolve.inputs import log_result, read_lines

logger = logging.getLogger(__name__)

_INSTRUCTION = re.compile(r"(\w+) (\W\w+)", re.ASCII)
_SWAPS = {"jmp": "nop", "nop": "jmp"}


@dataclass(frozen=True)
class Instruction:
    """One boot code instruction."""

    cmd: str
    step: int


def parse_instructions(commands):
    """Parse instruction lines, skipping those that do not parse."""
    instructions = []
    for command in commands:
        match = _INSTRUCTION.search(command)
        if match is None:
            logger.warning("Invalid pattern: %s", command)
            continue
        try:
            step = int(match[2])
        except ValueError as exc:
            logger.warning("Error parsing step: %s", exc)
            continue
        instructions.append(Instruction(cmd=match[1], step=step))
    return instructions


def find_loop(instructions):
    """Run the program; return (accumulator, whether an instruction repeated)."""
    accumulator = 0
    executed = set()
    pc = 0
    while pc < len(instructions):
        if pc < 0:
            raise IndexError(f"instruction pointer out of range: {pc}")
        if pc in executed:
            return accumulator, True
        executed.add(pc)
        instruction = instructions[pc]
        if instruction.cmd == "acc":
            accumulator += instruction.step
            pc += 1
        elif instruction.cmd == "jmp":
            pc += instruction.step
        elif instruction.cmd == "nop":
            pc += 1
    return accumulator, False


def fix_loop(instructions):
    """Swap one jmp/nop so the program ends; return its accumulator, or 0."""
    for index, instruction in enumerate(instructions):
        swapped = _SWAPS.get(instruction.cmd)
        if swapped is None:
            continue
        patched = list(instructions)
        patched[index] = replace(instruction, cmd=swapped)
        accumulator, looped = find_loop(patched)
        if not looped:
            return accumulator
    return 0


def run(path):
    """Solve both parts for the input file at ``path``."""
    instructions = parse_instructions(read_lines(path))
    before, _ = find_loop(instructions)
    log_result(8, 1, "Accumulator value before loop", before)
    fixed = fix_loop(instructions)
    log_result(8, 2, "Accumulator value after fixing loop", fixed)
    return before, fixed