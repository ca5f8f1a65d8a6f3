"""Picking multiply instructions out of corrupted memory."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

__all__ = ["Instruction", "find_instructions", "find_doables"]

_INSTRUCTION = re.compile(r"mul\([0-9]+,[0-9]+\)|do\(\)|don't\(\)")


@dataclass(frozen=True)
class Instruction:
    """An operation name (``mul``, ``do`` or ``don't``) and its operands."""

    op: str
    operands: tuple[int, ...] = ()


def _to_instruction(text: str) -> Instruction:
    op, _, rest = text.partition("(")
    arguments = rest.rstrip(")")
    operands = tuple(int(value) for value in arguments.split(",")) if arguments else ()
    return Instruction(op, operands)


def find_instructions(stream: Iterable[str]) -> list[Instruction]:
    """Return every well-formed instruction in the memory, in order."""
    memory = "".join(stream)
    return [_to_instruction(match.group()) for match in _INSTRUCTION.finditer(memory)]


def find_doables(instructions: Iterable[Instruction]) -> list[Instruction]:
    """Return the instructions enabled by the most recent ``do`` or ``don't``."""
    enabled = True
    doable = []
    for instruction in instructions:
        if instruction.op == "do":
            enabled = True
        elif instruction.op == "don't":
            enabled = False
        elif enabled:
            doable.append(instruction)
    return doable