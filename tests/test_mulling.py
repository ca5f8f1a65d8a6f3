import io

from advent.aoc2024.mulling import Instruction, find_doables, find_instructions

FIRST = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
SECOND = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_find_instructions():
    instructions = find_instructions(io.StringIO(FIRST))
    assert len(instructions) == 4
    assert len(instructions[0].operands) == 2
    assert sum(i.operands[0] * i.operands[1] for i in instructions) == 161


def test_find_doables():
    instructions = find_instructions(io.StringIO(SECOND))
    assert len(instructions) == 6
    assert len(instructions[0].operands) == 2
    doables = find_doables(instructions)
    assert sum(i.operands[0] * i.operands[1] for i in doables) == 48


def test_instruction_contents():
    instructions = find_instructions(io.StringIO(SECOND))
    assert instructions[0] == Instruction("mul", (2, 4))
    assert [i.op for i in instructions] == ["mul", "don't", "mul", "mul", "do", "mul"]


def test_find_doables_starts_enabled():
    instructions = [Instruction("mul", (1, 2)), Instruction("don't"), Instruction("mul", (3, 4))]
    assert find_doables(instructions) == [Instruction("mul", (1, 2))]