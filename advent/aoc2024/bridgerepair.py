"""Bridge repair: finding operators that make calibration equations true."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import product
from typing import Iterable, Sequence

__all__ = [
    "Operator",
    "ALL_OPERATORS",
    "PartialEquation",
    "parse_calibration_equations",
]


class Operator(Enum):
    """Operators that can be placed between operands."""

    PLUS = 0
    TIMES = 1
    CONCAT = 2


ALL_OPERATORS: tuple[Operator, ...] = (Operator.PLUS, Operator.TIMES, Operator.CONCAT)

_DEFAULT_OPERATORS: tuple[Operator, ...] = (Operator.PLUS, Operator.TIMES)


@dataclass(frozen=True)
class PartialEquation:
    """An expected result and the operands whose operators are missing."""

    expected_value: int
    operands: tuple[int, ...]

    def operator_alternatives(self, *operators: Operator) -> list[list[Operator]]:
        """Return every way to fill the gaps between operands, in counting order.

        With no operators given, only PLUS and TIMES are considered.
        """
        considered = operators or _DEFAULT_OPERATORS
        gaps = max(len(self.operands) - 1, 0)
        return [list(choice) for choice in product(considered, repeat=gaps)]

    def could_be_made_true(self, *operators: Operator) -> bool:
        """Whether some choice of operators evaluates to the expected value."""
        return any(
            self.evaluate(choice) == self.expected_value
            for choice in self.operator_alternatives(*operators)
        )

    def evaluate(self, operators: Sequence[Operator]) -> int:
        """Evaluate the operands strictly left to right with ``operators``."""
        if not self.operands:
            raise ValueError("an equation needs at least one operand")
        if len(operators) < len(self.operands) - 1:
            raise ValueError("too few operators for the operands")
        answer = self.operands[0]
        for operator, operand in zip(operators, self.operands[1:]):
            if operator is Operator.PLUS:
                answer += operand
            elif operator is Operator.TIMES:
                answer *= operand
            elif operator is Operator.CONCAT:
                answer = int(f"{answer}{operand}")
        return answer


def parse_calibration_equations(stream: Iterable[str]) -> list[PartialEquation]:
    """Parse lines of the form ``<value>: <operand> <operand> ...``."""
    equations = []
    for raw_line in stream:
        fields = raw_line.split()
        if not fields:
            continue
        expected = int(fields[0].rstrip(":"))
        equations.append(PartialEquation(expected, tuple(int(value) for value in fields[1:])))
    return equations