"""Trebuchet calibration values from digits and spelled-out digits."""

from __future__ import annotations

from typing import Iterable

__all__ = ["calibration_value", "process_calibration_document"]

_DIGIT_WORDS = {
    "one": "1",
    "two": "2",
    "three": "3",
    "four": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "nine": "9",
}


def _digits(line: str) -> list[str]:
    digits = []
    for position, character in enumerate(line):
        if character.isdecimal():
            digits.append(character)
        digits.extend(
            digit for word, digit in _DIGIT_WORDS.items() if line.startswith(word, position)
        )
    return digits


def calibration_value(line: str) -> int:
    """Return the two-digit number made of the first and last digit in ``line``."""
    digits = _digits(line)
    if not digits:
        raise ValueError(f"no digits in calibration line {line!r}")
    return int(digits[0] + digits[-1])


def process_calibration_document(stream: Iterable[str]) -> int:
    """Sum the calibration values of every line in ``stream``."""
    return sum(calibration_value(line.rstrip("\r\n")) for line in stream)