from __future__ import annotations

from typing import Any
from typing import Literal
from typing import TypedDict


AnswerValue = Any
"""The answer to a puzzle, either a string or a number. Numbers are coerced to a string"""
PuzzlePart = Literal["a", "b"]
"""Suffix of a resource file holding the input for one level only"""


class Durations(TypedDict):
    """Elapsed milliseconds for each phase of a solution, see `log_durations`"""

    parsing: int
    part_1: int
    part_2: int
    total: int
