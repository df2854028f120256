# -*- test-case-name: pomocycle.model.test.test_rules -*-
from __future__ import annotations

from dataclasses import dataclass

from .timer import (
    DEFAULT_BREAK_SECONDS,
    DEFAULT_LONG_BREAK_SECONDS,
    DEFAULT_WORK_SECONDS,
)


@dataclass(frozen=True)
class CycleRules:
    """
    How long each kind of interval lasts and how many of them there are.
    """

    workSeconds: float = DEFAULT_WORK_SECONDS
    breakSeconds: float = DEFAULT_BREAK_SECONDS
    longBreakSeconds: float = DEFAULT_LONG_BREAK_SECONDS
    cyclesPerLongBreak: int = 4
    "Every Nth completed work interval is followed by a long break."
    totalCycles: int = 8
    "The number of work intervals after which the whole cycle is complete."

    def __post_init__(self) -> None:
        for name in ("workSeconds", "breakSeconds", "longBreakSeconds"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        for name in ("cyclesPerLongBreak", "totalCycles"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1")
