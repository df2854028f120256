# -*- test-case-name: pomocycle.model.test.test_machine -*-
from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from .boundaries import Notice, Phase
from .task import AnyTask


@dataclass(frozen=True)
class Transition:
    """
    The machine moved from one phase to another, possibly retiring a task
    along the way.
    """

    old: Phase
    new: Phase
    completedTask: AnyTask | None = None
    """
    The task that was finished by the work interval that just ended, if there
    was one.  It has already been removed from the queue.
    """

    @property
    def changed(self) -> bool:
        return self.old is not self.new

    def __str__(self) -> str:
        task = "None" if self.completedTask is None else str(self.completedTask)
        return f"(from: {self.old}, to: {self.new}, completed: {task})"


Message: TypeAlias = "Transition | Notice"
"""
Anything a L{PomodoroMachine} operation can report back to its caller.
"""
