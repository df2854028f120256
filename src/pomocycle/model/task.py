# -*- test-case-name: pomocycle.model.test.test_machine -*-
from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from .boundaries import Task


@dataclass
class SimpleTask:
    """
    A task that is nothing but a description.
    """

    description: str
    completed: bool = False

    def complete(self) -> None:
        self.completed = True

    def __str__(self) -> str:
        return self.description


_SimpleTaskImplements: type[Task] = SimpleTask

AnyTask: TypeAlias = SimpleTask
"""
Any kind of task that can sit in a L{PomodoroMachine}'s queue.
"""
