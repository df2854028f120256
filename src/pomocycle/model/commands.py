# -*- test-case-name: pomocycle.model.test.test_commands -*-
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, TypeAlias

from .boundaries import NoSuchTask, Notice, Phase
from .task import AnyTask

if TYPE_CHECKING:
    from .machine import PomodoroMachine
    from .messages import Message


class Command(Enum):
    """
    Commands that take no arguments.  Each one names the
    L{PomodoroMachine} method that carries it out.
    """

    Start = "start"
    Reset = "reset"
    Clear = "clear"
    Pause = "pause"
    Unpause = "unpause"
    TogglePause = "togglePause"
    Update = "update"

    def applyTo(self, machine: PomodoroMachine) -> Message:
        method: Callable[[], Message] = getattr(machine, self.value)
        return method()


@dataclass(frozen=True)
class AddTask:
    task: AnyTask

    def applyTo(self, machine: PomodoroMachine) -> Message:
        return machine.addTask(self.task)


@dataclass(frozen=True)
class RemoveTask:
    index: int

    def applyTo(self, machine: PomodoroMachine) -> Message:
        try:
            machine.removeTask(self.index)
        except NoSuchTask:
            return Notice.Rejected
        return Notice.Executed


@dataclass(frozen=True)
class SkipTo:
    phase: Phase

    def applyTo(self, machine: PomodoroMachine) -> Message:
        return machine.skipTo(self.phase)


AnyCommand: TypeAlias = "Command | AddTask | RemoveTask | SkipTo"
"""
Anything that can be passed to L{PomodoroMachine.execute}.
"""
