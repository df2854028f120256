# -*- test-case-name: pomocycle.model.test -*-
from __future__ import annotations

from enum import Enum
from typing import Protocol


class Phase(Enum):
    """
    One discrete mode of the pomodoro cycle.
    """

    NotStarted = "NotStarted"
    """
    The machine has been built but nobody has called C{start} yet.
    """

    Pending = "Pending"
    """
    Started, waiting for the next poll to begin the first work interval.
    """

    Working = "Working"
    Break = "Break"
    LongBreak = "LongBreak"

    Paused = "Paused"
    """
    One of the timed phases was interrupted; the machine remembers which one.
    """

    Completed = "Completed"
    """
    All cycles are done.  Polling no longer does anything.
    """

    label: str

    @property
    def timed(self) -> bool:
        """
        Does this phase have a timer of its own?
        """
        return self in TIMED_PHASES

    def __str__(self) -> str:
        return self.label


Phase.NotStarted.label = "Not Started"
Phase.Pending.label = "Pending"
Phase.Working.label = "Working"
Phase.Break.label = "Break"
Phase.LongBreak.label = "Long Break"
Phase.Paused.label = "Paused"
Phase.Completed.label = "Completed"

TIMED_PHASES = frozenset({Phase.Working, Phase.Break, Phase.LongBreak})


class Notice(Enum):
    """
    Messages that are not transitions between phases.
    """

    NoChange = "NoChange"
    "Nothing happened."

    Reset = "Reset"
    "The machine was reset to its initial phase."

    Executed = "Executed"
    "A change to the task queue was applied."

    Rejected = "Rejected"
    "A change to the task queue was refused; nothing was modified."


class NoSuchTask(IndexError):
    """
    A task index did not refer to any task in the queue.
    """


class Clock(Protocol):
    """
    The part of L{twisted.internet.interfaces.IReactorTime} that timers need.
    """

    def seconds(self) -> float:
        """
        The current time, in seconds.
        """


class Timer(Protocol):
    """
    Tracks elapsed time against a goal.
    """

    def start(self) -> None:
        """
        Start (or restart) counting from zero.
        """

    def reset(self) -> None:
        """
        Put the timer back to a fresh state; usually the same as C{start}.
        """

    def elapsed(self) -> float | None:
        """
        Seconds since C{start}, or C{None} if the timer never started.
        """

    def goal(self) -> float:
        """
        The number of seconds that must elapse for the timer to complete,
        including any time that was spent paused.
        """

    def hasStarted(self) -> bool:
        ...

    def isCompleted(self) -> bool:
        """
        Has the goal been reached?  A paused timer is never completed.
        """

    def percentage(self) -> float:
        """
        Fraction of the goal elapsed so far.
        """

    def isPaused(self) -> bool:
        ...

    def pause(self) -> None:
        ...

    def resume(self) -> None:
        ...


class Task(Protocol):
    """
    Something the user wants to get done during a work interval.
    """

    @property
    def completed(self) -> bool:
        """
        Has this task been retired?
        """

    def complete(self) -> None:
        """
        Mark this task as done.
        """
