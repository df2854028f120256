# -*- test-case-name: pomocycle.model.test.test_timer -*-
from __future__ import annotations

from dataclasses import dataclass, field

from twisted.python.runtime import seconds as runtimeSeconds

from .boundaries import Clock, Timer

DEFAULT_WORK_SECONDS = 25 * 60
DEFAULT_BREAK_SECONDS = 5 * 60
DEFAULT_LONG_BREAK_SECONDS = 30 * 60


@dataclass
class WallClock:
    """
    A L{Clock} that reports the real time.
    """

    def seconds(self) -> float:
        return runtimeSeconds()


@dataclass
class PausableTimer:
    """
    A timer that measures time with a L{Clock}.

    Pausing does not stop the clock; instead, when the timer resumes, the
    time spent paused is added onto the goal.
    """

    clock: Clock
    originalGoal: float
    "The goal, in seconds, that the timer is reset to whenever it starts."

    _startedAt: float | None = None
    _pausedAt: float | None = None
    _extendedGoal: float = field(init=False)

    def __post_init__(self) -> None:
        self._extendedGoal = self.originalGoal

    @classmethod
    def work(cls, clock: Clock) -> PausableTimer:
        return cls(clock, DEFAULT_WORK_SECONDS)

    @classmethod
    def shortBreak(cls, clock: Clock) -> PausableTimer:
        return cls(clock, DEFAULT_BREAK_SECONDS)

    @classmethod
    def longBreak(cls, clock: Clock) -> PausableTimer:
        return cls(clock, DEFAULT_LONG_BREAK_SECONDS)

    def start(self) -> None:
        self._extendedGoal = self.originalGoal
        self._startedAt = self.clock.seconds()
        self._pausedAt = None

    def reset(self) -> None:
        self.start()

    def elapsed(self) -> float | None:
        if self._startedAt is None:
            return None
        return self.clock.seconds() - self._startedAt

    def goal(self) -> float:
        return self._extendedGoal

    def hasStarted(self) -> bool:
        return self._startedAt is not None

    def isCompleted(self) -> bool:
        elapsed = self.elapsed()
        if elapsed is None:
            return False
        return elapsed >= self.goal() and not self.isPaused()

    def percentage(self) -> float:
        elapsed = self.elapsed()
        if elapsed is None:
            return 0.0
        goal = self.goal()
        if goal <= 0:
            return 1.0
        return elapsed / goal

    def isPaused(self) -> bool:
        return self._pausedAt is not None

    def pause(self) -> None:
        if self._pausedAt is None:
            self._pausedAt = self.clock.seconds()

    def resume(self) -> None:
        if self._pausedAt is not None:
            self._extendedGoal += self.clock.seconds() - self._pausedAt
            self._pausedAt = None


_PausableTimerImplements: type[Timer] = PausableTimer
