# -*- test-case-name: pomocycle.model.test.test_machine -*-
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from twisted.logger import Logger

from .boundaries import Clock, NoSuchTask, Notice, Phase, Timer
from .commands import AnyCommand
from .messages import Message, Transition
from .rules import CycleRules
from .task import AnyTask
from .timer import PausableTimer
from .util import intervalSummary

log = Logger()


@dataclass(frozen=True)
class MachineSnapshot:
    """
    Plain data describing a L{PomodoroMachine} at one moment, for something
    to display.
    """

    phase: Phase
    previousPhase: Phase
    task: str | None
    "Description of the task at the front of the queue."
    elapsed: float
    "Seconds elapsed on the active timer, 0 if there isn't one."
    goal: float
    "Goal of the active timer, 0 if there isn't one."
    percentage: float
    cycleCount: int
    totalCycles: int
    pendingTasks: int


@dataclass
class PomodoroMachine:
    """
    State machine that alternates between work and break intervals, retiring
    one queued task each time a work interval completes.

    Nothing happens on its own; the caller must poll L{PomodoroMachine.update}
    often enough for its own purposes, and every operation returns a
    L{Message} describing what changed.
    """

    _workTimer: Timer
    _breakTimer: Timer
    _longBreakTimer: Timer

    _tasks: list[AnyTask] = field(default_factory=list)
    "Tasks still to be done, front of the queue first."

    _cyclesPerLongBreak: int = 4
    _totalCycles: int = 8

    _cycleCount: int = 0
    "How many work intervals have completed."

    _phase: Phase = Phase.NotStarted
    _previousPhase: Phase = Phase.NotStarted
    """
    The phase before the current one.  While paused, this is the phase that
    will be resumed.
    """

    def __post_init__(self) -> None:
        if self._cyclesPerLongBreak < 1:
            raise ValueError("cyclesPerLongBreak must be at least 1")
        if self._totalCycles < 1:
            raise ValueError("totalCycles must be at least 1")

    @classmethod
    def fromRules(
        cls,
        rules: CycleRules,
        clock: Clock,
        tasks: Iterable[AnyTask] = (),
    ) -> PomodoroMachine:
        """
        Build a machine with one L{PausableTimer} per timed phase, all reading
        the given clock.
        """
        return cls(
            _workTimer=PausableTimer(clock, rules.workSeconds),
            _breakTimer=PausableTimer(clock, rules.breakSeconds),
            _longBreakTimer=PausableTimer(clock, rules.longBreakSeconds),
            _tasks=list(tasks),
            _cyclesPerLongBreak=rules.cyclesPerLongBreak,
            _totalCycles=rules.totalCycles,
        )

    # accessors

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def previousPhase(self) -> Phase:
        return self._previousPhase

    @property
    def cycleCount(self) -> int:
        return self._cycleCount

    @property
    def tasks(self) -> Sequence[AnyTask]:
        return self._tasks

    @property
    def task(self) -> AnyTask | None:
        """
        The task currently being worked on, i.e. the front of the queue.
        """
        return self._tasks[0] if self._tasks else None

    @property
    def timer(self) -> Timer | None:
        """
        The timer of the current phase, if the current phase is timed.
        """
        return self._timerFor(self._phase)

    def isPaused(self) -> bool:
        return self._phase is Phase.Paused

    def isCompleted(self) -> bool:
        return self._phase is Phase.Completed

    def snapshot(self) -> MachineSnapshot:
        timer = self.timer
        elapsed = timer.elapsed() if timer is not None else None
        task = self.task
        return MachineSnapshot(
            phase=self._phase,
            previousPhase=self._previousPhase,
            task=None if task is None else str(task),
            elapsed=0.0 if elapsed is None else elapsed,
            goal=0.0 if timer is None else timer.goal(),
            percentage=0.0 if timer is None else timer.percentage(),
            cycleCount=self._cycleCount,
            totalCycles=self._totalCycles,
            pendingTasks=len(self._tasks),
        )

    # reconfiguration

    @property
    def workTimer(self) -> Timer:
        return self._workTimer

    @workTimer.setter
    def workTimer(self, timer: Timer) -> None:
        self._workTimer = timer
        self._installed(Phase.Working, timer)

    @property
    def breakTimer(self) -> Timer:
        return self._breakTimer

    @breakTimer.setter
    def breakTimer(self, timer: Timer) -> None:
        self._breakTimer = timer
        self._installed(Phase.Break, timer)

    @property
    def longBreakTimer(self) -> Timer:
        return self._longBreakTimer

    @longBreakTimer.setter
    def longBreakTimer(self, timer: Timer) -> None:
        self._longBreakTimer = timer
        self._installed(Phase.LongBreak, timer)

    @property
    def cyclesPerLongBreak(self) -> int:
        return self._cyclesPerLongBreak

    @cyclesPerLongBreak.setter
    def cyclesPerLongBreak(self, value: int) -> None:
        if value < 1:
            raise ValueError("cyclesPerLongBreak must be at least 1")
        self._cyclesPerLongBreak = value

    @property
    def totalCycles(self) -> int:
        return self._totalCycles

    @totalCycles.setter
    def totalCycles(self, value: int) -> None:
        self._checkTotalCycles(value)
        self._totalCycles = value

    def _checkTotalCycles(self, value: int) -> None:
        if value < 1:
            raise ValueError("totalCycles must be at least 1")
        if self._phase is Phase.Completed:
            if value != self._cycleCount:
                raise ValueError(
                    "totalCycles of a completed machine is fixed until reset"
                )
        elif value <= self._cycleCount:
            raise ValueError(
                f"{self._cycleCount} cycles have already completed, "
                f"totalCycles must be greater than that"
            )

    def applyRules(self, rules: CycleRules, clock: Clock) -> None:
        """
        Replace every timer and both cycle counts with those described by
        C{rules}.

        @raise ValueError: if C{rules} asks for no more cycles than have
            already completed.  Nothing is replaced in that case.
        """
        self.totalCycles = rules.totalCycles
        self.cyclesPerLongBreak = rules.cyclesPerLongBreak
        self.workTimer = PausableTimer(clock, rules.workSeconds)
        self.breakTimer = PausableTimer(clock, rules.breakSeconds)
        self.longBreakTimer = PausableTimer(clock, rules.longBreakSeconds)

    def _installed(self, phase: Phase, timer: Timer) -> None:
        # the timer of the running (or paused) phase is always started
        paused = self._phase is Phase.Paused
        running = self._previousPhase if paused else self._phase
        if running is phase:
            timer.start()
            if paused:
                timer.pause()

    # task queue

    def addTask(self, task: AnyTask) -> Message:
        self._tasks.append(task)
        log.debug("task added: {task}", task=str(task))
        return Notice.Executed

    def removeTask(self, index: int) -> AnyTask:
        """
        Remove the task at C{index} from the queue and return it.

        @raise NoSuchTask: if C{index} is not a position in the queue.  The
            queue is not modified.
        """
        if not 0 <= index < len(self._tasks):
            log.warn(
                "no task at index {index} of {count}",
                index=index,
                count=len(self._tasks),
            )
            raise NoSuchTask(index)
        return self._tasks.pop(index)

    # phase changes

    def start(self) -> Message:
        if self._phase is not Phase.NotStarted:
            return Notice.NoChange
        return self._setPhase(Phase.Pending)

    def reset(self) -> Message:
        """
        Go back to the beginning.  Queued tasks are kept; see L{clear}.
        """
        self._cycleCount = 0
        self._phase = self._previousPhase = Phase.NotStarted
        for timer in self._timers():
            timer.reset()
        log.info("reset")
        return Notice.Reset

    def clear(self) -> Message:
        """
        Drop every queued task and reset.
        """
        self._tasks.clear()
        return self.reset()

    def update(self) -> Message:
        """
        Poll the active timer, moving on to the next phase if it's done.
        """
        phase = self._phase
        if phase is Phase.Pending:
            self._workTimer.reset()
            return self._setPhase(Phase.Working)
        if phase is Phase.Working:
            return self._updateWorking()
        if phase is Phase.Break or phase is Phase.LongBreak:
            timer = self._timerFor(phase)
            assert timer is not None
            if timer.isCompleted():
                return self._enter(Phase.Working)
        return Notice.NoChange

    def _updateWorking(self) -> Message:
        if not self._workTimer.isCompleted():
            return Notice.NoChange
        self._cycleCount += 1

        completedTask = None
        if self._tasks:
            completedTask = self._tasks.pop(0)
            completedTask.complete()
            log.info("task completed: {task}", task=str(completedTask))

        if self._cycleCount >= self._totalCycles:
            return self._setPhase(Phase.Completed, completedTask)
        if self._cycleCount % self._cyclesPerLongBreak == 0:
            return self._enter(Phase.LongBreak, completedTask)
        return self._enter(Phase.Break, completedTask)

    def skipTo(self, phase: Phase) -> Message:
        """
        Abandon the current interval and start a fresh one of the given kind.

        Phases without a timer of their own can't be skipped to, and a
        completed machine can't skip anywhere until it is reset; either way
        nothing happens.
        """
        if self._phase is Phase.Completed:
            log.debug("completed, not skipping to {phase}", phase=phase)
            return Notice.NoChange
        if not phase.timed:
            log.debug("not skipping to untimed phase {phase}", phase=phase)
            return Notice.NoChange
        return self._enter(phase)

    def pause(self) -> Message:
        if self._phase is Phase.Paused:
            return Transition(Phase.Paused, Phase.Paused)
        timer = self._timerFor(self._phase)
        if timer is None:
            return Transition(self._phase, self._phase)
        timer.pause()
        return self._setPhase(Phase.Paused)

    def unpause(self) -> Message:
        if self._phase is not Phase.Paused:
            return Transition(self._phase, self._phase)
        resumed = self._previousPhase
        timer = self._timerFor(resumed)
        if timer is not None:
            timer.resume()
        return self._setPhase(resumed)

    def togglePause(self) -> Message:
        if self.isPaused():
            return self.unpause()
        return self.pause()

    def execute(self, command: AnyCommand) -> Message:
        """
        Carry out a command object; see L{pomocycle.model.commands}.
        """
        return command.applyTo(self)

    def _enter(
        self, phase: Phase, completedTask: AnyTask | None = None
    ) -> Message:
        for each in self._timers():
            each.reset()
        timer = self._timerFor(phase)
        assert timer is not None, f"{phase} has no timer"
        timer.start()
        log.info(
            "{phase} for {duration}",
            phase=phase,
            duration=intervalSummary(timer.goal()),
        )
        return self._setPhase(phase, completedTask)

    def _setPhase(
        self, phase: Phase, completedTask: AnyTask | None = None
    ) -> Transition:
        self._previousPhase = self._phase
        self._phase = phase
        transition = Transition(self._previousPhase, phase, completedTask)
        log.info("transition {transition}", transition=transition)
        return transition

    def _timers(self) -> tuple[Timer, Timer, Timer]:
        return (self._workTimer, self._breakTimer, self._longBreakTimer)

    def _timerFor(self, phase: Phase) -> Timer | None:
        if phase is Phase.Working:
            return self._workTimer
        if phase is Phase.Break:
            return self._breakTimer
        if phase is Phase.LongBreak:
            return self._longBreakTimer
        return None
