from .boundaries import Clock, NoSuchTask, Notice, Phase, Task, Timer
from .commands import AddTask, AnyCommand, Command, RemoveTask, SkipTo
from .machine import MachineSnapshot, PomodoroMachine
from .messages import Message, Transition
from .parsing import parseDuration, parseMilliseconds
from .rules import CycleRules
from .task import AnyTask, SimpleTask
from .timer import PausableTimer, WallClock

__all__ = [
    "AddTask",
    "AnyCommand",
    "AnyTask",
    "Clock",
    "Command",
    "CycleRules",
    "MachineSnapshot",
    "Message",
    "NoSuchTask",
    "Notice",
    "PausableTimer",
    "Phase",
    "PomodoroMachine",
    "RemoveTask",
    "SimpleTask",
    "SkipTo",
    "Task",
    "Timer",
    "Transition",
    "WallClock",
    "parseDuration",
    "parseMilliseconds",
]
