# -*- test-case-name: pomocycle.model.test.test_storage -*-
"""
Conversion of rules and tasks to and from JSON-compatible plain data.

Actually putting that data somewhere is up to the caller.
"""
from __future__ import annotations

from functools import singledispatch
from typing import Iterable

from twisted.logger import Logger

from .parsing import parseDuration
from .rules import CycleRules
from .schema import SavedRules, SavedSimpleTask, SavedTask
from .task import AnyTask, SimpleTask

log = Logger()

_defaultRules = CycleRules()


def rulesToJSON(rules: CycleRules) -> SavedRules:
    return {
        "workSeconds": rules.workSeconds,
        "breakSeconds": rules.breakSeconds,
        "longBreakSeconds": rules.longBreakSeconds,
        "cyclesPerLongBreak": rules.cyclesPerLongBreak,
        "totalCycles": rules.totalCycles,
    }


def rulesFromJSON(saved: SavedRules) -> CycleRules:
    """
    Load L{CycleRules} from their saved form.

    @raise ValueError: if the saved values are not valid rules.
    """
    return CycleRules(
        workSeconds=saved["workSeconds"],
        breakSeconds=saved["breakSeconds"],
        longBreakSeconds=saved["longBreakSeconds"],
        cyclesPerLongBreak=saved["cyclesPerLongBreak"],
        totalCycles=saved["totalCycles"],
    )


def rulesFromStrings(
    work: str | None = None,
    shortBreak: str | None = None,
    longBreak: str | None = None,
    cyclesPerLongBreak: int = _defaultRules.cyclesPerLongBreak,
    totalCycles: int = _defaultRules.totalCycles,
) -> CycleRules:
    """
    Build L{CycleRules} from duration strings such as C{"25m"}, as a command
    line or a settings form would supply them.  Strings that are missing or
    don't parse fall back to the default duration.
    """

    def duration(name: str, text: str | None, default: float) -> float:
        if text is None:
            return default
        parsed = parseDuration(text)
        if parsed is None:
            log.warn(
                "could not parse {name} duration {text!r}, using {default}s",
                name=name,
                text=text,
                default=default,
            )
            return default
        return parsed

    return CycleRules(
        workSeconds=duration("work", work, _defaultRules.workSeconds),
        breakSeconds=duration("break", shortBreak, _defaultRules.breakSeconds),
        longBreakSeconds=duration(
            "long break", longBreak, _defaultRules.longBreakSeconds
        ),
        cyclesPerLongBreak=cyclesPerLongBreak,
        totalCycles=totalCycles,
    )


@singledispatch
def taskToJSON(task: AnyTask) -> SavedTask:
    """
    Save any task to its paired JSON data structure.
    """
    raise TypeError(f"unsupported task type {type(task).__name__}")


@taskToJSON.register(SimpleTask)
def saveSimpleTask(task: SimpleTask) -> SavedSimpleTask:
    return {
        "kind": "Simple",
        "description": task.description,
        "completed": task.completed,
    }


def taskFromJSON(saved: SavedTask) -> AnyTask:
    kind = saved.get("kind", "Simple")
    if kind == "Simple":
        return SimpleTask(
            description=saved["description"],
            completed=bool(saved.get("completed", False)),
        )
    raise ValueError(f"unknown task kind {kind!r}")


def tasksToJSON(tasks: Iterable[AnyTask]) -> list[SavedTask]:
    return [taskToJSON(task) for task in tasks]


def tasksFromJSON(saved: Iterable[SavedTask]) -> list[AnyTask]:
    return [taskFromJSON(each) for each in saved]
