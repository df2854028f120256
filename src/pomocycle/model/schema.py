from typing import Literal, TypedDict

SavedSimpleTask = TypedDict(
    "SavedSimpleTask",
    {
        "kind": Literal["Simple"],
        "description": str,
        "completed": bool,
    },
)

SavedTask = SavedSimpleTask

SavedRules = TypedDict(
    "SavedRules",
    {
        "workSeconds": float,
        "breakSeconds": float,
        "longBreakSeconds": float,
        "cyclesPerLongBreak": int,
        "totalCycles": int,
    },
)
