# -*- test-case-name: pomocycle.model.test.test_util -*-
from __future__ import annotations

from dateutil.relativedelta import relativedelta


def intervalSummary(seconds: float) -> str:
    """
    Describe the length of an interval in minutes and seconds, the units
    interval lengths are set in; an hour-long break is "60 minutes".

    Fractions of a second are dropped.
    """
    delta = relativedelta(seconds=int(seconds))
    minutes = (delta.days * 24 + delta.hours) * 60 + delta.minutes
    segments = [
        f"{value} {unit if value == 1 else unit + 's'}"
        for unit, value in [("minute", minutes), ("second", delta.seconds)]
        if value
    ]
    return " and ".join(segments) or "0 seconds"
