# -*- test-case-name: pomocycle.model.test.test_parsing -*-
from __future__ import annotations

from string import ascii_letters, digits

UNIT_MILLISECONDS: dict[str, int] = {
    "ms": 1,
    "s": 1000,
    "m": 60 * 1000,
    "h": 60 * 60 * 1000,
}


def _scan(text: str, position: int, alphabet: str) -> int:
    while position < len(text) and text[position] in alphabet:
        position += 1
    return position


def parseMilliseconds(text: str) -> int | None:
    """
    Parse a duration like C{"1h20m10s5"} into a whole number of milliseconds.

    The string is a sequence of number/unit pairs.  The units are C{h}, C{m},
    C{s} and C{ms}; a number at the very end of the string with no unit after
    it is a count of milliseconds.  Return C{None} if there is a unit we don't
    know, a unit with no number in front of it, or anything that is neither a
    digit nor a letter.
    """
    total = 0
    position = 0
    while position < len(text):
        numberEnd = _scan(text, position, digits)
        if numberEnd == position:
            return None
        number = int(text[position:numberEnd])

        unitEnd = _scan(text, numberEnd, ascii_letters)
        if unitEnd == numberEnd:
            if unitEnd < len(text):
                return None
            multiplier = 1
        elif (found := UNIT_MILLISECONDS.get(text[numberEnd:unitEnd])) is None:
            return None
        else:
            multiplier = found
        total += number * multiplier
        position = unitEnd
    return total


def parseDuration(text: str) -> float | None:
    """
    Parse a duration string (see L{parseMilliseconds}) into seconds.
    """
    milliseconds = parseMilliseconds(text)
    if milliseconds is None:
        return None
    return milliseconds / 1000
