"""Split the non-letter runs of a label into NUMBER, DASH and SYMBOL stubs"""

import re
from typing import List

from .stub import Stub, StubType

NUMBER_REGEX = re.compile(r"[0-9]+")
DASH_REGEX = re.compile(r"[-_]+")


def classify_non_letter_run(label: str, level: int, run: str) -> List[Stub]:
    """Classify a run of non-letters taken from ``label``.

    ex) classify_non_letter_run("a0-?b", 2, "0-?") -> [NUMBER "0", DASH "-", SYMBOL "?"]

    Digit runs win over dash runs; anything else is a SYMBOL run that stops
    where the next digit or dash run begins.
    """
    stubs: List[Stub] = []
    rest = run
    while rest:
        number = NUMBER_REGEX.search(rest)
        dash = DASH_REGEX.search(rest)

        if number and number.start() == 0:
            token, kind = number.group(), StubType.NUMBER
        elif dash and dash.start() == 0:
            token, kind = dash.group(), StubType.DASH
        else:
            starts = [m.start() for m in (number, dash) if m]
            token, kind = rest[: min(starts, default=len(rest))], StubType.SYMBOL

        stubs.append(Stub(token, level, kind, (token,)))
        rest = rest[len(token):]

    return stubs
