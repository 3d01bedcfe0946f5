"""Stub: one classified fragment of a domain label"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple


class StubType(IntEnum):
    """What a stub holds"""
    DOT = 0  # reserved, levels already separate labels
    DASH = 1
    NUMBER = 2
    LATIN = 3
    SYMBOL = 4


@dataclass(frozen=True)
class Stub:
    """A word, number, dash or symbol run of a label

    Args:
        text: The run this stub was derived from (the whole letter run for LATIN)
        level: 1-based label level, counted from the rightmost label
        kind: StubType of the run
        parts: Words reconstructing a LATIN run, otherwise the run itself
    """
    text: str
    level: int
    kind: StubType
    parts: Tuple[str, ...]

    def __post_init__(self):
        if not self.text:
            raise ValueError("Stub text must not be empty")
        if self.level < 1:
            raise ValueError(f"Stub level must be >= 1, got {self.level}")
        if isinstance(self.parts, str):
            object.__setattr__(self, "parts", (self.parts,))
        else:
            object.__setattr__(self, "parts", tuple(self.parts))
        if not self.parts:
            raise ValueError("Stub parts must not be empty")

    def rating(self) -> float:
        """Lower is better: fewer and longer parts"""
        r = 0.0
        for part in self.parts:
            r += 1.0 / len(part) if part else 2
        return r

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "level": self.level,
            "kind": self.kind.name,
            "parts": list(self.parts),
        }
