"""Canonical domain alphabets and the bigram layout built on top of them"""

import re
from enum import Enum
from typing import Dict, List


class CanonicalMode(Enum):
    """How aggressively a domain is folded"""
    FOLD_SIMILAR = "similar"
    FOLD_DIGITS_ONLY = "digits"
    BS_ONLY = "bs"


# Compact alphabet every FOLD_SIMILAR output lives in
ALPHABET = (
    ".", "-", "0",
    "a", "c", "d", "e", "g", "i", "l", "m", "o", "p", "r", "s", "t", "u", "w",
    "?",
)

_DIGIT_FOLDS = {"_": "-", **{d: "0" for d in "123456789"}}

# Visually or phonetically close letters collapse onto one representative
_LETTER_FOLDS = {
    "k": "c",
    "b": "d",
    "j": "g",
    "y": "i",
    "h": "l",
    "n": "m",
    "q": "p",
    "x": "r",
    "z": "s",
    "f": "t",
    "v": "w",
}

_DIGITS_TABLE = str.maketrans(_DIGIT_FOLDS)
_SIMILAR_TABLE = str.maketrans({**_DIGIT_FOLDS, **_LETTER_FOLDS})

_OUTSIDE_NICE = re.compile(r"[^.\-0-9a-z]")
_OUTSIDE_BS = re.compile(r"[^.\-_0-9a-z]")


def canonicalize(text: str, mode: CanonicalMode = CanonicalMode.FOLD_DIGITS_ONLY) -> str:
    """Fold a domain onto one of the canonical alphabets.

    ex) canonicalize("Mp3_Shits.com".lower()) -> "mp0-shits.com"
    ex) canonicalize("mp3shits.com", CanonicalMode.FOLD_SIMILAR) -> "mp0slits.com"
    """
    if mode is CanonicalMode.BS_ONLY:
        return _OUTSIDE_BS.sub("?", text)
    if mode is CanonicalMode.FOLD_SIMILAR:
        folded = text.translate(_SIMILAR_TABLE)
    else:
        folded = text.translate(_DIGITS_TABLE)
    return _OUTSIDE_NICE.sub("?", folded)


def generate_bigrams() -> List[str]:
    """All ordered pairs over ALPHABET except "..", row by row.

    The position of a pair is its feature index: fvec[BIGRAM_INDEX["ab"]] += 1
    """
    return [a + b for a in ALPHABET for b in ALPHABET if not (a == "." and b == ".")]


BIGRAM_INDEX: Dict[str, int] = {gram: i for i, gram in enumerate(generate_bigrams())}
