"""Load the dictionary word set and the public-suffix set"""

import gzip
import json
import logging
import re
from pathlib import Path
from typing import Iterator, NamedTuple, Optional, Type, Union

from .exceptions import DictionaryDataUnavailable, ResourceUnavailable, SuffixDataUnavailable

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_DICTIONARY = DATA_DIR / "words.txt"
DEFAULT_SUFFIXES = DATA_DIR / "suffixes.dat"

_SUFFIX_ENTRY = re.compile(r"^[^\s/!]+$")

PathLike = Union[str, Path]


class Resources(NamedTuple):
    """Read-only data shared by every Domain construction"""
    dictionary: frozenset
    suffixes: frozenset


def _read_text(path: Path) -> str:
    if path.suffix == ".gz":
        with gzip.open(path, "rt", encoding="utf-8") as f:
            return f.read()
    return path.read_text(encoding="utf-8")


def _format_of(path: Path) -> str:
    suffixes = [s for s in path.suffixes if s != ".gz"]
    return suffixes[-1] if suffixes else ".txt"


def _iter_json(text: str) -> Iterator[str]:
    data = json.loads(text)
    if isinstance(data, dict):
        yield from data.keys()
    elif isinstance(data, list):
        for entry in data:
            if not isinstance(entry, str):
                raise ValueError(f"Expected a list of strings, found {type(entry).__name__}")
            yield entry
    else:
        raise ValueError(f"Expected a JSON object or list, found {type(data).__name__}")


def _iter_lines(text: str) -> Iterator[str]:
    """One entry per line, skipping blanks and # comments"""
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        yield line


def _iter_public_suffix_list(text: str) -> Iterator[str]:
    """Entries of the Mozilla public suffix list format"""
    for line in text.splitlines():
        line = line.strip()

        # Skip comments and empty lines
        if not line or line.startswith("//"):
            continue

        # Remove wildcard and skip exception markers
        if line.startswith("*."):
            line = line[2:]
        elif line.startswith("!"):
            continue

        if _SUFFIX_ENTRY.match(line) and not line.startswith("."):
            yield line


def _load_set(path: PathLike, error: Type[ResourceUnavailable]) -> frozenset:
    path = Path(path)
    try:
        text = _read_text(path)
        fmt = _format_of(path)
        if fmt == ".json":
            entries = _iter_json(text)
        elif fmt == ".dat":
            entries = _iter_public_suffix_list(text)
        else:
            entries = _iter_lines(text)
        loaded = frozenset(e.strip().lower() for e in entries if e.strip())
    except (OSError, UnicodeError, ValueError) as e:
        raise error(path, f"Can't read {error.kind} data from {path}: {e}") from e

    if not loaded:
        raise error(path, f"No {error.kind} entries found in {path}")

    logger.info(f"Loaded {len(loaded):,} {error.kind} entries from {path}")
    return loaded


def load_word_set(path: PathLike = DEFAULT_DICTIONARY) -> frozenset:
    """Load dictionary words (.txt, .json or .dat, optionally gzipped)"""
    return _load_set(path, DictionaryDataUnavailable)


def load_suffix_set(path: PathLike = DEFAULT_SUFFIXES) -> frozenset:
    """Load public suffixes in natural order, e.g. "co.uk" """
    return _load_set(path, SuffixDataUnavailable)


def load_resources(config=None) -> Resources:
    """Load both sets, from the paths in a SegmenterConfig when given"""
    dictionary_path = getattr(config, "dictionary_path", None) or DEFAULT_DICTIONARY
    suffix_path = getattr(config, "suffix_path", None) or DEFAULT_SUFFIXES
    return Resources(
        dictionary=load_word_set(dictionary_path),
        suffixes=load_suffix_set(suffix_path),
    )


_default_resources: Optional[Resources] = None


def get_default_resources() -> Resources:
    """Get or load the bundled resources (loaded once per process)"""
    global _default_resources
    if _default_resources is None:
        _default_resources = load_resources()
    return _default_resources


def reset_default_resources() -> None:
    """Forget the cached default resources"""
    global _default_resources
    _default_resources = None
