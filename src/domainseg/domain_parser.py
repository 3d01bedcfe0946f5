"""Label splitting and longest public-suffix matching"""

import logging
from typing import AbstractSet, List, Optional, Sequence

logger = logging.getLogger(__name__)

MAX_SUFFIX_LEVEL = 5


def reversed_labels(name: str) -> List[str]:
    """Split a name on dots, rightmost label first.

    ex) reversed_labels("www.example.co.uk") -> ["uk", "co", "example", "www"]
    """
    return name.split(".")[::-1]


class SuffixMatcher:
    """Longest-match lookup of a label sequence against a public-suffix set"""

    def __init__(self, suffixes: Optional[AbstractSet[str]] = None, max_level: int = MAX_SUFFIX_LEVEL):
        """Initialize matcher with a suffix set, the bundled list when omitted"""
        if suffixes is None:
            from .resources import get_default_resources
            suffixes = get_default_resources().suffixes
        self.suffixes = suffixes
        self.max_level = max_level

    def match(self, labels: Sequence[str]) -> str:
        """Return the longest listed suffix of ``labels`` (rightmost label first).

        ex) with {"com", "co.uk"}: match(["uk", "co", "example"]) -> "co.uk"

        Nothing listed still yields the rightmost label alone, so the result
        does not prove membership in the suffix set.
        """
        head = list(labels[: self.max_level])
        suffix = ""
        for i in range(len(head), 0, -1):
            suffix = ".".join(reversed(head[:i]))
            if suffix in self.suffixes:
                return suffix

        logger.debug(f"No listed suffix for {list(labels)}, using {suffix!r}")
        return suffix


# Singleton instance for convenience
_default_matcher = None


def get_default_matcher() -> SuffixMatcher:
    """Get or create the matcher over the bundled suffix list"""
    global _default_matcher
    if _default_matcher is None:
        _default_matcher = SuffixMatcher()
    return _default_matcher


def match_suffix(labels: Sequence[str], suffixes: Optional[AbstractSet[str]] = None) -> str:
    """Convenience function, using the default matcher unless suffixes are given"""
    if suffixes is None:
        return get_default_matcher().match(labels)
    return SuffixMatcher(suffixes).match(labels)
