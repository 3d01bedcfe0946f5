"""Dictionary-driven splitting of letter runs into words"""

from typing import AbstractSet, Iterable, List


def covers(text: str, words: Iterable[str]) -> bool:
    """True when the words are at least as long as text"""
    return sum(len(w) for w in words) >= len(text)


class WordSegmenter:
    """Enumerate full covers of a letter run by dictionary words

    The outer scan tries every first-word length from the longest down, so the
    first segmentation returned always starts with the longest dictionary
    prefix. The remainder after each first word is completed greedily along a
    single path.
    """

    def __init__(self, dictionary: AbstractSet[str]):
        self.dictionary = dictionary
        # Prefixes longer than this can never be dictionary hits
        self.max_word_length = max((len(w) for w in dictionary), default=0)

    def segment(self, run: str) -> List[List[str]]:
        """Return every segmentation found for ``run``, primary first.

        ex) with {"shit", "shits", "hits"}: segment("shits") -> [["shits"], ["shit", "s"]]
        """
        segmentations: List[List[str]] = []
        words: List[str] = []

        for end in range(len(run), 0, -1):
            prefix = run[:end]
            forced = end == 1 and not words and not segmentations
            if not (forced or self._known(prefix)):
                continue

            words.append(prefix)
            if end < len(run):
                words.extend(self.complete(run[end:]))
            if end == len(run) or covers(run, words):
                segmentations.append(words)
                words = []

        if words and (not segmentations or covers(run, words)):
            segmentations.append(words)

        return segmentations

    def complete(self, text: str) -> List[str]:
        """Greedy single-path split: longest known prefix, else one character"""
        words: List[str] = []
        while text:
            end = 1
            for size in range(min(len(text), self.max_word_length), 1, -1):
                if text[:size] in self.dictionary:
                    end = size
                    break
            words.append(text[:end])
            text = text[end:]
        return words

    def _known(self, word: str) -> bool:
        return len(word) <= self.max_word_length and word in self.dictionary


def segment_letters(run: str, dictionary: AbstractSet[str]) -> List[List[str]]:
    """Convenience wrapper around WordSegmenter.segment"""
    return WordSegmenter(dictionary).segment(run)
