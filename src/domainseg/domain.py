"""Domain aggregate and the assembler that validates and segments raw input"""

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import AbstractSet, List, Mapping, Optional, Tuple

from . import idn
from .alphabet import CanonicalMode, canonicalize
from .classifier import classify_non_letter_run
from .config import SegmenterConfig
from .domain_parser import SuffixMatcher, reversed_labels
from .exceptions import (
    EmptyLabel,
    InputTooLong,
    InvalidCharacters,
    IpLiteralRejected,
    PreEncodedIdnRejected,
)
from .resolver import AmbiguityResolver
from .segmenter import WordSegmenter
from .stub import Stub, StubType

logger = logging.getLogger(__name__)

LATIN_REGEX = re.compile(r"[a-z]+")
BS_REGEX = re.compile(r"[^.\-_0-9a-z]")
IP_REGEX = re.compile(r"\b\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\b", re.ASCII)

Variant = Mapping[int, Tuple[Stub, ...]]


@dataclass(frozen=True)
class Domain:
    """A validated and segmented domain name

    Args:
        name: Normalized name in Unicode
        idn: Whether the name needed punycode to become ASCII
        labels: Canonical labels, rightmost first
        suffix: Longest listed public suffix (or the rightmost label)
        primary: Level -> stubs of the best segmentation
        alternate: Level -> stubs of the second best one, None without ambiguity
    """
    name: str
    idn: bool
    labels: Tuple[str, ...]
    suffix: str
    primary: Variant
    alternate: Optional[Variant] = None

    @property
    def levels(self) -> int:
        return len(self.labels)

    def variants(self) -> List[Variant]:
        """Primary, then the alternate when there is one"""
        if self.alternate is None:
            return [self.primary]
        return [self.primary, self.alternate]

    def to_dict(self) -> dict:
        def dump(variant):
            return {str(level): [stub.to_dict() for stub in stubs] for level, stubs in variant.items()}

        return {
            "name": self.name,
            "idn": self.idn,
            "labels": list(self.labels),
            "suffix": self.suffix,
            "primary": dump(self.primary),
            "alternate": dump(self.alternate) if self.alternate is not None else None,
        }


class _LevelBuilder:
    """Collects the stubs of one label, with the alternate choice per position"""

    def __init__(self, level: int):
        self.level = level
        self.positions: List[Tuple[Stub, Optional[Stub]]] = []

    def add(self, primary: Stub, alternate: Optional[Stub] = None):
        self.positions.append((primary, alternate))

    def extend(self, stubs: List[Stub]):
        for stub in stubs:
            self.add(stub)

    @property
    def diverged(self) -> bool:
        return any(alt is not None for _, alt in self.positions)

    def primary(self) -> Tuple[Stub, ...]:
        return tuple(p for p, _ in self.positions)

    def alternate(self) -> Tuple[Stub, ...]:
        return tuple(p if alt is None else alt for p, alt in self.positions)


class DomainAssembler:
    """Validate raw domains and build their segmentations

    Args:
        dictionary: Known words, queried by exact match
        suffixes: Public suffixes in natural order ("co.uk")
        config: SegmenterConfig, defaults when omitted
    """

    def __init__(
        self,
        dictionary: AbstractSet[str],
        suffixes: AbstractSet[str],
        config: Optional[SegmenterConfig] = None,
    ):
        self.config = config or SegmenterConfig()
        self.segmenter = WordSegmenter(dictionary)
        self.resolver = AmbiguityResolver()
        self.matcher = SuffixMatcher(suffixes, max_level=self.config.max_suffix_level)

    @classmethod
    def from_resources(cls, resources, config: Optional[SegmenterConfig] = None) -> "DomainAssembler":
        return cls(resources.dictionary, resources.suffixes, config)

    def assemble(self, raw: str) -> Domain:
        """Build a Domain, raising a DomainRejected subclass for invalid input"""
        domain = raw.strip().lower().split(":")[0]
        ascii_name = self._to_ascii(domain)
        name = self.validate(domain)

        labels = reversed_labels(canonicalize(name, CanonicalMode.FOLD_DIGITS_ONLY))
        if any(not label for label in labels):
            raise self._rejected(EmptyLabel(domain, f"The domain has an empty label: {domain}"))

        suffix = self.matcher.match(labels)

        builders = []
        diverged = False
        for level, label in enumerate(labels, start=1):
            builder = self._segment_label(label, level, diverged)
            diverged = diverged or builder.diverged
            builders.append(builder)

        primary = {b.level: b.primary() for b in builders}
        alternate = None
        if diverged and self.config.track_alternates:
            alternate = MappingProxyType({b.level: b.alternate() for b in builders})

        return Domain(
            name=name,
            idn=ascii_name != domain,
            labels=tuple(labels),
            suffix=suffix,
            primary=MappingProxyType(primary),
            alternate=alternate,
        )

    def validate(self, domain: str) -> str:
        """Return the Unicode name of a lowercased domain after the structural checks"""
        try:
            name = idn.to_unicode(domain)
        except UnicodeError as e:
            raise self._rejected(PreEncodedIdnRejected(
                domain, f"The domain has a broken punycode label: {domain} ({e})"
            )) from e

        if len(domain) > self.config.max_length or len(name) > self.config.max_length:
            raise self._rejected(InputTooLong(
                domain, f"The domain is longer than {self.config.max_length} characters: {domain}"
            ))
        if idn.ACE_PREFIX in domain:
            raise self._rejected(PreEncodedIdnRejected(domain, f"The domain is already punycode encoded: {domain}"))
        if IP_REGEX.search(domain):
            raise self._rejected(IpLiteralRejected(domain, f"The domain is an IP address: {domain}"))

        return name

    def _to_ascii(self, domain: str) -> str:
        try:
            ascii_name = idn.to_ascii(domain)
        except UnicodeError as e:
            raise self._rejected(InvalidCharacters(domain, f"The domain can't be encoded: {domain} ({e})")) from e
        if BS_REGEX.search(ascii_name):
            raise self._rejected(InvalidCharacters(domain, f"The domain has characters outside LDH: {domain}"))
        return ascii_name

    def _segment_label(self, label: str, level: int, diverged: bool) -> _LevelBuilder:
        builder = _LevelBuilder(level)
        track = self.config.track_alternates
        last_end = 0

        for match in LATIN_REGEX.finditer(label):
            if match.start() > last_end:
                builder.extend(classify_non_letter_run(label, level, label[last_end:match.start()]))

            run = match.group()
            candidates = [
                Stub(run, level, StubType.LATIN, tuple(words))
                for words in self.segmenter.segment(run)
            ]
            alternate = None
            if track:
                alternate = self.resolver.choose_alternate(candidates, level, diverged or builder.diverged)
            builder.add(candidates[0], alternate)
            last_end = match.end()

        if last_end < len(label):
            builder.extend(classify_non_letter_run(label, level, label[last_end:]))

        return builder

    def _rejected(self, error):
        logger.debug(f"Rejected {error.domain!r}: {error.reason}")
        return error


_default_assembler = None


def get_default_assembler() -> DomainAssembler:
    """Get or create the assembler over the bundled resources"""
    global _default_assembler
    if _default_assembler is None:
        from .resources import get_default_resources
        _default_assembler = DomainAssembler.from_resources(get_default_resources())
    return _default_assembler


def parse_domain(raw: str) -> Domain:
    """Convenience function using the default assembler"""
    return get_default_assembler().assemble(raw)
