"""domainseg: split domain names into dictionary words, numbers and symbols"""

from .alphabet import ALPHABET, BIGRAM_INDEX, CanonicalMode, canonicalize, generate_bigrams
from .config import SegmenterConfig
from .domain import Domain, DomainAssembler, parse_domain
from .domain_parser import SuffixMatcher, match_suffix
from .exceptions import (
    DictionaryDataUnavailable,
    DomainRejected,
    DomainSegError,
    EmptyLabel,
    InputTooLong,
    InvalidCharacters,
    IpLiteralRejected,
    PreEncodedIdnRejected,
    ResourceUnavailable,
    SuffixDataUnavailable,
)
from .resources import Resources, load_resources
from .segmenter import WordSegmenter, segment_letters
from .stub import Stub, StubType

__version__ = "2019.3.0"

__all__ = [
    "ALPHABET",
    "BIGRAM_INDEX",
    "CanonicalMode",
    "canonicalize",
    "generate_bigrams",
    "SegmenterConfig",
    "Domain",
    "DomainAssembler",
    "parse_domain",
    "SuffixMatcher",
    "match_suffix",
    "DomainSegError",
    "DomainRejected",
    "InputTooLong",
    "InvalidCharacters",
    "IpLiteralRejected",
    "PreEncodedIdnRejected",
    "EmptyLabel",
    "ResourceUnavailable",
    "SuffixDataUnavailable",
    "DictionaryDataUnavailable",
    "Resources",
    "load_resources",
    "WordSegmenter",
    "segment_letters",
    "Stub",
    "StubType",
]
