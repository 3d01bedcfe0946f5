"""Errors raised while loading resources or building a Domain"""

from typing import Optional


class DomainSegError(Exception):
    """Base class for every domainseg error"""


class DomainRejected(DomainSegError, ValueError):
    """The input could not be turned into a Domain

    Args:
        domain: The offending input (after port stripping and lowercasing)
        message: Human readable explanation
    """

    reason = "rejected"

    def __init__(self, domain: str, message: Optional[str] = None):
        self.domain = domain
        super().__init__(message or f"{self.reason}: {domain}")


class InputTooLong(DomainRejected):
    reason = "input_too_long"


class InvalidCharacters(DomainRejected):
    reason = "invalid_characters"


class IpLiteralRejected(DomainRejected):
    reason = "ip_literal"


class PreEncodedIdnRejected(DomainRejected):
    reason = "pre_encoded_idn"


class EmptyLabel(DomainRejected):
    reason = "empty_label"


class ResourceUnavailable(DomainSegError):
    """A dictionary or suffix list could not be loaded"""

    kind = "resource"

    def __init__(self, path, message: Optional[str] = None):
        self.path = path
        super().__init__(message or f"Can't read {self.kind} data from {path}")


class SuffixDataUnavailable(ResourceUnavailable):
    kind = "suffix"


class DictionaryDataUnavailable(ResourceUnavailable):
    kind = "dictionary"
