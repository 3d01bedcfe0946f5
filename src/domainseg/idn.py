"""Unicode <-> ASCII domain conversion, one label at a time

Labels are converted with the punycode codec only; no nameprep or IDNA 2008
validation is applied, so any valid Unicode label survives the round trip and
structural checks are left to the caller.
"""

ACE_PREFIX = "xn--"


def label_to_ascii(label: str) -> str:
    """ex) label_to_ascii("mañana") -> "xn--maana-pta"

    Raises UnicodeError for text that is not valid Unicode (lone surrogates
    from undecodable bytes).
    """
    if label.isascii():
        return label
    label.encode("utf-8")
    return ACE_PREFIX + label.encode("punycode").decode("ascii")


def label_to_unicode(label: str) -> str:
    """ex) label_to_unicode("xn--maana-pta") -> "mañana"

    Raises UnicodeError when the ACE payload is not valid punycode.
    """
    if not label.lower().startswith(ACE_PREFIX):
        return label
    return label[len(ACE_PREFIX):].encode("ascii").decode("punycode")


def to_ascii(name: str) -> str:
    return ".".join(label_to_ascii(label) for label in name.split("."))


def to_unicode(name: str) -> str:
    return ".".join(label_to_unicode(label) for label in name.split("."))
