from __future__ import annotations

"""BCP 47 language tag validation for language-tagged literals.

See https://tools.ietf.org/html/bcp47#section-2.2.9. Custom subtags of length
5-8 registered in the IANA language-subtag-registry are not tracked.
"""

import re

_IRREGULAR = (
    "en-GB-oed|i-ami|i-bnn|i-default|i-enochian|i-hak|i-klingon|i-lux|"
    "i-mingo|i-navajo|i-pwn|i-tao|i-tay|i-tsu|sgn-BE-FR|sgn-BE-NL|sgn-CH-DE"
)
_REGULAR = (
    "art-lojban|cel-gaulish|no-bok|no-nyn|zh-guoyu|zh-hakka|zh-min|"
    "zh-min-nan|zh-xiang"
)

_LANGUAGE = r"(?:[A-Za-z]{2,3}(?:-[A-Za-z]{3}(?:-[A-Za-z]{3}){0,2})?|[A-Za-z]{4})"
_SCRIPT = r"(?:-[A-Za-z]{4})?"
_REGION = r"(?:-(?:[A-Za-z]{2}|[0-9]{3}))?"
_VARIANT = r"(?:-(?:[A-Za-z0-9]{5,8}|[0-9][A-Za-z0-9]{3}))*"
# Singletons exclude "x", which introduces the private-use sequence.
_EXTENSION = r"(?:-[0-9A-WY-Za-wy-z](?:-[A-Za-z0-9]{2,8})+)*"
_PRIVATE_USE = r"x(?:-[A-Za-z0-9]{1,8})+"

LANGUAGE_TAG_RE = re.compile(
    rf"(?:{_IRREGULAR}|{_REGULAR})"
    rf"|{_LANGUAGE}{_SCRIPT}{_REGION}{_VARIANT}{_EXTENSION}(?:-{_PRIVATE_USE})?"
    rf"|{_PRIVATE_USE}",
    re.IGNORECASE | re.ASCII,
)


def is_valid_language_tag(tag: object) -> bool:
    """Return ``True`` when ``tag`` is a well-formed BCP 47 language tag.

    The whole string must match. Letters match in either case and the tag
    is checked as given, without normalization.
    """

    if not isinstance(tag, str):
        return False
    return LANGUAGE_TAG_RE.fullmatch(tag) is not None


__all__ = ["LANGUAGE_TAG_RE", "is_valid_language_tag"]
