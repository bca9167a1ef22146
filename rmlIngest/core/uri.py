from __future__ import annotations

"""Resource identifiers and syntactic URL validation.

Only syntax is checked here; reachability and scheme support belong to the
consumers of a mapping document.
"""

import ipaddress
import re
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlsplit

DEFAULT_SCHEMES = frozenset({"http", "https", "ftp"})

_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+\-.]*")
_LABEL_RE = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?")
_TLD_RE = re.compile(r"[A-Za-z]{2,63}")
_IPV4_RE = re.compile(r"(\d{1,3})\.(\d{1,3})\.(\d{1,3})\.(\d{1,3})")
_USERINFO_RE = re.compile(r"(?:[A-Za-z0-9\-._~!$&'()*+,;=]|%[0-9A-Fa-f]{2})*(?::(?:[A-Za-z0-9\-._~!$&'()*+,;=]|%[0-9A-Fa-f]{2})*)?")
_PATH_RE = re.compile(r"(?:/[-\w:@&?=+,.!/~*'%$;()]*)?")


@dataclass(frozen=True, slots=True)
class Uri:
    """Opaque identifier of a mapping resource, as written by its author."""

    value: str

    def __str__(self) -> str:
        return self.value

    @property
    def is_absolute(self) -> bool:
        return Path(self.value).is_absolute()

    def is_valid(self) -> bool:
        return is_valid_uri(self.value)


def _valid_host(host: str) -> bool:
    if host.startswith("[") and host.endswith("]"):
        try:
            ipaddress.IPv6Address(host[1:-1])
        except ValueError:
            return False
        return True
    match = _IPV4_RE.fullmatch(host)
    if match:
        return all(int(octet) <= 255 for octet in match.groups())
    labels = host.rstrip(".").split(".")
    if len(labels) < 2 or len(host) > 253:
        return False
    if not _TLD_RE.fullmatch(labels[-1]):
        return False
    return all(_LABEL_RE.fullmatch(label) for label in labels[:-1])


def _valid_authority(authority: str) -> bool:
    if not authority:
        return False
    userinfo, sep, hostport = authority.rpartition("@")
    if sep and not _USERINFO_RE.fullmatch(userinfo):
        return False
    if hostport.startswith("["):
        end = hostport.find("]")
        if end < 0:
            return False
        host, rest = hostport[: end + 1], hostport[end + 1 :]
        if rest and not rest.startswith(":"):
            return False
        port = rest[1:] if rest else ""
    else:
        host, _, port = hostport.partition(":")
    if port:
        if not port.isdigit() or len(port) > 5 or int(port) > 65535:
            return False
    return _valid_host(host)


def _valid_path(path: str) -> bool:
    if not _PATH_RE.fullmatch(path):
        return False
    if "//" in path:
        return False
    depth = 0
    for segment in path.split("/")[1:]:
        if segment == "..":
            depth -= 1
            if depth < 0:
                return False
        elif segment not in ("", "."):
            depth += 1
    return True


def is_valid_uri(value: object, schemes: frozenset[str] = DEFAULT_SCHEMES) -> bool:
    """Return ``True`` when ``value`` is a syntactically valid URL.

    The scheme must be one of ``schemes`` (compared case-insensitively) and
    the URL must carry an authority with a well-formed host.
    """

    if not isinstance(value, str) or not value:
        return False
    if any(ch.isspace() for ch in value) or not value.isascii():
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    if not _SCHEME_RE.fullmatch(parts.scheme) or parts.scheme.lower() not in schemes:
        return False
    if not value[len(parts.scheme) + 1 :].startswith("//"):
        return False
    if not _valid_authority(parts.netloc):
        return False
    return _valid_path(parts.path)


__all__ = ["DEFAULT_SCHEMES", "Uri", "is_valid_uri"]
