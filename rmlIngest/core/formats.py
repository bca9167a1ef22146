"""Serialization format detection from file names."""
from __future__ import annotations

import os
from enum import Enum


class Format(str, Enum):
    """Graph serializations a mapping document may be written in.

    Member values are the rdflib parser names, so a detected format can be
    passed straight to ``rdflib.Graph.parse``.
    """

    TURTLE = "turtle"
    NTRIPLES = "nt"
    NQUADS = "nquads"
    JSON_LD = "json-ld"

    @property
    def rdflib_name(self) -> str:
        return self.value


_SUFFIXES: dict[str, Format] = {
    ".ttl": Format.TURTLE,
    ".nt": Format.NTRIPLES,
    ".nq": Format.NQUADS,
    ".json": Format.JSON_LD,
    ".json-ld": Format.JSON_LD,
}


def detect_format(file_name: str | os.PathLike[str]) -> Format | None:
    """Guess the serialization of ``file_name`` from its suffix.

    The suffix runs from the last ``.`` to the end of the name and is matched
    case-insensitively. Names without a ``.`` (including the empty name) and
    unknown suffixes yield ``None``.
    """

    name = os.fspath(file_name)
    index = name.rfind(".")
    if index < 0:
        return None
    return _SUFFIXES.get(name[index:].lower())


__all__ = ["Format", "detect_format"]
