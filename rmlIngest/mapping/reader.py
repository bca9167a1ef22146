from __future__ import annotations

"""Adapter from mapping document streams to rdflib graphs."""

import logging
from typing import IO, Protocol

import rdflib

from rmlIngest.core.formats import Format
from rmlIngest.errors import MappingParseError

logger = logging.getLogger(__name__)


class MappingReader(Protocol):
    def read(self, stream: IO[bytes], *, format: Format, base_uri: str = "") -> rdflib.Graph:
        """Parse ``stream`` into a graph or raise :class:`MappingParseError`."""


class GraphMappingReader:
    """Parse mapping documents with rdflib's serialization plugins."""

    def __init__(self, *, source_name: str | None = None) -> None:
        self.source_name = source_name

    def read(self, stream: IO[bytes], *, format: Format, base_uri: str = "") -> rdflib.Graph:
        graph: rdflib.Graph
        if format is Format.NQUADS:
            graph = rdflib.Dataset(default_union=True)
        else:
            graph = rdflib.Graph()
        try:
            graph.parse(source=stream, format=format.rdflib_name, publicID=base_uri or None)
        except Exception as exc:
            raise MappingParseError(str(exc) or exc.__class__.__name__, source=self.source_name) from exc
        logger.debug("parsed %d triples as %s", len(graph), format.value)
        return graph


__all__ = ["MappingReader", "GraphMappingReader"]
