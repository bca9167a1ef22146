from __future__ import annotations

"""Entry point turning a mapping document path into a normalized mapping."""

import logging
import os
from pathlib import Path
from typing import IO, Callable

import rdflib

from rmlIngest.config import load_config
from rmlIngest.core.directives import base_uri_from_stream
from rmlIngest.core.formats import Format, detect_format
from rmlIngest.core.resolver import resolve
from rmlIngest.core.scoped import open_stream, with_resource
from rmlIngest.core.search_roots import SearchRoot
from rmlIngest.errors import ReadError
from rmlIngest.mapping.formatted import NormalizedMapping, format_mapping
from rmlIngest.mapping.reader import GraphMappingReader, MappingReader

logger = logging.getLogger(__name__)

MappingFormatter = Callable[..., NormalizedMapping]


class MappingLoader:
    """Locate, sniff, parse and normalize mapping documents.

    Parameters
    ----------
    search_root: SearchRoot, optional
        Where relative paths are looked up; the configured default when
        omitted.
    reader: MappingReader, optional
        Parser turning a byte stream into a graph. Defaults to rdflib.
    formatter: callable, optional
        Normalizer applied to the parsed graph.
    default_format: Format, optional
        Serialization assumed when the file name has no known suffix; the
        configured ``default_format`` when omitted.
    """

    def __init__(
        self,
        *,
        search_root: SearchRoot | None = None,
        reader: MappingReader | None = None,
        formatter: MappingFormatter | None = None,
        default_format: Format | None = None,
    ) -> None:
        self.search_root = search_root
        self.reader = reader
        self.formatter = formatter or format_mapping
        self.default_format = default_format

    def locate(self, path: str | os.PathLike[str]) -> Path:
        return resolve(path, self.search_root)

    def load(self, path: str | os.PathLike[str]) -> NormalizedMapping:
        location = self.locate(path)
        fmt = detect_format(location.name) or self.default_format or load_config().default_format
        reader = self.reader or GraphMappingReader(source_name=str(location))

        def parse(stream: IO[bytes]) -> tuple[str, rdflib.Graph]:
            base_uri = base_uri_from_stream(stream)
            stream.seek(0)
            return base_uri, reader.read(stream, format=fmt, base_uri=base_uri)

        try:
            stream = open_stream(location)
        except OSError as exc:
            raise ReadError(f"cannot open {location}: {exc.strerror or exc}") from exc
        base_uri, graph = with_resource(stream, parse)
        mapping = self.formatter(graph, source=location, format=fmt, base_uri=base_uri)
        logger.info(
            "loaded %s (%s, base=%r): %d standard, %d joined triples maps",
            location,
            fmt.value,
            base_uri,
            len(mapping.standard_triples_maps),
            len(mapping.joined_triples_maps),
        )
        return mapping


def load_mapping(
    path: str | os.PathLike[str],
    *,
    search_root: SearchRoot | None = None,
    reader: MappingReader | None = None,
    formatter: MappingFormatter | None = None,
    default_format: Format | None = None,
) -> NormalizedMapping:
    """Read the mapping document at ``path`` and normalize it.

    Suffix-less or unknown file names are read as ``default_format``, or
    the configured default when it is omitted. Raises :class:`~rmlIngest.errors.ResourceNotFoundError` when ``path``
    resolves to nothing and :class:`~rmlIngest.errors.MappingParseError` when
    the content is rejected.
    """

    loader = MappingLoader(
        search_root=search_root,
        reader=reader,
        formatter=formatter,
        default_format=default_format,
    )
    return loader.load(path)


__all__ = ["MappingLoader", "MappingFormatter", "load_mapping"]
