"""Parsing and normalization of RML mapping documents."""

__all__ = [
    "GraphMappingReader",
    "MappingReader",
    "NormalizedMapping",
    "TriplesMap",
    "format_mapping",
    "is_root_iterator",
]

from .reader import GraphMappingReader, MappingReader
from .formatted import NormalizedMapping, TriplesMap, format_mapping, is_root_iterator
