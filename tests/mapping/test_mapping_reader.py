from __future__ import annotations

import io

import pytest
from rdflib import URIRef
from rdflib.namespace import RDF

from rmlIngest.core.formats import Format
from rmlIngest.errors import MappingParseError
from rmlIngest.mapping.namespaces import RR
from rmlIngest.mapping.reader import GraphMappingReader


def test_relative_iris_use_the_supplied_base() -> None:
    doc = b"@prefix rr: <http://www.w3.org/ns/r2rml#> .\n<#M> a rr:TriplesMap .\n"
    graph = GraphMappingReader().read(io.BytesIO(doc), format=Format.TURTLE, base_uri="http://example.com/m/")
    assert (URIRef("http://example.com/m/#M"), RDF.type, RR.TriplesMap) in graph


def test_nquads_are_read_across_graphs() -> None:
    doc = (
        b"<http://example.com/M> <http://www.w3.org/1999/02/22-rdf-syntax-ns#type> "
        b"<http://www.w3.org/ns/r2rml#TriplesMap> <http://example.com/g> .\n"
    )
    graph = GraphMappingReader().read(io.BytesIO(doc), format=Format.NQUADS)
    assert set(graph.subjects(RDF.type, RR.TriplesMap)) == {URIRef("http://example.com/M")}


def test_syntax_errors_become_parse_errors() -> None:
    reader = GraphMappingReader(source_name="broken.ttl")
    with pytest.raises(MappingParseError) as info:
        reader.read(io.BytesIO(b"<#A> a [ ;"), format=Format.TURTLE, base_uri="http://a.org/")
    assert info.value.source == "broken.ttl"
    assert str(info.value).startswith("broken.ttl: ")
    assert info.value.__cause__ is not None
