from __future__ import annotations

"""Normalized view of a parsed RML mapping document.

The normalizer walks the graph produced by the mapping reader and splits the
triples maps into standard ones and joined ones (those with at least one
referencing object map), which is the shape the execution engine consumes.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import rdflib
from rdflib import BNode, Literal, URIRef
from rdflib.namespace import RDF
from rdflib.term import Node

from rmlIngest.core.formats import Format
from rmlIngest.core.language import is_valid_language_tag
from rmlIngest.errors import MappingParseError

from .namespaces import DEFAULT_ITERATORS, RML, RR


def is_root_iterator(iterator: str | None) -> bool:
    """Return ``True`` for an absent iterator or a reference formulation default."""

    if iterator is None:
        return True
    return iterator in DEFAULT_ITERATORS.values()


@dataclass(frozen=True, slots=True)
class LogicalSource:
    source: str
    reference_formulation: str | None = None
    iterator: str | None = None

    @property
    def has_root_iterator(self) -> bool:
        return is_root_iterator(self.iterator)

    def to_dict(self) -> dict[str, object]:
        return {
            "source": self.source,
            "reference_formulation": self.reference_formulation,
            "iterator": self.iterator,
        }


@dataclass(frozen=True, slots=True)
class TermMap:
    """A constant-, reference- or template-valued term map."""

    kind: str
    value: str
    term_type: str | None = None
    datatype: str | None = None
    language: str | None = None

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {"kind": self.kind, "value": self.value}
        for key in ("term_type", "datatype", "language"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


@dataclass(frozen=True, slots=True)
class JoinCondition:
    child: str
    parent: str

    def to_dict(self) -> dict[str, str]:
        return {"child": self.child, "parent": self.parent}


@dataclass(frozen=True, slots=True)
class RefObjectMap:
    parent_triples_map: str
    join_conditions: tuple[JoinCondition, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "parent_triples_map": self.parent_triples_map,
            "join_conditions": [cond.to_dict() for cond in self.join_conditions],
        }


@dataclass(frozen=True, slots=True)
class PredicateObjectMap:
    predicates: tuple[TermMap, ...]
    objects: tuple[TermMap, ...] = ()
    ref_objects: tuple[RefObjectMap, ...] = ()
    graphs: tuple[TermMap, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "predicates": [p.to_dict() for p in self.predicates],
            "objects": [o.to_dict() for o in self.objects],
            "ref_objects": [r.to_dict() for r in self.ref_objects],
            "graphs": [g.to_dict() for g in self.graphs],
        }


@dataclass(frozen=True, slots=True)
class TriplesMap:
    iri: str
    logical_source: LogicalSource
    subject: TermMap
    classes: tuple[str, ...] = ()
    graphs: tuple[TermMap, ...] = ()
    predicate_object_maps: tuple[PredicateObjectMap, ...] = ()

    @property
    def is_joined(self) -> bool:
        return any(pom.ref_objects for pom in self.predicate_object_maps)

    @property
    def parent_triples_maps(self) -> tuple[str, ...]:
        parents = {
            ref.parent_triples_map
            for pom in self.predicate_object_maps
            for ref in pom.ref_objects
        }
        return tuple(sorted(parents))

    def to_dict(self) -> dict[str, object]:
        return {
            "iri": self.iri,
            "logical_source": self.logical_source.to_dict(),
            "subject": self.subject.to_dict(),
            "classes": list(self.classes),
            "graphs": [g.to_dict() for g in self.graphs],
            "predicate_object_maps": [pom.to_dict() for pom in self.predicate_object_maps],
        }


@dataclass(frozen=True, slots=True)
class NormalizedMapping:
    source: Path
    format: Format
    base_uri: str = ""
    standard_triples_maps: tuple[TriplesMap, ...] = ()
    joined_triples_maps: tuple[TriplesMap, ...] = ()

    @property
    def triples_maps(self) -> tuple[TriplesMap, ...]:
        both = self.standard_triples_maps + self.joined_triples_maps
        return tuple(sorted(both, key=lambda tm: tm.iri))

    def get(self, iri: str) -> TriplesMap | None:
        for triples_map in self.triples_maps:
            if triples_map.iri == iri:
                return triples_map
        return None

    def to_dict(self) -> dict[str, object]:
        return {
            "source": str(self.source),
            "format": self.format.value,
            "base_uri": self.base_uri,
            "standard_triples_maps": [tm.to_dict() for tm in self.standard_triples_maps],
            "joined_triples_maps": [tm.to_dict() for tm in self.joined_triples_maps],
        }


def _node_id(node: Node) -> str:
    if isinstance(node, BNode):
        return f"_:{node}"
    return str(node)


def _optional_str(graph: rdflib.Graph, node: Node, predicate: URIRef) -> str | None:
    value = graph.value(node, predicate)
    return None if value is None else str(value)


class _Normalizer:
    def __init__(self, graph: rdflib.Graph, source: str) -> None:
        self.graph = graph
        self.source = source

    def fail(self, message: str) -> MappingParseError:
        return MappingParseError(message, source=self.source)

    def triples_map_nodes(self) -> list[Node]:
        nodes = set(self.graph.subjects(RDF.type, RR.TriplesMap))
        nodes.update(self.graph.subjects(RML.logicalSource, None))
        return sorted(nodes, key=_node_id)

    def logical_source(self, node: Node) -> LogicalSource:
        ls = self.graph.value(node, RML.logicalSource)
        if ls is None:
            raise self.fail(f"triples map {_node_id(node)} has no rml:logicalSource")
        raw_source = self.graph.value(ls, RML.source)
        if raw_source is None:
            raise self.fail(f"logical source of {_node_id(node)} has no rml:source")
        if isinstance(raw_source, (Literal, URIRef)):
            source = str(raw_source)
        else:
            # Structured source descriptions are identified by their type.
            source = _optional_str(self.graph, raw_source, RDF.type) or ""
        return LogicalSource(
            source=source,
            reference_formulation=_optional_str(self.graph, ls, RML.referenceFormulation),
            iterator=_optional_str(self.graph, ls, RML.iterator),
        )

    def language(self, node: Node, owner: Node) -> str | None:
        language = _optional_str(self.graph, node, RR.language)
        if language is not None and not is_valid_language_tag(language):
            raise self.fail(f"invalid language tag {language!r} in {_node_id(owner)}")
        return language

    def constant(self, value: Node) -> TermMap:
        if isinstance(value, Literal):
            return TermMap(
                kind="constant",
                value=str(value),
                term_type=str(RR.Literal),
                datatype=str(value.datatype) if value.datatype else None,
                language=value.language,
            )
        return TermMap(kind="constant", value=_node_id(value))

    def term_map(self, node: Node, owner: Node) -> TermMap:
        if isinstance(node, Literal):
            raise self.fail(f"term map of {_node_id(owner)} is a literal")
        constant = self.graph.value(node, RR.constant)
        if constant is not None:
            base = self.constant(constant)
            return TermMap(
                kind=base.kind,
                value=base.value,
                term_type=_optional_str(self.graph, node, RR.termType) or base.term_type,
                datatype=_optional_str(self.graph, node, RR.datatype) or base.datatype,
                language=self.language(node, owner) or base.language,
            )
        for kind, predicate in (
            ("reference", RML.reference),
            ("reference", RR.column),
            ("template", RR.template),
        ):
            value = self.graph.value(node, predicate)
            if value is not None:
                return TermMap(
                    kind=kind,
                    value=str(value),
                    term_type=_optional_str(self.graph, node, RR.termType),
                    datatype=_optional_str(self.graph, node, RR.datatype),
                    language=self.language(node, owner),
                )
        raise self.fail(f"term map {_node_id(node)} of {_node_id(owner)} has no value")

    def term_maps(self, node: Node, shortcut: URIRef, full: URIRef, owner: Node) -> tuple[TermMap, ...]:
        maps = [self.constant(value) for value in self.graph.objects(node, shortcut)]
        maps.extend(self.term_map(value, owner) for value in self.graph.objects(node, full))
        return tuple(sorted(maps, key=lambda tm: (tm.kind, tm.value)))

    def ref_object(self, node: Node) -> RefObjectMap:
        parent = self.graph.value(node, RR.parentTriplesMap)
        conditions = []
        for cond in self.graph.objects(node, RR.joinCondition):
            child = _optional_str(self.graph, cond, RR.child)
            parent_ref = _optional_str(self.graph, cond, RR.parent)
            if child is None or parent_ref is None:
                raise self.fail(f"join condition under {_node_id(node)} needs rr:child and rr:parent")
            conditions.append(JoinCondition(child=child, parent=parent_ref))
        conditions.sort(key=lambda c: (c.child, c.parent))
        return RefObjectMap(parent_triples_map=_node_id(parent), join_conditions=tuple(conditions))

    def predicate_object_map(self, node: Node, owner: Node) -> PredicateObjectMap:
        predicates = self.term_maps(node, RR.predicate, RR.predicateMap, owner)
        if not predicates:
            raise self.fail(f"predicate-object map of {_node_id(owner)} has no predicate")
        objects = [self.constant(value) for value in self.graph.objects(node, RR.object)]
        refs = []
        for object_map in self.graph.objects(node, RR.objectMap):
            if self.graph.value(object_map, RR.parentTriplesMap) is not None:
                refs.append(self.ref_object(object_map))
            else:
                objects.append(self.term_map(object_map, owner))
        if not objects and not refs:
            raise self.fail(f"predicate-object map of {_node_id(owner)} has no object")
        return PredicateObjectMap(
            predicates=predicates,
            objects=tuple(sorted(objects, key=lambda tm: (tm.kind, tm.value))),
            ref_objects=tuple(sorted(refs, key=lambda r: r.parent_triples_map)),
            graphs=self.term_maps(node, RR.graph, RR.graphMap, owner),
        )

    def triples_map(self, node: Node) -> TriplesMap:
        logical_source = self.logical_source(node)
        subject_maps = self.term_maps(node, RR.subject, RR.subjectMap, node)
        if len(subject_maps) != 1:
            raise self.fail(
                f"triples map {_node_id(node)} needs exactly one subject map, found {len(subject_maps)}"
            )
        subject_node = self.graph.value(node, RR.subjectMap)
        classes: Iterable[Node] = ()
        graphs: tuple[TermMap, ...] = ()
        if subject_node is not None:
            classes = self.graph.objects(subject_node, RR["class"])
            graphs = self.term_maps(subject_node, RR.graph, RR.graphMap, node)
        poms = [
            self.predicate_object_map(pom, node)
            for pom in self.graph.objects(node, RR.predicateObjectMap)
        ]
        poms.sort(key=lambda p: [tm.value for tm in p.predicates])
        return TriplesMap(
            iri=_node_id(node),
            logical_source=logical_source,
            subject=subject_maps[0],
            classes=tuple(sorted(str(c) for c in classes)),
            graphs=graphs,
            predicate_object_maps=tuple(poms),
        )


def format_mapping(
    graph: rdflib.Graph,
    *,
    source: Path,
    format: Format,
    base_uri: str = "",
) -> NormalizedMapping:
    """Normalize the triples maps found in ``graph``.

    Raises :class:`MappingParseError` when a triples map is incomplete or an
    object map declares an invalid language tag.
    """

    normalizer = _Normalizer(graph, str(source))
    standard: list[TriplesMap] = []
    joined: list[TriplesMap] = []
    for node in normalizer.triples_map_nodes():
        triples_map = normalizer.triples_map(node)
        (joined if triples_map.is_joined else standard).append(triples_map)
    return NormalizedMapping(
        source=source,
        format=format,
        base_uri=base_uri,
        standard_triples_maps=tuple(standard),
        joined_triples_maps=tuple(joined),
    )


__all__ = [
    "LogicalSource",
    "TermMap",
    "JoinCondition",
    "RefObjectMap",
    "PredicateObjectMap",
    "TriplesMap",
    "NormalizedMapping",
    "format_mapping",
    "is_root_iterator",
]
