from __future__ import annotations

"""Vocabulary namespaces used by RML mapping documents.

This module is the single source of truth for the namespace strings read by
the mapping normalizer.
"""

from rdflib import Namespace

RR_NS = "http://www.w3.org/ns/r2rml#"
RML_NS = "http://semweb.mmlab.be/ns/rml#"
QL_NS = "http://semweb.mmlab.be/ns/ql#"

RR = Namespace(RR_NS)
RML = Namespace(RML_NS)
QL = Namespace(QL_NS)

# Iterator used by a reference formulation when a logical source declares none.
DEFAULT_ITERATORS: dict[str, str] = {
    str(QL.JSONPath): "$",
    str(QL.XPath): "/*",
    str(QL.CSV): "",
}

__all__ = [
    "RR_NS",
    "RML_NS",
    "QL_NS",
    "RR",
    "RML",
    "QL",
    "DEFAULT_ITERATORS",
]
