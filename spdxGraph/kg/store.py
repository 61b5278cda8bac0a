from __future__ import annotations

"""Triple store capability used by the license mapper.

The mapper only needs three primitives: match ``(subject, predicate, *)``,
remove every such triple, and add one. :class:`GraphStore` provides them over
an in-memory :class:`rdflib.Graph`; any object with the same methods can be
passed instead (a SPARQL-backed store, a test double).
"""

import logging
from typing import Iterator, List, Optional, Protocol, Tuple

from rdflib import Graph, URIRef
from rdflib.term import Node

from .ontology import graph_with_prefixes

logger = logging.getLogger(__name__)

Triple = Tuple[Node, Node, Node]


class TripleStore(Protocol):
    def find_triples(self, subject: Node, predicate: URIRef) -> List[Triple]:
        ...

    def remove_triples(self, subject: Node, predicate: URIRef) -> None:
        ...

    def add_triple(self, subject: Node, predicate: URIRef, value: Node) -> None:
        ...


class GraphStore:
    """Adapter exposing an :class:`rdflib.Graph` as a :class:`TripleStore`."""

    def __init__(self, graph: Optional[Graph] = None) -> None:
        self.graph = graph if graph is not None else graph_with_prefixes()

    def find_triples(self, subject: Node, predicate: URIRef) -> List[Triple]:
        return list(self.graph.triples((subject, predicate, None)))

    def remove_triples(self, subject: Node, predicate: URIRef) -> None:
        before = len(self.graph)
        self.graph.remove((subject, predicate, None))
        removed = before - len(self.graph)
        if removed:
            logger.debug("removed %d triple(s) %s %s", removed, subject, predicate)

    def add_triple(self, subject: Node, predicate: URIRef, value: Node) -> None:
        self.graph.add((subject, predicate, value))

    def subjects_with(self, predicate: URIRef, obj: Optional[Node] = None) -> Iterator[Node]:
        seen: set[Node] = set()
        for subject in self.graph.subjects(predicate, obj):
            if subject not in seen:
                seen.add(subject)
                yield subject

    def __len__(self) -> int:
        return len(self.graph)

    @classmethod
    def from_file(cls, path, *, fmt: str = "turtle") -> "GraphStore":
        graph = graph_with_prefixes()
        graph.parse(str(path), format=fmt)
        logger.debug("parsed %d triple(s) from %s", len(graph), path)
        return cls(graph)


__all__ = ["Triple", "TripleStore", "GraphStore"]
