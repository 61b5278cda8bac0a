from __future__ import annotations

"""Schema-version tolerant property lookup.

``resolve`` walks a field's candidate predicates in priority order and stops
at the first predicate with any match; the remaining candidates are never
queried. Stores are not required to return a single object per predicate, so
only the first matching triple is used.
"""

from typing import Iterable, List, NamedTuple, Optional, Sequence, Union

from rdflib import URIRef
from rdflib.term import Node

from .namespaces import XML_LITERAL_SUFFIX
from .predicates import VersionedPredicate
from .store import TripleStore

Candidates = Union[VersionedPredicate, Sequence[URIRef]]


class Resolved(NamedTuple):
    """Object found for a field and the predicate that supplied it."""

    value: Node
    predicate: URIRef


def _candidates(field: Candidates) -> Iterable[URIRef]:
    if isinstance(field, VersionedPredicate):
        return field.candidates
    return field


def resolve_match(store: TripleStore, node: Node, field: Candidates) -> Optional[Resolved]:
    for predicate in _candidates(field):
        triples = store.find_triples(node, predicate)
        if triples:
            return Resolved(triples[0][2], predicate)
    return None


def resolve(store: TripleStore, node: Node, field: Candidates) -> Optional[Node]:
    """Return the first object found under the highest-priority predicate."""

    match = resolve_match(store, node, field)
    return match.value if match else None


def resolve_all(store: TripleStore, node: Node, field: Candidates) -> List[Node]:
    """Return every object under the highest-priority predicate that matches.

    Used for multi-valued fields such as ``rdfs:seeAlso``.
    """

    for predicate in _candidates(field):
        triples = store.find_triples(node, predicate)
        if triples:
            return [o for _, _, o in triples]
    return []


def extract_text(value: Node) -> str:
    """Return the string form of ``value`` minus a trailing XML-literal marker."""

    text = str(value)
    if text.endswith(XML_LITERAL_SUFFIX):
        return text[: -len(XML_LITERAL_SUFFIX)]
    return text


__all__ = ["Resolved", "resolve", "resolve_match", "resolve_all", "extract_text"]
