"""License graph utilities."""

__all__ = [
    "GraphStore",
    "TripleStore",
    "VersionedPredicate",
    "extract_text",
    "resolve",
    "resolve_all",
    "graph_with_prefixes",
    "iri_for_license",
    "write_sorted_ttl",
    "run_checks",
]

from .store import GraphStore, TripleStore
from .predicates import VersionedPredicate
from .resolver import extract_text, resolve, resolve_all
from .ontology import graph_with_prefixes, iri_for_license, write_sorted_ttl
from .integrity import run_checks
