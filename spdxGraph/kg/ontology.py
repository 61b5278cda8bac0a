"""Minimal ontology helpers for license graphs."""

from __future__ import annotations

from pathlib import Path
from typing import Optional
from urllib.parse import quote

import rdflib
from rdflib import Graph, Literal
from rdflib.namespace import RDF, RDFS, XSD

from .namespaces import LIC, SPDX


def graph_with_prefixes(*, identifier: rdflib.term.Identifier | None = None) -> Graph:
    """Return a graph pre-bound with the SPDX prefixes.

    Parameters
    ----------
    identifier:
        Optional identifier for the graph. When provided the returned
        :class:`~rdflib.Graph` will use this value as its named graph IRI.
    """

    g = Graph(identifier=identifier)
    g.bind("spdx", SPDX)
    g.bind("lic", LIC)
    g.bind("rdf", RDF)
    g.bind("rdfs", RDFS)
    g.bind("xsd", XSD)
    return g


def iri_for_license(license_id: str) -> rdflib.URIRef:
    """Return the listed-license IRI for ``license_id``."""

    raw = str(license_id or "").strip()
    if not raw:
        raise ValueError("license_id must be non-empty")
    return LIC[quote(raw.replace(" ", "-"), safe="-._~+")]


def license_id_from_iri(node: rdflib.term.Node) -> Optional[str]:
    """Return the trailing path or fragment segment of an IRI node."""

    if not isinstance(node, rdflib.URIRef):
        return None
    raw = str(node).rstrip("/")
    for sep in ("#", "/"):
        if sep in raw:
            raw = raw.rsplit(sep, 1)[-1]
            break
    return raw or None


def safe_literal(value: str | bool, datatype: Optional[rdflib.term.Identifier] = None) -> Literal:
    """Create a plain literal for ``value``.

    Booleans are written as the lowercase lexical forms ``true``/``false`` so
    they read back through the OSI flag parser unchanged.
    """

    if isinstance(value, bool):
        return Literal("true" if value else "false", datatype=datatype)
    return Literal(value, datatype=datatype)


def write_sorted_ttl(graph: Graph, out_path: Path) -> None:
    """Write ``graph`` as line-sorted N-Triples-style Turtle for stable diffs."""

    prefixes = sorted(graph.namespace_manager.namespaces(), key=lambda x: x[0])
    lines: list[str] = []
    nm = graph.namespace_manager
    for s, p, o in graph:
        lines.append(f"{s.n3(nm)} {p.n3(nm)} {o.n3(nm)} .")
    lines.sort()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as f:
        for prefix, ns in prefixes:
            f.write(f"@prefix {prefix}: <{ns}> .\n")
        f.write("\n")
        for line in lines:
            f.write(line + "\n")


__all__ = [
    "graph_with_prefixes",
    "iri_for_license",
    "license_id_from_iri",
    "safe_literal",
    "write_sorted_ttl",
]
