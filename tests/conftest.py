from __future__ import annotations

import logging
from typing import Callable

import pytest
from rdflib import Graph, URIRef

from spdxGraph.kg.namespaces import LIC
from spdxGraph.kg.ontology import graph_with_prefixes
from spdxGraph.kg.store import GraphStore
from spdxGraph.license import LicenseMapper
from spdxGraph.utils.log_json import JsonLogger

TTL_PREFIXES = """
@prefix spdx: <http://spdx.org/rdf/terms#> .
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
@prefix lic: <http://spdx.org/licenses/> .
@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .
"""


@pytest.fixture
def graph() -> Graph:
    return graph_with_prefixes()


@pytest.fixture
def store(graph: Graph) -> GraphStore:
    return GraphStore(graph)


@pytest.fixture
def license_node() -> URIRef:
    return LIC["MIT"]


@pytest.fixture
def turtle_store() -> Callable[[str], GraphStore]:
    """Build a store from a Turtle body; the common prefixes are prepended."""

    def _build(body: str) -> GraphStore:
        graph = graph_with_prefixes()
        graph.parse(data=TTL_PREFIXES + body, format="turtle")
        return GraphStore(graph)

    return _build


@pytest.fixture
def mapper() -> LicenseMapper:
    logger = logging.getLogger("spdxgraph.test.mapper")
    logger.handlers = [logging.NullHandler()]
    return LicenseMapper(logger=JsonLogger("test", logger=logger))
