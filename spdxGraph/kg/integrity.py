from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

import rdflib

from .ontology import graph_with_prefixes

@dataclass
class IntegrityIssue:
    name: str
    count: int
    query: str


_PREFIXES = """
PREFIX spdx: <http://spdx.org/rdf/terms#>
PREFIX rdfs: <http://www.w3.org/2000/01/rdf-schema#>
"""

QUERIES: Dict[str, str] = {
    "licenses_without_text": _PREFIXES
    + """
SELECT (COUNT(DISTINCT ?s) AS ?count)
WHERE {
  VALUES ?type { spdx:License spdx:ListedLicense }
  ?s a ?type .
  FILTER NOT EXISTS { ?s spdx:licenseText ?text }
}
""",
    "licenses_with_legacy_predicates": _PREFIXES
    + """
SELECT (COUNT(DISTINCT ?s) AS ?count)
WHERE {
  VALUES ?legacy {
    spdx:licenseNotice spdx:licenseTemplate spdx:licenseOsiApproved
    spdx:licenseName spdx:licenseNotes spdx:licenseSourceUrl
  }
  ?s ?legacy ?value .
}
""",
    "licenses_with_multiple_headers": _PREFIXES
    + """
SELECT (COUNT(DISTINCT ?s) AS ?count)
WHERE {
  ?s spdx:standardLicenseHeader ?a .
  ?s spdx:standardLicenseHeader ?b .
  FILTER (?a != ?b)
}
""",
    "invalid_osi_values": _PREFIXES
    + r"""
SELECT (COUNT(?value) AS ?count)
WHERE {
  VALUES ?p { spdx:isOsiApproved spdx:licenseOsiApproved }
  ?s ?p ?value .
  FILTER (!REGEX(STR(?value), "^\\s*(true|false|1|0)\\s*$"))
}
""",
}


def run_checks(graph: rdflib.Graph, queries: Dict[str, str] | None = None) -> List[IntegrityIssue]:
    checks = []
    for name, query in (queries or QUERIES).items():
        result = graph.query(query)
        count = 0
        for row in result:
            if row and len(row) > 0:
                try:
                    count = int(row[0])
                except (TypeError, ValueError):
                    count = 0
        checks.append(IntegrityIssue(name=name, count=count, query=query))
    return checks


def check_file(ttl_path: Path) -> List[IntegrityIssue]:
    graph = graph_with_prefixes()
    graph.parse(ttl_path, format="turtle")
    return run_checks(graph)


__all__ = ["IntegrityIssue", "QUERIES", "run_checks", "check_file"]
