from __future__ import annotations

"""Canonical namespaces for SPDX license graphs.

This module is the single source of truth for namespace strings used when
reading and writing license nodes.
"""

from rdflib import Namespace

# Canonical namespaces (normative).
SPDX_TERMS_NS = "http://spdx.org/rdf/terms#"
LISTED_LICENSE_NS = "http://spdx.org/licenses/"

# Datatype marker appended to literals by the legacy XML-literal serialization.
XML_LITERAL_SUFFIX = "^^http://www.w3.org/1999/02/22-rdf-syntax-ns#XMLLiteral"

# rdflib Namespace helpers.
SPDX = Namespace(SPDX_TERMS_NS)
LIC = Namespace(LISTED_LICENSE_NS)

__all__ = [
    "SPDX_TERMS_NS",
    "LISTED_LICENSE_NS",
    "XML_LITERAL_SUFFIX",
    "SPDX",
    "LIC",
]
