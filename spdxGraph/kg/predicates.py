from __future__ import annotations

"""Versioned predicate table for license fields.

Every field is described by one canonical predicate, used for all writes,
followed by the legacy predicate names still accepted on read. The order of
:attr:`VersionedPredicate.candidates` is the read priority.
"""

from dataclasses import dataclass
from typing import Tuple

from rdflib import URIRef
from rdflib.namespace import RDFS

from .namespaces import SPDX


@dataclass(frozen=True)
class VersionedPredicate:
    """A field's canonical predicate plus its legacy read fallbacks."""

    name: str
    canonical: URIRef
    legacy: Tuple[URIRef, ...] = ()

    @property
    def candidates(self) -> Tuple[URIRef, ...]:
        return (self.canonical, *self.legacy)

    def is_legacy(self, predicate: URIRef) -> bool:
        return predicate in self.legacy


# Licensing-info base fields.
LICENSE_ID = VersionedPredicate("license_id", SPDX.licenseId)
NAME = VersionedPredicate("name", SPDX.name, (SPDX.licenseName,))
COMMENT = VersionedPredicate("comment", RDFS.comment, (SPDX.licenseNotes,))
SEE_ALSO = VersionedPredicate("see_also", RDFS.seeAlso, (SPDX.licenseSourceUrl,))

# License fields. Body text has never been renamed.
LICENSE_TEXT = VersionedPredicate("license_text", SPDX.licenseText)
STANDARD_LICENSE_HEADER = VersionedPredicate(
    "standard_license_header", SPDX.standardLicenseHeader, (SPDX.licenseNotice,)
)
STANDARD_LICENSE_TEMPLATE = VersionedPredicate(
    "standard_license_template", SPDX.standardLicenseTemplate, (SPDX.licenseTemplate,)
)
OSI_APPROVED = VersionedPredicate(
    "osi_approved", SPDX.isOsiApproved, (SPDX.licenseOsiApproved,)
)

LICENSE_FIELDS: Tuple[VersionedPredicate, ...] = (
    LICENSE_ID,
    NAME,
    COMMENT,
    SEE_ALSO,
    LICENSE_TEXT,
    STANDARD_LICENSE_HEADER,
    STANDARD_LICENSE_TEMPLATE,
    OSI_APPROVED,
)

LICENSE_CLASSES = (SPDX.License, SPDX.ListedLicense)

__all__ = [
    "VersionedPredicate",
    "LICENSE_ID",
    "NAME",
    "COMMENT",
    "SEE_ALSO",
    "LICENSE_TEXT",
    "STANDARD_LICENSE_HEADER",
    "STANDARD_LICENSE_TEMPLATE",
    "OSI_APPROVED",
    "LICENSE_FIELDS",
    "LICENSE_CLASSES",
]
