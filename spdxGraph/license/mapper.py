"""Load and project :class:`License` entities to and from graph nodes.

Reads accept the current and the version 1 predicate names; writes always use
the current names. Body text and template literals may carry the legacy
XML-literal marker and HTML markup, both removed on load. Headers are only
entity-unescaped.
"""

from __future__ import annotations

from typing import List, Optional

from rdflib import RDF, BNode
from rdflib.term import Node

from spdxGraph.config import MappingConfig
from spdxGraph.kg.namespaces import SPDX
from spdxGraph.kg.ontology import iri_for_license, license_id_from_iri
from spdxGraph.kg.predicates import (
    COMMENT,
    LICENSE_CLASSES,
    LICENSE_FIELDS,
    LICENSE_ID,
    LICENSE_TEXT,
    NAME,
    OSI_APPROVED,
    SEE_ALSO,
    STANDARD_LICENSE_HEADER,
    STANDARD_LICENSE_TEMPLATE,
    VersionedPredicate,
)
from spdxGraph.kg.resolver import extract_text, resolve_all, resolve_match
from spdxGraph.kg.store import GraphStore, TripleStore
from spdxGraph.transforms.markup import normalize_header, normalize_markup
from spdxGraph.utils.log_json import JsonLogger

from .model import License, NodeBinding

OSI_APPROVED_VALUES = {"true": True, "1": True, "false": False, "0": False}


class LicenseValidationError(ValueError):
    """Raised when a stored license value violates its literal contract."""


def parse_osi_approved(value: Node, node: Optional[Node] = None) -> bool:
    """Map an OSI-approved literal to a bool; only true/false/1/0 are accepted."""

    text = str(value).strip()
    try:
        return OSI_APPROVED_VALUES[text]
    except KeyError:
        where = f" on {node}" if node is not None else ""
        raise LicenseValidationError(
            f"Invalid value for OSI Approved - must be {{true, false, 0, 1}}; got {text!r}{where}"
        ) from None


def _optional_str(value: Optional[Node]) -> Optional[str]:
    return None if value is None else str(value)


class LicenseMapper:
    """Read and write the license fields of graph nodes."""

    def __init__(
        self,
        config: MappingConfig | None = None,
        *,
        logger: JsonLogger | None = None,
    ) -> None:
        self.config = config or MappingConfig()
        self.logger = logger or JsonLogger.from_config("license-mapper", self.config.logging)

    # ------------------------------------------------------------------
    # Load

    def load(self, store: TripleStore, node: Node) -> License:
        """Construct a bound :class:`License` from ``node``."""

        license = License(binding=NodeBinding(store, node, mapper=self))
        return self.read_into(license)

    def read_into(self, license: License) -> License:
        """Populate a bound ``license`` from its node using its HTML flags."""

        if not license.is_bound:
            raise ValueError("Only a bound license can be read from a graph")
        store, node = license.binding.store, license.binding.node
        legacy_hits: List[str] = []

        def lookup(field: VersionedPredicate) -> Optional[Node]:
            match = resolve_match(store, node, field)
            if match is None:
                return None
            if field.is_legacy(match.predicate):
                legacy_hits.append(field.name)
            return match.value

        raw_id = lookup(LICENSE_ID)
        license_id = str(raw_id).strip() if raw_id is not None else license_id_from_iri(node)
        name = _optional_str(lookup(NAME))
        comment = _optional_str(lookup(COMMENT))
        see_also = [str(url) for url in resolve_all(store, node, SEE_ALSO)]

        text = lookup(LICENSE_TEXT)
        license_text = None
        if text is not None:
            license_text = normalize_markup(
                extract_text(text), license.text_in_html, parser=self.config.html_parser
            )

        header = lookup(STANDARD_LICENSE_HEADER)
        standard_header = normalize_header(str(header)) if header is not None else None

        template = lookup(STANDARD_LICENSE_TEMPLATE)
        standard_template = None
        if template is not None:
            standard_template = normalize_markup(
                extract_text(template), license.template_in_html, parser=self.config.html_parser
            )

        osi = lookup(OSI_APPROVED)
        osi_approved = False
        if osi is not None:
            try:
                osi_approved = parse_osi_approved(osi, node)
            except LicenseValidationError:
                self.logger.warning(
                    "license.load.invalid_osi", node=node, license_id=license_id, value=str(osi)
                )
                raise

        license._assign_loaded(
            license_id=license_id,
            name=name,
            comment=comment,
            see_also=see_also,
            license_text=license_text,
            standard_license_header=standard_header,
            standard_license_template=standard_template,
            osi_approved=osi_approved,
        )
        self.logger.info(
            "license.load",
            node=node,
            license_id=license_id,
            legacy_fields=legacy_hits,
            has_text=license_text is not None,
        )
        return license

    def load_all(self, store: GraphStore) -> List[License]:
        """Load every license node in ``store``, ordered by node."""

        nodes = set()
        for rdf_type in LICENSE_CLASSES:
            nodes.update(store.subjects_with(RDF.type, rdf_type))
        nodes.update(store.subjects_with(LICENSE_TEXT.canonical))
        return [self.load(store, node) for node in sorted(nodes, key=str)]

    # ------------------------------------------------------------------
    # Save

    def project(
        self,
        license: License,
        store: TripleStore,
        node: Optional[Node] = None,
    ) -> License:
        """Write every field of ``license`` onto ``node`` and return it bound.

        ``node`` defaults to the listed-license IRI for the id, or a blank node
        when the license has no id. The source entity is left untouched.
        """

        if node is None:
            node = iri_for_license(license.license_id) if license.license_id else BNode()
        binding = NodeBinding(store, node, mapper=self)
        store.add_triple(node, RDF.type, SPDX.License)
        binding.write(LICENSE_ID, license.license_id)
        binding.write(NAME, license.name)
        binding.write(COMMENT, license.comment)
        binding.write_many(SEE_ALSO, license.see_also)
        binding.write(LICENSE_TEXT, license.license_text or None)
        binding.write(STANDARD_LICENSE_HEADER, license.standard_license_header)
        binding.write(STANDARD_LICENSE_TEMPLATE, license.standard_license_template)
        binding.write(OSI_APPROVED, "true" if license.osi_approved else None)

        bound = License(binding=binding)
        bound._assign_loaded(
            license_id=license.license_id,
            name=license.name,
            comment=license.comment,
            see_also=license.see_also,
            license_text=license.license_text,
            standard_license_header=license.standard_license_header,
            standard_license_template=license.standard_license_template,
            osi_approved=license.osi_approved,
        )
        bound.text_in_html = license.text_in_html
        bound.template_in_html = license.template_in_html
        self.logger.info("license.project", node=node, license_id=license.license_id)
        return bound

    def upgrade(self, license: License) -> List[str]:
        """Rewrite fields stored under legacy predicates to their canonical names.

        Returns the names of the fields that were rewritten.
        """

        if not license.is_bound:
            raise ValueError("Only a bound license can be upgraded")
        store, node = license.binding.store, license.binding.node
        migrated: List[str] = []
        for field in LICENSE_FIELDS:
            if any(store.find_triples(node, predicate) for predicate in field.legacy):
                # Re-setting the current value drops every legacy triple.
                setattr(license, field.name, getattr(license, field.name))
                migrated.append(field.name)
        if migrated:
            self.logger.info(
                "license.upgrade", node=node, license_id=license.license_id, fields=migrated
            )
        return migrated


def load_license(store: TripleStore, node: Node, config: MappingConfig | None = None) -> License:
    return LicenseMapper(config).load(store, node)


__all__ = [
    "OSI_APPROVED_VALUES",
    "LicenseValidationError",
    "LicenseMapper",
    "load_license",
    "parse_osi_approved",
]
