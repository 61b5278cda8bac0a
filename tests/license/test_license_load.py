from __future__ import annotations

import pytest
from rdflib import Literal

from spdxGraph.kg.namespaces import LIC, SPDX, XML_LITERAL_SUFFIX
from spdxGraph.license import License, LicenseMapper, LicenseValidationError, parse_osi_approved


def test_loads_current_schema_fields(mapper, turtle_store) -> None:
    store = turtle_store(
        """
lic:MIT a spdx:ListedLicense ;
    spdx:licenseId "MIT" ;
    spdx:name "MIT License" ;
    rdfs:comment "Popular permissive license" ;
    rdfs:seeAlso "https://opensource.org/licenses/MIT" ;
    spdx:licenseText "<p>Permission is hereby granted</p>" ;
    spdx:standardLicenseHeader "Copyright &copy; &lt;year&gt;" ;
    spdx:standardLicenseTemplate "<p>Copyright holder</p>" ;
    spdx:isOsiApproved "true" .
"""
    )
    lic = mapper.load(store, LIC["MIT"])
    assert lic.is_bound
    assert lic.node == LIC["MIT"]
    assert lic.license_id == "MIT"
    assert lic.name == "MIT License"
    assert lic.comment == "Popular permissive license"
    assert lic.see_also == ("https://opensource.org/licenses/MIT",)
    assert lic.license_text == "Permission is hereby granted\n"
    assert lic.standard_license_header == "Copyright © <year>"
    assert lic.standard_license_template == "Copyright holder\n"
    assert lic.osi_approved is True
    assert lic.text_in_html and lic.template_in_html


def test_legacy_predicates_are_read(mapper, turtle_store) -> None:
    store = turtle_store(
        """
lic:GPL-2.0 spdx:licenseName "GNU GPL v2" ;
    spdx:licenseNotes "v1 notes" ;
    spdx:licenseSourceUrl "https://www.gnu.org/licenses/gpl-2.0.html" ;
    spdx:licenseText "This program is free software" ;
    spdx:licenseNotice "legacy header" ;
    spdx:licenseTemplate "legacy template" ;
    spdx:licenseOsiApproved "1" .
"""
    )
    lic = mapper.load(store, LIC["GPL-2.0"])
    assert lic.license_id == "GPL-2.0"
    assert lic.name == "GNU GPL v2"
    assert lic.comment == "v1 notes"
    assert lic.see_also == ("https://www.gnu.org/licenses/gpl-2.0.html",)
    assert lic.standard_license_header == "legacy header"
    assert lic.standard_license_template == "legacy template"
    assert lic.osi_approved is True


def test_current_header_preferred_over_legacy(mapper, store, license_node) -> None:
    store.add_triple(license_node, SPDX.licenseNotice, Literal("old"))
    store.add_triple(license_node, SPDX.standardLicenseHeader, Literal("new"))
    store.add_triple(license_node, SPDX.licenseTemplate, Literal("old template"))
    store.add_triple(license_node, SPDX.standardLicenseTemplate, Literal("new template"))
    lic = mapper.load(store, license_node)
    assert lic.standard_license_header == "new"
    assert lic.standard_license_template == "new template"


def test_absent_optional_fields(mapper, store, license_node) -> None:
    store.add_triple(license_node, SPDX.licenseText, Literal("text"))
    lic = mapper.load(store, license_node)
    assert lic.standard_license_header is None
    assert lic.standard_license_template is None
    assert lic.osi_approved is False
    assert lic.name is None
    assert lic.see_also == ()


def test_xml_literal_suffix_is_stripped(mapper, store, license_node) -> None:
    store.add_triple(license_node, SPDX.licenseText, Literal("Body" + XML_LITERAL_SUFFIX))
    store.add_triple(
        license_node, SPDX.licenseTemplate, Literal("Template" + XML_LITERAL_SUFFIX)
    )
    lic = mapper.load(store, license_node)
    assert lic.license_text == "Body"
    assert lic.standard_license_template == "Template"


def test_header_keeps_tags(mapper, store, license_node) -> None:
    store.add_triple(license_node, SPDX.standardLicenseHeader, Literal("<b>Notice</b> &amp; more"))
    lic = mapper.load(store, license_node)
    assert lic.standard_license_header == "<b>Notice</b> & more"


@pytest.mark.parametrize(
    "value, expected",
    [("true", True), ("1", True), ("false", False), ("0", False), (" true ", True)],
)
def test_osi_values(mapper, store, license_node, value, expected) -> None:
    store.add_triple(license_node, SPDX.isOsiApproved, Literal(value))
    assert mapper.load(store, license_node).osi_approved is expected


def test_typed_boolean_osi_literal(mapper, store, license_node) -> None:
    store.add_triple(license_node, SPDX.isOsiApproved, Literal(True))
    assert mapper.load(store, license_node).osi_approved is True


@pytest.mark.parametrize("value", ["yes", "TRUE", "True", "2", ""])
def test_invalid_osi_value_fails_load(mapper, store, license_node, value) -> None:
    store.add_triple(license_node, SPDX.licenseOsiApproved, Literal(value))
    with pytest.raises(LicenseValidationError) as excinfo:
        mapper.load(store, license_node)
    assert "OSI Approved" in str(excinfo.value)


def test_parse_osi_approved_without_node() -> None:
    assert parse_osi_approved(Literal("0")) is False
    with pytest.raises(LicenseValidationError):
        parse_osi_approved(Literal("no"))


def test_license_id_from_literal_wins_over_iri(mapper, store, license_node) -> None:
    store.add_triple(license_node, SPDX.licenseId, Literal(" Expat "))
    assert mapper.load(store, license_node).license_id == "Expat"


def test_load_all_finds_typed_and_untyped_nodes(mapper, turtle_store) -> None:
    store = turtle_store(
        """
lic:MIT a spdx:ListedLicense ; spdx:licenseText "mit" .
lic:Apache-2.0 a spdx:License .
lic:Zlib spdx:licenseText "zlib" .
lic:NotALicense rdfs:comment "unrelated" .
"""
    )
    ids = [lic.license_id for lic in mapper.load_all(store)]
    assert ids == ["Apache-2.0", "MIT", "Zlib"]


def test_refresh_skips_normalisation_after_plain_set(mapper, store, license_node) -> None:
    store.add_triple(license_node, SPDX.licenseText, Literal("<p>stored</p>"))
    lic = mapper.load(store, license_node)
    assert lic.license_text == "stored\n"

    lic.license_text = "<b>kept verbatim</b>"
    assert lic.text_in_html is False
    lic.refresh(mapper)
    assert lic.license_text == "<b>kept verbatim</b>"

    fresh = mapper.load(store, license_node)
    assert fresh.license_text == "kept verbatim"


def test_refresh_requires_binding(mapper) -> None:
    with pytest.raises(ValueError):
        License(license_id="MIT").refresh(mapper)


def test_clearing_text_keeps_html_flags(mapper, store, license_node) -> None:
    lic = mapper.load(store, license_node)
    lic.license_text = None
    lic.standard_license_template = None
    assert lic.text_in_html and lic.template_in_html

    store.add_triple(license_node, SPDX.licenseText, Literal("<p>new body</p>"))
    assert lic.refresh().license_text == "new body\n"


class CountingMapper(LicenseMapper):
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.reads = 0

    def read_into(self, license: License) -> License:
        self.reads += 1
        return super().read_into(license)


def test_refresh_defaults_to_loading_mapper(mapper, store, license_node) -> None:
    counting = CountingMapper(logger=mapper.logger)
    lic = counting.load(store, license_node)
    lic.refresh()
    assert counting.reads == 2

    projected = counting.project(License(license_id="ISC", license_text="isc"), store)
    projected.refresh()
    assert counting.reads == 3
