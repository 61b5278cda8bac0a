from __future__ import annotations

from spdxGraph.license import License


def test_identity_compares_ids_only() -> None:
    a = License(license_id="MIT", license_text="one text")
    b = License(license_id="MIT", license_text="another text")
    assert a.same_identity(b)
    assert not a.semantically_equivalent(b)
    assert a != b


def test_equivalence_ignores_everything_but_text() -> None:
    a = License(name="MIT License", license_id="MIT", license_text="Permission is granted.")
    b = License(name="Expat", license_id="Expat", license_text="permission  IS granted")
    assert a.semantically_equivalent(b)
    assert not a.same_identity(b)


def test_comparisons_with_other_types() -> None:
    lic = License(license_id="MIT", license_text="text")
    assert lic.same_identity(lic)
    assert not lic.same_identity("MIT")
    assert not lic.semantically_equivalent("text")


def test_str_is_license_id() -> None:
    assert str(License(license_id="Apache-2.0", name="Apache License 2.0")) == "Apache-2.0"
    assert str(License()) == ""
    assert "detached" in repr(License(license_id="MIT"))


def test_new_entity_defaults() -> None:
    lic = License()
    assert not lic.is_bound
    assert lic.osi_approved is False
    assert lic.see_also == ()
    assert lic.text_in_html and lic.template_in_html
