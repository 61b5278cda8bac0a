from __future__ import annotations

"""License entity with an explicit detached or node-bound storage mode.

A :class:`License` is either *detached* (a plain in-memory value, setters only
change memory) or *bound* to a graph node, in which case every setter
synchronously replaces the field's triples: all triples under the canonical
and legacy predicates are removed, then the new value is added under the
canonical predicate. The mode is fixed when the entity is constructed.

Store writes happen after the in-memory field is updated. If the store raises
part way through, memory and graph disagree until the caller re-reads.
"""

from typing import Iterable, Optional, Sequence, Tuple

from rdflib.term import Node

from spdxGraph.kg.ontology import safe_literal
from spdxGraph.kg.predicates import (
    COMMENT,
    LICENSE_ID,
    LICENSE_TEXT,
    NAME,
    OSI_APPROVED,
    SEE_ALSO,
    STANDARD_LICENSE_HEADER,
    STANDARD_LICENSE_TEMPLATE,
    VersionedPredicate,
)
from spdxGraph.kg.store import TripleStore
from spdxGraph.transforms.equivalence import is_license_text_equivalent

from .verify import verify as verify_license


class DetachedBinding:
    """Binding for in-memory entities; writes are no-ops."""

    bound = False
    store = None
    node = None
    mapper = None

    def write(self, field: VersionedPredicate, value: Optional[str]) -> None:
        return None

    def write_many(self, field: VersionedPredicate, values: Iterable[str]) -> None:
        return None


class NodeBinding:
    """Binding that writes fields straight through to ``node`` in ``store``."""

    bound = True

    def __init__(self, store: TripleStore, node: Node, mapper=None) -> None:
        self.store = store
        self.node = node
        # The mapper that loaded the node; refresh re-reads with the same settings.
        self.mapper = mapper

    def write(self, field: VersionedPredicate, value: Optional[str]) -> None:
        self.write_many(field, () if value is None else (value,))

    def write_many(self, field: VersionedPredicate, values: Iterable[str]) -> None:
        # Legacy names go too, otherwise a later read could see contradictory values.
        for predicate in field.candidates:
            self.store.remove_triples(self.node, predicate)
        for value in values:
            self.store.add_triple(self.node, field.canonical, safe_literal(value))

    def __repr__(self) -> str:
        return f"NodeBinding({self.node!r})"


DETACHED = DetachedBinding()


class License:
    """An SPDX license: identity fields plus text, header, template and OSI flag."""

    def __init__(
        self,
        name: Optional[str] = None,
        license_id: Optional[str] = None,
        license_text: Optional[str] = None,
        see_also: Sequence[str] = (),
        comment: Optional[str] = None,
        standard_license_header: Optional[str] = None,
        standard_license_template: Optional[str] = None,
        osi_approved: bool = False,
        *,
        binding: DetachedBinding | NodeBinding | None = None,
    ) -> None:
        self._binding = binding or DETACHED
        # True until the field is overwritten through its setter; only
        # consulted when the entity re-reads its node.
        self.text_in_html = True
        self.template_in_html = True
        self._name = name
        self._license_id = license_id
        self._license_text = license_text
        self._see_also: Tuple[str, ...] = tuple(see_also or ())
        self._comment = comment
        self._standard_license_header = standard_license_header
        self._standard_license_template = standard_license_template
        self._osi_approved = bool(osi_approved)

    # ------------------------------------------------------------------
    # Binding

    @property
    def binding(self) -> DetachedBinding | NodeBinding:
        return self._binding

    @property
    def is_bound(self) -> bool:
        return self._binding.bound

    @property
    def node(self) -> Optional[Node]:
        return self._binding.node

    def _assign_loaded(
        self,
        *,
        license_id: Optional[str],
        name: Optional[str],
        comment: Optional[str],
        see_also: Sequence[str],
        license_text: Optional[str],
        standard_license_header: Optional[str],
        standard_license_template: Optional[str],
        osi_approved: bool,
    ) -> None:
        """Set fields read from the store without writing them back."""

        self._license_id = license_id
        self._name = name
        self._comment = comment
        self._see_also = tuple(see_also)
        self._license_text = license_text
        self._standard_license_header = standard_license_header
        self._standard_license_template = standard_license_template
        self._osi_approved = osi_approved

    # ------------------------------------------------------------------
    # Licensing-info fields

    @property
    def license_id(self) -> Optional[str]:
        return self._license_id

    @license_id.setter
    def license_id(self, value: Optional[str]) -> None:
        self._license_id = value
        self._binding.write(LICENSE_ID, value)

    @property
    def name(self) -> Optional[str]:
        return self._name

    @name.setter
    def name(self, value: Optional[str]) -> None:
        self._name = value
        self._binding.write(NAME, value)

    @property
    def comment(self) -> Optional[str]:
        return self._comment

    @comment.setter
    def comment(self, value: Optional[str]) -> None:
        self._comment = value
        self._binding.write(COMMENT, value)

    @property
    def see_also(self) -> Tuple[str, ...]:
        return self._see_also

    @see_also.setter
    def see_also(self, urls: Optional[Sequence[str]]) -> None:
        self._see_also = tuple(urls or ())
        self._binding.write_many(SEE_ALSO, self._see_also)

    # ------------------------------------------------------------------
    # License fields

    @property
    def license_text(self) -> Optional[str]:
        return self._license_text

    @license_text.setter
    def license_text(self, text: Optional[str]) -> None:
        self._license_text = text
        if text is not None:
            self.text_in_html = False
        self._binding.write(LICENSE_TEXT, text)

    @property
    def standard_license_header(self) -> Optional[str]:
        return self._standard_license_header

    @standard_license_header.setter
    def standard_license_header(self, header: Optional[str]) -> None:
        self._standard_license_header = header
        self._binding.write(STANDARD_LICENSE_HEADER, header)

    @property
    def standard_license_template(self) -> Optional[str]:
        return self._standard_license_template

    @standard_license_template.setter
    def standard_license_template(self, template: Optional[str]) -> None:
        self._standard_license_template = template
        if template is not None:
            self.template_in_html = False
        self._binding.write(STANDARD_LICENSE_TEMPLATE, template)

    @property
    def osi_approved(self) -> bool:
        return self._osi_approved

    @osi_approved.setter
    def osi_approved(self, approved: bool) -> None:
        self._osi_approved = bool(approved)
        # False is the default on read, so it is stored as absence.
        self._binding.write(OSI_APPROVED, "true" if self._osi_approved else None)

    # ------------------------------------------------------------------
    # Identity, equivalence, copies

    def same_identity(self, other: object) -> bool:
        """True when ``other`` is a license with the same license id."""

        if other is self:
            return True
        if not isinstance(other, License):
            return False
        return self.license_id == other.license_id

    def semantically_equivalent(self, other: object) -> bool:
        """True when the license texts are equivalent; no other field is compared."""

        if not isinstance(other, License):
            return False
        return is_license_text_equivalent(self.license_text, other.license_text)

    def clone(self) -> "License":
        """Return a detached copy of every field."""

        copy = License(
            name=self.name,
            license_id=self.license_id,
            license_text=self.license_text,
            see_also=self.see_also,
            comment=self.comment,
            standard_license_header=self.standard_license_header,
            standard_license_template=self.standard_license_template,
            osi_approved=self.osi_approved,
        )
        copy.text_in_html = self.text_in_html
        copy.template_in_html = self.template_in_html
        return copy

    def copy_from(self, other: "License") -> None:
        """Assign every field of ``other`` through the setters."""

        self.comment = other.comment
        self.license_id = other.license_id
        self.license_text = other.license_text
        self.name = other.name
        self.osi_approved = other.osi_approved
        self.see_also = other.see_also
        self.standard_license_header = other.standard_license_header
        self.standard_license_template = other.standard_license_template

    def refresh(self, mapper=None) -> "License":
        """Re-read every field of a bound entity from its node.

        Defaults to the mapper that loaded or projected the entity.
        """

        from .mapper import LicenseMapper

        mapper = mapper or self._binding.mapper or LicenseMapper()
        return mapper.read_into(self)

    def verify(self) -> list[str]:
        return verify_license(self)

    def __str__(self) -> str:
        # Only the id, so the string is usable inside a license expression.
        return self._license_id or ""

    def __repr__(self) -> str:
        mode = repr(self._binding) if self.is_bound else "detached"
        return f"License(license_id={self._license_id!r}, {mode})"


__all__ = ["DETACHED", "DetachedBinding", "NodeBinding", "License"]
