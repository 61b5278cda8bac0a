"""Required-field checks for licenses."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:  # pragma: no cover
    from .model import License


def verify(license: "License") -> List[str]:
    """Return one message per missing required field; never raises."""

    problems: List[str] = []
    license_id = license.license_id
    if not license_id:
        problems.append("Missing required license ID")
    if not license.name:
        problems.append("Missing required license name")
    if not license.license_text:
        if license_id:
            problems.append(f"Missing required license text for {license_id}")
        else:
            problems.append("Missing required license text")
    return problems


__all__ = ["verify"]
