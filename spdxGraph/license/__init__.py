"""License entities and their graph mapping."""

from .model import DetachedBinding, License, NodeBinding  # noqa: F401
from .mapper import (  # noqa: F401
    LicenseMapper,
    LicenseValidationError,
    load_license,
    parse_osi_approved,
)
from .verify import verify  # noqa: F401

__all__ = [
    "DetachedBinding",
    "License",
    "LicenseMapper",
    "LicenseValidationError",
    "NodeBinding",
    "load_license",
    "parse_osi_approved",
    "verify",
]
