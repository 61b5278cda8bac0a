"""Text transforms applied to license literals."""

from .equivalence import is_license_text_equivalent, normalize_tokens  # noqa: F401
from .markup import (  # noqa: F401
    html_to_text,
    normalize_header,
    normalize_markup,
    unescape_html_entities,
)

__all__ = [
    "html_to_text",
    "is_license_text_equivalent",
    "normalize_header",
    "normalize_markup",
    "normalize_tokens",
    "unescape_html_entities",
]
