"""License text equivalence.

Two texts are equivalent when they contain the same word sequence after
normalisation: case, whitespace, punctuation, quote style, URL scheme,
copyright symbols and British/American spellings are all ignored.
"""

from __future__ import annotations

import re
from typing import List, Optional

_COPYRIGHT_RE = re.compile(r"©|\(c\)", re.IGNORECASE)
_URL_SCHEME_RE = re.compile(r"https?://", re.IGNORECASE)
_WORD_RE = re.compile(r"\w+")

# Spellings treated as the same word.
VARIANT_SPELLINGS = {
    "licence": "license",
    "licences": "licenses",
    "licenced": "licensed",
    "sublicence": "sublicense",
    "acknowledgement": "acknowledgment",
    "acknowledgements": "acknowledgments",
    "analogue": "analog",
    "authorisation": "authorization",
    "authorised": "authorized",
    "behaviour": "behavior",
    "centre": "center",
    "favour": "favor",
    "organisation": "organization",
    "recognised": "recognized",
    "whilst": "while",
}


def normalize_tokens(text: Optional[str]) -> List[str]:
    if not text:
        return []
    text = _COPYRIGHT_RE.sub(" copyright ", text)
    text = _URL_SCHEME_RE.sub("", text)
    tokens = _WORD_RE.findall(text.casefold())
    return [VARIANT_SPELLINGS.get(tok, tok) for tok in tokens]


def is_license_text_equivalent(text_a: Optional[str], text_b: Optional[str]) -> bool:
    """Return ``True`` when both texts normalise to the same token sequence."""

    return normalize_tokens(text_a) == normalize_tokens(text_b)


__all__ = ["VARIANT_SPELLINGS", "normalize_tokens", "is_license_text_equivalent"]
