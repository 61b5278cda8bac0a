"""HTML-flavoured literal normalisation for license fields."""

from __future__ import annotations

import warnings
from html import unescape

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning

DEFAULT_PARSER = "html.parser"
SUPPORTED_PARSERS = ("html.parser", "lxml")

_LINE_BREAK_TAGS = ("p", "div", "li", "h1", "h2", "h3", "h4", "h5", "h6", "tr")


def html_to_text(html: str, *, parser: str = DEFAULT_PARSER) -> str:
    """Convert HTML markup to plain text.

    ``<br>`` becomes a newline and block elements end with one. Text without
    any markup or entity references is returned unchanged.
    """

    if not html or ("<" not in html and "&" not in html):
        return html
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        soup = BeautifulSoup(html, parser)
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for block in soup.find_all(_LINE_BREAK_TAGS):
        block.append("\n")
    return soup.get_text()


def unescape_html_entities(text: str) -> str:
    return unescape(text)


def normalize_markup(text: str, is_html: bool, *, parser: str = DEFAULT_PARSER) -> str:
    """Return the canonical in-memory form of a body text or template literal."""

    if is_html:
        return html_to_text(text, parser=parser)
    return text


def normalize_header(text: str) -> str:
    """Headers are entity-unescaped regardless of the HTML flag, never tag-stripped."""

    return unescape_html_entities(text)


__all__ = [
    "DEFAULT_PARSER",
    "SUPPORTED_PARSERS",
    "html_to_text",
    "unescape_html_entities",
    "normalize_markup",
    "normalize_header",
]
