from __future__ import annotations

import pytest

from spdxGraph.transforms.markup import (
    html_to_text,
    normalize_header,
    normalize_markup,
    unescape_html_entities,
)


def test_html_to_text_line_breaks() -> None:
    assert html_to_text("Line one<br/>Line two") == "Line one\nLine two"


@pytest.mark.parametrize("parser", ["html.parser", "lxml"])
def test_html_to_text_paragraphs(parser: str) -> None:
    assert html_to_text("<p>First</p><p>Second</p>", parser=parser) == "First\nSecond\n"


def test_html_to_text_strips_tags_and_decodes_entities() -> None:
    assert html_to_text("<b>Fish</b> &amp; Chips") == "Fish & Chips"


def test_plain_text_is_unchanged() -> None:
    text = "MIT License\n\nPermission is hereby granted, free of charge.\n"
    assert html_to_text(text) == text
    assert html_to_text("") == ""


def test_normalize_markup_respects_flag() -> None:
    assert normalize_markup("<p>Text</p>", True) == "Text\n"
    assert normalize_markup("<p>Text</p>", False) == "<p>Text</p>"


def test_header_is_unescaped_but_not_tag_stripped() -> None:
    assert normalize_header("&lt;year&gt; &amp; <b>owner</b>") == "<year> & <b>owner</b>"
    assert unescape_html_entities("&quot;AS IS&quot;") == '"AS IS"'
