"""Conversion between HTML fragments and single-line plain text."""
from __future__ import annotations

import html
import re
from html.parser import HTMLParser

WHITESPACE_RE = re.compile(r"\s+")
LINE_BREAK_RE = re.compile(r"[\n\r]")


class _TextContentParser(HTMLParser):
    """
    Collects the text content of a fragment, dropping every tag.
    Character references in text are decoded exactly once, so an encoded
    "&lt;" comes out as a literal "<" and is never read as markup.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.parts: list[str] = []

    def handle_data(self, data: str) -> None:
        self.parts.append(data)

    def text(self) -> str:
        return "".join(self.parts)


def strip_html(fragment: str) -> str:
    """Return the text content of an HTML fragment."""
    parser = _TextContentParser()
    parser.feed(fragment)
    parser.close()
    return parser.text()


def decode_for_text(fragment: str) -> str:
    """Decode HTML entities only. The result may still contain tags."""
    return html.unescape(fragment)


def encode_for_html(text: str) -> str:
    """Encode plain text so it can be embedded as HTML text content."""
    if text is None:
        return ""
    return html.escape(text, quote=True)


def purify_html(fragment: object) -> str:
    """Text content of an HTML fragment with entities decoded once."""
    if not isinstance(fragment, str):
        return ""
    return strip_html(fragment)


def to_plain_text_line(fragment: object) -> str:
    """
    Convert an HTML fragment into one line of plain text.
    Tags are removed, entities decoded and whitespace runs (newlines
    included) collapsed to a single space.
    """
    text = purify_html(fragment)
    text = LINE_BREAK_RE.sub(" ", text)
    return WHITESPACE_RE.sub(" ", text).strip()
