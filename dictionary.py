"""Translation tree merging and lookup."""
from __future__ import annotations

import copy
import logging
import re
from typing import Iterable, Mapping

import markdown

from models import TranslationTree
from protocols import MarkdownConverter

log = logging.getLogger(__name__)

PATH_SEPARATOR_RE = re.compile(r"[./]+")
PARAGRAPH_BOUNDARY_RE = re.compile(r"</p>(\n)?<p>")
PARAGRAPH_TAG_RE = re.compile(r"<(/)?p>")


class PythonMarkdownConverter:
    """Markdown to HTML through Python-Markdown."""

    def convert(self, text: str) -> str:
        return markdown.markdown(text)


def split_path(path: str) -> list[str]:
    """Split a key such as "l10n.title" or "l10n/title" into segments."""
    return PATH_SEPARATOR_RE.split(path)


def markdown_to_html(
    text: str, converter: MarkdownConverter, separate_with_br: bool = False
) -> str:
    html = converter.convert(text)
    if separate_with_br:
        html = PARAGRAPH_BOUNDARY_RE.sub("\n\n", html)
        html = PARAGRAPH_TAG_RE.sub("", html)
        html = html.replace("\n", "<br />")
    return html


def merge_flat(
    flat_source: Mapping[str, str], default_tree: TranslationTree
) -> TranslationTree:
    """
    Merge path-keyed strings into a copy of default_tree.
    Existing leaves always win: a value is only written where the
    destination has none yet.
    """
    merged: TranslationTree = copy.deepcopy(dict(default_tree))

    for key, value in flat_source.items():
        *parents, leaf = split_path(key)
        current = merged
        for segment in parents:
            child = current.get(segment)
            if child is None:
                child = current[segment] = {}
            if not isinstance(child, dict):
                log.debug("Skipping %s: %s is already a string", key, segment)
                current = None
                break
            current = child

        if current is not None and current.get(leaf) is None:
            current[leaf] = value

    return merged


def extend(base: TranslationTree, *overrides: Mapping) -> TranslationTree:
    """Deep-merge overrides onto a copy of base. Later values replace earlier ones."""
    result: TranslationTree = copy.deepcopy(dict(base))
    for override in overrides:
        for key, value in override.items():
            current = result.get(key)
            if isinstance(current, dict) and isinstance(value, Mapping):
                result[key] = extend(current, value)
            else:
                result[key] = copy.deepcopy(value)
    return result


def lookup(tree: TranslationTree, path: str) -> str | None:
    current: object = tree
    for segment in split_path(path):
        if not isinstance(current, dict) or segment not in current:
            return None
        current = current[segment]
    return current if isinstance(current, str) else None


def apply_markdown(
    tree: TranslationTree,
    paths: Iterable[str],
    converter: MarkdownConverter,
    separate_with_br: bool = True,
) -> TranslationTree:
    """Return a copy of tree with the leaves at paths converted to HTML."""
    result: TranslationTree = copy.deepcopy(dict(tree))
    for path in paths:
        *parents, leaf = split_path(path)
        current: object = result
        for segment in parents:
            current = current.get(segment) if isinstance(current, dict) else None
        if not isinstance(current, dict) or not isinstance(current.get(leaf), str):
            log.debug("No translation at %s to convert", path)
            continue
        current[leaf] = markdown_to_html(
            current[leaf], converter, separate_with_br=separate_with_br
        )
    return result


class Dictionary:
    """Read-only translation lookup by dotted or slashed path."""

    def __init__(self) -> None:
        self._translations: TranslationTree = {}

    def fill(
        self,
        translations: TranslationTree,
        markdown_to_html: Iterable[str] = (),
        converter: MarkdownConverter | None = None,
    ) -> None:
        paths = list(markdown_to_html)
        if paths:
            translations = apply_markdown(
                translations, paths, converter or PythonMarkdownConverter()
            )
        self._translations = copy.deepcopy(dict(translations))

    def get(self, path: str) -> str:
        value = lookup(self._translations, path)
        if value is None:
            log.warning("Missing translation for %s", path)
            return ""
        return value

    def as_tree(self) -> TranslationTree:
        return copy.deepcopy(self._translations)
