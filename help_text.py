"""Help text shown above the textual editor."""
from __future__ import annotations

from dictionary import Dictionary, markdown_to_html
from protocols import MarkdownConverter


def build_help_text(
    title_main: str,
    introduction: str,
    title_example: str,
    example: str,
) -> str:
    title = f'<div class="title">{title_main}</div>'
    header = f'<div class="header">{title}</div>'

    description = f'<div class="description">{introduction}</div>'
    example_title = f'<div class="example-title">{title_example}</div>'
    example_text = f'<div class="example-text">{example}</div>'
    example_block = f'<div class="example">{example_title}{example_text}</div>'

    body = f'<div class="body">{description}{example_block}</div>'
    return f"{header}{body}"


def help_text_from_dictionary(
    dictionary: Dictionary, converter: MarkdownConverter
) -> str:
    """
    Assemble the help text from translations. The introduction is
    expected to be converted to HTML already when the dictionary was
    filled; the example is converted here.
    """
    example = markdown_to_html(
        dictionary.get("l10n.helpTextExample"), converter, separate_with_br=True
    )
    return build_help_text(
        dictionary.get("l10n.helpTextTitleMain"),
        dictionary.get("l10n.helpTextIntroduction"),
        dictionary.get("l10n.helpTextTitleExample"),
        example,
    )
