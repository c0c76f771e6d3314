"""
Line codec for answer options.

One option per line:

    [*]option text[:chosen feedback[:not chosen feedback]]

A leading "*" marks a correct option. The last one or two ":" segments
are always read as feedback, so option text containing ":" cannot be
written unambiguously.
"""
from __future__ import annotations

from typing import Iterable

from models import AnswerOption
from text_normalize import encode_for_html, to_plain_text_line

CORRECT_MARKER = "*"
FIELD_SEPARATOR = ":"


def wrap_paragraph(text: str) -> str:
    """Encode plain text and wrap it as a single HTML paragraph."""
    return f"<p>{encode_for_html(text)}</p>\n"


def decode_line(line: str) -> AnswerOption:
    """
    Parse one text line into an answer option. Never raises.
    Text and feedback are HTML-encoded like the structured editor stores them.
    """
    if not isinstance(line, str):
        line = ""
    correct = line.startswith(CORRECT_MARKER)
    raw = line[len(CORRECT_MARKER):] if correct else line

    segments = raw.split(FIELD_SEPARATOR)
    not_chosen_feedback = segments.pop() if len(segments) > 2 else ""
    chosen_feedback = segments.pop() if len(segments) > 1 else ""

    return AnswerOption(
        text=wrap_paragraph(FIELD_SEPARATOR.join(segments)),
        correct=correct,
        chosen_feedback=encode_for_html(chosen_feedback),
        not_chosen_feedback=encode_for_html(not_chosen_feedback),
    )


def encode_option(option: AnswerOption) -> str:
    """Serialize an answer option into one text line. Markup is dropped."""
    line = CORRECT_MARKER if option.correct else ""
    line += to_plain_text_line(option.text or "")

    not_chosen = option.not_chosen_feedback
    # An empty chosen segment is kept when it is needed as a placeholder.
    chosen = option.chosen_feedback or ("" if not_chosen else None)

    if chosen is not None:
        line += FIELD_SEPARATOR + to_plain_text_line(chosen)
    if not_chosen:
        line += FIELD_SEPARATOR + to_plain_text_line(not_chosen)
    return line


def decode_lines(lines: Iterable[str]) -> list[AnswerOption]:
    return [decode_line(line) for line in lines]


def encode_options(options: Iterable[AnswerOption]) -> list[str]:
    return [encode_option(option) for option in options]
