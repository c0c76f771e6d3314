"""Interfaces of the collaborators the editor core talks to."""
from __future__ import annotations

from typing import Callable, Protocol, Sequence

from models import AnswerOption


class OrderedCollection(Protocol):
    """Host-owned option list. Fires an add notification per add_item call."""

    def get_value(self) -> Sequence[AnswerOption] | None: ...

    def add_item(self, record: AnswerOption | dict) -> object: ...

    def remove_item(self, index: int) -> object: ...

    def on_add(self, listener: Callable[[AnswerOption], None]) -> None: ...


class QuestionTextField(Protocol):
    """Question text as HTML. Not ready means the plain fallback input is used."""

    value: str | None
    ready: bool

    def force_value(self, html: str) -> None: ...

    def set_fallback_value(self, html: str) -> None: ...

    def validate(self) -> bool: ...


class MarkdownConverter(Protocol):
    def convert(self, text: str) -> str: ...
