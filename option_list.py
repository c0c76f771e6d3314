"""In-memory stand-ins for the structured editor's list and question field."""
from __future__ import annotations

from typing import Callable

from models import AnswerOption

AddListener = Callable[[AnswerOption], None]
RemoveListener = Callable[[int, AnswerOption], None]


class OptionList:
    """Ordered answer options that announce every add and remove."""

    def __init__(self) -> None:
        self._items: list[AnswerOption] = []
        self._add_listeners: list[AddListener] = []
        self._remove_listeners: list[RemoveListener] = []

    def on_add(self, listener: AddListener) -> None:
        self._add_listeners.append(listener)

    def on_remove(self, listener: RemoveListener) -> None:
        self._remove_listeners.append(listener)

    def get_value(self) -> list[AnswerOption]:
        return list(self._items)

    def add_item(self, record: AnswerOption | dict) -> AnswerOption:
        if not isinstance(record, AnswerOption):
            record = AnswerOption.from_params(record)
        self._items.append(record)
        for listener in list(self._add_listeners):
            listener(record)
        return record

    def remove_item(self, index: int) -> AnswerOption:
        record = self._items.pop(index)
        for listener in list(self._remove_listeners):
            listener(index, record)
        return record

    def __len__(self) -> int:
        return len(self._items)


class QuestionField:
    """
    Question text holder. A ready field stands for an initialized rich
    text editor, otherwise the value is written to the plain fallback.
    """

    def __init__(self, value: str = "", ready: bool = True) -> None:
        self.value = value
        self.ready = ready
        self.fallback_html: str | None = None
        self.validations = 0

    def force_value(self, html: str) -> None:
        self.value = html

    def set_fallback_value(self, html: str) -> None:
        self.fallback_html = html

    def validate(self) -> bool:
        if self.fallback_html is not None:
            self.value = self.fallback_html
            self.fallback_html = None
        if self.value is None:
            self.value = ""
        self.validations += 1
        return True
