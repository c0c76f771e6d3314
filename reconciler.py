"""Keeps the plain-text buffer and the structured option list in sync."""
from __future__ import annotations

import logging
from enum import Enum

from models import AnswerOption
from option_codec import decode_line, encode_option, wrap_paragraph
from protocols import OrderedCollection, QuestionTextField
from text_normalize import to_plain_text_line

log = logging.getLogger(__name__)


class ReconcilePhase(str, Enum):
    IDLE = "idle"
    REBUILDING_FROM_TEXT = "rebuilding_from_text"


class ListReconciler:
    """
    Owns the text buffer of the textual editor.

    The first buffer line is the question, every following line one
    answer option. Rebuilding the option list from the buffer fires the
    list's own add/remove notifications; those are ignored while the
    rebuild runs so they do not flow back into the buffer.
    """

    def __init__(
        self,
        collection: OrderedCollection,
        question_field: QuestionTextField | None = None,
    ) -> None:
        self.collection = collection
        self.question_field = question_field
        self.text_buffer = ""
        self.phase = ReconcilePhase.IDLE
        self.question_text: str | None = None

    def attach(self) -> "ListReconciler":
        """Forward the collection's add notifications to this reconciler."""
        self.collection.on_add(self.on_external_item_added)
        return self

    @property
    def is_rebuilding(self) -> bool:
        return self.phase is ReconcilePhase.REBUILDING_FROM_TEXT

    def set_buffer(self, text: str) -> None:
        self.text_buffer = text or ""

    def reset(self) -> None:
        """Forget the cached question so the next add reseeds the buffer."""
        self.question_text = None

    def on_buffer_changed(self) -> None:
        lines = self.text_buffer.split("\n")

        self.phase = ReconcilePhase.REBUILDING_FROM_TEXT
        try:
            if self.question_field is not None:
                self._write_question(lines.pop(0))

            existing = self.collection.get_value() or []
            for index in range(len(existing) - 1, -1, -1):
                self.collection.remove_item(index)

            for line in lines:
                self.collection.add_item(decode_line(line))
            log.debug("Rebuilt option list with %d options", len(lines))
        finally:
            self.phase = ReconcilePhase.IDLE

    def on_external_item_added(self, record: AnswerOption | dict) -> None:
        if self.is_rebuilding:
            return

        if isinstance(record, dict):
            record = AnswerOption.from_params(record)
        if not isinstance(record, AnswerOption):
            log.debug("Ignoring added item of type %s", type(record).__name__)
            return

        self.seed_question()
        self.text_buffer = f"{self.text_buffer}\n{encode_option(record)}"

    def seed_question(self) -> None:
        """Start the buffer with the question line, once."""
        if self.question_text is None:
            self.question_text = self._read_question()
            self.text_buffer = self.question_text

    def _write_question(self, line: str) -> None:
        value = wrap_paragraph(line)
        if self.question_field.ready:
            self.question_field.force_value(value)
        else:
            self.question_field.set_fallback_value(value)
        self.question_field.validate()

    def _read_question(self) -> str:
        if self.question_field is None:
            return ""
        # Validation applies pending edits to the value.
        self.question_field.validate()
        return to_plain_text_line(self.question_field.value or "")
