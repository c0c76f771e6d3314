"""Service layer for the textual editor."""
import logging
from typing import Iterable

from api.config import DEFAULT_ROWS
from api.services.translation_service import load_dictionary
from dictionary import PythonMarkdownConverter
from help_text import help_text_from_dictionary
from models import AnswerOption
from protocols import MarkdownConverter
from option_list import OptionList, QuestionField
from reconciler import ListReconciler

log = logging.getLogger(__name__)


def parse_document(text: str) -> tuple[str, list[AnswerOption]]:
    """Turn editor text into question HTML and answer options."""
    options = OptionList()
    question = QuestionField()
    reconciler = ListReconciler(options, question).attach()

    reconciler.set_buffer(text)
    reconciler.on_buffer_changed()
    log.debug("Parsed %d options", len(options))
    return question.value, options.get_value()


def serialize_document(question_html: str, options: Iterable[AnswerOption]) -> str:
    """Turn question HTML and answer options into editor text."""
    option_list = OptionList()
    question = QuestionField(value=question_html)
    reconciler = ListReconciler(option_list, question).attach()

    for option in options:
        option_list.add_item(option)
    # Without options the buffer still starts with the question.
    reconciler.seed_question()
    return reconciler.text_buffer


def editor_strings(lang: str, converter: MarkdownConverter | None = None) -> dict[str, object]:
    """Strings and settings the textual editor UI needs."""
    converter = converter or PythonMarkdownConverter()
    dictionary = load_dictionary(lang, converter)
    return {
        "language": lang,
        "helpText": help_text_from_dictionary(dictionary, converter),
        "placeholder": dictionary.get("l10n.helpTextExample"),
        "rows": DEFAULT_ROWS,
        "warning": {
            "headerText": dictionary.get("l10n.warningHeaderText"),
            "dialogText": dictionary.get("l10n.warningDialogText"),
            "confirmText": dictionary.get("l10n.ok"),
        },
    }


def translations(lang: str) -> dict[str, object]:
    return load_dictionary(lang).as_tree()
