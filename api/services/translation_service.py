"""Service layer for editor translations."""
import logging
from typing import Iterable, Mapping

from api.utils import core_language_path, language_path, read_json_file
from dictionary import Dictionary, PythonMarkdownConverter, extend, merge_flat
from models import TranslationTree
from protocols import MarkdownConverter

log = logging.getLogger(__name__)

MISSING_TRANSLATION = "Missing translation"

DEFAULT_TRANSLATIONS: TranslationTree = {
    "l10n": {
        "helpTextTitleMain": "Important instructions",
        "helpTextTitleExample": "Example",
        "helpTextIntroduction": (
            "The first line is the question and the next lines are the answer "
            "alternatives. The correct alternatives are prefixed with an "
            "asterisk(*), feedback can also be added: "
            "*alternative:tip:feedback if chosen:feedback if not chosen."
        ),
        "helpTextExample": (
            "What type of berry is commonly used to make a traditional "
            "Scandinavian dessert called \"rødgrød\"?\n"
            "*Red Currant\nBlueberry\nStrawberry"
        ),
        "warningHeaderText": "Confirm warning notice",
        "warningDialogText": (
            "Warning! If you change the task in the textual editor all rich "
            "text formatting (incl. line breaks) will be removed."
        ),
        "ok": "OK",
    }
}

# (local key, core key) pairs reused from the shared core strings.
CORE_KEY_PAIRS = (
    ("helpTextTitleMain", "importantInstructions"),
    ("helpTextTitleExample", "example"),
)

MARKDOWN_PATHS = ("l10n.helpTextIntroduction",)


class CoreTranslations:
    """Shared strings looked up by (namespace, key)."""

    def __init__(self, strings: Mapping[str, Mapping[str, str]] | None = None):
        self.strings = strings or {}

    def t(self, namespace: str, key: str) -> str:
        namespace_strings = self.strings.get(namespace)
        value = namespace_strings.get(key) if isinstance(namespace_strings, dict) else None
        if not isinstance(value, str):
            return f'{MISSING_TRANSLATION} "{key}" in "{namespace}"'
        return value


def core_l10n_overrides(
    core: CoreTranslations, key_pairs: Iterable[tuple[str, str]] = CORE_KEY_PAIRS
) -> TranslationTree:
    """Seed tree with the core strings that exist."""
    l10n: dict[str, str] = {}
    for local_key, core_key in key_pairs:
        if not isinstance(local_key, str) or not isinstance(core_key, str):
            continue
        value = core.t("core", core_key)
        if not value.startswith(MISSING_TRANSLATION):
            l10n[local_key] = value
    return {"l10n": l10n}


def build_dictionary(
    library_strings: Mapping[str, str],
    core: CoreTranslations,
    converter: MarkdownConverter | None = None,
) -> Dictionary:
    """Core strings first, then library strings, then built-in defaults."""
    translations = merge_flat(library_strings, core_l10n_overrides(core))
    translations = extend(DEFAULT_TRANSLATIONS, translations)

    dictionary = Dictionary()
    dictionary.fill(
        translations,
        markdown_to_html=MARKDOWN_PATHS,
        converter=converter or PythonMarkdownConverter(),
    )
    return dictionary


def load_library_strings(lang: str) -> dict[str, str]:
    """Load flat library strings for a language, {} if unavailable."""
    payload = read_json_file(language_path(lang), {})
    strings = payload.get("libraryStrings") if isinstance(payload, dict) else None
    if not isinstance(strings, dict):
        log.info("No library strings for language %s", lang)
        return {}
    return {key: value for key, value in strings.items() if isinstance(value, str)}


def load_core_translations(lang: str) -> CoreTranslations:
    payload = read_json_file(core_language_path(lang), {})
    return CoreTranslations(payload if isinstance(payload, dict) else {})


def load_dictionary(lang: str, converter: MarkdownConverter | None = None) -> Dictionary:
    return build_dictionary(
        load_library_strings(lang), load_core_translations(lang), converter
    )
