"""Path utilities for language files."""
from pathlib import Path

from api.config import CORE_LANGUAGE_DIR, LANGUAGE_DIR


def language_path(lang: str) -> Path:
    """Get path to the editor's library strings for a language."""
    return LANGUAGE_DIR / f"{lang}.json"


def core_language_path(lang: str) -> Path:
    """Get path to the shared core strings for a language."""
    return CORE_LANGUAGE_DIR / f"{lang}.json"
