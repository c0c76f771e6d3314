"""Application configuration and constants."""
import os
import sys
from pathlib import Path


def _resource_path(relative: str) -> Path:
    """Get path to resource, works for PyInstaller bundles."""
    if getattr(sys, "frozen", False):
        base_dir = Path(sys._MEIPASS)
    else:
        base_dir = Path(__file__).resolve().parent.parent
    return base_dir / relative


def _parse_int_env(name: str, default: int) -> int:
    """Parse integer from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# Translations
LANGUAGE_DIR = Path(os.environ.get("EDITOR_LANGUAGE_DIR", _resource_path("language")))
CORE_LANGUAGE_DIR = LANGUAGE_DIR / "core"
DEFAULT_LANGUAGE = os.environ.get("EDITOR_DEFAULT_LANGUAGE", "en")

# Editor
DEFAULT_ROWS = _parse_int_env("EDITOR_DEFAULT_ROWS", 20)

# Server
HOST = os.environ.get("EDITOR_HOST", "127.0.0.1")
PORT = _parse_int_env("EDITOR_PORT", 8000)
