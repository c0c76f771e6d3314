"""Utility modules."""
from api.utils.json_utils import json_dump, json_load, read_json_file
from api.utils.paths import core_language_path, language_path
from api.utils.validation import validate_language

__all__ = [
    "json_dump",
    "json_load",
    "read_json_file",
    "core_language_path",
    "language_path",
    "validate_language",
]
