"""Validation utilities."""
import re

from fastapi import HTTPException

LANGUAGE_CODE_RE = re.compile(r"^[a-z]{2,3}(-[a-z0-9]{2,8})?$")


def validate_language(value: str) -> str:
    """Validate language code (no path traversal)."""
    if not isinstance(value, str):
        raise HTTPException(status_code=400, detail="Language is required")
    cleaned = value.strip().lower()
    if not cleaned:
        raise HTTPException(status_code=400, detail="Language is required")
    if not LANGUAGE_CODE_RE.match(cleaned):
        raise HTTPException(status_code=400, detail="Invalid language")
    return cleaned
