"""Textual editor endpoints."""
from fastapi import APIRouter

from api.config import DEFAULT_LANGUAGE
from api.models import ParseRequest, SerializeRequest
from api.services import editor_service
from api.utils import validate_language

router = APIRouter(prefix="/api/editor", tags=["editor"])


@router.post("/parse")
def parse_text(payload: ParseRequest) -> dict[str, object]:
    """Parse editor text into question and answer options."""
    question, options = editor_service.parse_document(payload.text)
    return {
        "question": question,
        "options": [option.to_params() for option in options],
    }


@router.post("/serialize")
def serialize_options(payload: SerializeRequest) -> dict[str, object]:
    """Serialize question and answer options into editor text."""
    text = editor_service.serialize_document(
        payload.question,
        [option.to_option() for option in payload.options],
    )
    return {"text": text}


@router.get("/help")
def get_help(lang: str = DEFAULT_LANGUAGE) -> dict[str, object]:
    """Help text, placeholder and warning dialog strings."""
    return editor_service.editor_strings(validate_language(lang))


@router.get("/translations")
def get_translations(lang: str = DEFAULT_LANGUAGE) -> dict[str, object]:
    """Merged translation tree."""
    return editor_service.translations(validate_language(lang))
