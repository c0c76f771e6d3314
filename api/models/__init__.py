"""Pydantic models."""
from api.models.editor import (
    AnswerOptionParams,
    HintAndFeedback,
    ParseRequest,
    SerializeRequest,
)

__all__ = [
    "AnswerOptionParams",
    "HintAndFeedback",
    "ParseRequest",
    "SerializeRequest",
]
