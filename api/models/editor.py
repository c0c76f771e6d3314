"""Textual editor Pydantic models."""
from pydantic import BaseModel, Field

from models import AnswerOption


class HintAndFeedback(BaseModel):
    """Feedback strings of one answer option."""

    chosenFeedback: str = ""
    notChosenFeedback: str = ""


class AnswerOptionParams(BaseModel):
    """Answer option as stored by the structured editor."""

    text: str = ""
    correct: bool = False
    hintAndFeedback: HintAndFeedback = Field(default_factory=HintAndFeedback)

    def to_option(self) -> AnswerOption:
        return AnswerOption(
            text=self.text,
            correct=self.correct,
            chosen_feedback=self.hintAndFeedback.chosenFeedback,
            not_chosen_feedback=self.hintAndFeedback.notChosenFeedback,
        )


class ParseRequest(BaseModel):
    """Text typed into the textual editor."""

    text: str


class SerializeRequest(BaseModel):
    """Question and options to turn into editor text."""

    question: str = ""
    options: list[AnswerOptionParams] = Field(default_factory=list)
