from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Union

# Nested translation mapping: key -> string leaf or subtree.
TranslationTree = Dict[str, Union[str, "TranslationTree"]]


@dataclass
class AnswerOption:
    text: str = ""  # HTML fragment, usually "<p>...</p>\n"
    correct: bool = False
    chosen_feedback: str | None = None  # None = absent, "" = present but empty
    not_chosen_feedback: str | None = None

    def to_params(self) -> dict[str, Any]:
        """Content shape used by the structured editor."""
        return {
            "text": self.text,
            "correct": self.correct,
            "hintAndFeedback": {
                "chosenFeedback": self.chosen_feedback or "",
                "notChosenFeedback": self.not_chosen_feedback or "",
            },
        }

    @classmethod
    def from_params(cls, params: object) -> "AnswerOption":
        if not isinstance(params, dict):
            return cls()
        feedback = params.get("hintAndFeedback")
        if not isinstance(feedback, dict):
            feedback = {}
        chosen = feedback.get("chosenFeedback")
        not_chosen = feedback.get("notChosenFeedback")
        text = params.get("text")
        return cls(
            text=text if isinstance(text, str) else "",
            correct=bool(params.get("correct", False)),
            chosen_feedback=chosen if isinstance(chosen, str) else None,
            not_chosen_feedback=not_chosen if isinstance(not_chosen, str) else None,
        )
