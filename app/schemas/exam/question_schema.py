from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Dict, List

from pydantic import BaseModel, ConfigDict, Field, RootModel, StrictStr, field_validator, model_validator

from app.models.exam.question_model import QuestionType

QUESTIONS_PER_BATCH = len(QuestionType)

_NUMBERING_RE = re.compile(r"^\s*(\d+)\s*[.)]?\s*")
_LABELS = {member.value.casefold(): member for member in QuestionType}
_ORDERED = list(QuestionType)


def _normalize_label(value: str) -> str:
    return " ".join(value.split()).casefold()


def resolve_question_type(value: str) -> QuestionType:
    """Map a generator label onto one of the nine categories.

    Accepts the exact label in any case, the label prefixed by its number
    (``"5. Grammar & Reading (Grammar completion)"``) or the bare number.
    """
    normalized = _normalize_label(value)
    if normalized in _LABELS:
        return _LABELS[normalized]

    numbering = _NUMBERING_RE.match(normalized)
    if numbering:
        rest = normalized[numbering.end():]
        position = int(numbering.group(1))
        if not rest and 1 <= position <= len(_ORDERED):
            return _ORDERED[position - 1]
        if rest in _LABELS:
            return _LABELS[rest]

    raise ValueError(f"unknown question_type {value!r}")


# --- Document renvoyé par le générateur ---
class QuestionItem(BaseModel):
    question_type: QuestionType
    question: StrictStr
    options: List[StrictStr]
    answer: StrictStr
    explanation: StrictStr

    @field_validator("question_type", mode="before")
    @classmethod
    def _resolve_type(cls, value: object) -> QuestionType:
        if isinstance(value, QuestionType):
            return value
        if not isinstance(value, str):
            raise ValueError("question_type must be a string")
        return resolve_question_type(value)

    @model_validator(mode="after")
    def _answer_is_single_option(self) -> "QuestionItem":
        matches = sum(1 for option in self.options if option == self.answer)
        if matches == 0:
            raise ValueError("answer_not_in_options")
        if matches > 1:
            raise ValueError("answer_option_duplicated")
        return self


class QuestionSetDocument(RootModel[Annotated[List[QuestionItem], Field(min_length=QUESTIONS_PER_BATCH, max_length=QUESTIONS_PER_BATCH)]]):
    """The generator returns a bare JSON array of exactly nine questions."""

    def __iter__(self):
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)


# --- Sorties de l'API ---
class QuestionGenerateOut(BaseModel):
    message: str
    batch_id: int
    grammar_used: List[str]
    kanji_used: List[str]
    count: int
    category_counts: Dict[str, int]


class QuestionOptionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    option_text: str
    is_correct: bool


class QuestionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    question_type: QuestionType
    question_text: str
    answer: str
    explanation: str
    options: List[QuestionOptionOut]


class ExamOut(BaseModel):
    id: int
    created_at: datetime
    grammar_list: List[str]
    kanji_list: List[str]
    questions: List[QuestionOut]
