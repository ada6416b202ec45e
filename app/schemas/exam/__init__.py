"""Pydantic schemas for generated question batches."""

from .question_schema import (
    QUESTIONS_PER_BATCH,
    ExamOut,
    QuestionGenerateOut,
    QuestionItem,
    QuestionOptionOut,
    QuestionOut,
    QuestionSetDocument,
    resolve_question_type,
)

__all__ = [
    "QUESTIONS_PER_BATCH",
    "QuestionItem",
    "QuestionSetDocument",
    "QuestionGenerateOut",
    "QuestionOptionOut",
    "QuestionOut",
    "ExamOut",
    "resolve_question_type",
]
