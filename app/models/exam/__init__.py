"""Daily exam batches, their questions and answer options."""

from .question_model import Question, QuestionBatch, QuestionOption, QuestionType

__all__ = [
    "QuestionBatch",
    "Question",
    "QuestionOption",
    "QuestionType",
]
