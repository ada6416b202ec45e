from __future__ import annotations

import enum
from datetime import datetime, timezone
from typing import List

from sqlalchemy import (
    Boolean,
    DateTime,
    Enum as EnumSQL,
    ForeignKey,
    Integer,
    UnicodeText,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base_class import Base


def utc_now() -> datetime:
    """Horodatage UTC naïf, indépendant du fuseau du serveur SQL."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class QuestionType(str, enum.Enum):
    """The nine JLPT N4 question categories, one question per category in a batch."""

    KANJI_READING = "Vocabulary (Kanji readings)"
    WORD_USAGE = "Vocabulary (Word usage in context)"
    PARAPHRASING = "Vocabulary (Paraphrasing)"
    ORTHOGRAPHY = "Vocabulary (Correct spelling/orthography)"
    GRAMMAR_COMPLETION = "Grammar & Reading (Grammar completion)"
    SENTENCE_REARRANGEMENT = "Grammar & Reading (Sentence rearrangement)"
    SHORT_PASSAGE = "Grammar & Reading (Short passage comprehension)"
    MEDIUM_PASSAGE = "Grammar & Reading (Medium passage comprehension)"
    NOTICES = "Grammar & Reading (Notices/ads comprehension)"


class QuestionBatch(Base):
    __tablename__ = "question_batches"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utc_now, index=True
    )
    # Listes tirées au sort, sérialisées en JSON (texte)
    grammar_list: Mapped[str] = mapped_column(UnicodeText, nullable=False)
    kanji_list: Mapped[str] = mapped_column(UnicodeText, nullable=False)

    questions: Mapped[List["Question"]] = relationship(
        back_populates="batch",
        order_by="Question.id",
    )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<QuestionBatch(id={self.id}, created_at={self.created_at})>"


class Question(Base):
    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    batch_id: Mapped[int] = mapped_column(Integer, ForeignKey("question_batches.id"), nullable=False, index=True)
    question_type: Mapped[QuestionType] = mapped_column(
        EnumSQL(
            QuestionType,
            native_enum=False,
            length=100,
            values_callable=lambda members: [member.value for member in members],
        ),
        nullable=False,
    )
    question_text: Mapped[str] = mapped_column(UnicodeText, nullable=False)
    answer: Mapped[str] = mapped_column(UnicodeText, nullable=False)
    explanation: Mapped[str] = mapped_column(UnicodeText, nullable=False)

    batch: Mapped[QuestionBatch] = relationship(back_populates="questions")
    options: Mapped[List["QuestionOption"]] = relationship(
        back_populates="question",
        order_by="QuestionOption.id",
    )


class QuestionOption(Base):
    __tablename__ = "question_options"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    question_id: Mapped[int] = mapped_column(Integer, ForeignKey("questions.id"), nullable=False, index=True)
    option_text: Mapped[str] = mapped_column(UnicodeText, nullable=False)
    is_correct: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    question: Mapped[Question] = relationship(back_populates="options")
