"""All-or-nothing persistence of validated generator documents.

Each write runs in a single transaction on the caller's session. Rows are
inserted top-down in document order and every child row is built with the
identifier the store assigned to its parent on flush. Any store failure rolls
the whole hierarchy back and surfaces as :class:`PersistenceError`.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import PersistenceError
from app.db.base_class import Base
from app.models.exam.question_model import Question, QuestionBatch, QuestionOption, QuestionType
from app.models.grammar.grammar_point_model import GrammarExample, GrammarPoint, GrammarVocab
from app.schemas.exam.question_schema import QuestionSetDocument
from app.schemas.grammar.grammar_schema import GrammarDocument
from app.services.batch_selector import BatchSelection

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GrammarWriteResult:
    grammar_id: int
    document: GrammarDocument


@dataclass(slots=True)
class QuestionWriteResult:
    batch_id: int
    category_counts: Dict[str, int]
    grammar_used: List[str]
    kanji_used: List[str]
    count: int


def _insert_returning_id(db: Session, row: Base) -> int:
    """Add *row* and flush so the store assigns its identifier."""
    db.add(row)
    db.flush()
    return row.id


def _rollback_and_wrap(db: Session, exc: SQLAlchemyError, what: str) -> PersistenceError:
    db.rollback()
    logger.error("Écriture en cascade annulée (%s): %s", what, exc)
    return PersistenceError(f"Could not persist {what}: {exc}")


def write_grammar_document(db: Session, document: GrammarDocument) -> GrammarWriteResult:
    """Insert a grammar point, its examples and their vocabulary atomically."""
    try:
        grammar_id = _insert_returning_id(
            db,
            GrammarPoint(
                concept=document.concept,
                meaning=document.meaning,
                details=document.details,
            ),
        )

        for example in document.examples:
            example_id = _insert_returning_id(
                db,
                GrammarExample(
                    grammar_id=grammar_id,
                    japanese=example.japanese,
                    romaji=example.romaji,
                    english=example.english,
                ),
            )
            for vocab in example.vocab:
                db.add(
                    GrammarVocab(
                        example_id=example_id,
                        word=vocab.word,
                        romaji=vocab.romaji,
                        meaning=vocab.meaning,
                    )
                )

        db.commit()
    except SQLAlchemyError as exc:
        raise _rollback_and_wrap(db, exc, f"grammar point '{document.concept}'") from exc

    logger.info(
        "Point de grammaire %s inséré ('%s', %s exemple(s)).",
        grammar_id,
        document.concept,
        len(document.examples),
    )
    return GrammarWriteResult(grammar_id=grammar_id, document=document)


def write_question_set(
    db: Session,
    selection: BatchSelection,
    document: QuestionSetDocument,
) -> QuestionWriteResult:
    """Insert a question batch, its questions and their options atomically.

    ``is_correct`` is always recomputed from ``option_text == answer``.
    """
    try:
        batch_id = _insert_returning_id(
            db,
            QuestionBatch(
                grammar_list=selection.serialized_grammar_list(),
                kanji_list=selection.serialized_kanji_list(),
            ),
        )

        for item in document:
            question_id = _insert_returning_id(
                db,
                Question(
                    batch_id=batch_id,
                    question_type=item.question_type,
                    question_text=item.question,
                    answer=item.answer,
                    explanation=item.explanation,
                ),
            )
            for option_text in item.options:
                db.add(
                    QuestionOption(
                        question_id=question_id,
                        option_text=option_text,
                        is_correct=option_text == item.answer,
                    )
                )

        db.commit()
    except SQLAlchemyError as exc:
        raise _rollback_and_wrap(db, exc, "question batch") from exc

    counts = Counter(item.question_type for item in document)
    category_counts = {question_type.value: counts.get(question_type, 0) for question_type in QuestionType}

    logger.info("Lot de questions %s inséré (%s questions).", batch_id, len(document))
    return QuestionWriteResult(
        batch_id=batch_id,
        category_counts=category_counts,
        grammar_used=list(selection.grammar_list),
        kanji_used=list(selection.kanji_list),
        count=len(document),
    )
