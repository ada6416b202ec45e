# Fichier: app/crud/exam_crud.py
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.engine import RowMapping
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.models.exam.question_model import Question, QuestionBatch, QuestionOption, utc_now
from app.services.tree_reconstructor import EXAM_TREE


def _utc_today() -> date:
    return utc_now().date()


def fetch_exam_rows(db: Session, batch_id: int) -> Sequence[RowMapping]:
    """Lignes plates question_batches ⋈ questions ⋈ question_options (LEFT JOIN)."""
    stmt = (
        select(
            QuestionBatch.id.label("batch_id"),
            QuestionBatch.created_at,
            QuestionBatch.grammar_list,
            QuestionBatch.kanji_list,
            Question.id.label("question_id"),
            Question.question_type,
            Question.question_text,
            Question.answer,
            Question.explanation,
            QuestionOption.id.label("option_id"),
            QuestionOption.option_text,
            QuestionOption.is_correct,
        )
        .select_from(QuestionBatch)
        .outerjoin(Question, Question.batch_id == QuestionBatch.id)
        .outerjoin(QuestionOption, QuestionOption.question_id == Question.id)
        .where(QuestionBatch.id == batch_id)
        .order_by(Question.id, QuestionOption.id)
    )
    return db.execute(stmt).mappings().all()


def find_latest_batch_id(db: Session, day: date) -> Optional[int]:
    """Dernier lot créé pendant la journée calendaire ``day`` (``created_at`` est en UTC)."""
    start = datetime.combine(day, time.min)
    end = start + timedelta(days=1)
    return db.scalar(
        select(QuestionBatch.id)
        .where(QuestionBatch.created_at >= start, QuestionBatch.created_at < end)
        .order_by(QuestionBatch.created_at.desc(), QuestionBatch.id.desc())
        .limit(1)
    )


def get_today_exam(db: Session, today: Optional[date] = None) -> Dict[str, Any]:
    batch_id = find_latest_batch_id(db, today or _utc_today())
    if batch_id is None:
        raise NotFoundError("No exam found for today")
    return EXAM_TREE.rebuild_one(fetch_exam_rows(db, batch_id))
