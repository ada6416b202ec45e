# Fichier: app/api/v2/endpoints/exam_router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.v2.dependencies import get_db, to_http_exception
from app.core.exceptions import NotFoundError
from app.crud import exam_crud
from app.schemas.exam import question_schema

router = APIRouter()


@router.get("/today", response_model=question_schema.ExamOut)
def read_today_exam(db: Session = Depends(get_db)):
    """Dernier lot de questions généré aujourd'hui, avec ses options."""
    try:
        return exam_crud.get_today_exam(db)
    except NotFoundError as exc:
        raise to_http_exception(exc) from exc
