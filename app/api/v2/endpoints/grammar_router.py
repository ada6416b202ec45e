# Fichier: app/api/v2/endpoints/grammar_router.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.v2.dependencies import get_db, to_http_exception
from app.core.exceptions import NotFoundError
from app.crud import grammar_crud
from app.schemas.grammar import grammar_schema

router = APIRouter()


@router.get("", response_model=List[grammar_schema.GrammarPointOut])
def read_grammar_points(db: Session = Depends(get_db)):
    return grammar_crud.list_grammar_points(db)


@router.get("/{grammar_id}", response_model=grammar_schema.GrammarPointOut)
def read_grammar_point(grammar_id: int, db: Session = Depends(get_db)):
    try:
        return grammar_crud.get_grammar_point(db, grammar_id)
    except NotFoundError as exc:
        raise to_http_exception(exc) from exc
