# Fichier: app/api/v2/endpoints/kanji_router.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.v2.dependencies import get_db, to_http_exception
from app.core.exceptions import NotFoundError
from app.crud import kanji_crud
from app.schemas.kanji import kanji_schema

router = APIRouter()


@router.get("", response_model=List[kanji_schema.KanjiOut])
def read_kanji(db: Session = Depends(get_db)):
    return kanji_crud.list_kanji(db)


@router.get("/{kanji_id}", response_model=kanji_schema.KanjiDetailOut)
def read_kanji_detail(kanji_id: int, db: Session = Depends(get_db)):
    try:
        return kanji_crud.get_kanji_detail(db, kanji_id)
    except NotFoundError as exc:
        raise to_http_exception(exc) from exc
