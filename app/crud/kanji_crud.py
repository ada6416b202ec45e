# Fichier: app/crud/kanji_crud.py
from typing import Any, Dict, List, Sequence

from sqlalchemy import select
from sqlalchemy.engine import RowMapping
from sqlalchemy.orm import Session

from app.models.kanji.kanji_model import KanjiExample, KanjiExampleVocab, KanjiInfo
from app.services.tree_reconstructor import KANJI_TREE


def list_kanji(db: Session) -> List[KanjiInfo]:
    return list(db.scalars(select(KanjiInfo).order_by(KanjiInfo.id)).all())


def fetch_kanji_rows(db: Session, kanji_id: int) -> Sequence[RowMapping]:
    """Lignes plates kanji_info ⋈ kanji_examples ⋈ kanji_example_vocabulary (LEFT JOIN)."""
    stmt = (
        select(
            KanjiInfo.id.label("kanji_id"),
            KanjiInfo.kanji,
            KanjiInfo.meanings,
            KanjiInfo.kun_readings,
            KanjiInfo.on_readings,
            KanjiInfo.grade,
            KanjiInfo.jlpt,
            KanjiInfo.stroke_count,
            KanjiInfo.unicode,
            KanjiInfo.heisig_en,
            KanjiInfo.freq_mainichi_shinbun,
            KanjiExample.id.label("example_id"),
            KanjiExample.japanese,
            KanjiExample.romaji.label("example_romaji"),
            KanjiExample.english,
            KanjiExampleVocab.id.label("vocab_id"),
            KanjiExampleVocab.word,
            KanjiExampleVocab.romaji.label("vocab_romaji"),
            KanjiExampleVocab.meaning.label("vocab_meaning"),
        )
        .select_from(KanjiInfo)
        .outerjoin(KanjiExample, KanjiExample.kanji_id == KanjiInfo.id)
        .outerjoin(KanjiExampleVocab, KanjiExampleVocab.example_id == KanjiExample.id)
        .where(KanjiInfo.id == kanji_id)
        .order_by(KanjiExample.id, KanjiExampleVocab.id)
    )
    return db.execute(stmt).mappings().all()


def get_kanji_detail(db: Session, kanji_id: int) -> Dict[str, Any]:
    """Un kanji avec ses exemples et leur vocabulaire en une seule requête."""
    return KANJI_TREE.rebuild_one(fetch_kanji_rows(db, kanji_id))
