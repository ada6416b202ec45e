# Fichier: app/crud/grammar_crud.py
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.engine import RowMapping
from sqlalchemy.orm import Session

from app.models.grammar.grammar_point_model import GrammarExample, GrammarPoint, GrammarVocab
from app.services.tree_reconstructor import GRAMMAR_TREE


def fetch_grammar_rows(db: Session, grammar_id: Optional[int] = None) -> Sequence[RowMapping]:
    """
    Lignes plates grammar_points ⋈ examples ⋈ vocabulary (LEFT JOIN),
    triées par id de grammaire, puis d'exemple, puis de vocabulaire.
    """
    stmt = (
        select(
            GrammarPoint.id.label("grammar_id"),
            GrammarPoint.concept,
            GrammarPoint.meaning,
            GrammarPoint.details,
            GrammarExample.id.label("example_id"),
            GrammarExample.japanese,
            GrammarExample.romaji.label("example_romaji"),
            GrammarExample.english,
            GrammarVocab.id.label("vocab_id"),
            GrammarVocab.word,
            GrammarVocab.romaji.label("vocab_romaji"),
            GrammarVocab.meaning.label("vocab_meaning"),
        )
        .select_from(GrammarPoint)
        .outerjoin(GrammarExample, GrammarExample.grammar_id == GrammarPoint.id)
        .outerjoin(GrammarVocab, GrammarVocab.example_id == GrammarExample.id)
        .order_by(GrammarPoint.id, GrammarExample.id, GrammarVocab.id)
    )
    if grammar_id is not None:
        stmt = stmt.where(GrammarPoint.id == grammar_id)
    return db.execute(stmt).mappings().all()


def get_grammar_point(db: Session, grammar_id: int) -> Dict[str, Any]:
    """Récupère un point de grammaire complet; lève NotFoundError s'il n'existe pas."""
    return GRAMMAR_TREE.rebuild_one(fetch_grammar_rows(db, grammar_id=grammar_id))


def list_grammar_points(db: Session) -> List[Dict[str, Any]]:
    return GRAMMAR_TREE.rebuild_all(fetch_grammar_rows(db))
