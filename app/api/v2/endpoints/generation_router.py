# Fichier: app/api/v2/endpoints/generation_router.py
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.v2.dependencies import get_batch_selector, get_db, get_generator, to_http_exception
from app.core.ai_service import TextGenerator
from app.core.exceptions import PipelineError
from app.schemas.exam import question_schema
from app.schemas.grammar import grammar_schema
from app.services.batch_selector import BatchSelector
from app.services.generation_service import GrammarGenerationService, QuestionGenerationService

router = APIRouter()


@router.post("/grammar", response_model=grammar_schema.GrammarGenerateOut)
def generate_grammar_point(
    payload: grammar_schema.GrammarGenerateIn,
    db: Session = Depends(get_db),
    generator: TextGenerator = Depends(get_generator),
):
    """
    Fait expliquer un point de grammaire par Gemini puis l'enregistre
    (grammaire -> exemples -> vocabulaire) en une seule transaction.
    """
    service = GrammarGenerationService(db=db, generator=generator)
    try:
        result = service.generate(payload.concept)
    except PipelineError as exc:
        raise to_http_exception(exc) from exc

    return {
        "message": "Grammar point inserted successfully",
        "grammar_id": result.grammar_id,
        "document": result.document,
    }


@router.post("/questions", response_model=question_schema.QuestionGenerateOut)
def generate_question_batch(
    db: Session = Depends(get_db),
    generator: TextGenerator = Depends(get_generator),
    selector: BatchSelector = Depends(get_batch_selector),
):
    """Tire 5 points de grammaire et 10 kanji, génère 9 questions et enregistre le lot."""
    service = QuestionGenerationService(db=db, generator=generator, selector=selector)
    try:
        result = service.generate()
    except PipelineError as exc:
        raise to_http_exception(exc) from exc

    return {
        "message": "Questions inserted successfully",
        "batch_id": result.batch_id,
        "grammar_used": result.grammar_used,
        "kanji_used": result.kanji_used,
        "count": result.count,
        "category_counts": result.category_counts,
    }
