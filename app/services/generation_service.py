"""Generation pipelines: prompt -> generator -> sanitizer -> decoder -> cascading writer."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.core import prompt_manager
from app.core.ai_service import TextGenerator
from app.models.exam.question_model import QuestionType
from app.services.batch_selector import BatchSelection, BatchSelector
from app.services.cascading_writer import (
    GrammarWriteResult,
    QuestionWriteResult,
    write_grammar_document,
    write_question_set,
)
from app.services.document_decoder import decode_grammar_document, decode_question_set
from app.utils.json_utils import sanitize_generation_text

logger = logging.getLogger(__name__)


def _question_type_lines() -> str:
    return "\n".join(
        f"  {position}. {question_type.value}"
        for position, question_type in enumerate(QuestionType, start=1)
    )


class GrammarGenerationService:
    """Explain a grammar concept with the generator and persist the result."""

    def __init__(self, db: Session, generator: TextGenerator):
        self.db = db
        self.generator = generator

    def build_prompt(self, concept: str) -> str:
        return prompt_manager.get_prompt("jlpt.grammar_explanation", concept=concept)

    def generate(self, concept: str) -> GrammarWriteResult:
        logger.info("Génération du point de grammaire '%s'.", concept)
        raw = self.generator.generate(self.build_prompt(concept))
        document = decode_grammar_document(sanitize_generation_text(raw))
        return write_grammar_document(self.db, document)


class QuestionGenerationService:
    """Draw a batch seed, generate nine questions from it and persist them."""

    def __init__(self, db: Session, generator: TextGenerator, selector: BatchSelector):
        self.db = db
        self.generator = generator
        self.selector = selector

    def build_prompt(self, selection: BatchSelection) -> str:
        return prompt_manager.get_prompt(
            "jlpt.question_set",
            grammar_list=selection.grammar_list,
            kanji_list=selection.kanji_list,
            question_count=len(QuestionType),
            question_types=_question_type_lines(),
        )

    def generate(self) -> QuestionWriteResult:
        selection = self.selector.select()
        # Ne pas garder la transaction de lecture ouverte pendant l'appel au générateur
        self.db.rollback()

        logger.info(
            "Génération d'un lot de questions (grammaire: %s | kanji: %s).",
            ", ".join(selection.grammar_list),
            ", ".join(selection.kanji_list),
        )
        raw = self.generator.generate(self.build_prompt(selection))
        document = decode_question_set(sanitize_generation_text(raw))
        return write_question_set(self.db, selection, document)
