"""Decode sanitized generator output into typed documents.

The decoder is strict: the text must be valid JSON (``MalformedGenerationError``
otherwise) and must match the expected document shape without any type
coercion (``SchemaMismatchError`` otherwise).
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from app.core.exceptions import SchemaMismatchError
from app.schemas.exam.question_schema import QuestionSetDocument
from app.schemas.grammar.grammar_schema import GrammarDocument
from app.utils.json_utils import parse_generation_json

logger = logging.getLogger(__name__)

MIN_VOCAB_PER_EXAMPLE = 2
_MAX_REPORTED_ERRORS = 5


def _summarize_validation_error(exc: ValidationError) -> str:
    errors = exc.errors()
    parts = []
    for error in errors[:_MAX_REPORTED_ERRORS]:
        location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
        parts.append(f"{location}: {error.get('msg', 'invalid')}")
    if len(errors) > _MAX_REPORTED_ERRORS:
        parts.append(f"... {len(errors) - _MAX_REPORTED_ERRORS} more")
    return "; ".join(parts)


def _log_vocab_quality(document: GrammarDocument) -> None:
    for index, example in enumerate(document.examples):
        if len(example.vocab) < MIN_VOCAB_PER_EXAMPLE:
            logger.warning(
                "Qualité: l'exemple %s de '%s' n'a que %s entrée(s) de vocabulaire (minimum attendu: %s).",
                index,
                document.concept,
                len(example.vocab),
                MIN_VOCAB_PER_EXAMPLE,
            )


def decode_grammar_document(candidate: str) -> GrammarDocument:
    data: Any = parse_generation_json(candidate)
    if not isinstance(data, dict):
        raise SchemaMismatchError(
            f"Grammar document must be a JSON object, got {type(data).__name__}"
        )

    try:
        document = GrammarDocument.model_validate(data)
    except ValidationError as exc:
        raise SchemaMismatchError(
            f"Grammar document does not match the expected shape: {_summarize_validation_error(exc)}"
        ) from exc

    _log_vocab_quality(document)
    return document


def decode_question_set(candidate: str) -> QuestionSetDocument:
    data: Any = parse_generation_json(candidate)
    if not isinstance(data, list):
        raise SchemaMismatchError(
            f"Question set must be a JSON array, got {type(data).__name__}"
        )

    try:
        return QuestionSetDocument.model_validate(data)
    except ValidationError as exc:
        raise SchemaMismatchError(
            f"Question set does not match the expected shape: {_summarize_validation_error(exc)}"
        ) from exc
