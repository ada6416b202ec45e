# Fichier: app/schemas/grammar/grammar_schema.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictStr


# --- Document renvoyé par le générateur ---
class VocabEntry(BaseModel):
    word: StrictStr
    romaji: StrictStr
    meaning: StrictStr


class ExampleEntry(BaseModel):
    japanese: StrictStr
    romaji: StrictStr
    english: StrictStr
    vocab: List[VocabEntry]


class GrammarDocument(BaseModel):
    """Shape the generator must return for a grammar explanation."""

    concept: StrictStr
    meaning: StrictStr
    details: StrictStr
    examples: List[ExampleEntry]


# --- Entrées / sorties de l'API ---
class GrammarGenerateIn(BaseModel):
    concept: str = Field(..., min_length=1, max_length=255)


class GrammarGenerateOut(BaseModel):
    message: str
    grammar_id: int
    document: GrammarDocument


class GrammarVocabOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    word: str
    romaji: str
    meaning: str


class GrammarExampleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    japanese: str
    romaji: str
    english: str
    vocab: List[GrammarVocabOut]


class GrammarPointOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    concept: str
    meaning: str
    details: str
    examples: List[GrammarExampleOut]
