# Fichier: app/schemas/kanji/kanji_schema.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class KanjiOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    kanji: str
    meanings: Optional[str] = None
    kun_readings: Optional[str] = None
    on_readings: Optional[str] = None
    grade: Optional[int] = None
    jlpt: Optional[int] = None
    stroke_count: Optional[int] = None
    unicode: Optional[str] = None
    heisig_en: Optional[str] = None
    freq_mainichi_shinbun: Optional[int] = None


class KanjiVocabOut(BaseModel):
    id: int
    word: str
    romaji: Optional[str] = None
    meaning: Optional[str] = None


class KanjiExampleOut(BaseModel):
    id: int
    japanese: str
    romaji: Optional[str] = None
    english: Optional[str] = None
    vocab: List[KanjiVocabOut]


class KanjiDetailOut(KanjiOut):
    examples: List[KanjiExampleOut]
