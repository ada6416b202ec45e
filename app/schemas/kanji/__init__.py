"""Pydantic schemas for kanji reference data."""

from .kanji_schema import KanjiDetailOut, KanjiExampleOut, KanjiOut, KanjiVocabOut

__all__ = [
    "KanjiOut",
    "KanjiVocabOut",
    "KanjiExampleOut",
    "KanjiDetailOut",
]
