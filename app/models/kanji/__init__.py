"""Kanji reference data."""

from .kanji_model import KanjiExample, KanjiExampleVocab, KanjiInfo

__all__ = [
    "KanjiInfo",
    "KanjiExample",
    "KanjiExampleVocab",
]
