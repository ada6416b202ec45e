"""Pydantic schemas for generated grammar points."""

from .grammar_schema import (
    ExampleEntry,
    GrammarDocument,
    GrammarExampleOut,
    GrammarGenerateIn,
    GrammarGenerateOut,
    GrammarPointOut,
    GrammarVocabOut,
    VocabEntry,
)

__all__ = [
    "VocabEntry",
    "ExampleEntry",
    "GrammarDocument",
    "GrammarGenerateIn",
    "GrammarGenerateOut",
    "GrammarVocabOut",
    "GrammarExampleOut",
    "GrammarPointOut",
]
