"""Grammar points and their examples/vocabulary."""

from .grammar_point_model import GrammarExample, GrammarPoint, GrammarVocab

__all__ = [
    "GrammarPoint",
    "GrammarExample",
    "GrammarVocab",
]
