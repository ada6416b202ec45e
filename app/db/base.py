"""Déclare l'ensemble des modèles SQLAlchemy pour ``Base.metadata.create_all``."""

from app.db.base_class import Base

# Grammaire générée
from app.models.grammar.grammar_point_model import GrammarExample, GrammarPoint, GrammarVocab

# Examens quotidiens
from app.models.exam.question_model import Question, QuestionBatch, QuestionOption

# Référentiel kanji
from app.models.kanji.kanji_model import KanjiExample, KanjiExampleVocab, KanjiInfo

__all__ = (
    "Base",
    "GrammarPoint",
    "GrammarExample",
    "GrammarVocab",
    "QuestionBatch",
    "Question",
    "QuestionOption",
    "KanjiInfo",
    "KanjiExample",
    "KanjiExampleVocab",
)
