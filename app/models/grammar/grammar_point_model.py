# Fichier: app/models/grammar/grammar_point_model.py
from typing import List

from sqlalchemy import ForeignKey, Integer, Unicode, UnicodeText
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base_class import Base


class GrammarPoint(Base):
    """Un point de grammaire JLPT expliqué par le générateur."""
    __tablename__ = "grammar_points"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    concept: Mapped[str] = mapped_column(Unicode(255), nullable=False, index=True)  # Ex: "って"
    meaning: Mapped[str] = mapped_column(UnicodeText, nullable=False)
    details: Mapped[str] = mapped_column(UnicodeText, nullable=False)

    examples: Mapped[List["GrammarExample"]] = relationship(
        back_populates="grammar_point",
        order_by="GrammarExample.id",
    )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<GrammarPoint(id={self.id}, concept='{self.concept}')>"


class GrammarExample(Base):
    __tablename__ = "grammar_examples"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    grammar_id: Mapped[int] = mapped_column(Integer, ForeignKey("grammar_points.id"), nullable=False, index=True)

    japanese: Mapped[str] = mapped_column(UnicodeText, nullable=False)
    romaji: Mapped[str] = mapped_column(UnicodeText, nullable=False)
    english: Mapped[str] = mapped_column(UnicodeText, nullable=False)

    grammar_point: Mapped[GrammarPoint] = relationship(back_populates="examples")
    vocab: Mapped[List["GrammarVocab"]] = relationship(
        back_populates="example",
        order_by="GrammarVocab.id",
    )


class GrammarVocab(Base):
    __tablename__ = "grammar_vocabulary"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    example_id: Mapped[int] = mapped_column(Integer, ForeignKey("grammar_examples.id"), nullable=False, index=True)

    word: Mapped[str] = mapped_column(Unicode(255), nullable=False)
    romaji: Mapped[str] = mapped_column(Unicode(255), nullable=False)
    meaning: Mapped[str] = mapped_column(UnicodeText, nullable=False)

    example: Mapped[GrammarExample] = relationship(back_populates="vocab")
