# Fichier: app/models/kanji/kanji_model.py
from typing import List, Optional

from sqlalchemy import ForeignKey, Integer, Unicode, UnicodeText
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base_class import Base


class KanjiInfo(Base):
    """Fiche kanji importée par ``scripts/seed_kanji.py``."""
    __tablename__ = "kanji_info"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    kanji: Mapped[str] = mapped_column(Unicode(8), nullable=False, unique=True)
    meanings: Mapped[Optional[str]] = mapped_column(UnicodeText)
    kun_readings: Mapped[Optional[str]] = mapped_column(UnicodeText)
    on_readings: Mapped[Optional[str]] = mapped_column(UnicodeText)
    grade: Mapped[Optional[int]] = mapped_column(Integer)
    jlpt: Mapped[Optional[int]] = mapped_column(Integer, index=True)
    stroke_count: Mapped[Optional[int]] = mapped_column(Integer)
    unicode: Mapped[Optional[str]] = mapped_column(Unicode(16))
    heisig_en: Mapped[Optional[str]] = mapped_column(Unicode(255))
    freq_mainichi_shinbun: Mapped[Optional[int]] = mapped_column(Integer)

    examples: Mapped[List["KanjiExample"]] = relationship(
        back_populates="kanji_info",
        order_by="KanjiExample.id",
    )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<KanjiInfo(id={self.id}, kanji='{self.kanji}')>"


class KanjiExample(Base):
    __tablename__ = "kanji_examples"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    kanji_id: Mapped[int] = mapped_column(Integer, ForeignKey("kanji_info.id"), nullable=False, index=True)
    japanese: Mapped[str] = mapped_column(UnicodeText, nullable=False)
    romaji: Mapped[Optional[str]] = mapped_column(UnicodeText)
    english: Mapped[Optional[str]] = mapped_column(UnicodeText)

    kanji_info: Mapped[KanjiInfo] = relationship(back_populates="examples")
    vocab: Mapped[List["KanjiExampleVocab"]] = relationship(
        back_populates="example",
        order_by="KanjiExampleVocab.id",
    )


class KanjiExampleVocab(Base):
    __tablename__ = "kanji_example_vocabulary"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    example_id: Mapped[int] = mapped_column(Integer, ForeignKey("kanji_examples.id"), nullable=False, index=True)
    word: Mapped[str] = mapped_column(Unicode(255), nullable=False)
    romaji: Mapped[Optional[str]] = mapped_column(Unicode(255))
    meaning: Mapped[Optional[str]] = mapped_column(UnicodeText)

    example: Mapped[KanjiExample] = relationship(back_populates="vocab")
