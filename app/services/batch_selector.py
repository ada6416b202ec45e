from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import List

from sqlalchemy import func, select
from sqlalchemy.orm import InstrumentedAttribute, Session

from app.core.exceptions import InsufficientDataError
from app.models.grammar.grammar_point_model import GrammarPoint
from app.models.kanji.kanji_model import KanjiInfo

logger = logging.getLogger(__name__)

DEFAULT_GRAMMAR_SAMPLE_SIZE = 5
DEFAULT_KANJI_SAMPLE_SIZE = 10


@dataclass(slots=True)
class BatchSelection:
    """Seed of a question generation request."""

    grammar_list: List[str]
    kanji_list: List[str]

    def serialized_grammar_list(self) -> str:
        return json.dumps(self.grammar_list, ensure_ascii=False)

    def serialized_kanji_list(self) -> str:
        return json.dumps(self.kanji_list, ensure_ascii=False)


class BatchSelector:
    """Draw independent random samples of grammar concepts and kanji.

    Sampling is delegated to the store (``ORDER BY random()``). A pool holding
    fewer rows than requested fails with :class:`InsufficientDataError`; the
    selector never degrades to a smaller sample.
    """

    def __init__(
        self,
        db: Session,
        *,
        grammar_sample_size: int = DEFAULT_GRAMMAR_SAMPLE_SIZE,
        kanji_sample_size: int = DEFAULT_KANJI_SAMPLE_SIZE,
    ):
        self.db = db
        self.grammar_sample_size = grammar_sample_size
        self.kanji_sample_size = kanji_sample_size

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def select(self) -> BatchSelection:
        grammar_list = self._sample(GrammarPoint.concept, self.grammar_sample_size, pool="grammar")
        kanji_list = self._sample(KanjiInfo.kanji, self.kanji_sample_size, pool="kanji")
        logger.info(
            "Tirage du lot: %s points de grammaire, %s kanji.",
            len(grammar_list),
            len(kanji_list),
        )
        return BatchSelection(grammar_list=grammar_list, kanji_list=kanji_list)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _random_order(self):
        dialect = self.db.get_bind().dialect.name
        if dialect == "mssql":
            return func.newid()
        if dialect in {"mysql", "mariadb"}:
            return func.rand()
        return func.random()

    def _sample(self, column: InstrumentedAttribute, size: int, *, pool: str) -> List[str]:
        values = list(
            self.db.scalars(
                select(column).order_by(self._random_order()).limit(size)
            ).all()
        )
        if len(values) < size:
            logger.warning(
                "Pool '%s' insuffisant: %s ligne(s) disponible(s) pour un tirage de %s.",
                pool,
                len(values),
                size,
            )
            raise InsufficientDataError(
                f"Not enough {pool} entries to sample {size} (only {len(values)} available)"
            )
        return values
