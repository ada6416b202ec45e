# Fichier: scripts/seed_kanji.py
"""Load kanji reference data into ``kanji_info`` (and optional examples/vocabulary).

Usage::

    python -m scripts.seed_kanji path/to/kanji.json

The file holds a JSON array (or JSON lines) of objects such as::

    {"kanji": "日", "meanings": "day, sun", "kun_readings": "ひ, か",
     "on_readings": "ニチ, ジツ", "grade": 1, "jlpt": 5, "stroke_count": 4,
     "examples": [{"japanese": "日曜日", "romaji": "nichiyoubi", "english": "Sunday",
                   "vocab": [{"word": "日曜日", "romaji": "nichiyoubi", "meaning": "Sunday"}]}]}

Kanji already present are skipped.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List

from sqlalchemy import select
from sqlalchemy.orm import Session

# --- Configuration du chemin et des imports ---
sys.path.append(str(Path(__file__).resolve().parents[1]))
from app.db.base import Base  # noqa: E402,F401 - charge tous les modèles
from app.models.kanji.kanji_model import KanjiExample, KanjiExampleVocab, KanjiInfo  # noqa: E402

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

_KANJI_FIELDS = (
    "meanings",
    "kun_readings",
    "on_readings",
    "grade",
    "jlpt",
    "stroke_count",
    "unicode",
    "heisig_en",
    "freq_mainichi_shinbun",
)


def _join(value: Any) -> Any:
    # Les listes de lectures/sens sont stockées en texte "a, b, c"
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    return value


def load_records(path: Path) -> List[Dict[str, Any]]:
    text = path.read_text(encoding="utf-8").strip()
    if not text:
        return []
    if text.startswith("["):
        return json.loads(text)
    return [json.loads(line) for line in text.splitlines() if line.strip()]


def seed_kanji(db: Session, records: Iterable[Dict[str, Any]]) -> int:
    """Insère les kanji absents avec leurs exemples; renvoie le nombre ajouté."""
    existing = set(db.scalars(select(KanjiInfo.kanji)).all())
    count = 0
    for record in records:
        character = record.get("kanji")
        if not character or character in existing:
            continue

        kanji = KanjiInfo(kanji=character, **{name: _join(record.get(name)) for name in _KANJI_FIELDS})
        for example_data in record.get("examples") or []:
            example = KanjiExample(
                japanese=example_data["japanese"],
                romaji=example_data.get("romaji"),
                english=example_data.get("english"),
            )
            for vocab_data in example_data.get("vocab") or []:
                example.vocab.append(
                    KanjiExampleVocab(
                        word=vocab_data["word"],
                        romaji=vocab_data.get("romaji"),
                        meaning=vocab_data.get("meaning"),
                    )
                )
            kanji.examples.append(example)

        db.add(kanji)
        existing.add(character)
        count += 1

    db.commit()
    return count


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("source", type=Path, help="JSON array or JSON lines file")
    args = parser.parse_args(argv)

    if not args.source.exists():
        logger.error("❌ Fichier non trouvé : %s", args.source)
        return 1

    from app.db import session as db_session

    Base.metadata.create_all(bind=db_session.engine)
    with db_session.SessionLocal() as db:
        added = seed_kanji(db, load_records(args.source))
    logger.info("✅ %s nouveaux kanji ajoutés.", added)
    return 0


if __name__ == "__main__":
    sys.exit(main())
