import json

from sqlalchemy import select

from app.crud import kanji_crud
from app.models.kanji.kanji_model import KanjiInfo
from scripts.seed_kanji import load_records, seed_kanji

RECORDS = [
    {
        "kanji": "日",
        "meanings": ["day", "sun"],
        "kun_readings": ["ひ", "か"],
        "on_readings": ["ニチ", "ジツ"],
        "jlpt": 5,
        "stroke_count": 4,
        "examples": [
            {
                "japanese": "日曜日",
                "romaji": "nichiyoubi",
                "english": "Sunday",
                "vocab": [{"word": "日曜日", "romaji": "nichiyoubi", "meaning": "Sunday"}],
            }
        ],
    },
    {"kanji": "月", "meanings": "month, moon", "jlpt": 5},
]


def test_load_records_accepts_array_and_json_lines(tmp_path):
    array_file = tmp_path / "kanji.json"
    array_file.write_text(json.dumps(RECORDS, ensure_ascii=False), encoding="utf-8")
    lines_file = tmp_path / "kanji.jsonl"
    lines_file.write_text("\n".join(json.dumps(r, ensure_ascii=False) for r in RECORDS) + "\n", encoding="utf-8")

    assert load_records(array_file) == RECORDS
    assert load_records(lines_file) == RECORDS


def test_seed_kanji_inserts_hierarchy_once(db_session):
    assert seed_kanji(db_session, RECORDS) == 2
    assert seed_kanji(db_session, RECORDS) == 0

    sun = db_session.scalars(select(KanjiInfo).where(KanjiInfo.kanji == "日")).one()
    assert sun.meanings == "day, sun"

    detail = kanji_crud.get_kanji_detail(db_session, sun.id)
    assert detail["on_readings"] == "ニチ, ジツ"
    assert detail["examples"][0]["vocab"][0]["meaning"] == "Sunday"
