"""Utility helpers for test factories."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from app.core.exceptions import GenerationUnreachableError
from app.models.exam.question_model import QuestionType
from app.models.grammar.grammar_point_model import GrammarPoint
from app.models.kanji.kanji_model import KanjiInfo

KANJI_POOL = ["日", "月", "火", "水", "木", "金", "土", "山", "川", "田", "人", "口"]


class FakeGenerator:
    """Stands in for Gemini: records prompts and replays a canned response."""

    def __init__(self, response: str | None = None, *, error: Exception | None = None):
        self.response = response
        self.error = error
        self.prompts: List[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response or ""


def unreachable_generator() -> FakeGenerator:
    return FakeGenerator(error=GenerationUnreachableError("Gemini call failed: timeout"))


def grammar_document_dict(concept: str = "って", *, vocab_per_example: tuple[int, ...] = (2,)) -> Dict[str, Any]:
    examples = []
    for index, vocab_count in enumerate(vocab_per_example):
        examples.append(
            {
                "japanese": f"明日は雨だって。({index})",
                "romaji": f"ashita wa ame datte ({index})",
                "english": f"I heard it will rain tomorrow ({index})",
                "vocab": [
                    {"word": f"明日{n}", "romaji": f"ashita{n}", "meaning": f"tomorrow {n}"}
                    for n in range(vocab_count)
                ],
            }
        )
    return {
        "concept": concept,
        "meaning": "I heard that / they say",
        "details": "Casual quotation particle, colloquial form of と.",
        "examples": examples,
    }


def question_set_list(count: int = 9) -> List[Dict[str, Any]]:
    labels = [question_type.value for question_type in QuestionType]
    questions = []
    for index in range(count):
        answer = f"答え{index}"
        questions.append(
            {
                "question_type": labels[index % len(labels)],
                "question": f"問題{index}：＿＿に入るものはどれですか。",
                "options": [f"選択{index}a", answer, f"選択{index}b", f"選択{index}c"],
                "answer": answer,
                "explanation": f"説明{index}",
            }
        )
    return questions


def fenced(payload: Any, tag: str = "json") -> str:
    body = json.dumps(payload, ensure_ascii=False, indent=2)
    return f"Here is the JSON you asked for:\n```{tag}\n{body}\n```\nGood luck with your studies!"


def create_grammar_points(db, count: int = 5) -> List[GrammarPoint]:
    points = [
        GrammarPoint(concept=f"文法{index}", meaning=f"meaning {index}", details=f"details {index}")
        for index in range(count)
    ]
    db.add_all(points)
    db.commit()
    return points


def create_kanji(db, count: int = 10) -> List[KanjiInfo]:
    rows = [KanjiInfo(kanji=character, jlpt=5) for character in KANJI_POOL[:count]]
    db.add_all(rows)
    db.commit()
    return rows
