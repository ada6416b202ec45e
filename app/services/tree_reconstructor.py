"""Rebuild nested documents from the flat rows of a three-level LEFT JOIN.

A ``root LEFT JOIN child LEFT JOIN leaf`` query repeats the root columns once
per child row and the child columns once per leaf row. The reconstructor walks
the rows once and keeps, for the duration of a single call, an insertion-ordered
map of roots and a per-root insertion-ordered map of children, so every
distinct identifier yields exactly one node and nodes keep the order in which
the store returned them.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from app.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class LevelSpec:
    """How one level of the tree is read from a row.

    ``fields`` maps output keys to row columns; ``converters`` optionally
    post-process a value (e.g. JSON text back to a list). ``children_key`` is
    the output key holding the next level, ``None`` for leaves.
    """

    id_column: str
    fields: Mapping[str, str]
    children_key: Optional[str] = None
    converters: Mapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    def build(self, row: Row) -> Dict[str, Any]:
        node: Dict[str, Any] = {"id": row[self.id_column]}
        for key, column in self.fields.items():
            value = row[column]
            converter = self.converters.get(key)
            node[key] = converter(value) if converter is not None and value is not None else value
        if self.children_key is not None:
            node[self.children_key] = []
        return node


class TreeReconstructor:
    def __init__(self, root: LevelSpec, child: LevelSpec, leaf: LevelSpec, *, label: str = "Resource"):
        if root.children_key is None or child.children_key is None:
            raise ValueError("root and child levels need a children_key")
        self.root = root
        self.child = child
        self.leaf = leaf
        self.label = label

    def rebuild_all(self, rows: Iterable[Row]) -> List[Dict[str, Any]]:
        """Return every root in first-seen order; an empty row set gives ``[]``."""
        roots: Dict[Any, Dict[str, Any]] = {}
        children_by_root: Dict[Any, Dict[Any, Dict[str, Any]]] = {}

        for row in rows:
            root_id = row[self.root.id_column]
            root_node = roots.get(root_id)
            if root_node is None:
                root_node = self.root.build(row)
                roots[root_id] = root_node
                children_by_root[root_id] = {}

            child_id = row[self.child.id_column]
            if child_id is None:
                # LEFT JOIN sans enfant : la racine seule
                continue

            children = children_by_root[root_id]
            child_node = children.get(child_id)
            if child_node is None:
                child_node = self.child.build(row)
                children[child_id] = child_node
                root_node[self.root.children_key].append(child_node)

            if row[self.leaf.id_column] is not None:
                child_node[self.child.children_key].append(self.leaf.build(row))

        return list(roots.values())

    def rebuild_one(self, rows: Iterable[Row]) -> Dict[str, Any]:
        """Return the single root described by *rows* or raise :class:`NotFoundError`."""
        trees = self.rebuild_all(rows)
        if not trees:
            raise NotFoundError(f"{self.label} not found")
        if len(trees) > 1:
            logger.warning("%s: %s racines reçues en mode unitaire, seule la première est renvoyée.", self.label, len(trees))
        return trees[0]


GRAMMAR_TREE = TreeReconstructor(
    root=LevelSpec(
        id_column="grammar_id",
        fields={"concept": "concept", "meaning": "meaning", "details": "details"},
        children_key="examples",
    ),
    child=LevelSpec(
        id_column="example_id",
        fields={"japanese": "japanese", "romaji": "example_romaji", "english": "english"},
        children_key="vocab",
    ),
    leaf=LevelSpec(
        id_column="vocab_id",
        fields={"word": "word", "romaji": "vocab_romaji", "meaning": "vocab_meaning"},
    ),
    label="Grammar point",
)

EXAM_TREE = TreeReconstructor(
    root=LevelSpec(
        id_column="batch_id",
        fields={"created_at": "created_at", "grammar_list": "grammar_list", "kanji_list": "kanji_list"},
        children_key="questions",
        converters={"grammar_list": json.loads, "kanji_list": json.loads},
    ),
    child=LevelSpec(
        id_column="question_id",
        fields={
            "question_type": "question_type",
            "question_text": "question_text",
            "answer": "answer",
            "explanation": "explanation",
        },
        children_key="options",
    ),
    leaf=LevelSpec(
        id_column="option_id",
        fields={"option_text": "option_text", "is_correct": "is_correct"},
    ),
    label="Exam",
)

KANJI_TREE = TreeReconstructor(
    root=LevelSpec(
        id_column="kanji_id",
        fields={
            "kanji": "kanji",
            "meanings": "meanings",
            "kun_readings": "kun_readings",
            "on_readings": "on_readings",
            "grade": "grade",
            "jlpt": "jlpt",
            "stroke_count": "stroke_count",
            "unicode": "unicode",
            "heisig_en": "heisig_en",
            "freq_mainichi_shinbun": "freq_mainichi_shinbun",
        },
        children_key="examples",
    ),
    child=LevelSpec(
        id_column="example_id",
        fields={"japanese": "japanese", "romaji": "example_romaji", "english": "english"},
        children_key="vocab",
    ),
    leaf=LevelSpec(
        id_column="vocab_id",
        fields={"word": "word", "romaji": "vocab_romaji", "meaning": "vocab_meaning"},
    ),
    label="Kanji",
)
