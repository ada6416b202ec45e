from datetime import datetime

import pytest

from app.core.exceptions import NotFoundError
from app.services.tree_reconstructor import EXAM_TREE, GRAMMAR_TREE, LevelSpec, TreeReconstructor


def grammar_row(grammar_id, example_id=None, vocab_id=None, **overrides):
    row = {
        "grammar_id": grammar_id,
        "concept": f"concept {grammar_id}",
        "meaning": f"meaning {grammar_id}",
        "details": f"details {grammar_id}",
        "example_id": example_id,
        "japanese": None if example_id is None else f"文 {example_id}",
        "example_romaji": None if example_id is None else f"bun {example_id}",
        "english": None if example_id is None else f"sentence {example_id}",
        "vocab_id": vocab_id,
        "word": None if vocab_id is None else f"語 {vocab_id}",
        "vocab_romaji": None if vocab_id is None else f"go {vocab_id}",
        "vocab_meaning": None if vocab_id is None else f"word {vocab_id}",
    }
    row.update(overrides)
    return row


def test_rebuild_one_groups_rows_by_identifier():
    rows = [
        grammar_row(1, 10, 100),
        grammar_row(1, 10, 101),
        grammar_row(1, 11, 102),
    ]

    tree = GRAMMAR_TREE.rebuild_one(rows)

    assert tree["id"] == 1
    assert tree["concept"] == "concept 1"
    assert [example["id"] for example in tree["examples"]] == [10, 11]
    assert [vocab["id"] for vocab in tree["examples"][0]["vocab"]] == [100, 101]
    assert [vocab["id"] for vocab in tree["examples"][1]["vocab"]] == [102]
    assert tree["examples"][0]["romaji"] == "bun 10"
    assert tree["examples"][0]["vocab"][1] == {
        "id": 101,
        "word": "語 101",
        "romaji": "go 101",
        "meaning": "word 101",
    }


def test_fan_out_yields_each_node_once():
    rows = [grammar_row(1, example_id, example_id * 10 + n) for example_id in (1, 2, 3) for n in range(4)]

    tree = GRAMMAR_TREE.rebuild_one(rows)

    assert len(tree["examples"]) == 3
    assert all(len(example["vocab"]) == 4 for example in tree["examples"])
    leaf_ids = [vocab["id"] for example in tree["examples"] for vocab in example["vocab"]]
    assert len(leaf_ids) == len(set(leaf_ids)) == 12


def test_root_without_children():
    tree = GRAMMAR_TREE.rebuild_one([grammar_row(7)])
    assert tree["id"] == 7
    assert tree["examples"] == []


def test_child_without_leaves():
    tree = GRAMMAR_TREE.rebuild_one([grammar_row(1, 10), grammar_row(1, 11, 110)])
    assert tree["examples"][0]["vocab"] == []
    assert [vocab["id"] for vocab in tree["examples"][1]["vocab"]] == [110]


def test_rebuild_all_keeps_first_seen_order():
    rows = [
        grammar_row(3, 30, 300),
        grammar_row(1),
        grammar_row(3, 31),
        grammar_row(2, 20, 200),
    ]

    trees = GRAMMAR_TREE.rebuild_all(rows)

    assert [tree["id"] for tree in trees] == [3, 1, 2]
    assert [example["id"] for example in trees[0]["examples"]] == [30, 31]


def test_child_identifiers_are_scoped_to_their_root():
    trees = GRAMMAR_TREE.rebuild_all([grammar_row(1, 5, 50), grammar_row(2, 5, 51)])
    assert [len(tree["examples"]) for tree in trees] == [1, 1]


def test_empty_rows():
    assert GRAMMAR_TREE.rebuild_all([]) == []
    with pytest.raises(NotFoundError) as exc:
        GRAMMAR_TREE.rebuild_one([])
    assert exc.value.message == "Grammar point not found"


def test_rebuild_one_with_several_roots_returns_the_first():
    tree = GRAMMAR_TREE.rebuild_one([grammar_row(4), grammar_row(5)])
    assert tree["id"] == 4


def test_exam_tree_decodes_stored_lists():
    created_at = datetime(2026, 10, 19, 8, 30)
    row = {
        "batch_id": 1,
        "created_at": created_at,
        "grammar_list": '["って", "ように"]',
        "kanji_list": '["日", "月"]',
        "question_id": 2,
        "question_type": "Notices",
        "question_text": "問題",
        "answer": "A",
        "explanation": "説明",
        "option_id": 3,
        "option_text": "A",
        "is_correct": True,
    }

    tree = EXAM_TREE.rebuild_one([row, dict(row, option_id=4, option_text="B", is_correct=False)])

    assert tree["created_at"] == created_at
    assert tree["grammar_list"] == ["って", "ように"]
    assert tree["kanji_list"] == ["日", "月"]
    assert [(option["option_text"], option["is_correct"]) for option in tree["questions"][0]["options"]] == [
        ("A", True),
        ("B", False),
    ]


def test_levels_above_leaf_need_children_key():
    level = LevelSpec(id_column="id", fields={})
    with pytest.raises(ValueError):
        TreeReconstructor(level, level, level)


def test_trailing_example_without_vocab():
    rows = [grammar_row(1, 10, 100), grammar_row(1, 10, 101), grammar_row(1, 11)]

    tree = GRAMMAR_TREE.rebuild_one(rows)

    assert [len(example["vocab"]) for example in tree["examples"]] == [2, 0]
