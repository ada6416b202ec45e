import pytest

from app.core import prompt_manager


def test_grammar_prompt_injects_concept_and_defaults():
    prompt = prompt_manager.get_prompt("jlpt.grammar_explanation", concept="ように")

    assert prompt.endswith("Explain the grammar of this: ように")
    assert "JLPT N4" in prompt
    assert "2 to 3 vocab entries" in prompt
    assert "{{" not in prompt


def test_question_prompt_joins_lists():
    prompt = prompt_manager.get_prompt(
        "jlpt.question_set",
        grammar_list=["って", "ように"],
        kanji_list=["日", "月"],
        question_types="  1. Notices",
    )

    assert "Use grammar topics: って, ように" in prompt
    assert "Use kanji: 日, 月" in prompt
    assert "Generate 9 questions" in prompt


def test_ensure_json_appends_guardrail():
    prompt = prompt_manager.get_prompt("jlpt.grammar_explanation", ensure_json=True, concept="って")
    assert prompt.endswith(prompt_manager.JSON_GUARDRAIL)


def test_default_filter_in_template():
    rendered = prompt_manager._render_template(
        "{{ level|default('N5') }} {{ count|default(3) }} {{ flag|default(true) }}",
        {},
    )
    assert rendered == "N5 3 true"


def test_missing_template():
    with pytest.raises(FileNotFoundError):
        prompt_manager.get_prompt("jlpt.does_not_exist")
