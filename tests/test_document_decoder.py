import json
import logging

import pytest

from app.core.exceptions import MalformedGenerationError, SchemaMismatchError
from app.models.exam.question_model import QuestionType
from app.schemas.exam.question_schema import resolve_question_type
from app.services.document_decoder import decode_grammar_document, decode_question_set
from app.utils.json_utils import sanitize_generation_text
from tests.utils import grammar_document_dict, question_set_list


def test_decode_grammar_document():
    document = decode_grammar_document(json.dumps(grammar_document_dict(vocab_per_example=(2, 3))))
    assert document.concept == "って"
    assert [len(example.vocab) for example in document.examples] == [2, 3]


def test_grammar_document_with_no_examples_is_accepted():
    payload = grammar_document_dict()
    payload["examples"] = []
    assert decode_grammar_document(json.dumps(payload)).examples == []


def test_grammar_document_missing_field():
    payload = grammar_document_dict()
    del payload["details"]
    with pytest.raises(SchemaMismatchError) as exc:
        decode_grammar_document(json.dumps(payload))
    assert "details" in exc.value.message


def test_grammar_document_does_not_coerce_types():
    payload = grammar_document_dict()
    payload["examples"][0]["vocab"][0]["meaning"] = 42
    with pytest.raises(SchemaMismatchError):
        decode_grammar_document(json.dumps(payload))


def test_grammar_document_must_be_an_object():
    with pytest.raises(SchemaMismatchError):
        decode_grammar_document(json.dumps([grammar_document_dict()]))


def test_grammar_document_invalid_json():
    with pytest.raises(MalformedGenerationError):
        decode_grammar_document("The concept って means 'I heard'.")


def test_short_vocab_is_logged_not_rejected(caplog):
    with caplog.at_level(logging.WARNING, logger="app.services.document_decoder"):
        document = decode_grammar_document(json.dumps(grammar_document_dict(vocab_per_example=(1,))))
    assert len(document.examples[0].vocab) == 1
    assert any("vocabulaire" in record.getMessage() for record in caplog.records)


def test_decode_question_set():
    document = decode_question_set(json.dumps(question_set_list(), ensure_ascii=False))
    assert len(document) == 9
    assert [item.question_type for item in document] == list(QuestionType)


@pytest.mark.parametrize("count", [0, 8, 10])
def test_question_set_needs_exactly_nine_questions(count):
    with pytest.raises(SchemaMismatchError):
        decode_question_set(json.dumps(question_set_list(count)))


def test_question_set_must_be_an_array():
    with pytest.raises(SchemaMismatchError):
        decode_question_set(json.dumps({"questions": question_set_list()}))


def test_answer_must_be_one_of_the_options():
    questions = question_set_list()
    questions[3]["answer"] = "not an option"
    with pytest.raises(SchemaMismatchError) as exc:
        decode_question_set(json.dumps(questions))
    assert "answer_not_in_options" in exc.value.message


def test_answer_must_match_a_single_option():
    questions = question_set_list()
    questions[0]["options"].append(questions[0]["answer"])
    with pytest.raises(SchemaMismatchError):
        decode_question_set(json.dumps(questions))


def test_options_must_be_text():
    questions = question_set_list()
    questions[2]["options"] = [1, 2, 3]
    with pytest.raises(SchemaMismatchError):
        decode_question_set(json.dumps(questions))


def test_unknown_question_type():
    questions = question_set_list()
    questions[0]["question_type"] = "Listening"
    with pytest.raises(SchemaMismatchError):
        decode_question_set(json.dumps(questions))


@pytest.mark.parametrize(
    "label, expected",
    [
        ("Vocabulary (Kanji readings)", QuestionType.KANJI_READING),
        ("  vocabulary   (kanji READINGS) ", QuestionType.KANJI_READING),
        ("5. Grammar & Reading (Grammar completion)", QuestionType.GRAMMAR_COMPLETION),
        ("9", QuestionType.NOTICES),
    ],
)
def test_resolve_question_type(label, expected):
    assert resolve_question_type(label) is expected


def test_resolve_question_type_out_of_range():
    with pytest.raises(ValueError):
        resolve_question_type("10")


def test_deeply_nested_output_is_malformed():
    with pytest.raises(MalformedGenerationError):
        decode_grammar_document(sanitize_generation_text("[" * 200000))


def test_single_option_equal_to_answer_is_accepted():
    questions = question_set_list()
    questions[4]["options"] = [questions[4]["answer"]]
    document = decode_question_set(json.dumps(questions))
    assert list(document)[4].options == [questions[4]["answer"]]
