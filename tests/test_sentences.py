import json

import pytest

from everydayread.sentences import parse_string_list


def test_parse_returns_list_under_key():
    items = ["first rule", "두 번째 규칙"]
    text = json.dumps({"cppguidelines": items, "other": ["x"]}, ensure_ascii=False)
    assert parse_string_list(text, "cppguidelines") == items


def test_parse_topic_key():
    items = ["alpha", "beta", "gamma"]
    assert parse_string_list(json.dumps({"topic": items}), "topic") == items


def test_parse_empty_list():
    assert parse_string_list('{"topic": []}', "topic") == []


def test_missing_key_raises_key_error():
    with pytest.raises(KeyError):
        parse_string_list('{"topic": ["a"]}', "cppguidelines")


def test_non_list_value_raises_type_error():
    with pytest.raises(TypeError):
        parse_string_list('{"topic": "a"}', "topic")


def test_non_string_item_raises_type_error():
    with pytest.raises(TypeError):
        parse_string_list('{"topic": ["a", 3]}', "topic")


def test_non_object_document_raises_type_error():
    with pytest.raises(TypeError):
        parse_string_list('["a", "b"]', "topic")


def test_malformed_json_raises_value_error():
    with pytest.raises(ValueError):
        parse_string_list("{not json", "topic")