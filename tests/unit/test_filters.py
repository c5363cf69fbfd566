"""Unit tests for shorthand filter normalization."""
from dashx_core.query.filters import parse_filter_object


def test_prefixed_and_plain_keys():
    assert parse_filter_object({"_status": "active", "title": "Hi"}) == {
        "status": "active",
        "data": {"title": "Hi"},
    }


def test_empty_and_missing_input():
    assert parse_filter_object({}) == {}
    assert parse_filter_object(None) == {}
    assert parse_filter_object() == {}


def test_only_operator_keys_creates_no_data():
    result = parse_filter_object({"_status": "draft", "_id": {"eq": "1"}})
    assert result == {"status": "draft", "id": {"eq": "1"}}
    assert "data" not in result


def test_data_keys_are_prepended():
    result = parse_filter_object({"a": 1, "_status": "x", "b": 2, "c": 3})

    assert result["status"] == "x"
    assert result["data"] == {"a": 1, "b": 2, "c": 3}
    assert list(result["data"]) == ["c", "b", "a"]


def test_values_pass_through_and_input_untouched():
    shorthand = {"tags": {"in": ["x", "y"]}, "_limit": None}
    snapshot = {"tags": {"in": ["x", "y"]}, "_limit": None}

    result = parse_filter_object(shorthand)

    assert result == {"limit": None, "data": {"tags": {"in": ["x", "y"]}}}
    assert shorthand == snapshot


def test_only_leading_underscore_is_stripped():
    assert parse_filter_object({"__meta": 1, "snake_case": 2}) == {
        "_meta": 1,
        "data": {"snake_case": 2},
    }
