from __future__ import annotations

import pytest

from docstore.values import MISSING, canonical_json, field_of, json_equal


def test_json_equal_is_deep_and_type_aware():
    assert json_equal({"a": [1, {"b": None}]}, {"a": [1, {"b": None}]})
    assert not json_equal({"a": [1, 2]}, {"a": [2, 1]})
    assert not json_equal({"a": 1}, {"a": 1, "b": 2})
    assert not json_equal(True, 1)
    assert not json_equal(0, False)
    assert json_equal(1, 1.0)
    assert not json_equal(None, {})
    assert not json_equal("1", 1)


def test_canonical_json_is_compact_and_key_sorted():
    assert canonical_json({"b": 1, "a": [True, None]}) == '{"a":[true,null],"b":1}'
    assert canonical_json("é") == '"é"'
    assert canonical_json(None) == "null"


def test_field_of_only_reads_objects():
    assert field_of({"n": None}, "n") is None
    assert field_of({"n": 1}, "m") is MISSING
    assert field_of([1, 2], "0") is MISSING
    assert field_of("text", "id") is MISSING


@pytest.mark.parametrize(
    "value, text",
    [
        (1.0, "1.0"),
        (0.5, "0.5"),
        (123.456, "123.456"),
        (1e15, "1000000000000000.0"),
        (1e16, "1e16"),
        (2.5e20, "2.5e20"),
        (1e-5, "0.00001"),
        (1e-7, "1e-7"),
        (-1.5e-10, "-1.5e-10"),
        (0.30000000000000004, "0.30000000000000004"),
        (-0.0, "-0.0"),
        (float("nan"), "null"),
    ],
)
def test_float_text_uses_bare_exponents(value, text):
    assert canonical_json(value) == text


def test_floats_nested_in_containers_use_the_same_text():
    assert canonical_json({"n": [1e16, 2]}) == '{"n":[1e16,2]}'
