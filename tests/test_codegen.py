"""Tests for the canonical encoder."""

import io
import json

import pytest
from json_highlight_writer.codegen import DumpGenerator, dump, dumps, format_number
from json_highlight_writer.nodes import Array, Number, from_python


def canonical(data):
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


class TestDumps:
    """Test compact output against the standard library encoder."""

    @pytest.mark.parametrize("data", [
        None,
        True,
        False,
        0,
        -17,
        3.25,
        1e16,
        -2.5e-8,
        "",
        "world",
        [],
        {},
        [None, "world", True],
        {"foo": False, "bar": None, "answer": 42, "list": [None, "world", True]},
        {"nested": {"a": [1, [2, [3, {}]]], "b": {"c": []}}},
    ])
    def test_matches_standard_encoding(self, data):
        assert dumps(from_python(data)) == canonical(data)

    def test_basic_array(self):
        assert dumps(from_python([None, "world", True])) == '[null,"world",true]'

    def test_key_order_is_document_order(self):
        assert dumps(from_python({"z": 1, "a": 2})) == '{"z":1,"a":2}'


class TestStrings:
    """Test string escaping."""

    def test_short_escapes(self):
        assert dumps(from_python('a"b\\c\b\f\n\r\t')) == '"a\\"b\\\\c\\b\\f\\n\\r\\t"'

    def test_other_control_characters(self):
        assert dumps(from_python("\x00\x1f")) == '"\\u0000\\u001f"'

    def test_escape_after_clean_prefix(self):
        assert dumps(from_python("hello\nworld")) == '"hello\\nworld"'

    def test_unicode_is_not_escaped(self):
        assert dumps(from_python("héllo ☃ \x7f")) == '"héllo ☃ \x7f"'

    def test_keys_are_escaped(self):
        data = {"line\nbreak": 1}
        assert dumps(from_python(data)) == canonical(data)


class TestNumbers:
    """Test number formatting."""

    def test_integers(self):
        assert format_number(42) == "42"
        assert format_number(-7) == "-7"

    def test_floats_use_shortest_round_trip(self):
        assert format_number(0.1) == "0.1"
        assert format_number(42.0) == "42.0"
        assert float(format_number(1 / 3)) == 1 / 3

    def test_nan_and_infinity_are_null(self):
        assert dumps(Number(float("nan"))) == "null"
        assert dumps(Number(float("inf"))) == "null"
        assert dumps(Number(float("-inf"))) == "null"


class TestWriter:
    """Test writing into streams."""

    def test_dump_to_stream(self):
        stream = io.StringIO()
        dump(from_python({"a": [1, 2]}), stream)

        assert stream.getvalue() == '{"a":[1,2]}'

    def test_write_failure_propagates(self):
        class BrokenStream:
            def write(self, text):
                raise OSError("disk full")

        with pytest.raises(OSError, match="disk full"):
            dump(from_python([1]), BrokenStream())


class TestWalk:
    """Test the non-recursive tree walk."""

    def test_deep_nesting(self):
        doc = Array()
        for _ in range(5000):
            doc = Array([doc])

        assert dumps(doc) == "[" * 5001 + "]" * 5001

    def test_enter_and_leave_bracket_each_node(self):
        events = []

        class Recorder(DumpGenerator):
            def enter(self, node):
                events.append(("enter", self.consume()))
                return node

            def leave(self, token):
                events.append(("leave", self.consume(), token))

        doc = from_python({"a": [1]})
        Recorder().write_json(doc)

        assert events == [
            ("enter", ""),
            ("enter", '{"a":'),
            ("enter", '{"a":['),
            ("leave", '{"a":[1', doc["a"][0]),
            ("leave", '{"a":[1]', doc["a"]),
            ("leave", '{"a":[1]}', doc),
        ]
