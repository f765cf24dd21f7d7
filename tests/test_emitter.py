"""Tests for the block-style emitter."""

import datetime

import pytest
from yars_format.codes import FormatErrorCode
from yars_format.errors import YamlEncodingError
from yars_format.kernel.emitter import emit, render_tag
from yars_format.kernel.value import Key, Tagged, format_number


class TestLayout:
    """Structural layout rules."""

    def test_flat_mapping(self):
        assert emit({"a": 2, "b": 1}) == "a: 2\nb: 1\n"

    def test_nested_mapping_starts_on_new_line(self):
        assert emit({"a": {"b": 1, "c": 2}}) == "a:\n  b: 1\n  c: 2\n"

    def test_sequence_under_key(self):
        assert emit({"items": ["zebra", "apple"]}) == "items:\n  - zebra\n  - apple\n"

    def test_empty_collections_use_shorthand(self):
        assert emit({"d": [], "e": {}}) == "d: []\ne: {}\n"
        assert emit({"s": [[], {}]}) == "s:\n  - []\n  - {}\n"

    def test_empty_root_mapping(self):
        assert emit({}) == "{}\n"

    def test_mapping_in_sequence_starts_on_dash_line(self):
        data = {"items": [{"name": "x", "value": 1}, {"name": "y"}]}
        assert emit(data) == (
            "items:\n"
            "  - name: x\n"
            "    value: 1\n"
            "  - name: y\n"
        )

    def test_nested_sequence_in_sequence(self):
        assert emit({"m": [[1, 2], 3]}) == "m:\n  -\n    - 1\n    - 2\n  - 3\n"

    def test_deep_nesting(self):
        data = {"a": {"b": [{"c": {"d": [1]}}]}}
        assert emit(data) == (
            "a:\n"
            "  b:\n"
            "    - c:\n"
            "        d:\n"
            "          - 1\n"
        )

    def test_output_ends_with_single_newline(self):
        text = emit({"a": "x\ny"})
        assert text.endswith("y\n")
        assert not text.endswith("\n\n")


class TestScalars:
    def test_scalar_literals(self):
        assert emit({"n": None, "t": True, "f": False, "i": 42, "x": -1.5}) == (
            "n: null\nt: true\nf: false\ni: 42\nx: -1.5\n"
        )

    def test_plain_and_quoted_strings(self):
        assert emit({"a": "StringType", "b": "Short description", "c": ""}) == (
            'a: StringType\nb: "Short description"\nc: ""\n'
        )

    def test_reserved_words_quoted(self):
        assert emit({"a": "yes", "b": "Off", "c": "null"}) == 'a: "yes"\nb: "Off"\nc: "null"\n'

    def test_numeric_strings_quoted(self):
        assert emit({"a": "42", "b": "3.14", "c": "1e5"}) == 'a: "42"\nb: "3.14"\nc: "1e5"\n'

    def test_block_literal(self):
        assert emit({"description": "line1\nline2"}) == "description: |-\n  line1\n  line2\n"

    def test_block_literal_in_sequence(self):
        assert emit({"notes": ["a\nb"]}) == "notes:\n  - |-\n    a\n    b\n"

    def test_block_literal_in_mapping_under_dash(self):
        assert emit({"v": [{"d": "a\nb"}]}) == "v:\n  - d: |-\n      a\n      b\n"

    def test_block_literal_keeps_blank_lines(self):
        assert emit({"d": "a\n\nb"}) == "d: |-\n  a\n  \n  b\n"

    def test_padded_multiline_string_quoted(self):
        assert emit({"d": " leading space\nvalue "}) == 'd: " leading space\\nvalue "\n'

    def test_control_characters_force_quotes(self):
        assert emit({"d": "a\nb\x1f"}) == 'd: "a\\nb\\u001f"\n'


class TestKeys:
    def test_quoted_keys(self):
        assert emit({"has space": 1, "yes": 2, "5": 3}) == '"has space": 1\n"yes": 2\n"5": 3\n'

    def test_scalar_keys(self):
        assert emit({5: "x", None: 1, True: 2, 1.5: 3}) == "5: x\nnull: 1\ntrue: 2\n1.5: 3\n"

    def test_sequence_key_in_flow_style(self):
        assert emit({("a", "b c"): 1}) == '[a, "b c"]: 1\n'

    def test_tagged_key(self):
        assert emit({Tagged("!ref", "target"): 1}) == "!ref target: 1\n"

    def test_wrapped_scalar_keys(self):
        assert emit({Key(1): "a", Key(1.0): "b", Key(True): "c"}) == "1: a\n1.0: b\ntrue: c\n"

    def test_wrapped_mapping_key_in_flow_style(self):
        assert emit({Key({"y": 1, "x": "a b"}): 1}) == '{y: 1, x: "a b"}: 1\n'


class TestTagged:
    def test_tagged_scalar(self):
        assert emit({"k": Tagged("!secret", "abc")}) == "k: !secret abc\n"

    def test_tagged_mapping_on_next_line(self):
        assert emit({"k": Tagged("!env", {"b": 1})}) == "k: !env\n  b: 1\n"

    def test_tagged_mapping_in_sequence(self):
        assert emit({"k": [Tagged("!t", {"a": 1})]}) == "k:\n  - !t\n    a: 1\n"

    def test_tagged_empty_collection(self):
        assert emit({"k": Tagged("!t", [])}) == "k: !t []\n"

    def test_tagged_block_literal(self):
        assert emit({"k": Tagged("!doc", "a\nb")}) == "k: !doc |-\n  a\n  b\n"

    def test_render_tag_forms(self):
        assert render_tag("!local") == "!local"
        assert render_tag("tag:yaml.org,2002:set") == "!!set"
        assert render_tag("tag:example.com,2000:app/foo") == "!<tag:example.com,2000:app/foo>"


class TestRoots:
    def test_scalar_root(self):
        assert emit("hello") == "hello\n"
        assert emit(5) == "5\n"

    def test_document_end_root_quoted(self):
        assert emit("...") == '"..."\n'
        assert emit("....") == "....\n"

    def test_multiline_string_root(self):
        assert emit("a\nb") == "|-\n  a\n  b\n"

    def test_tagged_root(self):
        assert emit(Tagged("!cfg", {"a": 1})) == "!cfg\na: 1\n"

    def test_sequence_root_is_indented_one_level(self):
        # Sequence roots are rejected before emission; emit() itself indents them.
        assert emit(["a", "b"]) == "  - a\n  - b\n"


class TestEncodingFailures:
    def test_unsupported_type(self):
        with pytest.raises(YamlEncodingError, match="cannot represent") as excinfo:
            emit({"when": datetime.date(2024, 1, 1)})
        assert excinfo.value.code == FormatErrorCode.ENCODING_FAILURE

    def test_lone_surrogate_in_block_literal(self):
        with pytest.raises(YamlEncodingError):
            emit({"d": "a\n\ud800b"})


class TestFormatNumber:
    def test_ints(self):
        assert format_number(0) == "0"
        assert format_number(-42) == "-42"
        assert format_number(10 ** 30) == "1" + "0" * 30

    def test_floats(self):
        assert format_number(1.5) == "1.5"
        assert format_number(1.0) == "1.0"
        assert format_number(-0.0) == "-0.0"
        assert format_number(1e20) == "1.0e+20"
        assert format_number(2.5e-8) == "2.5e-08"

    def test_special_floats(self):
        assert format_number(float("inf")) == ".inf"
        assert format_number(float("-inf")) == "-.inf"
        assert format_number(float("nan")) == ".nan"


class TestKey:
    """Key compares by YAML structure."""

    def test_kinds_distinct(self):
        assert len({Key(1), Key(1.0), Key(True), Key("1")}) == 4

    def test_sequences_compare_by_items(self):
        assert Key([1, ["a"]]) == Key((1, ("a",)))
        assert Key([1]) != Key([True])

    def test_mappings_ignore_entry_order(self):
        assert Key({"x": 1, "y": 2}) == Key({"y": 2, "x": 1})
        assert Key({"x": 1}) != Key({"x": 1.0})

    def test_nan_equals_nan(self):
        assert Key(float("nan")) == Key(float("nan"))

    def test_rewrapping_keeps_value(self):
        assert Key(Key(5)).value == 5

    def test_unsupported_value(self):
        with pytest.raises(TypeError):
            Key(datetime.date(2024, 1, 1))
