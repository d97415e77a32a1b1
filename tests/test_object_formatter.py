"""
Unit Tests — Object Formatter
==============================
Validates the brace-delimited dictionary dump used for legends, screenshots
and generic error descriptions. Every assertion uses exact string equality.
"""
import pytest

from failreport.utils.object_formatter import format_dictionary


class TestFlatDictionaries:

    def test_single_string_value(self):
        assert format_dictionary({"a": "b"}, indent=2) == '{\n  "a" : "b"\n}'

    def test_numbers_are_bare(self):
        assert format_dictionary({"Line": 42}, indent=2) == '{\n  "Line" : 42\n}'

    def test_insertion_order_kept_without_key_order(self):
        out = format_dictionary({"z": "1", "a": "2"}, indent=2)
        assert out == '{\n  "z" : "1",\n  "a" : "2"\n}'

    def test_strings_not_escaped(self):
        out = format_dictionary({"h": 'line1\n"quoted"'}, indent=2)
        assert out == '{\n  "h" : "line1\n"quoted""\n}'

    def test_custom_indent(self):
        assert format_dictionary({"a": "b"}, indent=4) == '{\n    "a" : "b"\n}'

    def test_negative_indent_raises(self):
        with pytest.raises(ValueError, match="indent must be >= 0"):
            format_dictionary({"a": "b"}, indent=-1)


class TestEmptyHandling:

    def test_none_dictionary(self):
        assert format_dictionary(None) == "{}"

    def test_empty_dictionary(self):
        assert format_dictionary({}) == "{}"

    def test_hide_empty_drops_none_and_blank(self):
        out = format_dictionary({"a": None, "b": "", "c": [], "d": "x"}, indent=2, hide_empty=True)
        assert out == '{\n  "d" : "x"\n}'

    def test_hide_empty_all_hidden(self):
        assert format_dictionary({"a": None}, hide_empty=True) == "{}"

    def test_without_hide_empty_none_is_null(self):
        assert format_dictionary({"a": None}, indent=2) == '{\n  "a" : null\n}'

    def test_zero_is_not_empty(self):
        assert format_dictionary({"Code": 0}, indent=2, hide_empty=True) == '{\n  "Code" : 0\n}'


class TestKeyOrder:

    def test_key_order_first_then_sorted_rest(self):
        out = format_dictionary({"c": "3", "b": "2", "a": "1"}, indent=2, key_order=["c"])
        assert out == '{\n  "c" : "3",\n  "a" : "1",\n  "b" : "2"\n}'

    def test_key_order_skips_missing_keys(self):
        out = format_dictionary({"b": "2"}, indent=2, key_order=["a", "b"])
        assert out == '{\n  "b" : "2"\n}'


class TestNesting:

    def test_list_value(self):
        out = format_dictionary({"frames": ["f1", "f2"]}, indent=2)
        assert out == '{\n  "frames" : [\n    "f1",\n    "f2"\n  ]\n}'

    def test_nested_dictionary(self):
        out = format_dictionary({"outer": {"inner": "v"}}, indent=2)
        assert out == '{\n  "outer" : {\n    "inner" : "v"\n  }\n}'

    def test_hide_empty_applies_to_nested(self):
        out = format_dictionary({"outer": {"inner": None, "k": "v"}}, indent=2, hide_empty=True)
        assert out == '{\n  "outer" : {\n    "k" : "v"\n  }\n}'

    def test_deterministic(self):
        data = {"a": ["x", {"b": 1}], "c": "d"}
        assert format_dictionary(data) == format_dictionary(data)
