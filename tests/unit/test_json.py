"""Tests for JSON helpers."""

import pytest

from core.json import JSONParseError, dumps_compact, dumps_pretty, extract_json, js_string


@pytest.mark.unit
class TestExtract:
    """Pulling documents out of free text."""

    def test_plain(self):
        assert extract_json('{"a": 1}') == {"a": 1}

    def test_markdown_fence(self):
        text = 'Sure:\n```json\n{"nodes": []}\n```\nDone.'
        assert extract_json(text) == {"nodes": []}

    def test_surrounding_prose(self):
        assert extract_json('result -> {"a": {"b": 2}} <- end') == {"a": {"b": 2}}

    def test_repair(self):
        assert extract_json('{"a": 1, "b": [1, 2,],}') == {"a": 1, "b": [1, 2]}

    def test_no_repair(self):
        with pytest.raises(JSONParseError):
            extract_json('{"a": 1,}', repair=False)

    def test_no_object(self):
        with pytest.raises(JSONParseError):
            extract_json("[1, 2, 3]")


@pytest.mark.unit
class TestEncode:
    """Encoding helpers."""

    def test_compact_sorted(self):
        assert dumps_compact({"b": 1, "a": 2}, sort_keys=True) == '{"a":2,"b":1}'
        assert dumps_compact({"b": 1, "a": 2}) == '{"b":1,"a":2}'

    def test_pretty_keeps_order_and_unicode(self):
        assert dumps_pretty({"b": "é", "a": 1}) == '{\n  "b": "é",\n  "a": 1\n}'

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("hello", "'hello'"),
            ("it's", "'it\\'s'"),
            ('say "hi"', "'say \"hi\"'"),
            ("a\nb", "'a\\nb'"),
            ("back\\slash", "'back\\\\slash'"),
        ],
    )
    def test_js_string(self, value, expected):
        assert js_string(value) == expected
