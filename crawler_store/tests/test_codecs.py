"""
Tests for the record codecs
"""

import json

import pytest
import yaml

from crawler_core.errors import UnsupportedFormatError
from crawler_store import codecs
from crawler_store.codecs import RecordFormat, FILEMASK


class TestFormatDispatch:
    """Format is chosen from the file extension only"""

    @pytest.mark.parametrize("filename, expected", [
        ("record.yml", RecordFormat.YAML),
        ("record.yaml", RecordFormat.YAML),
        ("record.json", RecordFormat.JSON),
        ("dir/sub/record.json", RecordFormat.JSON),
    ])
    def test_format_for(self, filename, expected):
        assert codecs.format_for(filename) is expected

    def test_unknown_extension_raises(self):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            codecs.decode("record.txt", "a: 1")
        assert exc_info.value.filename == "record.txt"

    def test_no_extension_raises(self):
        with pytest.raises(UnsupportedFormatError):
            codecs.format_for("record")

    def test_filemask_matches_allowed_extensions(self):
        assert FILEMASK.search("a.yml")
        assert FILEMASK.search("a.yaml")
        assert FILEMASK.search("a.json")
        assert not FILEMASK.search("a.txt")
        assert not FILEMASK.search("a.yml.tmp")


class TestDecode:
    """Decoding YAML and JSON contents"""

    def test_decode_yaml(self):
        assert codecs.decode("r.yml", "title: Test\nitems:\n  - 1\n  - 2\n") == {"title": "Test", "items": [1, 2]}

    def test_decode_json(self):
        assert codecs.decode("r.json", '{"title": "Test", "items": [1, 2]}') == {"title": "Test", "items": [1, 2]}

    def test_decode_bytes(self):
        assert codecs.decode("r.json", b'{"a": "\xc3\xa9"}') == {"a": "é"}
        assert codecs.decode("r.yaml", "a: é".encode("utf-8")) == {"a": "é"}

    def test_decode_invalid_json_raises(self):
        with pytest.raises(json.JSONDecodeError):
            codecs.decode("r.json", "{not json")


class TestEncode:
    """Encoding always produces YAML"""

    def test_encode_is_yaml(self):
        value = {"title": "Test", "nested": {"a": [1, 2, {"b": None}]}}
        text = codecs.encode(value)

        assert yaml.safe_load(text) == value
        assert not text.lstrip().startswith("{")

    def test_encode_keeps_key_order_and_unicode(self):
        text = codecs.encode({"z": 1, "a": "café"})

        assert text.index("z:") < text.index("a:")
        assert "café" in text
