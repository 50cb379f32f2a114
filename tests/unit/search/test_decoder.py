"""Unit tests for response decoding."""

import json
import logging

import pytest

from hybridsearch.errors import MalformedResponse
from hybridsearch.search import RankedResult, decode_response, parse_response_body


class TestDecodeResponse:
    """Tests for decode_response."""

    def test_decodes_hits_in_order(self, sample_response):
        results = decode_response(sample_response)

        assert [r.id for r in results] == ["doc1", "doc10", "doc3"]
        assert results[0] == RankedResult(
            id="doc1",
            title="Introduction to Machine Learning",
            content="Machine learning is a subset of artificial intelligence.",
            category="AI/ML",
            relevance=0.91,
        )

    def test_preserves_backend_order_without_resorting(self):
        raw = {"root": {"children": [
            {"fields": {"id": "low"}, "relevance": 0.1},
            {"fields": {"id": "high"}, "relevance": 9.5},
            {"fields": {"id": "low"}, "relevance": 0.1},
        ]}}
        results = decode_response(raw)
        assert [r.id for r in results] == ["low", "high", "low"]

    def test_no_children_is_empty(self, empty_response):
        assert decode_response(empty_response) == []

    def test_empty_children_is_empty(self):
        assert decode_response({"root": {"children": []}}) == []

    def test_missing_relevance_defaults_to_zero(self):
        results = decode_response({"root": {"children": [{"fields": {"id": "doc1"}}]}})
        assert results[0].relevance == 0.0

    def test_relevance_not_bounded(self):
        results = decode_response({"root": {"children": [{"fields": {}, "relevance": 17.25}]}})
        assert results[0].relevance == 17.25

    def test_missing_fields_default_to_empty(self):
        results = decode_response({"root": {"children": [
            {"fields": {"id": "doc1"}, "relevance": 0.5},
            {"relevance": 0.4},
        ]}})

        assert results[0].title == ""
        assert results[0].content == ""
        assert results[0].category == ""
        assert results[1] == RankedResult(id="", title="", content="", category="", relevance=0.4)

    def test_non_string_fields_are_stringified(self):
        results = decode_response({"root": {"children": [{"fields": {"id": 42}}]}})
        assert results[0].id == "42"

    def test_missing_root_raises(self):
        with pytest.raises(MalformedResponse):
            decode_response({"timing": {}})

    def test_non_object_root_raises(self):
        with pytest.raises(MalformedResponse):
            decode_response({"root": []})

    def test_non_object_response_raises(self):
        with pytest.raises(MalformedResponse):
            decode_response([1, 2, 3])

    def test_children_not_list_raises(self):
        with pytest.raises(MalformedResponse):
            decode_response({"root": {"children": {"fields": {}}}})

    def test_non_object_hit_raises(self):
        with pytest.raises(MalformedResponse):
            decode_response({"root": {"children": ["doc1"]}})

    def test_non_numeric_relevance_raises(self):
        with pytest.raises(MalformedResponse):
            decode_response({"root": {"children": [{"fields": {}, "relevance": "high"}]}})

    def test_root_errors_are_logged(self, caplog):
        raw = {"root": {
            "errors": [{"code": 8, "summary": "Search request soft doomed"}],
            "children": [{"fields": {"id": "doc1"}, "relevance": 0.3}],
        }}
        with caplog.at_level(logging.WARNING, logger="hybridsearch.search.decoder"):
            results = decode_response(raw)

        assert len(results) == 1
        assert "soft doomed" in caplog.text


class TestParseResponseBody:
    """Tests for parse_response_body."""

    def test_parses_json_text(self, sample_response):
        results = parse_response_body(json.dumps(sample_response))
        assert len(results) == 3

    def test_invalid_json_raises(self):
        with pytest.raises(MalformedResponse):
            parse_response_body("<html>502 Bad Gateway</html>")
