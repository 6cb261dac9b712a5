"""Tests for helper functions and the diagnostics collector."""

import pytest

from graphql_workbook.engine.diagnostics import DiagnosticCode, Diagnostics, DiagnosticSeverity
from graphql_workbook.utils.helpers import capital_case, is_valid_url, merge_dicts, split_words


class TestCapitalCase:
    """Tests for capital_case."""

    @pytest.mark.parametrize("value,expected", [
        ("movie", "Movie"),
        ("releaseDate", "Release Date"),
        ("release_date", "Release Date"),
        ("release-date", "Release Date"),
        ("HTTPServer", "Http Server"),
        ("userID", "User Id"),
        ("version2Name", "Version2 Name"),
        ("__typename", "Typename"),
    ])
    def test_capital_case(self, value, expected):
        assert capital_case(value) == expected

    def test_split_words(self):
        assert split_words("firstName_last-name") == ["first", "Name", "last", "name"]


class TestIsValidUrl:
    """Tests for is_valid_url."""

    @pytest.mark.parametrize("value", [
        "https://swapi-graphql.netlify.app/.netlify/functions/index",
        "http://localhost:4000/graphql",
        "  https://example.com/graphql  ",
    ])
    def test_valid(self, value):
        assert is_valid_url(value)

    @pytest.mark.parametrize("value", [
        "type Query { a: String }",
        "schema.graphql",
        "/graphql",
        "",
        "http://",
        "ftp://files.example.com/schema",
        "mailto://someone@example.com",
    ])
    def test_invalid(self, value):
        assert not is_valid_url(value)


class TestMergeDicts:
    """Tests for merge_dicts."""

    def test_deep_merge(self):
        base = {"a": 1, "nested": {"x": 1, "y": 2}}
        override = {"b": 2, "nested": {"y": 3}}

        assert merge_dicts(base, override) == {"a": 1, "b": 2, "nested": {"x": 1, "y": 3}}
        assert base == {"a": 1, "nested": {"x": 1, "y": 2}}


class TestDiagnostics:
    """Tests for the Diagnostics collector."""

    def test_add_and_count(self):
        diagnostics = Diagnostics()
        diagnostics.add(DiagnosticSeverity.WARNING, DiagnosticCode.UNSUPPORTED_FIELD_KIND, "skipped", path="A.b")
        diagnostics.add(DiagnosticSeverity.INFO, DiagnosticCode.ID_FIELD_ADDED, "added", path="A")

        assert len(diagnostics) == 2
        assert diagnostics.warning_count == 1
        assert diagnostics.info_count == 1
        assert [d.path for d in diagnostics.by_code(DiagnosticCode.ID_FIELD_ADDED)] == ["A"]

    def test_merge_and_to_dict(self):
        first = Diagnostics()
        first.add(DiagnosticSeverity.WARNING, DiagnosticCode.DANGLING_REFERENCE, "dropped", missing=["X"])
        second = Diagnostics()

        merged = first.merge(second)
        data = merged.to_dict()

        assert data["warning_count"] == 1
        assert data["items"][0]["code"] == "dangling_reference"
        assert data["items"][0]["context"] == {"missing": ["X"]}
