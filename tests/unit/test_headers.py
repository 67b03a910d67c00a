"""
Unit tests for the Headers collection.
"""

import pytest

from httpclient.exceptions import InvalidHeaderError
from httpclient.http.headers import Headers


class TestLookup:
    """Tests for case-insensitive lookup."""

    def test_get_is_case_insensitive(self):
        """Test lookups ignore name case."""
        headers = Headers({"Content-Type": "text/plain"})

        assert headers.get("content-type") == ["text/plain"]
        assert headers.get("CONTENT-TYPE") == ["text/plain"]
        assert headers.has("Content-type")
        assert "content-TYPE" in headers

    def test_original_case_preserved(self):
        """Test the name is stored as first given."""
        headers = Headers({"X-Request-ID": "abc"})
        assert list(headers) == ["X-Request-ID"]
        assert headers.to_dict() == {"X-Request-ID": ["abc"]}

    def test_missing_header(self):
        """Test absent headers give empty results."""
        headers = Headers()

        assert headers.get("Accept") == []
        assert headers.get_line("Accept") == ""
        assert not headers.has("Accept")

    def test_get_line_joins_values(self):
        """Test multiple values are joined with a comma."""
        headers = Headers({"Accept": ["text/html", "application/json"]})
        assert headers.get_line("accept") == "text/html, application/json"

    def test_get_returns_copy(self):
        """Test callers cannot mutate stored values."""
        headers = Headers({"Accept": "text/html"})
        headers.get("Accept").append("oops")
        assert headers.get("Accept") == ["text/html"]

    def test_pairs_with_duplicates_merge(self):
        """Test duplicate names from a pair list are merged."""
        headers = Headers([("Set-Cookie", "a=1"), ("set-cookie", "b=2")])
        assert headers.to_dict() == {"Set-Cookie": ["a=1", "b=2"]}


class TestModifiers:
    """Tests for copy-on-write modifiers."""

    def test_with_header_replaces(self):
        """Test with_header replaces all previous values."""
        headers = Headers({"Accept": ["a", "b"]}).with_header("accept", "c")
        assert headers.get("Accept") == ["c"]

    def test_with_header_new_casing_wins(self):
        """Test replacing a header takes the new name casing."""
        headers = Headers({"ACCEPT": "a"}).with_header("Accept", "b")
        assert list(headers) == ["Accept"]

    def test_with_added_header_appends(self):
        """Test appending keeps old values."""
        headers = Headers({"Accept": "a"}).with_added_header("accept", "b")
        assert headers.get("Accept") == ["a", "b"]

    def test_with_added_header_never_dedupes(self):
        """Test identical values are appended again."""
        headers = Headers({"Accept": "a"}).with_added_header("Accept", "a")
        assert headers.get("Accept") == ["a", "a"]

    def test_without_header(self):
        """Test removal, and that removing an absent header is a no-op."""
        headers = Headers({"Accept": "a", "X-Other": "b"})

        assert not headers.without_header("accept").has("Accept")
        assert headers.without_header("Missing") == headers

    def test_original_untouched(self):
        """Test modifiers never change the original."""
        original = Headers({"Accept": "a"})
        original.with_header("Accept", "b")
        original.with_added_header("Accept", "c")
        original.without_header("Accept")

        assert original.get("Accept") == ["a"]

    def test_with_header_first(self):
        """Test a header can be moved to the front."""
        headers = Headers({"Accept": "a", "Host": "old"}).with_header_first("Host", "new")
        assert list(headers) == ["Host", "Accept"]
        assert headers.get("Host") == ["new"]

    def test_multi_items(self):
        """Test flattening into one pair per value."""
        headers = Headers({"Accept": ["a", "b"], "Host": "example.com"})
        assert headers.multi_items() == [
            ("Accept", "a"),
            ("Accept", "b"),
            ("Host", "example.com"),
        ]


class TestValidation:
    """Tests for header name and value validation."""

    def test_numbers_are_converted(self):
        """Test numeric values become strings."""
        headers = Headers({"Content-Length": 42, "X-Ratio": 0.5})
        assert headers.get("Content-Length") == ["42"]
        assert headers.get("X-Ratio") == ["0.5"]

    def test_values_are_trimmed(self):
        """Test surrounding spaces and tabs are stripped."""
        assert Headers({"Accept": " \ttext/html "}).get("Accept") == ["text/html"]

    @pytest.mark.parametrize("name", ["", "Bad Name", "X:Colon", "Ümlaut"])
    def test_invalid_names(self, name):
        """Test non-token names are rejected."""
        with pytest.raises(InvalidHeaderError):
            Headers().with_header(name, "value")

    @pytest.mark.parametrize("value", ["a\r\nInjected: yes", "a\nb", "a\0b"])
    def test_injection_rejected(self, value):
        """Test CR, LF and NUL are rejected in values."""
        with pytest.raises(InvalidHeaderError):
            Headers().with_header("X-Test", value)

    @pytest.mark.parametrize("value", [None, True, [], {"a": 1}])
    def test_invalid_value_types(self, value):
        """Test unsupported value types are rejected."""
        with pytest.raises(InvalidHeaderError):
            Headers().with_header("X-Test", value)

    def test_invalid_header_error_is_value_error(self):
        """Test callers can catch ValueError."""
        with pytest.raises(ValueError):
            Headers({"Bad Name": "x"})
