"""
Unit tests for status code classification.
"""

import pytest

from httpclient.http.status_codes import (
    HTTPStatus,
    get_error_codes,
    get_reason_phrase,
    is_client_error,
    is_error,
    is_informational,
    is_redirect,
    is_server_error,
    is_success,
    is_valid,
)


class TestClassifiers:
    """Tests for the module-level classifier functions."""

    @pytest.mark.parametrize("code,expected", [
        (100, "informational"),
        (204, "success"),
        (299, "success"),
        (301, "redirect"),
        (404, "client_error"),
        (499, "client_error"),
        (503, "server_error"),
        (599, "server_error"),
    ])
    def test_classes(self, code, expected):
        """Test each code lands in exactly one class."""
        results = {
            "informational": is_informational(code),
            "success": is_success(code),
            "redirect": is_redirect(code),
            "client_error": is_client_error(code),
            "server_error": is_server_error(code),
        }
        assert [name for name, hit in results.items() if hit] == [expected]

    def test_is_error_threshold(self):
        """Test that 400 and above are errors, below is not."""
        assert not is_error(399)
        assert is_error(400)
        assert is_error(599)

    def test_is_error_accepts_unregistered_codes(self):
        """Test that codes outside the registry are still classified."""
        assert is_error(9999)
        assert is_error(499)
        assert not is_error(299)

    def test_is_valid(self):
        """Test registered vs unregistered codes."""
        assert is_valid(200)
        assert is_valid(418)
        assert not is_valid(299)
        assert not is_valid(599)


class TestReasonPhrases:
    """Tests for reason phrase lookup."""

    def test_registered_phrase(self):
        """Test lookup of registered codes."""
        assert get_reason_phrase(200) == "OK"
        assert get_reason_phrase(404) == "Not Found"
        assert get_reason_phrase(418) == "I'm a teapot"

    def test_unregistered_phrase_is_none(self):
        """Test that unregistered codes have no phrase."""
        assert get_reason_phrase(299) is None

    def test_enum_phrase(self):
        """Test the enum property matches the function."""
        assert HTTPStatus.NOT_FOUND.phrase == "Not Found"
        assert HTTPStatus.NOT_FOUND == 404

    def test_enum_classifier_properties(self):
        """Test enum members expose the classifiers."""
        assert HTTPStatus.OK.is_success
        assert HTTPStatus.FOUND.is_redirect
        assert HTTPStatus.NOT_FOUND.is_client_error
        assert HTTPStatus.BAD_GATEWAY.is_server_error
        assert HTTPStatus.BAD_GATEWAY.is_error
        assert not HTTPStatus.OK.is_error


class TestErrorCodes:
    """Tests for get_error_codes()."""

    def test_contains_only_errors(self):
        """Test that every returned code is >= 400."""
        codes = get_error_codes()
        assert codes
        assert all(code >= 400 for code in codes)

    def test_includes_phrases(self):
        """Test that codes map to their phrases."""
        codes = get_error_codes()
        assert codes[404] == "Not Found"
        assert codes[511] == "Network Authentication Required"
        assert 200 not in codes
