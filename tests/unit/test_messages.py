"""
Unit tests for Request, Response and the message factory.
"""

import pytest

from httpclient.exceptions import InvalidArgumentError, InvalidMethodError
from httpclient.http import MessageFactory, Request, Response, Stream, URI


class TestRequest:
    """Tests for the Request message."""

    def test_factory_sets_host(self, factory):
        """Test created requests carry a Host header."""
        request = factory.create_request("GET", "https://api.example.com/users")

        assert request.method == "GET"
        assert request.uri.host == "api.example.com"
        assert request.get_header("Host") == ["api.example.com"]
        assert request.protocol_version == "1.1"

    def test_host_includes_non_default_port(self, factory):
        """Test the Host header carries a non-default port."""
        request = factory.create_request("GET", "http://localhost:8080/")
        assert request.get_header_line("Host") == "localhost:8080"

    @pytest.mark.parametrize("method", ["", "GE T", "GET\r\n", None])
    def test_invalid_method(self, method):
        """Test non-token methods are rejected at construction."""
        with pytest.raises(InvalidMethodError):
            Request(method)

    def test_method_case_preserved(self):
        """Test extension methods are kept as given."""
        assert Request("propfind").method == "propfind"

    def test_with_method_validates(self, sample_request):
        """Test with_method re-validates the method."""
        with pytest.raises(InvalidMethodError):
            sample_request.with_method("")

    def test_with_uri_updates_host(self, sample_request):
        """Test a new URI replaces the Host header and puts it first."""
        request = sample_request.with_uri("https://other.example.com/")

        assert request.get_header_line("Host") == "other.example.com"
        assert list(request.headers)[0] == "Host"

    def test_with_uri_preserve_host(self, sample_request):
        """Test preserve_host keeps an existing Host header."""
        request = sample_request.with_uri("https://other.example.com/", preserve_host=True)

        assert request.get_header_line("Host") == "api.example.com"
        assert request.uri.host == "other.example.com"

    def test_with_uri_preserve_host_without_host_header(self, sample_request):
        """Test preserve_host still sets Host when none exists."""
        request = sample_request.without_header("Host").with_uri(
            "https://other.example.com/", preserve_host=True
        )
        assert request.get_header_line("Host") == "other.example.com"

    def test_with_uri_without_host_keeps_header(self, sample_request):
        """Test a host-less URI leaves the Host header alone."""
        request = sample_request.with_uri(URI(path="/relative"))
        assert request.get_header_line("Host") == "api.example.com"

    def test_immutability(self, sample_request):
        """Test with_*() methods return new requests."""
        changed = sample_request.with_header("X-Test", "1").with_method("POST")

        assert not sample_request.has_header("X-Test")
        assert sample_request.method == "GET"
        assert changed.method == "POST"

    def test_request_target(self, sample_request):
        """Test the request-line target."""
        assert sample_request.request_target == "/users?page=1&limit=10"

    def test_with_body(self, sample_request):
        """Test a body stream can be attached."""
        request = sample_request.with_body(Stream.create("data"))
        assert request.body.to_bytes() == b"data"
        assert sample_request.body.get_size() == 0

    def test_protocol_version(self, sample_request):
        """Test changing and validating the protocol version."""
        assert sample_request.with_protocol_version("1.0").protocol_version == "1.0"
        with pytest.raises(InvalidArgumentError):
            sample_request.with_protocol_version("9.9")


class TestResponse:
    """Tests for the Response message."""

    def test_reason_phrase_default(self):
        """Test the phrase is filled from the status table."""
        assert Response(404).reason_phrase == "Not Found"

    def test_reason_phrase_unknown_code(self):
        """Test unregistered codes get an empty phrase."""
        assert Response(599).reason_phrase == ""

    def test_explicit_reason_phrase(self):
        """Test a given phrase is kept."""
        assert Response(200, "Fine").reason_phrase == "Fine"

    def test_no_status_validation(self):
        """Test any integer status is accepted."""
        assert Response(9999).status_code == 9999

    def test_status_line(self):
        """Test status line formatting."""
        assert Response(200).status_line == "HTTP/1.1 200 OK"
        assert Response(599).status_line == "HTTP/1.1 599"

    def test_with_status(self):
        """Test changing the status refreshes the default phrase."""
        response = Response(200).with_status(201)
        assert response.status_code == 201
        assert response.reason_phrase == "Created"

    def test_is_error(self):
        """Test the error property."""
        assert Response(500).is_error
        assert not Response(302).is_error


class TestMessageFactory:
    """Tests for MessageFactory."""

    def test_create_response(self):
        """Test response defaults."""
        response = MessageFactory().create_response()
        assert response.status_code == 200
        assert response.reason_phrase == "OK"

    def test_create_response_with_phrase(self):
        """Test an explicit phrase."""
        response = MessageFactory().create_response(404, "Nope")
        assert response.reason_phrase == "Nope"

    def test_create_request_accepts_uri_object(self):
        """Test URI objects are accepted as well as strings."""
        request = MessageFactory().create_request("GET", URI.parse("https://example.com/x"))
        assert str(request.uri) == "https://example.com/x"
