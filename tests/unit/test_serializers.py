"""
Unit tests for body serializers and the serializer registry.
"""

import logging
from dataclasses import dataclass

import pytest

from httpclient.exceptions import InvalidArgumentError, SerializationError
from httpclient.http import Request, Response, Stream
from httpclient.serializers import (
    JsonSerializer,
    PlainTextSerializer,
    SerializerRegistry,
    UrlEncodedSerializer,
)


def make_response(body: bytes, content_type: str = "") -> Response:
    response = Response(200).with_body(Stream.create(body))
    if content_type:
        response = response.with_header("Content-Type", content_type)
    return response


class TestJsonSerializer:
    """Tests for the application/json codec."""

    def test_apply_compact(self):
        """Test bodies are encoded without whitespace."""
        request = JsonSerializer().apply(Request("POST"), {"name": "alice", "tags": ["a"]})
        assert request.body.to_bytes() == b'{"name":"alice","tags":["a"]}'

    def test_apply_keeps_unicode(self):
        """Test non-ASCII text is written as UTF-8, not escaped."""
        request = JsonSerializer().apply(Request("POST"), {"name": "zoë"})
        assert request.body.to_bytes() == '{"name":"zoë"}'.encode("utf-8")

    def test_apply_does_not_modify_request(self):
        """Test the original request keeps its empty body."""
        original = Request("POST")
        JsonSerializer().apply(original, [1])
        assert original.body.get_size() == 0

    @pytest.mark.parametrize("body", [float("nan"), float("inf"), {1, 2}, object()])
    def test_apply_rejects_unencodable(self, body):
        """Test NaN, Infinity and non-JSON types raise SerializationError."""
        with pytest.raises(SerializationError):
            JsonSerializer().apply(Request("POST"), body)

    def test_apply_rejects_circular(self):
        """Test circular structures raise SerializationError."""
        body = {}
        body["self"] = body
        with pytest.raises(SerializationError):
            JsonSerializer().apply(Request("POST"), body)

    def test_encode_options(self):
        """Test extra json.dumps options are used."""
        serializer = JsonSerializer(encode_options={"sort_keys": True})
        request = serializer.apply(Request("POST"), {"b": 1, "a": 2})
        assert request.body.to_bytes() == b'{"a":2,"b":1}'

    def test_extract(self):
        """Test JSON bodies are decoded."""
        response = make_response(b'{"ok": true, "items": [1, 2]}', "application/json")
        assert JsonSerializer().extract(response) == {"ok": True, "items": [1, 2]}

    def test_extract_ignores_cursor(self):
        """Test the whole body is decoded even after a read."""
        response = make_response(b'{"ok": true}')
        response.body.get_contents()
        assert JsonSerializer().extract(response) == {"ok": True}

    def test_extract_charset(self):
        """Test the Content-Type charset is used for decoding."""
        body = '"café"'.encode("latin-1")
        response = make_response(body, "application/json; charset=ISO-8859-1")
        assert JsonSerializer().extract(response) == "café"

    @pytest.mark.parametrize("body", [b"", b"{not json", b"\xff\xfe"])
    def test_extract_invalid(self, body):
        """Test malformed bodies raise SerializationError."""
        with pytest.raises(SerializationError):
            JsonSerializer().extract(make_response(body))


class TestPlainTextSerializer:
    """Tests for the text/plain codec."""

    def test_apply_stringifies(self):
        """Test any value is written via str()."""
        serializer = PlainTextSerializer()
        assert serializer.apply(Request("POST"), "héllo").body.to_bytes() == "héllo".encode("utf-8")
        assert serializer.apply(Request("POST"), 42).body.to_bytes() == b"42"

    def test_extract_unmodified(self):
        """Test the body text comes back untouched."""
        response = make_response(b"  line one\nline two \n")
        assert PlainTextSerializer().extract(response) == "  line one\nline two \n"

    def test_extract_empty(self):
        """Test an empty body decodes to an empty string."""
        assert PlainTextSerializer().extract(make_response(b"")) == ""

    def test_extract_charset(self):
        """Test the charset parameter is honoured."""
        response = make_response("naïve".encode("latin-1"), "text/plain; charset=latin-1")
        assert PlainTextSerializer().extract(response) == "naïve"

    def test_extract_invalid_utf8(self):
        """Test undecodable bytes raise SerializationError."""
        with pytest.raises(SerializationError):
            PlainTextSerializer().extract(make_response(b"\xff\xfe\xfa"))

    def test_extract_unknown_charset(self):
        """Test an unknown charset raises SerializationError."""
        response = make_response(b"abc", "text/plain; charset=klingon")
        with pytest.raises(SerializationError):
            PlainTextSerializer().extract(response)


class TestUrlEncodedSerializer:
    """Tests for the application/x-www-form-urlencoded codec."""

    def test_apply_mapping(self):
        """Test a mapping is form encoded."""
        request = UrlEncodedSerializer().apply(Request("POST"), {"a": "b"})
        assert request.body.to_bytes() == b"a=b"

    def test_apply_nested_and_spaces(self):
        """Test nested values and spaces use the query encoding rules."""
        request = UrlEncodedSerializer().apply(Request("POST"), {"q": "a b", "ids": [1]})
        assert request.body.to_bytes() == b"q=a+b&ids%5B0%5D=1"

    def test_apply_dataclass(self):
        """Test dataclass instances are accepted."""
        @dataclass
        class Login:
            user: str
            remember: bool

        request = UrlEncodedSerializer().apply(Request("POST"), Login("alice", True))
        assert request.body.to_bytes() == b"user=alice&remember=1"

    @pytest.mark.parametrize("body", ["a=b", 42, 1.5, None, b"a=b"])
    def test_apply_rejects_scalars(self, body):
        """Test scalars raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            UrlEncodedSerializer().apply(Request("POST"), body)

    def test_extract(self):
        """Test form bodies are decoded into a dict."""
        response = make_response(b"a=b&n=1&tags[]=x&tags[]=y")
        assert UrlEncodedSerializer().extract(response) == {
            "a": "b",
            "n": "1",
            "tags": ["x", "y"],
        }

    def test_extract_non_ascii(self):
        """Test raw non-ASCII bytes raise SerializationError."""
        with pytest.raises(SerializationError):
            UrlEncodedSerializer().extract(make_response("a=é".encode("utf-8")))


class TestSerializerRegistry:
    """Tests for the media type lookup table."""

    def test_register_and_resolve(self):
        """Test an exact media type lookup."""
        registry = SerializerRegistry()
        serializer = JsonSerializer()
        registry.register("application/json", serializer)

        assert registry.resolve("application/json") is serializer
        assert "application/json" in registry
        assert len(registry) == 1

    def test_resolve_missing(self):
        """Test unknown media types resolve to None."""
        assert SerializerRegistry().resolve("application/xml") is None

    def test_exact_match_only(self):
        """Test there is no case folding or parameter stripping."""
        registry = SerializerRegistry()
        registry.register("application/json", JsonSerializer())

        assert registry.resolve("Application/JSON") is None
        assert registry.resolve("application/json; charset=utf-8") is None

    def test_replace_logs(self, caplog):
        """Test re-registering replaces and logs at debug level."""
        registry = SerializerRegistry()
        registry.register("text/plain", PlainTextSerializer())
        replacement = PlainTextSerializer()

        with caplog.at_level(logging.DEBUG, logger="httpclient.serializers.registry"):
            registry.register("text/plain", replacement)

        assert registry.resolve("text/plain") is replacement
        assert "Replacing serializer for text/plain" in caplog.text

    def test_media_types(self):
        """Test registration order is kept."""
        registry = SerializerRegistry()
        registry.register("b/b", PlainTextSerializer())
        registry.register("a/a", PlainTextSerializer())
        assert registry.media_types() == ["b/b", "a/a"]
