"""
Read-only wrapper around a received Response.

get_parsed_body() decodes the body with the serializer for the response's
Content-Type (plain text when missing or unregistered). The decoded value
is cached, so the serializer runs at most once per context, even when the
result is falsy ("" or {}).
"""

from typing import TYPE_CHECKING, Any

from ..http.response import Response
from ..http.stream import Stream
from .base import MessageContext

if TYPE_CHECKING:
    from ..client import HTTPClient


class ResponseContext(MessageContext):
    def __init__(self, client: "HTTPClient", response: Response):
        super().__init__(client)
        self._response = response
        self._parsed_body: Any = None
        self._is_parsed = False

    def _get_message(self) -> Response:
        return self._response

    def get_response(self) -> Response:
        return self._response

    def get_status_code(self) -> int:
        return self._response.status_code

    def get_reason_phrase(self) -> str:
        return self._response.reason_phrase

    def get_protocol_version(self) -> str:
        return self._response.protocol_version

    def get_body(self) -> Stream:
        """The raw body stream, undecoded."""
        return self._response.body

    def get_parsed_body(self) -> Any:
        """
        Decode the body on first call and return the cached value after.

        Raises:
            SerializationError: If the body cannot be decoded. Nothing is
                cached in that case.
        """
        if not self._is_parsed:
            self._parsed_body = self._resolve_serializer().extract(self._response)
            self._is_parsed = True
        return self._parsed_body

    def __repr__(self) -> str:
        return f"ResponseContext({self._response.status_line!r})"
