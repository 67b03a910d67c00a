"""
=============================================================================
SERIALIZER INTERFACE
=============================================================================

A serializer converts between Python values and message bodies for one
media type.

    apply():    value  ──encode──►  bytes in request.body
    extract():  bytes in response.body  ──decode──►  value

    ┌──────────────────────────────────────────────────────────────────────┐
    │  RequestContext.run()                                                │
    │      pending body {"name": "alice"}                                  │
    │      Content-Type: application/json                                  │
    │            │                                                         │
    │            ▼                                                         │
    │      registry.resolve("application/json") → JsonSerializer           │
    │            │                                                         │
    │            ▼                                                         │
    │      serializer.apply(request, body) → request with body stream      │
    └──────────────────────────────────────────────────────────────────────┘

Serializers hold configuration only. The same instance is shared by every
context of a client, so apply() and extract() must not keep per-call state.

=============================================================================
"""

from abc import ABC, abstractmethod
from typing import Any

from ..http.request import Request
from ..http.response import Response
from ..http.stream import Stream


class Serializer(ABC):
    """Base class for body codecs."""

    @abstractmethod
    def apply(self, request: Request, body: Any) -> Request:
        """
        Encode ``body`` and return a copy of ``request`` carrying it.

        Raises:
            SerializationError: If the value cannot be encoded.
            InvalidArgumentError: If the value has an unsupported shape.
        """

    @abstractmethod
    def extract(self, response: Response) -> Any:
        """
        Decode the body of ``response``.

        Raises:
            SerializationError: If the body cannot be decoded.
        """

    @staticmethod
    def read_body(response: Response) -> bytes:
        """Read the complete response body, whatever the stream position."""
        return response.body.to_bytes()

    @staticmethod
    def with_encoded_body(request: Request, encoded: bytes) -> Request:
        return request.with_body(Stream.create(encoded))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
