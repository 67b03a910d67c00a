"""
=============================================================================
MESSAGE FACTORIES
=============================================================================

The context layer and the drivers never construct Request or Response
directly; they go through a factory owned by the client.

    HTTPClient ──create_request()──► RequestFactory ──► Request
    Driver ─────create_response()──► ResponseFactory ─► Response

Swapping the factory (HTTPClient.set_request_factory()) is how callers
stamp default headers onto every request or use their own message
subclasses.

=============================================================================
"""

from abc import ABC, abstractmethod
from typing import Optional, Union

from .request import Request
from .response import Response
from .uri import URI


class RequestFactory(ABC):
    @abstractmethod
    def create_request(self, method: str, uri: Union[URI, str]) -> Request:
        """Create a request for ``method`` and ``uri``, with a Host header."""


class ResponseFactory(ABC):
    @abstractmethod
    def create_response(self, code: int = 200, reason_phrase: Optional[str] = None) -> Response:
        """Create an empty response with the given status."""


class MessageFactory(RequestFactory, ResponseFactory):
    """Default factory for both requests and responses."""

    def create_request(self, method: str, uri: Union[URI, str]) -> Request:
        return Request(method).with_uri(uri)

    def create_response(self, code: int = 200, reason_phrase: Optional[str] = None) -> Response:
        return Response(status_code=code, reason_phrase=reason_phrase)
