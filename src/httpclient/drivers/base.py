"""
=============================================================================
TRANSPORT DRIVERS
=============================================================================

A driver moves a Request over the network and hands back a Response. It
knows nothing about serializers or contexts.

    ┌─────────────┐  send_request(Request)  ┌─────────────┐    ┌─────────┐
    │ HTTPClient  │ ──────────────────────► │   Driver    │ ─► │ network │
    │             │ ◄────────────────────── │             │ ◄─ │         │
    └─────────────┘        Response         └─────────────┘    └─────────┘

=============================================================================
THE DRIVER CONTRACT
=============================================================================

1. Every response that arrives is returned, whatever its status. A 404 or
   a 503 is a successful send; HTTPClient decides what is an error.

2. When no response arrives, the library's exception is translated:

    ┌────────────────────────────────────┬───────────────────────────────┐
    │ Failure                            │ Raised                        │
    ├────────────────────────────────────┼───────────────────────────────┤
    │ host name does not resolve         │ UnresolvableHostError         │
    │ refused / timed out / cut short /  │ ConnectionFailedError         │
    │ too many redirects                 │                               │
    │ TLS handshake or certificate       │ SslCertificateError           │
    │ anything else (bad URL, ...)       │ DriverError                   │
    └────────────────────────────────────┴───────────────────────────────┘

   The original exception is chained (``raise ... from exc``) and kept on
   the error's ``previous`` attribute.

3. Responses are built through the response factory the client hands over
   with set_response_factory().

4. Response bodies are handed over decoded (gzip, deflate, ... undone by
   the library). Content-Encoding is removed and Content-Length matches
   the decoded body, so the headers describe what get_body() holds.

=============================================================================
"""

import logging
import socket
import ssl
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional, Tuple

from .._version import __version__
from ..exceptions import (
    ConnectionFailedError,
    RequestError,
    SslCertificateError,
    UnresolvableHostError,
)
from ..http.factory import MessageFactory, ResponseFactory
from ..http.headers import Headers
from ..http.message import SUPPORTED_PROTOCOL_VERSIONS
from ..http.methods import may_not_include_body
from ..http.request import Request
from ..http.response import Response
from ..http.stream import Stream

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = f"httpclient/{__version__}"


class Driver(ABC):
    """Interface every transport implements."""

    @abstractmethod
    def send_request(self, request: Request) -> Response:
        """
        Send ``request`` and return the response, whatever its status.

        Raises:
            UnresolvableHostError: DNS lookup failed.
            ConnectionFailedError: No complete response was received.
            SslCertificateError: TLS could not be established.
            DriverError: Any other failure.
        """

    @abstractmethod
    def set_response_factory(self, response_factory: ResponseFactory) -> None:
        """Use ``response_factory`` to build responses."""


class AbstractDriver(Driver):
    """
    Shared plumbing for the bundled drivers: response factory, User-Agent,
    header marshalling, body handling and error translation.
    """

    def __init__(
        self,
        response_factory: Optional[ResponseFactory] = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self._response_factory = response_factory or MessageFactory()
        self.user_agent = user_agent

    def set_response_factory(self, response_factory: ResponseFactory) -> None:
        self._response_factory = response_factory

    def get_response_factory(self) -> ResponseFactory:
        return self._response_factory

    # =========================================================================
    # REQUEST PREPARATION
    # =========================================================================

    @staticmethod
    def marshal_headers(headers: Headers) -> List[Tuple[str, str]]:
        """Flatten headers into (name, value) pairs, one per value."""
        return headers.multi_items()

    def prepare_request(self, request: Request) -> Request:
        """Add a User-Agent header unless the request has one."""
        if self.user_agent and not request.has_header("User-Agent"):
            request = request.with_header("User-Agent", self.user_agent)
        return request

    @staticmethod
    def get_content(request: Request) -> Optional[bytes]:
        """
        Get the bytes to send as the request body.

        Returns:
            None for empty bodies and for GET and HEAD requests.
        """
        if not request.body.get_size() or may_not_include_body(request.method):
            return None
        return request.body.to_bytes()

    # =========================================================================
    # RESPONSE CONSTRUCTION
    # =========================================================================

    def build_response(
        self,
        status_code: int,
        reason_phrase: Optional[str],
        headers: Iterable[Tuple[str, str]],
        content: bytes,
        protocol_version: str = "1.1",
        content_decoded: bool = False,
    ) -> Response:
        """
        Build a Response through the response factory.

        Args:
            content_decoded: The library already undid the Content-Encoding,
                so ``content`` is the plain body. Content-Encoding is then
                dropped and Content-Length set to the decoded size. Empty
                bodies (HEAD, 304) keep the headers as sent.
        """
        response = self._response_factory.create_response(status_code, reason_phrase or None)

        for name, value in headers:
            response = response.with_added_header(name, value)

        if content_decoded and content and response.has_header("Content-Encoding"):
            response = response.without_header("Content-Encoding")
            if response.has_header("Content-Length"):
                response = response.with_header("Content-Length", str(len(content)))

        if protocol_version in SUPPORTED_PROTOCOL_VERSIONS:
            response = response.with_protocol_version(protocol_version)

        return response.with_body(Stream.create(content))

    # =========================================================================
    # ERROR TRANSLATION
    # =========================================================================

    @staticmethod
    def iter_causes(exc: BaseException) -> Iterator[BaseException]:
        """
        Walk an exception and everything it wraps.

        Follows ``__cause__``, ``__context__``, a ``reason`` attribute
        (urllib3) and exceptions passed as arguments (requests).
        """
        pending = [exc]
        seen = set()
        while pending:
            current = pending.pop(0)
            if id(current) in seen:
                continue
            seen.add(id(current))
            yield current

            linked = [current.__cause__, current.__context__, getattr(current, "reason", None)]
            linked.extend(current.args)
            pending.extend(item for item in linked if isinstance(item, BaseException))

    def connection_error(self, request: Request, exc: BaseException) -> RequestError:
        """Classify a failed connection attempt by what caused it."""
        for cause in self.iter_causes(exc):
            if isinstance(cause, socket.gaierror):
                return UnresolvableHostError(request, exc)
            if isinstance(cause, ssl.SSLError):
                return SslCertificateError(request, str(exc), exc)

        return ConnectionFailedError(request, str(exc), exc)
