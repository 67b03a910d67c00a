"""
=============================================================================
HTTP CLIENT
=============================================================================

The entry point. HTTPClient creates request contexts, owns the serializer
registry and the message factories, and sends requests through a driver.

    from httpclient import HTTPClient

    client = HTTPClient()

    users = client.get("https://api.example.com/users").run().get_parsed_body()

    client.post("https://api.example.com/users", {"name": "alice"}) \\
        .as_json() \\
        .run()

=============================================================================
REQUEST LIFECYCLE
=============================================================================

    client.post(uri, body)
        │
        ▼
    RequestContext ── with_*() ──► run()
                                    │  serialize pending body
                                    ▼
                             client.request(request)
                                    │
                                    ▼
                             driver.send_request(request)
                                    │
                      ┌─────────────┴─────────────┐
                      ▼                           ▼
              status < 400                  status >= 400
                      │                           │
                      ▼                           ▼
              ResponseContext          raise NotFoundError, ...
                                       (see exceptions.STATUS_EXCEPTIONS)

Transport failures raised by the driver (UnresolvableHostError,
ConnectionFailedError, ...) pass through request() unchanged.

=============================================================================
"""

import logging
import time
from typing import Any, Optional, Union

from .config import ClientConfig
from .context.request_context import RequestContext
from .drivers.base import Driver
from .exceptions import RequestError, create_response_error
from .http.factory import MessageFactory, RequestFactory, ResponseFactory
from .http.methods import Method
from .http.mime_types import MediaType
from .http.request import Request
from .http.response import Response
from .http.status_codes import is_error
from .http.uri import URI
from .serializers.base import Serializer
from .serializers.json_serializer import JsonSerializer
from .serializers.plain_text import PlainTextSerializer
from .serializers.registry import SerializerRegistry
from .serializers.url_encoded import UrlEncodedSerializer

logger = logging.getLogger(__name__)

UriLike = Union[URI, str]


class HTTPClient:
    """
    Fluent HTTP client.

    Args:
        driver: Transport to use. Defaults to the driver described by
            ``config`` (an HttpxDriver unless configured otherwise).
        request_factory: Builds requests for the shorthand methods.
        response_factory: Handed to the driver to build responses.
        config: Settings for the default driver. Ignored when ``driver``
            is given.
    """

    def __init__(
        self,
        driver: Optional[Driver] = None,
        request_factory: Optional[RequestFactory] = None,
        response_factory: Optional[ResponseFactory] = None,
        config: Optional[ClientConfig] = None,
    ):
        factory = MessageFactory()
        self.config = config or ClientConfig()

        self._request_factory = request_factory or factory
        self._response_factory = response_factory or factory
        self.set_driver(driver if driver is not None else self.config.create_driver())

        self._serializer_registry = SerializerRegistry()
        self._serializer_registry.register(MediaType.APPLICATION_JSON, JsonSerializer())
        self._serializer_registry.register(MediaType.TEXT_PLAIN, PlainTextSerializer())
        self._serializer_registry.register(
            MediaType.APPLICATION_X_WWW_FORM_URLENCODED,
            UrlEncodedSerializer(),
        )

    # =========================================================================
    # COLLABORATORS
    # =========================================================================

    def set_driver(self, driver: Driver) -> None:
        """Use ``driver`` for all further requests and give it the response factory."""
        self._driver = driver
        self._driver.set_response_factory(self._response_factory)

    def get_driver(self) -> Driver:
        return self._driver

    def set_request_factory(self, request_factory: RequestFactory) -> None:
        self._request_factory = request_factory

    def get_request_factory(self) -> RequestFactory:
        return self._request_factory

    def set_response_factory(self, response_factory: ResponseFactory) -> None:
        """
        Replace the response factory.

        Only drivers set afterwards receive it; call set_driver() again to
        hand it to the current driver.
        """
        self._response_factory = response_factory

    def get_response_factory(self) -> ResponseFactory:
        return self._response_factory

    def get_serializer_registry(self) -> SerializerRegistry:
        return self._serializer_registry

    def add_serializer(self, media_type: str, serializer: Serializer) -> "HTTPClient":
        """Register a serializer on this client only. Returns the client."""
        self._serializer_registry.register(media_type, serializer)
        return self

    # =========================================================================
    # SHORTHANDS
    # =========================================================================

    def get(self, uri: UriLike) -> RequestContext:
        return self.create_context(Method.GET, uri)

    def head(self, uri: UriLike) -> RequestContext:
        return self.create_context(Method.HEAD, uri)

    def options(self, uri: UriLike) -> RequestContext:
        return self.create_context(Method.OPTIONS, uri)

    def delete(self, uri: UriLike) -> RequestContext:
        return self.create_context(Method.DELETE, uri)

    def post(self, uri: UriLike, body: Any = None) -> RequestContext:
        """
        Start a POST request.

        A truthy ``body`` becomes the pending body. Falsy values (None, "",
        0, {}) are ignored; use with_body() to send them.
        """
        return self._create_context_with_body(Method.POST, uri, body)

    def put(self, uri: UriLike, body: Any = None) -> RequestContext:
        return self._create_context_with_body(Method.PUT, uri, body)

    def patch(self, uri: UriLike, body: Any = None) -> RequestContext:
        return self._create_context_with_body(Method.PATCH, uri, body)

    def _create_context_with_body(self, method: str, uri: UriLike, body: Any) -> RequestContext:
        context = self.create_context(method, uri)
        if body:
            context.with_body(body)
        return context

    def create_context(self, method: str, uri: UriLike) -> RequestContext:
        request = self._request_factory.create_request(method, uri)
        return self.create_context_from_request(request)

    def create_context_from_request(self, request: Request) -> RequestContext:
        return RequestContext(self, request)

    # =========================================================================
    # SENDING
    # =========================================================================

    def request(self, request: Request) -> Response:
        """
        Send ``request`` through the driver and classify the response.

        Returns:
            The response, if its status is below 400.

        Raises:
            ResponseError: The subclass mapped to the status (NotFoundError
                for 404, ...) or ResponseError itself for unmapped codes.
            RequestError: Transport failures from the driver.
        """
        logger.debug(f"Sending {request.method} {request.uri.redacted}")
        start_time = time.perf_counter()

        try:
            response = self._driver.send_request(request)
        except RequestError as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"{request.method} {request.uri.redacted} failed - "
                f"{type(e).__name__}: {e} ({duration_ms:.2f}ms)"
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000

        if is_error(response.status_code):
            logger.warning(
                f"{request.method} {request.uri.redacted} returned "
                f"{response.status_code} {response.reason_phrase} ({duration_ms:.2f}ms)"
            )
            raise create_response_error(request, response)

        logger.debug(
            f"{request.method} {request.uri.redacted} returned "
            f"{response.status_code} {response.reason_phrase} ({duration_ms:.2f}ms)"
        )
        return response

    def close(self) -> None:
        """Release the driver's connections, if it holds any."""
        close = getattr(self._driver, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
