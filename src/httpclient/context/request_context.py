"""
=============================================================================
REQUEST CONTEXT
=============================================================================

A fluent, mutable builder around an immutable Request.

    response = (
        client.post("https://api.example.com/users")
        .with_query_parameter("notify", True)
        .with_bearer_authorization(token)
        .as_json()
        .with_body({"name": "alice"})
        .run()
    )

=============================================================================
HOW MUTATION WORKS
=============================================================================

Request objects are frozen. Every with_*() call on the context derives a
new Request and swaps it in, then returns the same context:

    ┌─────────────┐   with_header("Accept", ...)   ┌─────────────┐
    │ Request v1  │ ─────────────────────────────► │ Request v2  │
    └─────────────┘                                └─────────────┘
           ▲                                              ▲
           └────────── context._request ──────────────────┘
                       (same context, new value)

=============================================================================
THE PENDING BODY
=============================================================================

with_body() does not touch the request. The value is parked as-is and only
turned into bytes by run(), using whatever Content-Type is set by then.
This is why as_json() may come after with_body():

    run()
     │
     ├── no pending body ─────────────────────► send request unchanged
     │
     ├── Stream / bytes ──────────────────────► attach as body, send
     │
     └── anything else
           │
           ├── media type = Content-Type without parameters
           │                (text/plain when missing)
           ├── serializer = registry.resolve(media type)
           │                (PlainTextSerializer when unregistered)
           ├── request    = serializer.apply(request, body)
           └──────────────────────────────────► send request

Errors from serialization or sending propagate unmodified.

=============================================================================
"""

import base64
import logging
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Union

from ..http.authorization import Authorization
from ..http.headers import HeaderValue
from ..http.mime_types import MediaType
from ..http.query import build_query, parse_query
from ..http.request import Request
from ..http.stream import Stream
from ..http.uri import URI
from .base import MessageContext
from .response_context import ResponseContext

if TYPE_CHECKING:
    from ..client import HTTPClient

logger = logging.getLogger(__name__)


class RequestContext(MessageContext):
    """
    Builder for one request. Not thread-safe; use one context per request.
    """

    def __init__(self, client: "HTTPClient", request: Request):
        super().__init__(client)
        self._request = request
        self._body: Any = None

    def _get_message(self) -> Request:
        return self._request

    # =========================================================================
    # REQUEST, METHOD, URI
    # =========================================================================

    def set_request(self, request: Request) -> None:
        self._request = request

    def get_request(self) -> Request:
        return self._request

    def with_method(self, method: str) -> "RequestContext":
        self._request = self._request.with_method(method)
        return self

    def get_method(self) -> str:
        return self._request.method

    def with_uri(self, uri: Union[URI, str], preserve_host: bool = False) -> "RequestContext":
        self._request = self._request.with_uri(uri, preserve_host)
        return self

    def get_uri(self) -> URI:
        return self._request.uri

    # =========================================================================
    # QUERY STRING
    # =========================================================================

    def with_query_string(self, query_string: str) -> "RequestContext":
        return self.with_uri(self.get_uri().with_query(query_string))

    def get_query_string(self) -> str:
        return self.get_uri().query

    def with_query_parameters(self, parameters: Mapping[str, Any]) -> "RequestContext":
        """Replace the whole query string with ``parameters``."""
        return self.with_query_string(build_query(parameters))

    def get_query_parameters(self) -> Dict[str, Any]:
        return parse_query(self.get_query_string())

    def with_query_parameter(self, name: str, value: Any) -> "RequestContext":
        """
        Set a single query parameter, keeping the others.

        Setting a parameter to None removes it, since None values are
        dropped from encoded query strings.
        """
        parameters = self.get_query_parameters()
        parameters[name] = value
        return self.with_query_parameters(parameters)

    def without_query_parameter(self, name: str) -> "RequestContext":
        parameters = self.get_query_parameters()
        parameters.pop(name, None)
        return self.with_query_parameters(parameters)

    def get_query_parameter(self, name: str) -> Optional[str]:
        return self.get_query_parameters().get(name)

    # =========================================================================
    # HEADERS
    # =========================================================================

    def with_header(self, name: str, value: HeaderValue, append: bool = False) -> "RequestContext":
        """
        Set a header.

        Args:
            name: Header name, any case.
            value: A value or list of values.
            append: Add to the existing values instead of replacing them.
        """
        if append:
            self._request = self._request.with_added_header(name, value)
        else:
            self._request = self._request.with_header(name, value)
        return self

    def with_headers(self, headers: Mapping[str, HeaderValue], append: bool = False) -> "RequestContext":
        for name, value in headers.items():
            self.with_header(name, value, append)
        return self

    def without_header(self, name: str) -> "RequestContext":
        self._request = self._request.without_header(name)
        return self

    # =========================================================================
    # AUTHORIZATION
    # =========================================================================

    def with_authorization(self, scheme: str, credentials: str) -> "RequestContext":
        """Set the Authorization header to "<scheme> <credentials>"."""
        return self.with_header("Authorization", f"{scheme} {credentials}")

    def with_basic_authorization(self, username: str, password: Optional[str] = None) -> "RequestContext":
        """
        Use HTTP Basic authentication.

        A missing password is sent as an empty one: "user:".
        """
        raw = f"{username}:{password if password is not None else ''}"
        credentials = base64.b64encode(raw.encode("utf-8")).decode("ascii")
        return self.with_authorization(Authorization.BASIC, credentials)

    def with_bearer_authorization(self, token: str) -> "RequestContext":
        return self.with_authorization(Authorization.BEARER, token)

    # =========================================================================
    # CONTENT TYPE
    # =========================================================================

    def with_content_type(self, content_type: str) -> "RequestContext":
        return self.with_header("Content-Type", content_type)

    def as_json(self) -> "RequestContext":
        return self.with_content_type(MediaType.APPLICATION_JSON)

    def as_xml(self) -> "RequestContext":
        return self.with_content_type(MediaType.TEXT_XML)

    def as_plain_text(self) -> "RequestContext":
        return self.with_content_type(MediaType.TEXT_PLAIN)

    # =========================================================================
    # BODY
    # =========================================================================

    def with_body(self, body: Any) -> "RequestContext":
        """
        Park ``body`` until run(). Passing None clears it.

        The value is not inspected here. Streams and bytes are sent as-is,
        anything else goes through the serializer for the Content-Type.
        """
        self._body = body
        return self

    def get_body(self) -> Any:
        return self._body

    def has_body(self) -> bool:
        return self._body is not None

    # =========================================================================
    # DISPATCH
    # =========================================================================

    def run(self) -> ResponseContext:
        """
        Serialize the pending body, send the request and wrap the response.

        Raises:
            SerializationError: If the body cannot be encoded.
            InvalidArgumentError: If the serializer rejects the body.
            RequestError: Any transport or response error from the client.
        """
        if self.has_body():
            self._request = self._apply_body(self._body)

        response = self._client.request(self._request)
        return ResponseContext(self._client, response)

    execute = run

    def _apply_body(self, body: Any) -> Request:
        if isinstance(body, (bytes, bytearray)):
            body = Stream.create(body)

        if isinstance(body, Stream):
            return self._request.with_body(body)

        serializer = self._resolve_serializer()
        logger.debug(f"Serializing request body with {type(serializer).__name__}")
        return serializer.apply(self._request, body)

    def __repr__(self) -> str:
        return f"RequestContext({self._request})"
