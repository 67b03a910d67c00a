"""
=============================================================================
HTTPCLIENT - Fluent HTTP Client With Pluggable Transports
=============================================================================

A small HTTP client library: fluent request building, body serialization
chosen by Content-Type, swappable transport drivers, and a typed exception
for every error status.

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    httpclient/
    ├── __init__.py            # This file - package exports
    ├── __main__.py            # CLI entry point (python -m httpclient)
    ├── client.py              # HTTPClient facade
    ├── config.py              # ClientConfig dataclass
    ├── exceptions.py          # Error hierarchy, status → exception table
    ├── http/                  # Immutable message model
    │   ├── request.py         # Request
    │   ├── response.py        # Response
    │   ├── headers.py         # Headers multimap
    │   ├── uri.py             # URI
    │   ├── stream.py          # Body stream
    │   ├── query.py           # Query string encoding
    │   ├── factory.py         # Message factories
    │   └── status_codes.py    # HTTPStatus, classifiers
    ├── serializers/           # Body codecs
    │   ├── registry.py        # Media type → serializer
    │   ├── json_serializer.py # application/json
    │   ├── plain_text.py      # text/plain (fallback)
    │   └── url_encoded.py     # application/x-www-form-urlencoded
    ├── context/               # Fluent wrappers
    │   ├── request_context.py
    │   └── response_context.py
    └── drivers/               # Transports
        ├── httpx_driver.py    # httpx (default)
        └── requests_driver.py # requests

=============================================================================
QUICK START
=============================================================================

    from httpclient import HTTPClient, NotFoundError

    client = HTTPClient()

    response = (
        client.post("https://api.example.com/users")
        .with_bearer_authorization("secret")
        .as_json()
        .with_body({"name": "alice"})
        .run()
    )
    print(response.get_status_code(), response.get_parsed_body())

    try:
        client.get("https://api.example.com/users/999").run()
    except NotFoundError as e:
        print(e.response.status_code)

=============================================================================
"""

from ._version import __version__
from .client import HTTPClient
from .config import ClientConfig
from .context import RequestContext, ResponseContext
from .drivers import Driver, HttpxDriver, RequestsDriver, SupportsRedirects, SupportsTimeouts
from .exceptions import (
    ClientResponseError,
    ConfigurationError,
    ConnectionFailedError,
    DriverError,
    HTTPClientError,
    InvalidArgumentError,
    NotFoundError,
    RequestError,
    ResponseError,
    SerializationError,
    ServerResponseError,
    SslCertificateError,
    UnresolvableHostError,
)
from .http import HTTPStatus, MediaType, Method, Request, Response, Stream
from .serializers import JsonSerializer, PlainTextSerializer, Serializer, UrlEncodedSerializer

__all__ = [
    "__version__",

    # Client
    "HTTPClient",
    "ClientConfig",
    "RequestContext",
    "ResponseContext",

    # Drivers
    "Driver",
    "HttpxDriver",
    "RequestsDriver",
    "SupportsTimeouts",
    "SupportsRedirects",

    # Messages
    "Request",
    "Response",
    "Stream",
    "HTTPStatus",
    "MediaType",
    "Method",

    # Serializers
    "Serializer",
    "JsonSerializer",
    "PlainTextSerializer",
    "UrlEncodedSerializer",

    # Errors
    "HTTPClientError",
    "InvalidArgumentError",
    "ConfigurationError",
    "SerializationError",
    "RequestError",
    "DriverError",
    "UnresolvableHostError",
    "ConnectionFailedError",
    "SslCertificateError",
    "ResponseError",
    "ClientResponseError",
    "ServerResponseError",
    "NotFoundError",
]
