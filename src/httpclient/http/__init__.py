"""
=============================================================================
HTTP MESSAGE MODEL
=============================================================================

Immutable values the rest of the package passes around.

    ┌─────────────────────────────────────────────────────────────────────┐
    │ Request / Response (request.py, response.py)                        │
    │ ─────────────────────────────────────────────────────────────────── │
    │ Frozen dataclasses. with_*() returns a modified copy.               │
    │                                                                     │
    │   request = factory.create_request("GET", "https://example.com/")   │
    │   request = request.with_header("Accept", "application/json")       │
    └─────────────────────────────────────────────────────────────────────┘

    ┌─────────────────────────────────────────────────────────────────────┐
    │ Building blocks                                                     │
    │ ─────────────────────────────────────────────────────────────────── │
    │   headers.py       Headers, case-insensitive ordered multimap       │
    │   uri.py           URI, parsed target                               │
    │   stream.py        Stream, in-memory body                           │
    │   query.py         build_query() / parse_query()                    │
    │   factory.py       MessageFactory                                   │
    └─────────────────────────────────────────────────────────────────────┘

    ┌─────────────────────────────────────────────────────────────────────┐
    │ Protocol constants                                                  │
    │ ─────────────────────────────────────────────────────────────────── │
    │   status_codes.py  HTTPStatus + is_success() / is_error() / ...     │
    │   mime_types.py    MediaType + strip_parameters() / get_charset()   │
    │   methods.py       Method                                           │
    │   authorization.py Authorization                                    │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

from .authorization import Authorization
from .factory import MessageFactory, RequestFactory, ResponseFactory
from .headers import Headers
from .methods import Method
from .mime_types import MediaType
from .query import build_query, parse_query
from .request import Request
from .response import Response
from .status_codes import HTTPStatus
from .stream import Stream
from .uri import URI

__all__ = [
    # Messages
    "Request",
    "Response",
    "Headers",
    "URI",
    "Stream",

    # Factories
    "RequestFactory",
    "ResponseFactory",
    "MessageFactory",

    # Query strings
    "build_query",
    "parse_query",

    # Constants
    "HTTPStatus",
    "MediaType",
    "Method",
    "Authorization",
]
