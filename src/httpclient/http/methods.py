"""
HTTP request methods.

    ┌──────────┬────────────┬────────────┐
    │  Method  │ Idempotent │  Has Body  │
    ├──────────┼────────────┼────────────┤
    │  GET     │    Yes     │    No      │
    │  HEAD    │    Yes     │    No      │
    │  POST    │    No      │    Yes     │
    │  PUT     │    Yes     │    Yes     │
    │  PATCH   │    No      │    Yes     │
    │  DELETE  │    Yes     │  Optional  │
    │  OPTIONS │    Yes     │  Optional  │
    └──────────┴────────────┴────────────┘

Drivers use ``may_not_include_body()`` to drop the payload of GET and HEAD
requests before it reaches the wire.
"""

import re


class Method:
    """Method name constants (RFC 7231, RFC 5789 and WebDAV)."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    CONNECT = "CONNECT"

    # WebDAV
    COPY = "COPY"
    LOCK = "LOCK"
    MKCOL = "MKCOL"
    MOVE = "MOVE"
    PROPFIND = "PROPFIND"
    PROPPATCH = "PROPPATCH"
    REPORT = "REPORT"
    SEARCH = "SEARCH"
    UNLOCK = "UNLOCK"


# RFC 7230 section 3.2.6: token = 1*tchar
TOKEN_PATTERN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


def is_valid_token(value: str) -> bool:
    """Check that ``value`` is a non-empty RFC 7230 token (methods, header names)."""
    return isinstance(value, str) and bool(TOKEN_PATTERN.fullmatch(value))


def may_not_include_body(method: str) -> bool:
    """Check if requests with ``method`` must be sent without a body."""
    return method in (Method.GET, Method.HEAD)
