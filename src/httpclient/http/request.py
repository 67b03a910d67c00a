"""
=============================================================================
HTTP REQUEST MESSAGE
=============================================================================

An immutable outgoing request. The RequestContext holds one of these and
swaps it for a modified copy on every with_*() call.

    Request(
        method="POST",
        uri=URI.parse("https://api.example.com/users?page=2"),
        headers=Headers({"Host": "api.example.com", ...}),
        body=Stream(...),
        protocol_version="1.1",
    )

=============================================================================
THE HOST HEADER
=============================================================================

HTTP/1.1 requires a Host header. Requests built by the RequestFactory get
one from the URI, and with_uri() keeps it in sync:

    ┌──────────────────────────────┬──────────────────────────────────────┐
    │ with_uri(uri, preserve_host) │ Host header afterwards               │
    ├──────────────────────────────┼──────────────────────────────────────┤
    │ preserve_host=False          │ uri host[:port], if the uri has one  │
    │ preserve_host=True, no Host  │ uri host[:port], if the uri has one  │
    │ preserve_host=True, has Host │ unchanged                            │
    │ uri without a host           │ unchanged                            │
    └──────────────────────────────┴──────────────────────────────────────┘

The Host header is always moved to the front of the header list.

=============================================================================
"""

from dataclasses import dataclass, field, replace
from typing import Union

from ..exceptions import InvalidMethodError
from .headers import Headers
from .message import MessageMixin
from .methods import is_valid_token
from .stream import Stream
from .uri import URI


@dataclass(frozen=True)
class Request(MessageMixin):
    """
    Outgoing HTTP request.

    Attributes:
        method: Request method token, case preserved ("GET", "PROPFIND").
        uri: Target URI.
        headers: Request headers.
        body: Request body, empty by default.
        protocol_version: "1.1" unless changed.

    Raises:
        InvalidMethodError: If ``method`` is empty or not a token.
    """

    method: str
    uri: URI = field(default_factory=URI)
    headers: Headers = field(default_factory=Headers)
    body: Stream = field(default_factory=Stream, compare=False)
    protocol_version: str = "1.1"

    def __post_init__(self):
        if not is_valid_token(self.method):
            raise InvalidMethodError(f"Invalid HTTP method: {self.method!r}")

        if isinstance(self.uri, str):
            object.__setattr__(self, "uri", URI.parse(self.uri))

    @property
    def request_target(self) -> str:
        """Path plus query, as it appears on the request line."""
        target = self.uri.path or "/"
        if self.uri.query:
            target += f"?{self.uri.query}"
        return target

    def with_method(self, method: str) -> "Request":
        return replace(self, method=method)

    def with_uri(self, uri: Union[URI, str], preserve_host: bool = False) -> "Request":
        """
        Return a copy targeting ``uri``.

        Args:
            uri: New target, as a URI or a string.
            preserve_host: Keep an existing Host header instead of
                replacing it with the new URI's host.
        """
        if isinstance(uri, str):
            uri = URI.parse(uri)

        request = replace(self, uri=uri)
        if preserve_host and self.headers.has("Host"):
            return request
        return request._with_host_from_uri()

    def _with_host_from_uri(self) -> "Request":
        host = self.uri.host
        if not host:
            return self

        if ":" in host:
            host = f"[{host}]"
        if self.uri.port is not None:
            host = f"{host}:{self.uri.port}"
        return replace(self, headers=self.headers.with_header_first("Host", host))

    def __str__(self) -> str:
        return f"{self.method} {self.uri.redacted}"
