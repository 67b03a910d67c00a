"""
=============================================================================
HTTP RESPONSE MESSAGE
=============================================================================

An immutable incoming response, built by a driver through the
ResponseFactory.

    HTTP/1.1 404 Not Found
    ────┬─── ─┬─ ────┬────
        │     │      │
    protocol status  reason_phrase
    version   code

The status code is stored as given; codes outside the registered table
(299, 599, ...) are valid responses too. When no reason phrase is passed,
the registered one is used, or "" for unregistered codes.

=============================================================================
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from .headers import Headers
from .message import MessageMixin
from .status_codes import get_reason_phrase
from .status_codes import is_error as is_error_status
from .stream import Stream


@dataclass(frozen=True)
class Response(MessageMixin):
    """
    Incoming HTTP response.

    Attributes:
        status_code: Numeric status, not range-checked.
        reason_phrase: Status text; defaults from the status table.
        headers: Response headers.
        body: Response body.
        protocol_version: Version the server answered with.
    """

    status_code: int = 200
    reason_phrase: Optional[str] = None
    headers: Headers = field(default_factory=Headers)
    body: Stream = field(default_factory=Stream, compare=False)
    protocol_version: str = "1.1"

    def __post_init__(self):
        if self.reason_phrase is None:
            object.__setattr__(
                self, "reason_phrase", get_reason_phrase(self.status_code) or ""
            )

    @property
    def is_error(self) -> bool:
        return is_error_status(self.status_code)

    @property
    def status_line(self) -> str:
        """
        Format the status line.

        Example:
            "HTTP/1.1 200 OK"
        """
        return f"HTTP/{self.protocol_version} {self.status_code} {self.reason_phrase}".rstrip()

    def with_status(self, code: int, reason_phrase: Optional[str] = None) -> "Response":
        """Return a copy with a new status; the phrase defaults from the table."""
        return replace(self, status_code=code, reason_phrase=reason_phrase)
