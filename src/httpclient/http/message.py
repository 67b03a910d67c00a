"""
Operations shared by Request and Response.

Both are frozen dataclasses with ``headers``, ``body`` and
``protocol_version`` fields. Every with_*() method returns a modified copy
made with ``dataclasses.replace``; the original is never touched.
"""

from dataclasses import replace
from typing import List, TypeVar

from ..exceptions import InvalidArgumentError
from .headers import HeaderValue
from .stream import Stream

M = TypeVar("M", bound="MessageMixin")

SUPPORTED_PROTOCOL_VERSIONS = ("1.0", "1.1", "2", "2.0", "3")


class MessageMixin:
    # -------------------------------------------------------------------------
    # Header access
    # -------------------------------------------------------------------------

    def get_header(self, name: str) -> List[str]:
        return self.headers.get(name)

    def get_header_line(self, name: str) -> str:
        return self.headers.get_line(name)

    def has_header(self, name: str) -> bool:
        return self.headers.has(name)

    # -------------------------------------------------------------------------
    # Copy-on-write modifiers
    # -------------------------------------------------------------------------

    def with_header(self: M, name: str, value: HeaderValue) -> M:
        return replace(self, headers=self.headers.with_header(name, value))

    def with_added_header(self: M, name: str, value: HeaderValue) -> M:
        return replace(self, headers=self.headers.with_added_header(name, value))

    def without_header(self: M, name: str) -> M:
        return replace(self, headers=self.headers.without_header(name))

    def with_body(self: M, body: Stream) -> M:
        return replace(self, body=body)

    def with_protocol_version(self: M, version: str) -> M:
        """
        Return a copy speaking ``version`` ("1.0", "1.1", "2", ...).

        Raises:
            InvalidArgumentError: For versions not listed in SUPPORTED_PROTOCOL_VERSIONS.
        """
        if version not in SUPPORTED_PROTOCOL_VERSIONS:
            raise InvalidArgumentError(f"Unsupported HTTP protocol version: {version!r}")
        return replace(self, protocol_version=version)
