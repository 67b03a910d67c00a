"""
Fluent wrappers around request and response messages.

    RequestContext   mutable builder, pending body, run()
    ResponseContext  status/header accessors, memoized get_parsed_body()
"""

from .base import MessageContext
from .request_context import RequestContext
from .response_context import ResponseContext

__all__ = [
    "MessageContext",
    "RequestContext",
    "ResponseContext",
]
