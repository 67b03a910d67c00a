"""
=============================================================================
HTTP STATUS CODES AND CLASSIFICATION
=============================================================================

Status codes as received by the client, with their reason phrases and the
classifier functions the client facade uses to decide whether a response
is an error.

=============================================================================
STATUS CODE CLASSES
=============================================================================

    ┌────────┬───────────────────────────────────────────────────────────┐
    │  1xx   │ INFORMATIONAL   is_informational(code)                    │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  2xx   │ SUCCESS         is_success(code)                          │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  3xx   │ REDIRECTION     is_redirect(code)                         │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  4xx   │ CLIENT ERROR    is_client_error(code)  ┐                  │
    ├────────┼────────────────────────────────────────┤ is_error(code)   │
    │  5xx   │ SERVER ERROR    is_server_error(code)  ┘  (code >= 400)   │
    └────────┴───────────────────────────────────────────────────────────┘

A server may send any three-digit number, including codes that are not
registered with IANA (e.g. 299 or 599, or even 9999 from a broken proxy).
The module-level functions therefore accept plain integers and never
require a value to be a member of HTTPStatus:

    >>> is_error(404)
    True
    >>> is_error(9999)
    True
    >>> get_reason_phrase(9999) is None
    True

=============================================================================
"""

from enum import IntEnum
from typing import Dict, Optional


class HTTPStatus(IntEnum):
    """
    Registered HTTP status codes.

    Members compare equal to their integer value, so they can be passed
    anywhere a status code is expected:

        >>> HTTPStatus.NOT_FOUND == 404
        True
        >>> HTTPStatus.NOT_FOUND.phrase
        'Not Found'
    """

    # 1xx INFORMATIONAL
    CONTINUE = 100
    SWITCHING_PROTOCOLS = 101
    PROCESSING = 102
    EARLY_HINTS = 103

    # 2xx SUCCESS
    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NON_AUTHORITATIVE_INFORMATION = 203
    NO_CONTENT = 204
    RESET_CONTENT = 205
    PARTIAL_CONTENT = 206
    MULTI_STATUS = 207
    ALREADY_REPORTED = 208
    IM_USED = 226

    # 3xx REDIRECTION
    MULTIPLE_CHOICES = 300
    MOVED_PERMANENTLY = 301
    FOUND = 302
    SEE_OTHER = 303
    NOT_MODIFIED = 304
    USE_PROXY = 305
    TEMPORARY_REDIRECT = 307
    PERMANENT_REDIRECT = 308

    # 4xx CLIENT ERRORS
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    PAYMENT_REQUIRED = 402
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    NOT_ACCEPTABLE = 406
    PROXY_AUTHENTICATION_REQUIRED = 407
    REQUEST_TIMEOUT = 408
    CONFLICT = 409
    GONE = 410
    LENGTH_REQUIRED = 411
    PRECONDITION_FAILED = 412
    PAYLOAD_TOO_LARGE = 413
    URI_TOO_LONG = 414
    UNSUPPORTED_MEDIA_TYPE = 415
    RANGE_NOT_SATISFIABLE = 416
    EXPECTATION_FAILED = 417
    IM_A_TEAPOT = 418
    MISDIRECTED_REQUEST = 421
    UNPROCESSABLE_ENTITY = 422
    LOCKED = 423
    FAILED_DEPENDENCY = 424
    TOO_EARLY = 425
    UPGRADE_REQUIRED = 426
    PRECONDITION_REQUIRED = 428
    TOO_MANY_REQUESTS = 429
    REQUEST_HEADER_FIELDS_TOO_LARGE = 431
    UNAVAILABLE_FOR_LEGAL_REASONS = 451

    # 5xx SERVER ERRORS
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504
    HTTP_VERSION_NOT_SUPPORTED = 505
    VARIANT_ALSO_NEGOTIATES = 506
    INSUFFICIENT_STORAGE = 507
    LOOP_DETECTED = 508
    NOT_EXTENDED = 510
    NETWORK_AUTHENTICATION_REQUIRED = 511

    @property
    def phrase(self) -> str:
        """The reason phrase sent on the status line, e.g. "Not Found"."""
        return _STATUS_PHRASES[self]

    @property
    def is_informational(self) -> bool:
        return is_informational(self)

    @property
    def is_success(self) -> bool:
        return is_success(self)

    @property
    def is_redirect(self) -> bool:
        return is_redirect(self)

    @property
    def is_client_error(self) -> bool:
        return is_client_error(self)

    @property
    def is_server_error(self) -> bool:
        return is_server_error(self)

    @property
    def is_error(self) -> bool:
        return is_error(self)


# =============================================================================
# REASON PHRASES
# =============================================================================
#
# Used to fill in the reason phrase when a response does not carry one
# (HTTP/2 dropped reason phrases from the wire entirely).
#
# =============================================================================

_STATUS_PHRASES: Dict[int, str] = {
    HTTPStatus.CONTINUE: "Continue",
    HTTPStatus.SWITCHING_PROTOCOLS: "Switching Protocols",
    HTTPStatus.PROCESSING: "Processing",
    HTTPStatus.EARLY_HINTS: "Early Hints",

    HTTPStatus.OK: "OK",
    HTTPStatus.CREATED: "Created",
    HTTPStatus.ACCEPTED: "Accepted",
    HTTPStatus.NON_AUTHORITATIVE_INFORMATION: "Non-Authoritative Information",
    HTTPStatus.NO_CONTENT: "No Content",
    HTTPStatus.RESET_CONTENT: "Reset Content",
    HTTPStatus.PARTIAL_CONTENT: "Partial Content",
    HTTPStatus.MULTI_STATUS: "Multi-Status",
    HTTPStatus.ALREADY_REPORTED: "Already Reported",
    HTTPStatus.IM_USED: "IM Used",

    HTTPStatus.MULTIPLE_CHOICES: "Multiple Choices",
    HTTPStatus.MOVED_PERMANENTLY: "Moved Permanently",
    HTTPStatus.FOUND: "Found",
    HTTPStatus.SEE_OTHER: "See Other",
    HTTPStatus.NOT_MODIFIED: "Not Modified",
    HTTPStatus.USE_PROXY: "Use Proxy",
    HTTPStatus.TEMPORARY_REDIRECT: "Temporary Redirect",
    HTTPStatus.PERMANENT_REDIRECT: "Permanent Redirect",

    HTTPStatus.BAD_REQUEST: "Bad Request",
    HTTPStatus.UNAUTHORIZED: "Unauthorized",
    HTTPStatus.PAYMENT_REQUIRED: "Payment Required",
    HTTPStatus.FORBIDDEN: "Forbidden",
    HTTPStatus.NOT_FOUND: "Not Found",
    HTTPStatus.METHOD_NOT_ALLOWED: "Method Not Allowed",
    HTTPStatus.NOT_ACCEPTABLE: "Not Acceptable",
    HTTPStatus.PROXY_AUTHENTICATION_REQUIRED: "Proxy Authentication Required",
    HTTPStatus.REQUEST_TIMEOUT: "Request Timeout",
    HTTPStatus.CONFLICT: "Conflict",
    HTTPStatus.GONE: "Gone",
    HTTPStatus.LENGTH_REQUIRED: "Length Required",
    HTTPStatus.PRECONDITION_FAILED: "Precondition Failed",
    HTTPStatus.PAYLOAD_TOO_LARGE: "Payload Too Large",
    HTTPStatus.URI_TOO_LONG: "URI Too Long",
    HTTPStatus.UNSUPPORTED_MEDIA_TYPE: "Unsupported Media Type",
    HTTPStatus.RANGE_NOT_SATISFIABLE: "Range Not Satisfiable",
    HTTPStatus.EXPECTATION_FAILED: "Expectation Failed",
    HTTPStatus.IM_A_TEAPOT: "I'm a teapot",
    HTTPStatus.MISDIRECTED_REQUEST: "Misdirected Request",
    HTTPStatus.UNPROCESSABLE_ENTITY: "Unprocessable Entity",
    HTTPStatus.LOCKED: "Locked",
    HTTPStatus.FAILED_DEPENDENCY: "Failed Dependency",
    HTTPStatus.TOO_EARLY: "Too Early",
    HTTPStatus.UPGRADE_REQUIRED: "Upgrade Required",
    HTTPStatus.PRECONDITION_REQUIRED: "Precondition Required",
    HTTPStatus.TOO_MANY_REQUESTS: "Too Many Requests",
    HTTPStatus.REQUEST_HEADER_FIELDS_TOO_LARGE: "Request Header Fields Too Large",
    HTTPStatus.UNAVAILABLE_FOR_LEGAL_REASONS: "Unavailable For Legal Reasons",

    HTTPStatus.INTERNAL_SERVER_ERROR: "Internal Server Error",
    HTTPStatus.NOT_IMPLEMENTED: "Not Implemented",
    HTTPStatus.BAD_GATEWAY: "Bad Gateway",
    HTTPStatus.SERVICE_UNAVAILABLE: "Service Unavailable",
    HTTPStatus.GATEWAY_TIMEOUT: "Gateway Timeout",
    HTTPStatus.HTTP_VERSION_NOT_SUPPORTED: "HTTP Version Not Supported",
    HTTPStatus.VARIANT_ALSO_NEGOTIATES: "Variant Also Negotiates",
    HTTPStatus.INSUFFICIENT_STORAGE: "Insufficient Storage",
    HTTPStatus.LOOP_DETECTED: "Loop Detected",
    HTTPStatus.NOT_EXTENDED: "Not Extended",
    HTTPStatus.NETWORK_AUTHENTICATION_REQUIRED: "Network Authentication Required",
}


# =============================================================================
# CLASSIFIER FUNCTIONS
# =============================================================================

def is_informational(code: int) -> bool:
    """Check if ``code`` is a 1xx status."""
    return 100 <= code < 200


def is_success(code: int) -> bool:
    """Check if ``code`` is a 2xx status."""
    return 200 <= code < 300


def is_redirect(code: int) -> bool:
    """Check if ``code`` is a 3xx status."""
    return 300 <= code < 400


def is_client_error(code: int) -> bool:
    """Check if ``code`` is a 4xx status."""
    return 400 <= code < 500


def is_server_error(code: int) -> bool:
    """Check if ``code`` is a 5xx status."""
    return 500 <= code < 600


def is_error(code: int) -> bool:
    """
    Check if ``code`` signals an error response.

    Anything from 400 upwards counts, including unregistered codes above
    599. This is the single rule the client uses to decide whether to
    raise a ResponseError.
    """
    return code >= 400


def is_valid(code: int) -> bool:
    """Check if ``code`` is a registered status code."""
    return code in _STATUS_PHRASES


def get_reason_phrase(code: int) -> Optional[str]:
    """
    Get the standard reason phrase for ``code``.

    Returns:
        The phrase, or None if the code is not registered.
    """
    return _STATUS_PHRASES.get(code)


def get_error_codes() -> Dict[int, str]:
    """Get every registered error code (>= 400) mapped to its phrase."""
    return {
        int(code): phrase
        for code, phrase in _STATUS_PHRASES.items()
        if is_error(code)
    }
