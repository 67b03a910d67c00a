"""
=============================================================================
EXCEPTION HIERARCHY
=============================================================================

Every failure the client can produce is a distinct, catchable type, so
callers can tell a DNS failure from a TLS failure from a 404 without
matching on message strings.

    HTTPClientError
    ├── InvalidArgumentError          bad value passed by the caller
    │   ├── InvalidMethodError        empty / non-token method
    │   ├── InvalidHeaderError        bad header name or value
    │   └── InvalidUriError           unparsable URI
    ├── ConfigurationError            bad timeout / redirect limit / config
    ├── SerializationError            body could not be encoded / decoded
    └── RequestError                  carries .request
        ├── DriverError               generic transport failure
        │   └── UnresolvableHostError DNS lookup failed
        ├── ConnectionFailedError     refused, timed out, truncated
        ├── SslCertificateError       TLS handshake / certificate problem
        └── ResponseError             status >= 400, carries .response
            ├── ClientResponseError   4xx  (BadRequestError, NotFoundError, ...)
            └── ServerResponseError   5xx  (InternalServerError, ...)

=============================================================================
WHEN IS WHAT RAISED?
=============================================================================

    ┌────────────────────────┬──────────────────────────────────────────┐
    │ Kind                   │ Raised by / when                         │
    ├────────────────────────┼──────────────────────────────────────────┤
    │ Construction errors    │ the offending with_*() call, immediately │
    │ Configuration errors   │ the setter (set_timeout, ...)            │
    │ Codec errors           │ Serializer.apply() / extract()           │
    │ Transport failures     │ the driver, propagated unmodified        │
    │ Response errors        │ HTTPClient.request() after classifying   │
    └────────────────────────┴──────────────────────────────────────────┘

Response errors are picked from STATUS_EXCEPTIONS by status code. Codes
that are not in the table (a custom 499 or 599, say) fall back to the
generic ResponseError:

    try:
        client.get("https://example.com/users/42").run()
    except NotFoundError as e:
        print(e.response.status_code)   # 404
    except ResponseError as e:
        print(e.status_code)            # any other status >= 400

=============================================================================
"""

from typing import TYPE_CHECKING, Dict, Optional, Type

if TYPE_CHECKING:
    from .http.request import Request
    from .http.response import Response


class HTTPClientError(Exception):
    """Base class for every error raised by this package."""


# =============================================================================
# CALLER ERRORS
# =============================================================================

class InvalidArgumentError(HTTPClientError, ValueError):
    """A value passed to a builder, message or serializer is not acceptable."""


class InvalidMethodError(InvalidArgumentError):
    """The request method is empty or not a valid RFC 7230 token."""


class InvalidHeaderError(InvalidArgumentError):
    """A header name is not a token, or a value contains CR, LF or NUL."""


class InvalidUriError(InvalidArgumentError):
    """A URI string could not be parsed."""


class ConfigurationError(HTTPClientError, ValueError):
    """
    A configuration value is out of range.

    Raised by the setter itself; values are never clamped silently.
    """


class SerializationError(HTTPClientError):
    """A body could not be encoded into, or decoded from, its media type."""


# =============================================================================
# TRANSPORT ERRORS
# =============================================================================

class RequestError(HTTPClientError):
    """
    Base class for errors tied to a specific request.

    Attributes:
        request: The request that was being sent.
    """

    def __init__(self, request: "Request", message: str = ""):
        super().__init__(message)
        self.request = request


class DriverError(RequestError):
    """The driver could not send the request (invalid URL, library error, ...)."""

    def __init__(
        self,
        request: "Request",
        message: str = "",
        previous: Optional[BaseException] = None,
    ):
        super().__init__(request, f"Failed to create request: {message}")
        self.previous = previous


class UnresolvableHostError(DriverError):
    """The host name of the request URI could not be resolved."""

    def __init__(self, request: "Request", previous: Optional[BaseException] = None):
        super().__init__(
            request,
            f"Could not resolve host '{request.uri.host}'",
            previous,
        )


class ConnectionFailedError(RequestError):
    """The connection was refused, timed out, or the response was cut short."""

    def __init__(
        self,
        request: "Request",
        message: str = "",
        previous: Optional[BaseException] = None,
    ):
        super().__init__(request, f"Unable to connect to remote server: {message}")
        self.previous = previous


class SslCertificateError(RequestError):
    """The TLS handshake failed, usually because of the server certificate."""

    def __init__(
        self,
        request: "Request",
        message: str = "",
        previous: Optional[BaseException] = None,
    ):
        super().__init__(request, f"Failed to establish secure connection: {message}")
        self.previous = previous


# =============================================================================
# RESPONSE ERRORS
# =============================================================================

class ResponseError(RequestError):
    """
    The server answered with an error status (>= 400).

    The response is kept on the exception, so callers can inspect headers
    and body without re-issuing the request.

    Attributes:
        request: The request that was sent.
        response: The error response.
        status_code: Shortcut for ``response.status_code``.
    """

    def __init__(self, request: "Request", response: "Response"):
        super().__init__(
            request,
            f"Request failed with status {response.status_code}",
        )
        self.response = response
        self.status_code = response.status_code

    @classmethod
    def create(cls, request: "Request", response: "Response") -> "ResponseError":
        """Instantiate the exception type registered for the response status."""
        return create_response_error(request, response)


class ClientResponseError(ResponseError):
    """4xx status."""


class ServerResponseError(ResponseError):
    """5xx status."""


class BadRequestError(ClientResponseError):
    pass


class UnauthorizedError(ClientResponseError):
    pass


class PaymentRequiredError(ClientResponseError):
    pass


class ForbiddenError(ClientResponseError):
    pass


class NotFoundError(ClientResponseError):
    pass


class MethodNotAllowedError(ClientResponseError):
    pass


class NotAcceptableError(ClientResponseError):
    pass


class ProxyAuthenticationRequiredError(ClientResponseError):
    pass


class RequestTimeoutError(ClientResponseError):
    pass


class ConflictError(ClientResponseError):
    pass


class GoneError(ClientResponseError):
    pass


class LengthRequiredError(ClientResponseError):
    pass


class PreconditionFailedError(ClientResponseError):
    pass


class PayloadTooLargeError(ClientResponseError):
    pass


class UriTooLongError(ClientResponseError):
    pass


class UnsupportedMediaTypeError(ClientResponseError):
    pass


class RangeNotSatisfiableError(ClientResponseError):
    pass


class ExpectationFailedError(ClientResponseError):
    pass


class ImATeapotError(ClientResponseError):
    pass


class MisdirectedRequestError(ClientResponseError):
    pass


class UnprocessableEntityError(ClientResponseError):
    pass


class LockedError(ClientResponseError):
    pass


class FailedDependencyError(ClientResponseError):
    pass


class TooEarlyError(ClientResponseError):
    pass


class UpgradeRequiredError(ClientResponseError):
    pass


class PreconditionRequiredError(ClientResponseError):
    pass


class TooManyRequestsError(ClientResponseError):
    pass


class RequestHeaderFieldsTooLargeError(ClientResponseError):
    pass


class UnavailableForLegalReasonsError(ClientResponseError):
    pass


class InternalServerError(ServerResponseError):
    pass


class NotImplementedResponseError(ServerResponseError):
    pass


class BadGatewayError(ServerResponseError):
    pass


class ServiceUnavailableError(ServerResponseError):
    pass


class GatewayTimeoutError(ServerResponseError):
    pass


class HttpVersionNotSupportedError(ServerResponseError):
    pass


class VariantAlsoNegotiatesError(ServerResponseError):
    pass


class InsufficientStorageError(ServerResponseError):
    pass


class LoopDetectedError(ServerResponseError):
    pass


class NotExtendedError(ServerResponseError):
    pass


class NetworkAuthenticationRequiredError(ServerResponseError):
    pass


# =============================================================================
# STATUS CODE → EXCEPTION TYPE
# =============================================================================
#
# Only IANA-registered error codes are listed. Anything else >= 400 maps
# to the generic ResponseError in create_response_error().
#
# =============================================================================

STATUS_EXCEPTIONS: Dict[int, Type[ResponseError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    402: PaymentRequiredError,
    403: ForbiddenError,
    404: NotFoundError,
    405: MethodNotAllowedError,
    406: NotAcceptableError,
    407: ProxyAuthenticationRequiredError,
    408: RequestTimeoutError,
    409: ConflictError,
    410: GoneError,
    411: LengthRequiredError,
    412: PreconditionFailedError,
    413: PayloadTooLargeError,
    414: UriTooLongError,
    415: UnsupportedMediaTypeError,
    416: RangeNotSatisfiableError,
    417: ExpectationFailedError,
    418: ImATeapotError,
    421: MisdirectedRequestError,
    422: UnprocessableEntityError,
    423: LockedError,
    424: FailedDependencyError,
    425: TooEarlyError,
    426: UpgradeRequiredError,
    428: PreconditionRequiredError,
    429: TooManyRequestsError,
    431: RequestHeaderFieldsTooLargeError,
    451: UnavailableForLegalReasonsError,

    500: InternalServerError,
    501: NotImplementedResponseError,
    502: BadGatewayError,
    503: ServiceUnavailableError,
    504: GatewayTimeoutError,
    505: HttpVersionNotSupportedError,
    506: VariantAlsoNegotiatesError,
    507: InsufficientStorageError,
    508: LoopDetectedError,
    510: NotExtendedError,
    511: NetworkAuthenticationRequiredError,
}


def create_response_error(request: "Request", response: "Response") -> ResponseError:
    """
    Select and instantiate the exception type for an error response.

    Args:
        request: The request that was sent.
        response: A response with a status code >= 400.

    Returns:
        The mapped exception for registered codes, otherwise a plain
        ResponseError. The exception is returned, not raised.
    """
    exception_type = STATUS_EXCEPTIONS.get(response.status_code, ResponseError)
    return exception_type(request, response)
