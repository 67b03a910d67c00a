"""
=============================================================================
HTTPX DRIVER (default)
=============================================================================

Sends requests through an ``httpx.Client``.

    driver = HttpxDriver()
    driver.set_timeout(5000)            # ms
    driver.follow_redirects(True)
    driver.set_maximum_redirects(5)

A client passed in is used as-is (proxies, certificates, transports and
connection pooling all stay under the caller's control), except that the
redirect limit is written to its ``max_redirects`` attribute on each send.
Without one, the driver creates a client and closes it in close().

=============================================================================
EXCEPTION MAPPING
=============================================================================

    httpx.TimeoutException      ──► ConnectionFailedError
    httpx.TooManyRedirects      ──► ConnectionFailedError
    httpx.ConnectError          ──► UnresolvableHostError  (gaierror inside)
                                    SslCertificateError    (ssl.SSLError inside)
                                    ConnectionFailedError  (anything else)
    httpx.UnsupportedProtocol   ──► DriverError
    httpx.TransportError        ──► ConnectionFailedError
    httpx.HTTPError / InvalidURL──► DriverError

=============================================================================
"""

import logging
from typing import Optional

import httpx

from ..exceptions import ConnectionFailedError, DriverError
from ..http.factory import ResponseFactory
from ..http.request import Request
from ..http.response import Response
from .base import DEFAULT_USER_AGENT, AbstractDriver
from .features import RedirectsMixin, TimeoutsMixin

logger = logging.getLogger(__name__)


class HttpxDriver(AbstractDriver, TimeoutsMixin, RedirectsMixin):
    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        response_factory: Optional[ResponseFactory] = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        super().__init__(response_factory, user_agent)
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client()
        self._default_max_redirects = self._client.max_redirects

    @property
    def client(self) -> httpx.Client:
        return self._client

    def send_request(self, request: Request) -> Response:
        request = self.prepare_request(request)
        url = str(request.uri)
        log_url = request.uri.redacted

        if self._maximum_redirects is not None:
            self._client.max_redirects = self._maximum_redirects
        else:
            self._client.max_redirects = self._default_max_redirects

        try:
            response = self._client.request(
                request.method,
                url,
                headers=self.marshal_headers(request.headers),
                content=self.get_content(request),
                timeout=self.get_timeout_seconds(),
                follow_redirects=self._follow_redirects,
            )
        except httpx.TimeoutException as e:
            logger.debug(f"httpx timed out for {log_url}: {e!r}")
            raise ConnectionFailedError(request, f"Request timed out: {e}", e) from e
        except httpx.TooManyRedirects as e:
            logger.debug(f"httpx exceeded the redirect limit for {log_url}: {e!r}")
            raise ConnectionFailedError(request, str(e), e) from e
        except httpx.ConnectError as e:
            logger.debug(f"httpx could not connect to {log_url}: {e!r}")
            raise self.connection_error(request, e) from e
        except httpx.UnsupportedProtocol as e:
            logger.debug(f"httpx rejected {log_url}: {e!r}")
            raise DriverError(request, str(e), e) from e
        except httpx.TransportError as e:
            logger.debug(f"httpx transport error for {log_url}: {e!r}")
            raise ConnectionFailedError(request, str(e), e) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(f"httpx failed for {log_url}: {e!r}")
            raise DriverError(request, str(e), e) from e

        return self.build_response(
            response.status_code,
            response.reason_phrase,
            response.headers.multi_items(),
            response.content,
            response.http_version.replace("HTTP/", ""),
            content_decoded=True,
        )

    def close(self) -> None:
        """Close the httpx client if this driver created it."""
        if self._owns_client:
            self._client.close()
