"""
=============================================================================
REQUESTS DRIVER
=============================================================================

Sends requests through a ``requests.Session``, for code bases that already
configure sessions (adapters, retries, certificates) for requests.

    driver = RequestsDriver(session=my_session)
    client = HTTPClient(driver)

requests takes headers as a dict, so repeated headers are joined into one
comma-separated line before sending. Response headers come back the same
way: one value per name.

=============================================================================
EXCEPTION MAPPING
=============================================================================

    requests.exceptions.SSLError          ──► SslCertificateError
    requests.exceptions.Timeout           ──► ConnectionFailedError
    requests.exceptions.TooManyRedirects  ──► ConnectionFailedError
    requests.exceptions.ConnectionError   ──► UnresolvableHostError / ...
    requests.exceptions.ChunkedEncodingError
                                          ──► ConnectionFailedError
    requests.exceptions.RequestException  ──► DriverError

=============================================================================
"""

import logging
from typing import Dict, Optional

import requests

from ..exceptions import ConnectionFailedError, DriverError, SslCertificateError
from ..http.factory import ResponseFactory
from ..http.headers import Headers
from ..http.request import Request
from ..http.response import Response
from .base import DEFAULT_USER_AGENT, AbstractDriver
from .features import RedirectsMixin, TimeoutsMixin

logger = logging.getLogger(__name__)

# urllib3 reports the HTTP version as an int
_PROTOCOL_VERSIONS = {
    10: "1.0",
    11: "1.1",
    20: "2",
}


class RequestsDriver(AbstractDriver, TimeoutsMixin, RedirectsMixin):
    def __init__(
        self,
        session: Optional[requests.Session] = None,
        response_factory: Optional[ResponseFactory] = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        super().__init__(response_factory, user_agent)
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self._default_max_redirects = self._session.max_redirects

    @property
    def session(self) -> requests.Session:
        return self._session

    @staticmethod
    def join_headers(headers: Headers) -> Dict[str, str]:
        return {name: headers.get_line(name) for name in headers}

    def send_request(self, request: Request) -> Response:
        request = self.prepare_request(request)
        url = str(request.uri)
        log_url = request.uri.redacted

        if self._maximum_redirects is not None:
            self._session.max_redirects = self._maximum_redirects
        else:
            self._session.max_redirects = self._default_max_redirects

        try:
            response = self._session.request(
                request.method,
                url,
                headers=self.join_headers(request.headers),
                data=self.get_content(request),
                timeout=self.get_timeout_seconds(),
                allow_redirects=self._follow_redirects,
            )
        except requests.exceptions.SSLError as e:
            logger.debug(f"requests TLS failure for {log_url}: {e!r}")
            raise SslCertificateError(request, str(e), e) from e
        except requests.exceptions.Timeout as e:
            logger.debug(f"requests timed out for {log_url}: {e!r}")
            raise ConnectionFailedError(request, f"Request timed out: {e}", e) from e
        except requests.exceptions.TooManyRedirects as e:
            logger.debug(f"requests exceeded the redirect limit for {log_url}: {e!r}")
            raise ConnectionFailedError(request, str(e), e) from e
        except requests.exceptions.ConnectionError as e:
            logger.debug(f"requests could not connect to {log_url}: {e!r}")
            raise self.connection_error(request, e) from e
        except requests.exceptions.ChunkedEncodingError as e:
            logger.debug(f"requests received a truncated response from {log_url}: {e!r}")
            raise ConnectionFailedError(request, str(e), e) from e
        except requests.exceptions.RequestException as e:
            logger.debug(f"requests failed for {log_url}: {e!r}")
            raise DriverError(request, str(e), e) from e

        version = getattr(response.raw, "version", None)

        return self.build_response(
            response.status_code,
            response.reason,
            response.headers.items(),
            response.content,
            _PROTOCOL_VERSIONS.get(version, "1.1"),
            content_decoded=True,
        )

    def close(self) -> None:
        """Close the session if this driver created it."""
        if self._owns_session:
            self._session.close()
