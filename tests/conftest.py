"""
pytest configuration and fixtures.
"""

from typing import Callable, List, Optional, Union

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from httpclient import HTTPClient
from httpclient.drivers.base import AbstractDriver
from httpclient.http import MessageFactory, Request, Response


class RecordingDriver(AbstractDriver):
    """
    Driver that never touches the network.

    Every sent request is recorded. The reply is built by ``responder``,
    which may also raise to simulate a transport failure.
    """

    def __init__(self, responder: Optional[Callable[[Request], Response]] = None):
        super().__init__()
        self.requests: List[Request] = []
        self.responder = responder or (lambda request: self.respond(200))

    def respond(
        self,
        status_code: int = 200,
        body: Union[str, bytes] = b"",
        headers: Optional[dict] = None,
    ) -> Response:
        if isinstance(body, str):
            body = body.encode("utf-8")
        return self.build_response(status_code, None, (headers or {}).items(), body)

    def reply_with(
        self,
        status_code: int = 200,
        body: Union[str, bytes] = b"",
        headers: Optional[dict] = None,
    ) -> "RecordingDriver":
        self.responder = lambda request: self.respond(status_code, body, headers)
        return self

    def send_request(self, request: Request) -> Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last_request(self) -> Request:
        return self.requests[-1]


@pytest.fixture
def driver() -> RecordingDriver:
    """A driver answering 200 with an empty body."""
    return RecordingDriver()


@pytest.fixture
def client(driver: RecordingDriver) -> HTTPClient:
    """A client wired to the recording driver."""
    return HTTPClient(driver)


@pytest.fixture
def factory() -> MessageFactory:
    return MessageFactory()


@pytest.fixture
def sample_request(factory: MessageFactory) -> Request:
    """GET request with a query string and an Accept header."""
    return (
        factory.create_request("GET", "https://api.example.com/users?page=1&limit=10")
        .with_header("Accept", "application/json")
    )
