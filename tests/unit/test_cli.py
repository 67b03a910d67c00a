"""
Unit tests for the command line entry point.
"""

import pytest

from httpclient import ClientConfig
from httpclient.__main__ import build_parser, main
from httpclient.exceptions import ConnectionFailedError


@pytest.fixture(autouse=True)
def offline(monkeypatch, driver):
    """Route every CLI client through the recording driver."""
    for name in ("HTTPCLIENT_TIMEOUT_MS", "HTTPCLIENT_DRIVER", "HTTPCLIENT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(ClientConfig, "create_driver", lambda self: driver)


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        """Test optional arguments default to unset."""
        args = build_parser().parse_args(["GET", "https://example.com/"])

        assert args.header == []
        assert args.query == []
        assert args.data is None
        assert args.timeout is None
        assert not args.include

    def test_json_and_form_exclusive(self):
        """Test --json and --form cannot be combined."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["POST", "https://example.com/", "--json", "--form"])


class TestMain:
    """Tests for main()."""

    def test_get_json(self, driver, capsys):
        """Test a JSON response is pretty-printed."""
        driver.reply_with(200, '{"ok": true}', {"Content-Type": "application/json"})

        assert main(["get", "https://example.com/status"]) == 0

        assert driver.last_request.method == "GET"
        assert capsys.readouterr().out == '{\n  "ok": true\n}\n'

    def test_include(self, driver, capsys):
        """Test --include prints the status line and headers."""
        driver.reply_with(200, "hi", {"Content-Type": "text/plain"})

        main(["GET", "https://example.com/", "--include"])

        out = capsys.readouterr().out
        assert out.startswith("HTTP/1.1 200 OK\nContent-Type: text/plain\n\n")
        assert out.endswith("hi\n")

    def test_headers_and_query(self, driver):
        """Test -H and -q are applied."""
        main([
            "GET", "https://example.com/search",
            "-H", "Accept: text/html",
            "-H", "Accept: application/json",
            "-q", "q=a b",
        ])

        request = driver.last_request
        assert request.get_header("Accept") == ["text/html", "application/json"]
        assert request.uri.query == "q=a+b"

    def test_json_body(self, driver):
        """Test --json sends an encoded JSON body."""
        main(["POST", "https://example.com/", "--json", "-d", '{"a": [1, 2]}'])

        request = driver.last_request
        assert request.get_header_line("Content-Type") == "application/json"
        assert request.body.to_bytes() == b'{"a":[1,2]}'

    def test_form_body(self, driver):
        """Test --form sends a URL-encoded body."""
        main(["POST", "https://example.com/", "--form", "-d", "a=1&b=two words"])

        request = driver.last_request
        assert request.get_header_line("Content-Type") == "application/x-www-form-urlencoded"
        assert request.body.to_bytes() == b"a=1&b=two+words"

    def test_plain_body(self, driver):
        """Test a body without a type is sent as text."""
        main(["PUT", "https://example.com/", "-d", "hello"])
        assert driver.last_request.body.to_bytes() == b"hello"

    def test_invalid_json_body(self, driver, capsys):
        """Test malformed --json data fails without sending."""
        assert main(["POST", "https://example.com/", "--json", "-d", "{nope"]) == 2

        assert driver.requests == []
        assert "not valid JSON" in capsys.readouterr().err

    def test_invalid_header(self):
        """Test a header without a colon is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["GET", "https://example.com/", "-H", "NoColon"])
        assert exc_info.value.code == 2

    def test_error_status(self, driver, capsys):
        """Test error responses are printed and exit with 1."""
        driver.reply_with(404, "no such thing")

        assert main(["GET", "https://example.com/missing"]) == 1
        assert "no such thing" in capsys.readouterr().out

    def test_transport_error(self, driver, capsys):
        """Test transport failures exit with 2."""
        def fail(request):
            raise ConnectionFailedError(request, "refused")

        driver.responder = fail

        assert main(["GET", "https://example.com/"]) == 2
        assert "Unable to connect to remote server: refused" in capsys.readouterr().err

    def test_invalid_configuration(self, capsys):
        """Test invalid settings exit with 2 before anything is sent."""
        assert main(["GET", "https://example.com/", "--timeout", "0"]) == 2
        assert "timeout_ms" in capsys.readouterr().err

    def test_undecodable_body_printed_raw(self, driver, capsys):
        """Test a body that fails to decode is still shown."""
        driver.reply_with(200, b"{broken", {"Content-Type": "application/json"})

        assert main(["GET", "https://example.com/"]) == 0
        assert "{broken" in capsys.readouterr().out
