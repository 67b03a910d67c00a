"""
=============================================================================
HTTPCLIENT CLI ENTRY POINT
=============================================================================

Send a single request from the shell.

=============================================================================
USAGE
=============================================================================

    # Simple GET
    python -m httpclient GET https://httpbin.org/get

    # Query parameters and headers
    python -m httpclient GET https://httpbin.org/get -q page=2 -H "Accept: application/json"

    # JSON body
    python -m httpclient POST https://httpbin.org/post --json -d '{"name": "alice"}'

    # Form body
    python -m httpclient POST https://httpbin.org/post --form -d "name=alice&age=30"

    # Status line and headers too
    python -m httpclient HEAD https://example.com --include

=============================================================================
EXIT CODES
=============================================================================

    0   status < 400
    1   status >= 400 (the response is still printed)
    2   no response: DNS, connection, TLS, configuration or codec error

Settings not given on the command line come from the HTTPCLIENT_*
environment variables (see ClientConfig.from_env()).

=============================================================================
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from ._version import __version__
from .client import HTTPClient
from .config import DRIVERS, LOG_LEVELS, ClientConfig
from .context.request_context import RequestContext
from .context.response_context import ResponseContext
from .exceptions import HTTPClientError, ResponseError, SerializationError
from .http.mime_types import MediaType
from .http.query import parse_query

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="httpclient",
        description="Send an HTTP request and print the response",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m httpclient GET https://httpbin.org/get
  python -m httpclient GET https://httpbin.org/get -q page=2
  python -m httpclient POST https://httpbin.org/post --json -d '{"a": 1}'
  python -m httpclient POST https://httpbin.org/post --form -d "a=1&b=2"
        """
    )

    # ─────────────────────────────────────────────────────────────────────
    # REQUEST ARGUMENTS
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument("method", help="Request method (GET, POST, ...)")
    parser.add_argument("url", help="Absolute URL to request")

    parser.add_argument(
        "--header", "-H",
        action="append",
        default=[],
        metavar="'NAME: VALUE'",
        help="Add a request header (repeatable)"
    )

    parser.add_argument(
        "--query", "-q",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Set a query parameter (repeatable)"
    )

    parser.add_argument(
        "--data", "-d",
        default=None,
        help="Request body"
    )

    body_type = parser.add_mutually_exclusive_group()
    body_type.add_argument(
        "--json",
        action="store_true",
        help="Send the body as application/json (it must be valid JSON)"
    )
    body_type.add_argument(
        "--form",
        action="store_true",
        help="Send the body as application/x-www-form-urlencoded"
    )

    # ─────────────────────────────────────────────────────────────────────
    # TRANSPORT ARGUMENTS
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument(
        "--timeout",
        type=int,
        default=None,
        metavar="MS",
        help="Timeout in milliseconds (default: 30000)"
    )

    parser.add_argument(
        "--no-redirects",
        action="store_true",
        help="Do not follow redirects"
    )

    parser.add_argument(
        "--driver",
        choices=DRIVERS,
        default=None,
        help="Transport library (default: httpx)"
    )

    # ─────────────────────────────────────────────────────────────────────
    # OUTPUT ARGUMENTS
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument(
        "--include", "-i",
        action="store_true",
        help="Print the status line and response headers"
    )

    parser.add_argument(
        "--log-level", "-l",
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: WARNING)"
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"httpclient {__version__}"
    )

    return parser


def build_config(args: argparse.Namespace) -> ClientConfig:
    """Environment settings, overridden by whatever was given on the command line."""
    config = ClientConfig.from_env()

    if args.timeout is not None:
        config.timeout_ms = args.timeout
    if args.no_redirects:
        config.follow_redirects = False
    if args.driver is not None:
        config.driver = args.driver
    if args.log_level is not None:
        config.log_level = args.log_level

    config.validate()
    return config


def apply_arguments(context: RequestContext, args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    for header in args.header:
        name, separator, value = header.partition(":")
        if not separator or not name.strip():
            parser.error(f"Header must look like 'Name: value', got {header!r}")
        context.with_header(name.strip(), value.strip(), append=True)

    for parameter in args.query:
        name, separator, value = parameter.partition("=")
        if not separator or not name:
            parser.error(f"Query parameter must look like name=value, got {parameter!r}")
        context.with_query_parameter(name, value)

    if args.data is None:
        return

    if args.json:
        context.as_json()
        try:
            context.with_body(json.loads(args.data))
        except ValueError as e:
            raise SerializationError(f"--data is not valid JSON: {e}") from e
    elif args.form:
        context.with_content_type(MediaType.APPLICATION_X_WWW_FORM_URLENCODED)
        context.with_body(parse_query(args.data))
    else:
        context.with_body(args.data)


def print_response(response: ResponseContext, include: bool) -> None:
    if include:
        print(response.get_response().status_line)
        for name, values in response.get_headers().items():
            for value in values:
                print(f"{name}: {value}")
        print()

    try:
        body = response.get_parsed_body()
    except SerializationError as e:
        logger.warning(f"Could not decode response body: {e}")
        body = response.get_body().to_bytes().decode("utf-8", errors="replace")

    if isinstance(body, (dict, list)):
        print(json.dumps(body, indent=2, ensure_ascii=False))
    elif body:
        print(body)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        The process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except HTTPClientError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)

    with HTTPClient(config=config) as client:
        try:
            context = client.create_context(args.method.upper(), args.url)
            apply_arguments(context, args, parser)
            response = context.run()
        except ResponseError as e:
            print_response(ResponseContext(client, e.response), args.include)
            return 1
        except HTTPClientError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

        print_response(response, args.include)

    return 0


# =============================================================================
# ENTRY POINT
# =============================================================================

if __name__ == "__main__":
    sys.exit(main())
