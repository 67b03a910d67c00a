"""
=============================================================================
CLIENT CONFIGURATION
=============================================================================

Everything about how a client talks to the network, in one dataclass.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                     │
    │   Priority (highest to lowest):                                     │
    │                                                                     │
    │   1. Command-line arguments                                         │
    │      └── python -m httpclient GET https://... --timeout 5000        │
    │                                                                     │
    │   2. Environment variables                                          │
    │      └── HTTPCLIENT_TIMEOUT_MS=5000 python -m httpclient ...        │
    │                                                                     │
    │   3. Default values (in this dataclass)                             │
    │                                                                     │
    └─────────────────────────────────────────────────────────────────────┘

Settings are checked by validate() before a driver is built, so a typo in
an environment variable fails at startup instead of on the first request.

=============================================================================
"""

import os
from dataclasses import dataclass
from typing import Optional

from ._version import __version__
from .drivers.base import Driver
from .drivers.httpx_driver import HttpxDriver
from .drivers.requests_driver import RequestsDriver
from .exceptions import ConfigurationError

DRIVERS = ("httpx", "requests")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ClientConfig:
    """
    Configuration for HTTPClient and its default driver.

    Example:
        config = ClientConfig(timeout_ms=5000, max_redirects=3)
        client = HTTPClient(config=config)
    """

    # ─────────────────────────────────────────────────────────────────────
    # TRANSPORT
    # ─────────────────────────────────────────────────────────────────────

    timeout_ms: Optional[int] = 30000
    """
    Request timeout in milliseconds.
    None disables the timeout. 0 is rejected.
    """

    follow_redirects: bool = True

    max_redirects: Optional[int] = None
    """
    Upper bound on redirects followed per request.
    None keeps the driver library's own limit.
    """

    user_agent: str = f"httpclient/{__version__}"
    """Sent when a request has no User-Agent header of its own."""

    driver: str = "httpx"
    """Transport to build: "httpx" or "requests"."""

    # ─────────────────────────────────────────────────────────────────────
    # LOGGING
    # ─────────────────────────────────────────────────────────────────────

    log_level: str = "WARNING"
    """
    Logging level for the command line (DEBUG, INFO, WARNING, ERROR).
    DEBUG logs every request and response status.
    """

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Create configuration from environment variables.

        =====================================================================
        ENVIRONMENT VARIABLES
        =====================================================================

        HTTPCLIENT_TIMEOUT_MS        Timeout in ms, "none" disables (default: 30000)
        HTTPCLIENT_FOLLOW_REDIRECTS  "true" / "false" (default: true)
        HTTPCLIENT_MAX_REDIRECTS     Redirect limit (default: library default)
        HTTPCLIENT_USER_AGENT        User-Agent header (default: httpclient/<version>)
        HTTPCLIENT_DRIVER            httpx or requests (default: httpx)
        HTTPCLIENT_LOG_LEVEL         Logging level (default: WARNING)

        =====================================================================

        Raises:
            ConfigurationError: If a numeric or boolean variable does not parse.
        """
        defaults = cls()
        return cls(
            timeout_ms=_optional_int("HTTPCLIENT_TIMEOUT_MS", defaults.timeout_ms),
            follow_redirects=_boolean("HTTPCLIENT_FOLLOW_REDIRECTS", defaults.follow_redirects),
            max_redirects=_optional_int("HTTPCLIENT_MAX_REDIRECTS", defaults.max_redirects),
            user_agent=os.getenv("HTTPCLIENT_USER_AGENT", defaults.user_agent),
            driver=os.getenv("HTTPCLIENT_DRIVER", defaults.driver).lower(),
            log_level=os.getenv("HTTPCLIENT_LOG_LEVEL", defaults.log_level).upper(),
        )

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ConfigurationError: On the first invalid value.
        """
        if self.timeout_ms is not None and self.timeout_ms <= 0:
            raise ConfigurationError(
                f"timeout_ms must be > 0 (use None to disable), got {self.timeout_ms}"
            )

        if self.max_redirects is not None and self.max_redirects < 0:
            raise ConfigurationError(f"max_redirects must be >= 0, got {self.max_redirects}")

        if self.driver not in DRIVERS:
            raise ConfigurationError(
                f"Unknown driver {self.driver!r}, expected one of: {', '.join(DRIVERS)}"
            )

        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level {self.log_level!r}")

    def create_driver(self) -> Driver:
        """Validate, then build and configure the selected driver."""
        self.validate()

        if self.driver == "requests":
            driver = RequestsDriver(user_agent=self.user_agent)
        else:
            driver = HttpxDriver(user_agent=self.user_agent)

        driver.set_timeout(self.timeout_ms)
        driver.follow_redirects(self.follow_redirects)
        driver.set_maximum_redirects(self.max_redirects)
        return driver


def _optional_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    if raw.strip().lower() == "none":
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def _boolean(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default

    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")
