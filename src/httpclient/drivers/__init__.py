"""
Transport drivers.

    HttpxDriver     httpx.Client, the default
    RequestsDriver  requests.Session

Both support timeouts and redirect limits (SupportsTimeouts,
SupportsRedirects).
"""

from .base import AbstractDriver, Driver
from .features import RedirectsMixin, SupportsRedirects, SupportsTimeouts, TimeoutsMixin
from .httpx_driver import HttpxDriver
from .requests_driver import RequestsDriver

__all__ = [
    "Driver",
    "AbstractDriver",
    "HttpxDriver",
    "RequestsDriver",
    "SupportsTimeouts",
    "SupportsRedirects",
    "TimeoutsMixin",
    "RedirectsMixin",
]
