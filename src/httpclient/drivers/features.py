"""
=============================================================================
OPTIONAL DRIVER FEATURES
=============================================================================

Not every transport can enforce a timeout or cap redirects. Drivers that
can mix in the matching class; callers check with isinstance() against the
runtime-checkable protocols before configuring:

    driver = client.get_driver()
    if isinstance(driver, SupportsTimeouts):
        driver.set_timeout(5000)

    ┌──────────────────┬──────────────────┬───────────────────────────────┐
    │ Protocol         │ Mixin            │ Methods                       │
    ├──────────────────┼──────────────────┼───────────────────────────────┤
    │ SupportsTimeouts │ TimeoutsMixin    │ set_timeout / get_timeout     │
    │ SupportsRedirects│ RedirectsMixin   │ follow_redirects              │
    │                  │                  │ is_follow_redirects_enabled   │
    │                  │                  │ set_maximum_redirects         │
    │                  │                  │ get_maximum_redirects         │
    └──────────────────┴──────────────────┴───────────────────────────────┘

Timeouts are in milliseconds. None means no timeout; 0 is rejected, so a
zero read from a config file does not silently disable the timeout.

=============================================================================
"""

from typing import Optional, Protocol, runtime_checkable

from ..exceptions import ConfigurationError


@runtime_checkable
class SupportsTimeouts(Protocol):
    def set_timeout(self, amount: Optional[int]) -> None:
        ...

    def get_timeout(self) -> Optional[int]:
        ...


@runtime_checkable
class SupportsRedirects(Protocol):
    def follow_redirects(self, follow_redirects: bool = True) -> None:
        ...

    def is_follow_redirects_enabled(self) -> bool:
        ...

    def set_maximum_redirects(self, maximum_redirects: Optional[int]) -> None:
        ...

    def get_maximum_redirects(self) -> Optional[int]:
        ...


class TimeoutsMixin:
    _timeout: Optional[int] = None

    def set_timeout(self, amount: Optional[int]) -> None:
        """
        Set the request timeout in milliseconds.

        Raises:
            ConfigurationError: If ``amount`` is 0 (use None to disable the
                timeout) or negative.
        """
        if amount is None or amount > 0:
            self._timeout = amount
            return

        if amount == 0:
            raise ConfigurationError("Use None to disable the timeout")

        raise ConfigurationError(f"Timeout must be a positive number of milliseconds, got {amount}")

    def get_timeout(self) -> Optional[int]:
        return self._timeout

    def get_timeout_seconds(self) -> Optional[float]:
        """The timeout converted for libraries that take seconds."""
        return self._timeout / 1000 if self._timeout is not None else None


class RedirectsMixin:
    _follow_redirects: bool = True
    _maximum_redirects: Optional[int] = None

    def follow_redirects(self, follow_redirects: bool = True) -> None:
        self._follow_redirects = follow_redirects

    def is_follow_redirects_enabled(self) -> bool:
        return self._follow_redirects

    def set_maximum_redirects(self, maximum_redirects: Optional[int]) -> None:
        """
        Cap the number of redirects followed. None uses the library default.

        Raises:
            ConfigurationError: If ``maximum_redirects`` is negative.
        """
        if maximum_redirects is not None and maximum_redirects < 0:
            raise ConfigurationError("Number of maximum redirects must be 0 or greater")
        self._maximum_redirects = maximum_redirects

    def get_maximum_redirects(self) -> Optional[int]:
        return self._maximum_redirects
