"""
=============================================================================
HEADER COLLECTION
=============================================================================

An ordered multimap of header name → list of values.

    ┌──────────────────────────────────────────────────────────────────────┐
    │  lookup key      stored name       values                            │
    ├──────────────────────────────────────────────────────────────────────┤
    │  "host"          "Host"            ["example.com"]                   │
    │  "accept"        "Accept"          ["text/html", "application/json"] │
    │  "x-request-id"  "X-Request-ID"    ["abc123"]                        │
    └──────────────────────────────────────────────────────────────────────┘

- Lookups are case-insensitive ("content-type" finds "Content-Type").
- The name is stored with the case it was first given and is sent that way.
- Insertion order is kept, so headers go on the wire in the order set.

Headers values are immutable: with_header(), with_added_header() and
without_header() return a new collection and leave the original alone.

=============================================================================
"""

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from ..exceptions import InvalidHeaderError
from .methods import is_valid_token

HeaderValue = Union[str, int, float, Iterable[Union[str, int, float]]]

_FORBIDDEN_VALUE_CHARACTERS = ("\r", "\n", "\0")


def _normalize_name(name: Any) -> str:
    if not is_valid_token(name):
        raise InvalidHeaderError(f"Header name must be an RFC 7230 token, got {name!r}")
    return name


def _normalize_value(value: Any) -> List[str]:
    """Turn a scalar or list of scalars into a validated list of strings."""
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        values = [value]
    elif isinstance(value, (list, tuple)):
        values = list(value)
    else:
        raise InvalidHeaderError(
            f"Header value must be a string, number or list, got {type(value).__name__}"
        )

    if not values:
        raise InvalidHeaderError("Header values must not be an empty list")

    normalized = []
    for item in values:
        if isinstance(item, bool) or not isinstance(item, (str, int, float)):
            raise InvalidHeaderError(f"Invalid header value: {item!r}")

        text = str(item)
        if any(char in text for char in _FORBIDDEN_VALUE_CHARACTERS):
            raise InvalidHeaderError(f"Header value contains CR, LF or NUL: {text!r}")

        normalized.append(text.strip(" \t"))

    return normalized


class Headers:
    """
    Immutable, case-insensitive, case-preserving header multimap.

    Example:
        >>> headers = Headers({"Content-Type": "text/plain"})
        >>> headers = headers.with_added_header("Accept", "text/html")
        >>> headers.get("content-type")
        ['text/plain']
        >>> headers.to_dict()
        {'Content-Type': ['text/plain'], 'Accept': ['text/html']}
    """

    __slots__ = ("_entries",)

    def __init__(
        self,
        headers: Optional[Union[Mapping[str, HeaderValue], Iterable[Tuple[str, HeaderValue]]]] = None,
    ):
        # lowercase name -> (original name, values)
        self._entries: Dict[str, Tuple[str, List[str]]] = {}

        if headers is None:
            return

        pairs = headers.items() if isinstance(headers, Mapping) else headers
        for name, value in pairs:
            key = _normalize_name(name).lower()
            values = _normalize_value(value)
            if key in self._entries:
                stored_name, existing = self._entries[key]
                self._entries[key] = (stored_name, existing + values)
            else:
                self._entries[key] = (name, values)

    # =========================================================================
    # READ ACCESS
    # =========================================================================

    def get(self, name: str) -> List[str]:
        """
        Get all values of a header.

        Returns:
            A copy of the value list, empty if the header is absent.
        """
        entry = self._entries.get(name.lower())
        return list(entry[1]) if entry else []

    def get_line(self, name: str) -> str:
        """Get all values joined with ", ", or "" if the header is absent."""
        return ", ".join(self.get(name))

    def has(self, name: str) -> bool:
        return name.lower() in self._entries

    def to_dict(self) -> Dict[str, List[str]]:
        """Get a plain dict of stored name → values, in insertion order."""
        return {name: list(values) for name, values in self._entries.values()}

    def multi_items(self) -> List[Tuple[str, str]]:
        """
        Flatten into (name, value) pairs, one per value.

        This is the shape drivers put on the wire:
            {"Accept": ["a", "b"]} → [("Accept", "a"), ("Accept", "b")]
        """
        return [
            (name, value)
            for name, values in self._entries.values()
            for value in values
        ]

    # =========================================================================
    # COPY-ON-WRITE MODIFIERS
    # =========================================================================

    def with_header(self, name: str, value: HeaderValue) -> "Headers":
        """
        Return a copy with ``name`` set to ``value``, replacing all old values.

        The header keeps its position if it already existed; the new name
        casing wins.
        """
        key = _normalize_name(name).lower()
        values = _normalize_value(value)

        new = self._copy()
        new._entries[key] = (name, values)
        return new

    def with_added_header(self, name: str, value: HeaderValue) -> "Headers":
        """
        Return a copy with ``value`` appended to the existing values.

        Identical values are appended again, never de-duplicated.
        """
        key = _normalize_name(name).lower()
        values = _normalize_value(value)

        new = self._copy()
        if key in new._entries:
            stored_name, existing = new._entries[key]
            new._entries[key] = (stored_name, existing + values)
        else:
            new._entries[key] = (name, values)
        return new

    def without_header(self, name: str) -> "Headers":
        """Return a copy without ``name``. Absent headers are not an error."""
        new = self._copy()
        new._entries.pop(name.lower(), None)
        return new

    def with_header_first(self, name: str, value: HeaderValue) -> "Headers":
        """
        Return a copy with ``name`` set to ``value`` and moved to the front.

        Used for the Host header, which RFC 7230 recommends sending first.
        """
        key = _normalize_name(name).lower()
        values = _normalize_value(value)

        new = Headers()
        new._entries[key] = (name, values)
        for other_key, entry in self._entries.items():
            if other_key != key:
                new._entries[other_key] = (entry[0], list(entry[1]))
        return new

    def _copy(self) -> "Headers":
        new = Headers()
        new._entries = {
            key: (name, list(values))
            for key, (name, values) in self._entries.items()
        }
        return new

    # =========================================================================
    # PYTHON PROTOCOLS
    # =========================================================================

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __iter__(self) -> Iterator[str]:
        return iter(name for name, _ in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Headers):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Headers({self.to_dict()!r})"
