"""
=============================================================================
QUERY STRING / FORM ENCODING
=============================================================================

Shared by the RequestContext query helpers and the URL-encoded serializer.

    build_query({"q": "hello world", "page": 2, "debug": None})
        → "q=hello+world&page=2"

    parse_query("q=hello+world&page=2")
        → {"q": "hello world", "page": "2"}

=============================================================================
ENCODING RULES
=============================================================================

    ┌────────────────────────┬──────────────────────────────────────────┐
    │ Value                  │ Encoded as                               │
    ├────────────────────────┼──────────────────────────────────────────┤
    │ "text"                 │ text (percent-encoded, space → "+")      │
    │ 42 / 3.14              │ "42" / "3.14"                            │
    │ True / False           │ "1" / "0"                                │
    │ None                   │ left out entirely                        │
    │ {"b": 1} under "a"     │ a[b]=1                                   │
    │ ["x", "y"] under "a"   │ a[0]=x&a[1]=y                            │
    └────────────────────────┴──────────────────────────────────────────┘

The round trip is lossy: everything comes back as a string, and a key set
to None does not come back at all.

    >>> parse_query(build_query({"n": 42, "flag": True, "gone": None}))
    {'n': '42', 'flag': '1'}

=============================================================================
"""

import re
from dataclasses import asdict, is_dataclass
from typing import Any, Dict, Iterable, List, Mapping, Tuple
from urllib.parse import quote_plus, unquote_plus

_BRACKETED_KEY = re.compile(r"^([^\[]+)((?:\[[^\]]*\])+)$")
_SUBKEY = re.compile(r"\[([^\]]*)\]")
_INDEX = re.compile(r"[0-9]+")


def iter_items(data: Any) -> Iterable[Tuple[Any, Any]]:
    """
    Iterate over the (key, value) pairs of a structured value.

    Mappings yield their items, lists and tuples yield (index, item), and
    dataclass instances yield their fields.

    Raises:
        TypeError: If ``data`` is not a structured value.
    """
    if isinstance(data, Mapping):
        return data.items()
    if isinstance(data, (list, tuple)):
        return enumerate(data)
    if is_dataclass(data) and not isinstance(data, type):
        return asdict(data).items()
    raise TypeError(f"Cannot encode {type(data).__name__} as key/value pairs")


def _scalar_to_string(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def _flatten(prefix: str, value: Any, pairs: List[Tuple[str, str]]) -> None:
    if value is None:
        return

    if isinstance(value, (Mapping, list, tuple)) or (
        is_dataclass(value) and not isinstance(value, type)
    ):
        for key, item in iter_items(value):
            _flatten(f"{prefix}[{key}]", item, pairs)
        return

    pairs.append((prefix, _scalar_to_string(value)))


def build_query(params: Any) -> str:
    """
    Encode structured data as an application/x-www-form-urlencoded string.

    Args:
        params: Mapping, list/tuple or dataclass instance.

    Returns:
        The encoded string, without a leading "?".
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in iter_items(params):
        _flatten(str(key), value, pairs)

    return "&".join(f"{quote_plus(key)}={quote_plus(value)}" for key, value in pairs)


def parse_query(query: str) -> Dict[str, Any]:
    """
    Decode a query string into a dict of strings.

    Bracketed keys build nested structures: "a[b]=1" gives {"a": {"b": "1"}}
    and "a[]=1&a[]=2" gives {"a": ["1", "2"]}. A repeated plain key keeps
    the last value.
    """
    result: Dict[str, Any] = {}
    if not query:
        return result

    for segment in query.lstrip("?").split("&"):
        if not segment:
            continue

        raw_key, _, raw_value = segment.partition("=")
        key = unquote_plus(raw_key)
        if not key:
            continue

        _assign(result, key, unquote_plus(raw_value))

    return {key: _listify(value) for key, value in result.items()}


def _assign(target: Dict[str, Any], key: str, value: str) -> None:
    match = _BRACKETED_KEY.match(key)
    if not match:
        target[key] = value
        return

    path = [match.group(1)] + _SUBKEY.findall(match.group(2))

    container = target
    for part in path[:-1]:
        if part == "":
            part = _next_index(container)
        child = container.get(part)
        if not isinstance(child, dict):
            child = {}
            container[part] = child
        container = child

    last = path[-1]
    if last == "":
        last = _next_index(container)
    container[last] = value


def _next_index(container: Dict[str, Any]) -> str:
    indexes = [int(key) for key in container if _INDEX.fullmatch(key)]
    return str(max(indexes) + 1) if indexes else "0"


def _listify(value: Any) -> Any:
    """Turn dicts keyed "0".."n-1" back into lists, recursively."""
    if not isinstance(value, dict):
        return value

    converted = {key: _listify(item) for key, item in value.items()}
    if list(converted) == [str(index) for index in range(len(converted))]:
        return list(converted.values())
    return converted
