"""
=============================================================================
JSON SERIALIZER (application/json)
=============================================================================

    apply():    {"name": "alice", "tags": ["a"]}  →  b'{"name":"alice","tags":["a"]}'
    extract():  b'{"ok": true}'                   →  {"ok": True}

Encoding is strict. NaN and Infinity are not JSON, so they are rejected
instead of being written as the bare tokens json.dumps() emits by default.
Circular structures and values json cannot represent (sets, objects) are
rejected too. All of these raise SerializationError.

Decoding an empty body is an error as well: "" is not a JSON document.

Extra keyword arguments for json.dumps() / json.loads() can be passed in:

    JsonSerializer(encode_options={"sort_keys": True})
    JsonSerializer(decode_options={"parse_float": decimal.Decimal})

=============================================================================
"""

import json
from typing import Any, Dict, Optional

from ..exceptions import SerializationError
from ..http.mime_types import get_charset
from ..http.request import Request
from ..http.response import Response
from .base import Serializer

DEFAULT_ENCODE_OPTIONS: Dict[str, Any] = {
    "allow_nan": False,
    "ensure_ascii": False,
    "separators": (",", ":"),
}


class JsonSerializer(Serializer):
    def __init__(
        self,
        encode_options: Optional[Dict[str, Any]] = None,
        decode_options: Optional[Dict[str, Any]] = None,
    ):
        self.encode_options = {**DEFAULT_ENCODE_OPTIONS, **(encode_options or {})}
        self.decode_options = dict(decode_options or {})

    def apply(self, request: Request, body: Any) -> Request:
        try:
            encoded = json.dumps(body, **self.encode_options)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Unable to encode body as JSON: {e}") from e

        return self.with_encoded_body(request, encoded.encode("utf-8"))

    def extract(self, response: Response) -> Any:
        raw = self.read_body(response)
        charset = get_charset(response.get_header_line("Content-Type"))

        try:
            return json.loads(raw.decode(charset), **self.decode_options)
        except (UnicodeDecodeError, LookupError, ValueError) as e:
            raise SerializationError(f"Unable to decode JSON body: {e}") from e
