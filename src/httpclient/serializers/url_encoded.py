"""
URL-encoded form serializer (application/x-www-form-urlencoded).

    apply():    {"a": "b", "n": 1}  →  b"a=b&n=1"
    extract():  b"a=b&n=1"          →  {"a": "b", "n": "1"}

Only structured values can be form encoded: mappings, lists/tuples and
dataclass instances. Anything else raises InvalidArgumentError. The
encoding rules are those of http.query.build_query().
"""

from dataclasses import is_dataclass
from typing import Any, Dict, Mapping

from ..exceptions import InvalidArgumentError, SerializationError
from ..http.query import build_query, parse_query
from ..http.request import Request
from ..http.response import Response
from .base import Serializer


class UrlEncodedSerializer(Serializer):
    def apply(self, request: Request, body: Any) -> Request:
        structured = isinstance(body, (Mapping, list, tuple)) or (
            is_dataclass(body) and not isinstance(body, type)
        )
        if not structured:
            raise InvalidArgumentError(
                f"Only mappings, sequences or dataclasses may be URL encoded, "
                f"got {type(body).__name__}"
            )

        return self.with_encoded_body(request, build_query(body).encode("ascii"))

    def extract(self, response: Response) -> Dict[str, Any]:
        raw = self.read_body(response)

        try:
            text = raw.decode("ascii")
        except UnicodeDecodeError as e:
            raise SerializationError(f"Form body is not URL encoded: {e}") from e

        return parse_query(text)
