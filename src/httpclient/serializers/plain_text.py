"""
Plain text serializer (text/plain).

This is also the fallback codec: when no serializer is registered for a
content type, request and response contexts use a PlainTextSerializer.

    apply():    str(body) encoded as UTF-8
    extract():  the whole body decoded with the Content-Type charset
                (UTF-8 when none is given), unmodified
"""

from typing import Any

from ..exceptions import SerializationError
from ..http.mime_types import get_charset
from ..http.request import Request
from ..http.response import Response
from .base import Serializer


class PlainTextSerializer(Serializer):
    def apply(self, request: Request, body: Any) -> Request:
        return self.with_encoded_body(request, str(body).encode("utf-8"))

    def extract(self, response: Response) -> str:
        raw = self.read_body(response)
        charset = get_charset(response.get_header_line("Content-Type"))

        try:
            return raw.decode(charset)
        except (UnicodeDecodeError, LookupError) as e:
            raise SerializationError(f"Unable to decode body as {charset}: {e}") from e
