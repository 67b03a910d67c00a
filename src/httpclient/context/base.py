"""
Accessors shared by RequestContext and ResponseContext.

Both contexts wrap one message; MessageContext reads headers from it and
resolves the serializer that matches its Content-Type.
"""

import logging
from typing import TYPE_CHECKING, Dict, List, Optional, Union

from ..http.mime_types import MediaType, strip_parameters
from ..http.request import Request
from ..http.response import Response
from ..serializers.base import Serializer
from ..serializers.plain_text import PlainTextSerializer

if TYPE_CHECKING:
    from ..client import HTTPClient

logger = logging.getLogger(__name__)


class MessageContext:
    def __init__(self, client: "HTTPClient"):
        self._client = client

    def _get_message(self) -> Union[Request, Response]:
        raise NotImplementedError

    @property
    def client(self) -> "HTTPClient":
        return self._client

    def get_header(self, name: str) -> List[str]:
        return self._get_message().get_header(name)

    def get_header_line(self, name: str) -> str:
        return self._get_message().get_header_line(name)

    def get_headers(self) -> Dict[str, List[str]]:
        return self._get_message().headers.to_dict()

    def has_header(self, name: str) -> bool:
        return self._get_message().has_header(name)

    def get_content_type(self, omit_encoding: bool = False) -> Optional[str]:
        """
        Get the Content-Type header.

        Args:
            omit_encoding: Strip parameters, so "application/json;
                charset=utf-8" becomes "application/json".

        Returns:
            The header value, or None when it is missing or empty.
        """
        content_type = self.get_header_line("Content-Type")
        if not content_type:
            return None
        if omit_encoding:
            return strip_parameters(content_type)
        return content_type

    def _resolve_serializer(self) -> Serializer:
        """
        Find the serializer for this message's media type.

        Messages without a Content-Type are treated as text/plain, and media
        types without a registered serializer fall back to plain text.
        """
        media_type = self.get_content_type(True) or MediaType.TEXT_PLAIN
        serializer = self._client.get_serializer_registry().resolve(media_type)

        if serializer is None:
            logger.debug(f"No serializer registered for {media_type}, using plain text")
            serializer = PlainTextSerializer()

        return serializer
