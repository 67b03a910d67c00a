"""
Media type → serializer lookup table.

Each HTTPClient owns one registry, so registering a serializer on one
client never affects another.

Lookups are exact string matches on the media type. Callers strip
parameters first ("application/json; charset=utf-8" → "application/json");
there is no case folding and no wildcard matching.
"""

import logging
from typing import Dict, List, Optional

from .base import Serializer

logger = logging.getLogger(__name__)


class SerializerRegistry:
    """
    Example:
        >>> registry = SerializerRegistry()
        >>> registry.register("application/json", JsonSerializer())
        >>> registry.resolve("application/json")
        JsonSerializer()
        >>> registry.resolve("application/xml") is None
        True
    """

    def __init__(self):
        self._serializers: Dict[str, Serializer] = {}

    def register(self, media_type: str, serializer: Serializer) -> None:
        """Register ``serializer`` for ``media_type``, replacing any previous one."""
        if media_type in self._serializers:
            logger.debug(f"Replacing serializer for {media_type}")
        self._serializers[media_type] = serializer

    def resolve(self, media_type: str) -> Optional[Serializer]:
        return self._serializers.get(media_type)

    def media_types(self) -> List[str]:
        return list(self._serializers)

    def __contains__(self, media_type: object) -> bool:
        return media_type in self._serializers

    def __len__(self) -> int:
        return len(self._serializers)
