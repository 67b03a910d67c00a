"""
=============================================================================
MESSAGE BODY STREAM
=============================================================================

Request and response bodies are Streams: a readable, writable, seekable
sequence of bytes held in memory.

    ┌──────────────────────────────────────────────────────────────────────┐
    │   b'{"name": "alice"}'                                               │
    │    ▲                 ▲                                               │
    │    │                 │                                               │
    │  rewind()         tell() after a full read                           │
    └──────────────────────────────────────────────────────────────────────┘

A Stream has a single cursor. After a serializer has written the body the
cursor sits at the end, so anything that wants the whole body must rewind
first. to_bytes() does that for you; get_contents() does not.

    >>> body = Stream.create("hello")
    >>> body.get_contents()
    b'hello'
    >>> body.get_contents()
    b''
    >>> body.to_bytes()
    b'hello'

=============================================================================
"""

import io
from typing import Optional, Union

StreamContent = Union[str, bytes, bytearray, memoryview, None]


class Stream:
    """In-memory byte stream used as a message body."""

    def __init__(self, buffer: Optional[io.BytesIO] = None):
        self._buffer: Optional[io.BytesIO] = buffer if buffer is not None else io.BytesIO()

    @classmethod
    def create(cls, content: StreamContent = None) -> "Stream":
        """
        Create a stream holding ``content``, with the cursor at the start.

        Strings are encoded as UTF-8.
        """
        if content is None:
            return cls()
        if isinstance(content, str):
            content = content.encode("utf-8")
        return cls(io.BytesIO(bytes(content)))

    @property
    def _stream(self) -> io.BytesIO:
        if self._buffer is None:
            raise ValueError("Stream is detached")
        return self._buffer

    def read(self, size: int = -1) -> bytes:
        return self._stream.read(size)

    def write(self, data: Union[str, bytes]) -> int:
        """Write at the cursor. Returns the number of bytes written."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        return self._stream.write(data)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self._stream.seek(offset, whence)

    def tell(self) -> int:
        return self._stream.tell()

    def rewind(self) -> None:
        self._stream.seek(0)

    def eof(self) -> bool:
        stream = self._stream
        return stream.tell() >= stream.getbuffer().nbytes

    def get_contents(self) -> bytes:
        """Read the remaining bytes from the cursor to the end."""
        return self._stream.read()

    def get_size(self) -> Optional[int]:
        """Total size in bytes, or None once detached."""
        if self._buffer is None:
            return None
        return self._buffer.getbuffer().nbytes

    def to_bytes(self) -> bytes:
        """Rewind, then read everything."""
        self.rewind()
        return self.get_contents()

    def detach(self) -> Optional[io.BytesIO]:
        """Hand over the underlying buffer. The stream is unusable afterwards."""
        buffer, self._buffer = self._buffer, None
        return buffer

    def close(self) -> None:
        buffer = self.detach()
        if buffer is not None:
            buffer.close()

    def __len__(self) -> int:
        return self.get_size() or 0

    def __repr__(self) -> str:
        return f"Stream(size={self.get_size()})"
