"""
Content Sniffing

Detects the real MIME type of an uploaded part from its leading bytes,
ignoring whatever Content-Type the client declared.
"""
from typing import BinaryIO, Optional
import filetype

SNIFF_LEN = 512
DEFAULT_CONTENT_TYPE = 'application/octet-stream'


class ReplayReader:
    """
    Read-ahead wrapper over a non-seekable stream.

    Bytes fetched by peek() are buffered and handed out again by read(),
    so a part can be sniffed and then copied in full.
    """

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self._buffer = b''
        self._pos = 0

    def peek(self, size: int = SNIFF_LEN) -> bytes:
        """Return up to `size` bytes from the current position without consuming them."""
        while len(self._buffer) - self._pos < size:
            chunk = self._stream.read(size - (len(self._buffer) - self._pos))
            if not chunk:
                break
            self._buffer += chunk
        return self._buffer[self._pos:self._pos + size]

    def read(self, size: Optional[int] = -1) -> bytes:
        buffered = self._buffer[self._pos:]
        if size is None or size < 0:
            self._buffer, self._pos = b'', 0
            return buffered + self._stream.read()

        if buffered:
            taken = buffered[:size]
            self._pos += len(taken)
            if self._pos >= len(self._buffer):
                self._buffer, self._pos = b'', 0
            return taken
        return self._stream.read(size)


def sniff_content_type(reader: ReplayReader) -> str:
    """
    Detect MIME type from magic bytes.

    Args:
        reader: Reader positioned at the start of the part

    Returns:
        Detected MIME type, or application/octet-stream when unknown
    """
    head = reader.peek(SNIFF_LEN)
    if not head:
        return DEFAULT_CONTENT_TYPE
    kind = filetype.guess(head)
    return kind.mime if kind is not None else DEFAULT_CONTENT_TYPE
