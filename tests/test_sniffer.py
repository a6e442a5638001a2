from io import BytesIO
import unittest

from sample_files import jpeg_bytes, png_bytes
from toolkit.utils.file_upload.sniffer import (
    DEFAULT_CONTENT_TYPE,
    SNIFF_LEN,
    ReplayReader,
    sniff_content_type,
)


class TrickleStream:
    """Returns at most three bytes per read, like a slow socket."""

    def __init__(self, data):
        self._data = BytesIO(data)

    def read(self, size=-1):
        if size is None or size < 0 or size > 3:
            size = 3
        return self._data.read(size)


class BrokenStream:
    def read(self, size=-1):
        raise OSError('connection reset')


class TestReplayReader(unittest.TestCase):
    def test_peek_does_not_consume(self):
        reader = ReplayReader(BytesIO(b'abcdefghij'))

        self.assertEqual(reader.peek(4), b'abcd')
        self.assertEqual(reader.peek(4), b'abcd')
        self.assertEqual(reader.read(), b'abcdefghij')

    def test_peek_fills_across_short_reads(self):
        data = bytes(range(256)) * 4
        reader = ReplayReader(TrickleStream(data))

        self.assertEqual(reader.peek(SNIFF_LEN), data[:SNIFF_LEN])

        copied = b''
        while True:
            chunk = reader.read(100)
            if not chunk:
                break
            copied += chunk
        self.assertEqual(copied, data)

    def test_peek_past_end_returns_what_exists(self):
        reader = ReplayReader(BytesIO(b'short'))

        self.assertEqual(reader.peek(SNIFF_LEN), b'short')
        self.assertEqual(reader.read(2), b'sh')
        self.assertEqual(reader.read(10), b'ort')
        self.assertEqual(reader.read(10), b'')

    def test_read_errors_propagate(self):
        with self.assertRaises(OSError):
            ReplayReader(BrokenStream()).peek()


class TestSniffContentType(unittest.TestCase):
    def test_png(self):
        self.assertEqual(sniff_content_type(ReplayReader(BytesIO(png_bytes()))), 'image/png')

    def test_jpeg(self):
        self.assertEqual(sniff_content_type(ReplayReader(BytesIO(jpeg_bytes()))), 'image/jpeg')

    def test_unknown_and_empty(self):
        self.assertEqual(sniff_content_type(ReplayReader(BytesIO(b'hello world'))), DEFAULT_CONTENT_TYPE)
        self.assertEqual(sniff_content_type(ReplayReader(BytesIO(b''))), DEFAULT_CONTENT_TYPE)

    def test_sniffing_keeps_bytes(self):
        data = png_bytes(32, 32)
        reader = ReplayReader(BytesIO(data))

        sniff_content_type(reader)

        self.assertEqual(reader.read(), data)


if __name__ == '__main__':
    unittest.main()
